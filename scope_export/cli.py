"""Cyclopts CLI entrypoint for exporting wireframe sites as static bundles.

The ``scope-export`` console script defined here loads a site document
(YAML or JSON, as saved by the editor's data store), runs the export engine,
and either packages the result into ``<siteName>-<YYYY-MM-DD>.zip`` or
writes a quick preview of the root page. Option values come from the site
document's ``export`` block and can be overridden per run with flags or
``INPUT_*`` environment variables.

Examples
--------
Export a site with the default options:

>>> from scope_export.cli import main
>>> main()  # doctest: +SKIP

Export using the classic theme without responsive rules:

>>> from scope_export.cli import app
>>> app(
...     ["export", "--site", "site.yaml", "--theme", "classic", "--no-responsive"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import INDEX_FILENAME, SCRIPT_FILENAME, STYLESHEET_FILENAME
from .config import UserData, build_user, load_export_settings, resolve_export_options
from .generator import export_site
from .packager import ArchivePackager, DirectorySink, derive_site_name

DEFAULT_SITE = Path("site.yaml")
DEFAULT_OUTPUT_DIR = Path("dist")
DEFAULT_PREVIEW_DIR = Path("preview")

app = App(name="scope-export", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

SiteOption = typ.Annotated[
    Path, Parameter(help="Path to the site document", env_var="INPUT_SITE")
]
ThemeOption = typ.Annotated[
    str | None, Parameter(help="Theme: modern, classic or minimal")
]
ResponsiveOption = typ.Annotated[
    bool | None, Parameter(help="Append mobile breakpoint rules")
]
BrandingOption = typ.Annotated[
    bool | None, Parameter(help="Append the footer credit block")
]
SeoOption = typ.Annotated[
    bool | None, Parameter(help="Emit description and Open Graph meta tags")
]
IdentityOption = typ.Annotated[
    str | None, Parameter(help="User identity (email) requesting the export")
]
PlanOption = typ.Annotated[str | None, Parameter(help="Plan tier: free or pro")]
VerboseOption = typ.Annotated[bool, Parameter(help="Enable debug logging")]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _resolve_user(
    stored: UserData | None, identity: str | None, plan: str | None
) -> UserData | None:
    """Overlay CLI identity/plan values onto the user stored in the site file."""
    if identity is None and plan is None:
        return stored
    base_identity = stored.identity if stored else None
    base_plan = stored.plan if stored else None
    return build_user({"identity": identity or base_identity, "plan": plan or base_plan})


def _overrides(
    theme: str | None,
    responsive: bool | None,
    branding: bool | None,
    seo: bool | None,
) -> dict[str, typ.Any]:
    return {
        "theme": theme,
        "responsive": responsive,
        "include_branding": branding,
        "seo_optimized": seo,
    }


@app.command(help="Export a site as a zip archive of static HTML, CSS and JS.")
def export(
    *,
    site: SiteOption = DEFAULT_SITE,
    output_dir: typ.Annotated[
        Path, Parameter(help="Directory receiving the archive")
    ] = DEFAULT_OUTPUT_DIR,
    site_name: typ.Annotated[
        str | None, Parameter(help="Archive base name (defaults to the identity)")
    ] = None,
    theme: ThemeOption = None,
    responsive: ResponsiveOption = None,
    branding: BrandingOption = None,
    seo: SeoOption = None,
    identity: IdentityOption = None,
    plan: PlanOption = None,
    json_output: typ.Annotated[
        bool, Parameter(name="--json", help="Print a JSON summary")
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """Export the site described by ``site`` into a zip archive.

    Parameters
    ----------
    site : Path, optional
        Site document to export (overridable via ``INPUT_SITE``).
    output_dir : Path, optional
        Directory the archive is written to.
    site_name : str or None, optional
        Archive base name; defaults to the document's ``site_name`` or the
        local part of the user's identity.
    theme, responsive, branding, seo : optional
        Per-run overrides of the document's ``export`` block.
    identity, plan : str or None, optional
        Override the requesting user; free plans always keep branding.
    json_output : bool, optional
        Print the export metadata and archive path as JSON instead of the
        ``wrote`` line.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    PackagingError
        If the archive cannot be built or written.
    """
    _configure_logging(verbose=verbose)
    settings = load_export_settings(site)
    options = resolve_export_options(
        _overrides(theme, responsive, branding, seo), settings.options
    )
    user = _resolve_user(settings.user, identity, plan)
    name = site_name or settings.site_name or derive_site_name(
        user.identity if user else None
    )

    result = export_site(settings.site, options, user=user)
    archive_path = ArchivePackager(DirectorySink(output_dir)).package(result, name)

    if json_output:
        summary = {
            "archive": str(archive_path),
            "metadata": result.metadata.as_dict(),
            "assets": result.assets,
            "files": [
                INDEX_FILENAME,
                *(filename for filename, _ in result.documents()),
            ],
        }
        print(json.dumps(summary))
        return
    print(f"wrote {_format_path(archive_path)}")


@app.command(help="Write the root page, stylesheet and script for a quick preview.")
def preview(
    *,
    site: SiteOption = DEFAULT_SITE,
    output_dir: typ.Annotated[
        Path, Parameter(help="Directory receiving the preview files")
    ] = DEFAULT_PREVIEW_DIR,
    theme: ThemeOption = None,
    responsive: ResponsiveOption = None,
    branding: BrandingOption = None,
    seo: SeoOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Render the root page without packaging it.

    Writes ``index.html`` alongside the shared ``styles.css`` and
    ``script.js`` so the file can be opened directly in a browser. Plan
    gating is not applied to previews.
    """
    _configure_logging(verbose=verbose)
    settings = load_export_settings(site)
    options = resolve_export_options(
        _overrides(theme, responsive, branding, seo), settings.options
    )
    result = export_site(settings.site, options)

    output_dir.mkdir(parents=True, exist_ok=True)
    for filename, text in (
        (INDEX_FILENAME, result.html),
        (STYLESHEET_FILENAME, result.css),
        (SCRIPT_FILENAME, result.js),
    ):
        path = output_dir / filename
        path.write_text(text, encoding="utf-8")
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``scope-export`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
