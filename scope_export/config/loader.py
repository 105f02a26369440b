"""Load site documents from YAML (or JSON) into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _optional_str
from .models import ExportOptions, Site, UserData
from .options import DEFAULT_EXPORT_OPTIONS, build_user, resolve_export_options
from .site import build_site


@dc.dataclass(slots=True)
class ExportSettings:
    """Everything a site document supplies for one export run."""

    site: Site
    options: ExportOptions = DEFAULT_EXPORT_OPTIONS
    user: UserData | None = None
    site_name: str | None = None


def _read_document(path: Path) -> dict[str, typ.Any]:
    """Parse ``path`` and return its top-level mapping."""
    if not path.exists():
        msg = f"Site file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level site document must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def load_site(path: Path) -> Site:
    """Load the ordered page list stored in ``path``.

    Parameters
    ----------
    path : Path
        YAML or JSON document with a top-level ``pages`` list, as exported
        from the data store.

    Returns
    -------
    Site
        Parsed site model.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the top-level structure is not a mapping.
    SiteConfigError
        If ``pages`` is present but not a list.

    Examples
    --------
    >>> from pathlib import Path
    >>> site = load_site(Path("site.yaml"))  # doctest: +SKIP
    >>> [page.id for page in site.pages]  # doctest: +SKIP
    ['home', 'about']
    """
    return build_site(_read_document(path))


def load_export_settings(path: Path) -> ExportSettings:
    """Load the site plus its ``export``, ``user`` and ``site_name`` entries.

    The ``export`` block provides defaults that callers (for example the CLI)
    may further override with :func:`resolve_export_options`.
    """
    raw = _read_document(path)
    site = build_site(raw)
    options = resolve_export_options(raw.get("export") or {})
    return ExportSettings(
        site=site,
        options=options,
        user=build_user(raw.get("user")),
        site_name=_optional_str(raw.get("site_name")),
    )


__all__ = ["ExportSettings", "load_export_settings", "load_site"]
