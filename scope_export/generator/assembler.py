"""High-level orchestration for turning a site model into export artefacts.

This module coordinates option resolution, the shared stylesheet and script,
per-page rendering, and asset collection. It exposes :class:`SiteAssembler`,
which consumes a :class:`~scope_export.config.Site` snapshot and returns an
:class:`~scope_export.generator.models.ExportResult` ready for previewing or
packaging with :mod:`scope_export.packager`.

Example
-------
>>> from scope_export.config import build_site
>>> from scope_export.generator import export_site
>>> site = build_site({"pages": [{"id": "home", "name": "Home", "title": "T"}]})
>>> result = export_site(site, {"theme": "minimal"})
>>> result.metadata.total_pages, result.metadata.theme
(1, 'minimal')
"""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt
import logging
import typing as typ

from scope_export.config import Site, apply_plan_limits, resolve_export_options
from scope_export.generator.models import ExportMetadata, ExportResult
from scope_export.generator.navigation import assign_filenames
from scope_export.generator.renderer import PageRenderer
from scope_export.script import generate_script
from scope_export.theme import generate_stylesheet

if typ.TYPE_CHECKING:
    from scope_export.config import ExportOptions, Page, UserData
    from scope_export.config.options import OptionsInput

logger = logging.getLogger(__name__)

Clock: typ.TypeAlias = cabc.Callable[[], dt.datetime]


def _utc_now() -> dt.datetime:
    return dt.datetime.now(dt.UTC)


def collect_assets(pages: cabc.Iterable[Page]) -> list[str]:
    """Return every referenced image URL once, in first-seen order.

    Hero images are visited before body images within each page.
    """
    seen: dict[str, None] = {}
    for page in pages:
        for url in page.image_urls:
            seen.setdefault(url, None)
    return list(seen)


class SiteAssembler:
    """Render every page of a site and gather the shared export artefacts."""

    def __init__(
        self,
        *,
        renderer: PageRenderer | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the assembler.

        Parameters
        ----------
        renderer : PageRenderer, optional
            Page renderer to use; defaults to one backed by the package
            templates.
        clock : Callable[[], datetime], optional
            Source of the export timestamp; defaults to the current UTC time.
        """
        self.renderer = renderer or PageRenderer()
        self.clock = clock or _utc_now

    def run(
        self,
        site: Site,
        options: OptionsInput = None,
        *,
        user: UserData | None = None,
    ) -> ExportResult:
        """Export ``site`` using ``options`` overlaid on the defaults.

        Parameters
        ----------
        site : Site
            Snapshot of the site model; it is never mutated.
        options : ExportOptions, Mapping, or None
            Partial export options. Missing values take the documented
            defaults and unknown values are normalized.
        user : UserData, optional
            Requesting user; when given, plan-tier gating is applied.

        Returns
        -------
        ExportResult
            Root document, shared CSS/JS, non-root documents, assets and
            metadata. A site without pages yields an empty shell document
            and ``total_pages == 0``.
        """
        pages = list(site.pages)
        resolved = apply_plan_limits(
            resolve_export_options(options), user, page_count=len(pages)
        )
        css = generate_stylesheet(resolved.theme, resolved.responsive)
        js = generate_script()

        root = Site(pages=pages).root_page()
        if root is None:
            html = self.renderer.render_shell(**self._render_kwargs(resolved))
        else:
            html = self._render(root, pages, resolved)

        documents: dict[str, str] = {}
        for page in pages:
            if root is not None and page.id == root.id:
                continue
            if page.id in documents:
                logger.warning("Skipping duplicate page id %r", page.id)
                continue
            documents[page.id] = self._render(page, pages, resolved)

        assets = collect_assets(pages)
        metadata = ExportMetadata(
            total_pages=len(pages),
            export_date=self.clock(),
            theme=resolved.theme,
            responsive=resolved.responsive,
        )
        logger.info(
            "Site export completed: pages=%d assets=%d theme=%s branding=%s",
            metadata.total_pages,
            len(assets),
            resolved.theme,
            resolved.include_branding,
        )
        return ExportResult(
            html=html,
            css=css,
            js=js,
            assets=assets,
            metadata=metadata,
            pages=documents,
            filenames=assign_filenames(pages),
        )

    def _render(
        self, page: Page, pages: list[Page], resolved: ExportOptions
    ) -> str:
        return self.renderer.render(page, pages, **self._render_kwargs(resolved))

    @staticmethod
    def _render_kwargs(resolved: ExportOptions) -> dict[str, typ.Any]:
        return {
            "theme": resolved.theme,
            "include_branding": resolved.include_branding,
            "seo_optimized": resolved.seo_optimized,
        }


def export_site(
    site: Site,
    options: OptionsInput = None,
    *,
    user: UserData | None = None,
    clock: Clock | None = None,
) -> ExportResult:
    """Export ``site`` with a fresh :class:`SiteAssembler`; see :meth:`SiteAssembler.run`."""
    return SiteAssembler(clock=clock).run(site, options, user=user)


__all__ = ["SiteAssembler", "collect_assets", "export_site"]
