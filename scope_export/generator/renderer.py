"""Render one site page into a standalone HTML document."""

from __future__ import annotations

import functools
import re
import typing as typ

from scope_export import _constants
from scope_export.config.helpers import _normalize_theme
from scope_export.generator.navigation import build_nav_entries
from scope_export.templating import build_environment

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from scope_export.config import Page

PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")
EMPTY_SITE_TITLE = "Untitled site"


def split_paragraphs(text: str | None) -> list[str]:
    """Split body copy on blank lines, dropping empty chunks.

    Bullet prefixes (``•`` or ``-``) are kept as plain text; only paragraph
    segmentation is applied to exported pages.

    Examples
    --------
    >>> split_paragraphs("Para one.\\n\\nPara two.\\n\\n\\n")
    ['Para one.', 'Para two.']
    """
    if not text:
        return []
    normalized = text.replace("\r\n", "\n")
    chunks = (chunk.strip() for chunk in PARAGRAPH_BREAK.split(normalized))
    return [chunk for chunk in chunks if chunk]


class PageRenderer:
    """Render site pages with the shared ``page.html.jinja`` template."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("page.html.jinja")

    def render(
        self,
        page: Page,
        all_pages: cabc.Sequence[Page],
        *,
        theme: str = "modern",
        include_branding: bool = True,
        seo_optimized: bool = True,
    ) -> str:
        """Render ``page`` as a complete HTML document.

        Parameters
        ----------
        page : Page
            Page to render.
        all_pages : Sequence[Page]
            Every page of the site, in navigation order; the page itself is
            listed too.
        theme : str, optional
            Theme name, exposed as ``data-theme`` on ``<body>``.
        include_branding : bool, optional
            Append the footer credit block when true; omit the footer
            entirely otherwise.
        seo_optimized : bool, optional
            Emit description and Open Graph meta tags when true.

        Returns
        -------
        str
            Standalone document linking the shared stylesheet and script.
        """
        context = self._base_context(
            theme=theme,
            include_branding=include_branding,
            seo_optimized=seo_optimized,
        )
        context.update(
            {
                "page": page,
                "html_title": page.display_title,
                "nav_entries": build_nav_entries(all_pages, page.id),
                "hero_title": page.display_hero_title,
                "hero_subheading": page.display_hero_subheading,
                "paragraphs": split_paragraphs(page.body_content),
            }
        )
        return self._render(context)

    def render_shell(
        self,
        *,
        theme: str = "modern",
        include_branding: bool = True,
        seo_optimized: bool = True,
    ) -> str:
        """Render the empty document exported for a site without pages."""
        context = self._base_context(
            theme=theme,
            include_branding=include_branding,
            seo_optimized=seo_optimized,
        )
        context.update(
            {
                "page": None,
                "html_title": EMPTY_SITE_TITLE,
                "nav_entries": [],
                "paragraphs": [],
            }
        )
        return self._render(context)

    @staticmethod
    def _base_context(
        *, theme: str, include_branding: bool, seo_optimized: bool
    ) -> dict[str, typ.Any]:
        return {
            "theme": _normalize_theme(theme),
            "include_branding": include_branding,
            "seo_optimized": seo_optimized,
            "index_href": _constants.INDEX_FILENAME,
            "stylesheet_href": _constants.STYLESHEET_FILENAME,
            "script_href": _constants.SCRIPT_FILENAME,
            "brand": {
                "name": _constants.BRAND_NAME,
                "tagline": _constants.BRAND_TAGLINE,
                "credit": _constants.BRAND_CREDIT,
            },
        }

    def _render(self, context: dict[str, typ.Any]) -> str:
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html


@functools.cache
def _renderer() -> PageRenderer:
    return PageRenderer()


def render_page(
    page: Page,
    all_pages: cabc.Sequence[Page],
    *,
    theme: str = "modern",
    include_branding: bool = True,
    seo_optimized: bool = True,
) -> str:
    """Render ``page`` with the package templates; see :meth:`PageRenderer.render`."""
    return _renderer().render(
        page,
        all_pages,
        theme=theme,
        include_branding=include_branding,
        seo_optimized=seo_optimized,
    )


__all__ = [
    "EMPTY_SITE_TITLE",
    "PageRenderer",
    "render_page",
    "split_paragraphs",
]
