"""Typed dataclasses describing the site model and export configuration."""

from __future__ import annotations

import dataclasses as dc

from scope_export._constants import ROOT_PAGE_ID

THEMES: tuple[str, ...] = ("modern", "classic", "minimal")
DEFAULT_THEME = "modern"
PLAN_PAGE_LIMITS: dict[str, int] = {"free": 4, "pro": 6}
DEFAULT_PLAN = "free"
UNTITLED_PAGE = "Untitled page"


class SiteConfigError(ValueError):
    """Raised when the site payload does not have the expected shape."""


@dc.dataclass(slots=True)
class Page:
    """One editable unit of site content.

    Only ``id``, ``name`` and ``title`` are required. The hero fields fall
    back to ``title`` and ``description`` when rendered; image URLs and body
    copy are simply omitted when absent.
    """

    id: str
    name: str
    title: str
    description: str = ""
    hero_title: str | None = None
    hero_subheading: str | None = None
    hero_image_url: str | None = None
    body_content: str | None = None
    body_image_url: str | None = None

    @property
    def display_title(self) -> str:
        """Return the page title, falling back to the name, id, then a placeholder."""
        return self.title or self.name or self.id or UNTITLED_PAGE

    @property
    def display_name(self) -> str:
        """Return the navigation label, falling back like :attr:`display_title`."""
        return self.name or self.title or self.id or UNTITLED_PAGE

    @property
    def display_hero_title(self) -> str:
        """Return the hero heading, falling back to the page title."""
        return self.hero_title or self.display_title

    @property
    def display_hero_subheading(self) -> str:
        """Return the hero subheading, falling back to the page description."""
        return self.hero_subheading or self.description or ""

    @property
    def image_urls(self) -> list[str]:
        """Return the non-empty image URLs referenced by this page, hero first."""
        return [url for url in (self.hero_image_url, self.body_image_url) if url]


@dc.dataclass(slots=True)
class Site:
    """An ordered sequence of pages; order drives navigation and root fallback."""

    pages: list[Page] = dc.field(default_factory=list)

    def root_page(self) -> Page | None:
        """Return the ``home`` page, the first page, or ``None`` when empty."""
        for page in self.pages:
            if page.id == ROOT_PAGE_ID:
                return page
        if not self.pages:
            return None
        return self.pages[0]


@dc.dataclass(slots=True, frozen=True)
class ExportOptions:
    """Fully resolved options controlling one export."""

    include_branding: bool = True
    theme: str = DEFAULT_THEME
    responsive: bool = True
    seo_optimized: bool = True


@dc.dataclass(slots=True, frozen=True)
class UserData:
    """Identity and plan tier of the user requesting an export."""

    identity: str
    plan: str = DEFAULT_PLAN

    @property
    def page_limit(self) -> int:
        """Return the maximum number of pages the plan allows."""
        return PLAN_PAGE_LIMITS.get(self.plan, PLAN_PAGE_LIMITS[DEFAULT_PLAN])

    @property
    def can_remove_branding(self) -> bool:
        """Return whether the plan allows exports without the footer credit."""
        return self.plan == "pro"


__all__ = [
    "DEFAULT_PLAN",
    "DEFAULT_THEME",
    "PLAN_PAGE_LIMITS",
    "THEMES",
    "UNTITLED_PAGE",
    "ExportOptions",
    "Page",
    "Site",
    "SiteConfigError",
    "UserData",
]
