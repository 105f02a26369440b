"""Site model builders that turn raw store payloads into typed pages."""

from __future__ import annotations

import logging
import typing as typ

from .helpers import _first_present, _optional_str, _slugify, _unique_id
from .models import UNTITLED_PAGE, Page, Site, SiteConfigError

logger = logging.getLogger(__name__)

# Stored documents use the editor's camelCase keys; YAML authored by hand
# tends to use snake_case. Both spellings are accepted.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "hero_title": ("heroTitle", "hero_title"),
    "hero_subheading": ("heroSubheading", "hero_subheading"),
    "hero_image_url": ("heroImageUrl", "hero_image_url"),
    "body_content": ("bodyContent", "body_content"),
    "body_image_url": ("bodyImageUrl", "body_image_url"),
}


def build_site(payload: typ.Mapping[str, typ.Any] | None) -> Site:
    """Build a :class:`Site` from a raw ``{"pages": [...]}`` mapping.

    Parameters
    ----------
    payload : Mapping or None
        Site document as supplied by the data store. ``None`` is treated as
        an empty site.

    Returns
    -------
    Site
        Pages in their original order with required fields filled in and
        identifiers made unique.

    Raises
    ------
    SiteConfigError
        If ``payload`` is not a mapping or ``pages`` is not a list.
    """
    match payload:
        case None:
            return Site()
        case dict() as data:
            entries = data.get("pages")
        case _:
            msg = "Site payload must be a mapping."
            raise SiteConfigError(msg)

    match entries:
        case None:
            return Site()
        case list() as items:
            iterable = items
        case _:
            msg = "Site 'pages' must be a list."
            raise SiteConfigError(msg)

    pages: list[Page] = []
    used: set[str] = set()
    for position, entry in enumerate(iterable, start=1):
        match entry:
            case dict():
                pages.append(_build_page(entry, position=position, used=used))
            case _:
                logger.debug("Skipping non-mapping page entry at position %d", position)
                continue
    return Site(pages=pages)


def _build_page(
    payload: typ.Mapping[str, typ.Any], *, position: int, used: set[str]
) -> Page:
    """Build a single page, filling missing required fields best-effort."""
    raw_id = _optional_str(payload.get("id"))
    name = _optional_str(payload.get("name"))
    title = _optional_str(payload.get("title"))

    if raw_id is None:
        raw_id = _slugify(name or title or "") or f"page-{position}"
        logger.debug("Page at position %d has no id; using %r", position, raw_id)
    page_id = _unique_id(raw_id, used)
    if page_id != raw_id:
        logger.warning("Duplicate page id %r renamed to %r", raw_id, page_id)

    if name is None:
        name = title or raw_id.replace("-", " ").title()
    if title is None:
        title = name or UNTITLED_PAGE

    description = _optional_str(payload.get("description")) or ""
    optional = {
        field: _optional_str(_first_present(payload, *aliases))
        for field, aliases in _FIELD_ALIASES.items()
    }
    body = _first_present(payload, *_FIELD_ALIASES["body_content"])
    # Paragraph breaks must survive, so body copy is not stripped here.
    optional["body_content"] = str(body) if body else None

    return Page(
        id=page_id,
        name=name,
        title=title,
        description=description,
        **optional,
    )


__all__ = ["UNTITLED_PAGE", "build_site"]
