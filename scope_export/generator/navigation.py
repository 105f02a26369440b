"""Map page identifiers to archive filenames and navigation entries."""

from __future__ import annotations

import re
import typing as typ

from scope_export._constants import INDEX_FILENAME
from scope_export.config import Site
from scope_export.config.helpers import _unique_id
from scope_export.generator.models import NavEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from scope_export.config import Page

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def _file_stem(page_id: str | None) -> str:
    """Return a filesystem-safe stem for ``page_id``."""
    return _UNSAFE_FILENAME_CHARS.sub("-", page_id or "").strip("-") or "page"


def assign_filenames(pages: cabc.Sequence[Page]) -> dict[str, str]:
    """Return the archive filename for every distinct page id.

    The root page becomes ``index.html``; every other page becomes
    ``<id>.html``. Identifiers that are not filesystem-safe are slugged, and
    collisions (including with ``index``) receive numeric suffixes. Repeated
    ids keep the filename of their first occurrence.
    """
    filenames: dict[str, str] = {}
    used = {INDEX_FILENAME.removesuffix(".html")}
    root = Site(pages=list(pages)).root_page()
    if root is not None:
        filenames[root.id] = INDEX_FILENAME
    for page in pages:
        if page.id in filenames:
            continue
        stem = _unique_id(_file_stem(page.id), used)
        filenames[page.id] = f"{stem}.html"
    return filenames


def build_nav_entries(
    pages: cabc.Sequence[Page], current_id: str | None
) -> list[NavEntry]:
    """Return one navigation entry per distinct page, in site order."""
    filenames = assign_filenames(pages)
    entries: list[NavEntry] = []
    seen: set[str] = set()
    for page in pages:
        if page.id in seen:
            continue
        seen.add(page.id)
        entries.append(
            NavEntry(
                label=page.display_name,
                href=filenames[page.id],
                current=page.id == current_id,
            )
        )
    return entries


__all__ = ["assign_filenames", "build_nav_entries"]
