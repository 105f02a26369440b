"""Shared dataclasses produced by the export pipeline."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import typing as typ


@dc.dataclass(slots=True, frozen=True)
class NavEntry:
    """A single navigation link rendered in every page header.

    Attributes
    ----------
    label : str
        Page name shown in the menu.
    href : str
        Archive-relative filename of the linked page.
    current : bool
        Whether the entry points at the page being rendered.
    """

    label: str
    href: str
    current: bool = False


@dc.dataclass(slots=True, frozen=True)
class ExportMetadata:
    """Summary of one export run."""

    total_pages: int
    export_date: dt.datetime
    theme: str
    responsive: bool

    @property
    def export_date_iso(self) -> str:
        """Return the export timestamp as ISO-8601 with millisecond precision."""
        stamp = self.export_date.isoformat(timespec="milliseconds")
        return stamp.replace("+00:00", "Z")

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the manifest using the editor's camelCase keys."""
        return {
            "totalPages": self.total_pages,
            "exportDate": self.export_date_iso,
            "theme": self.theme,
            "responsive": self.responsive,
        }


@dc.dataclass(slots=True)
class ExportResult:
    """Structured output of :func:`~scope_export.generator.export_site`.

    Attributes
    ----------
    html : str
        Root page document, written as ``index.html``.
    css : str
        Stylesheet shared by all pages.
    js : str
        Script shared by all pages.
    assets : list[str]
        Image URLs referenced by any page, de-duplicated in first-seen order.
    metadata : ExportMetadata
        Page count, timestamp, theme and responsive flag.
    pages : dict[str, str]
        Documents for every non-root page keyed by page id.
    filenames : dict[str, str]
        Archive filename for each page id; the root maps to ``index.html``.
    """

    html: str
    css: str
    js: str
    assets: list[str]
    metadata: ExportMetadata
    pages: dict[str, str] = dc.field(default_factory=dict)
    filenames: dict[str, str] = dc.field(default_factory=dict)

    def documents(self) -> list[tuple[str, str]]:
        """Return ``(filename, html)`` pairs for the non-root pages in site order."""
        return [
            (self.filenames.get(page_id, f"{page_id}.html"), html)
            for page_id, html in self.pages.items()
        ]


__all__ = ["ExportMetadata", "ExportResult", "NavEntry"]
