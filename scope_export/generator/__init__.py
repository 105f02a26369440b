"""Utilities for rendering site pages and assembling export artefacts."""

from .assembler import SiteAssembler, collect_assets, export_site
from .models import ExportMetadata, ExportResult, NavEntry
from .navigation import assign_filenames, build_nav_entries
from .renderer import PageRenderer, render_page, split_paragraphs

__all__ = [
    "ExportMetadata",
    "ExportResult",
    "NavEntry",
    "PageRenderer",
    "SiteAssembler",
    "assign_filenames",
    "build_nav_entries",
    "collect_assets",
    "export_site",
    "render_page",
    "split_paragraphs",
]
