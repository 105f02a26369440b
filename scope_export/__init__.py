"""Static site export engine for ScopeStudio wireframes.

This package turns an edited site model (an ordered list of pages with hero
and body content) into deployable static files and packages them into a
downloadable zip archive. It also exposes the ``scope-export`` CLI used to
run exports from saved site documents.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``export_site``: Build an :class:`ExportResult` from a :class:`Site`.
- ``create_downloadable_archive``: Package a result into an archive sink.

Examples
--------
>>> from scope_export import build_site, export_site
>>> site = build_site({"pages": [{"id": "home", "name": "Home", "title": "T"}]})
>>> export_site(site).metadata.total_pages
1
>>> from scope_export import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .config import ExportOptions, Page, Site, UserData, build_site, load_site
from .generator import ExportResult, export_site, render_page
from .packager import (
    ArchivePackager,
    DirectorySink,
    PackagingError,
    build_archive,
    create_downloadable_archive,
)
from .script import generate_script
from .theme import generate_stylesheet

__all__ = [
    "ArchivePackager",
    "DirectorySink",
    "ExportOptions",
    "ExportResult",
    "PackagingError",
    "Page",
    "Site",
    "UserData",
    "app",
    "build_archive",
    "build_site",
    "create_downloadable_archive",
    "export_site",
    "generate_script",
    "generate_stylesheet",
    "load_site",
    "main",
    "render_page",
]
