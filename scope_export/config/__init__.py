"""Load and normalize the site model and export options.

This subpackage parses site documents exported from the data store (YAML or
JSON), fills in best-effort fallbacks for missing page fields, and resolves
partial export options against the documented defaults. It produces the
typed dataclasses (:class:`Site`, :class:`Page`, :class:`ExportOptions`)
consumed by the export engine. The main entry points are :func:`load_site`,
:func:`build_site` and :func:`resolve_export_options`.

Examples
--------
>>> from scope_export.config import build_site, resolve_export_options
>>> site = build_site({"pages": [{"id": "home", "name": "Home", "title": "T"}]})
>>> site.root_page().name
'Home'
>>> resolve_export_options({"theme": "unknown"}).theme
'modern'
"""

from .loader import ExportSettings, load_export_settings, load_site
from .models import (
    DEFAULT_THEME,
    PLAN_PAGE_LIMITS,
    THEMES,
    ExportOptions,
    Page,
    Site,
    SiteConfigError,
    UserData,
)
from .options import (
    DEFAULT_EXPORT_OPTIONS,
    apply_plan_limits,
    build_user,
    resolve_export_options,
)
from .site import build_site

__all__ = [
    "DEFAULT_EXPORT_OPTIONS",
    "DEFAULT_THEME",
    "PLAN_PAGE_LIMITS",
    "THEMES",
    "ExportOptions",
    "ExportSettings",
    "Page",
    "Site",
    "SiteConfigError",
    "UserData",
    "apply_plan_limits",
    "build_site",
    "build_user",
    "load_export_settings",
    "load_site",
    "resolve_export_options",
]
