"""Common literal values used across scope_export.

These constants keep archive filenames, the reserved root page id, and the
branding copy centralized so templates, the assembler, the packager, and
tests can import the same values without drifting. Intended for internal use
within the scope_export package.

Examples
--------
>>> from scope_export import _constants
>>> _constants.ARCHIVE_NAME_TEMPLATE.format(site_name="acme", date="2025-01-31")
'acme-2025-01-31.zip'
>>> _constants.ROOT_PAGE_ID
'home'
"""

ROOT_PAGE_ID = "home"
INDEX_FILENAME = "index.html"
STYLESHEET_FILENAME = "styles.css"
SCRIPT_FILENAME = "script.js"
README_FILENAME = "README.md"
ARCHIVE_NAME_TEMPLATE = "{site_name}-{date}.zip"
DEFAULT_SITE_NAME = "scopestudio-site"

BRAND_NAME = "ScopeStudio"
BRAND_TAGLINE = "The wireframing tool for modern development teams"
BRAND_CREDIT = "Built with Quantum Climb"
