"""Package export results into a downloadable zip archive.

The packager is the only part of the export engine with an observable side
effect. It assembles ``index.html``, one ``<pageId>.html`` per non-root page,
``styles.css``, ``script.js`` and a generated ``README.md`` into an
in-memory archive named ``<siteName>-<YYYY-MM-DD>.zip`` and hands the bytes
to an :class:`ArchiveSink`. The default :class:`DirectorySink` writes the
archive to disk through a temporary file that is always removed, whether the
write succeeds or fails.

Examples
--------
>>> from pathlib import Path
>>> from scope_export.config import build_site
>>> from scope_export.generator import export_site
>>> from scope_export.packager import ArchivePackager, DirectorySink
>>> result = export_site(build_site({"pages": []}))
>>> packager = ArchivePackager(DirectorySink(Path("dist")))  # doctest: +SKIP
>>> packager.package(result, "acme")  # doctest: +SKIP
PosixPath('dist/acme-2025-01-31.zip')
"""

from __future__ import annotations

import io
import logging
import os
import re
import tempfile
import typing as typ
import zipfile
import zlib
from pathlib import Path

from jinja2 import TemplateError

from . import _constants
from .templating import build_environment

if typ.TYPE_CHECKING:
    import datetime as dt

    from .generator.models import ExportResult

logger = logging.getLogger(__name__)

_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")
_FILE_MODE = 0o644


class PackagingError(RuntimeError):
    """Raised when the export archive cannot be built or delivered."""


class ArchiveSink(typ.Protocol):
    """Destination for finished archives."""

    def deliver(self, filename: str, payload: bytes) -> Path | None:
        """Store ``payload`` under ``filename`` and return its location, if any."""
        ...


class DirectorySink:
    """Write archives into a directory on the local filesystem."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def deliver(self, filename: str, payload: bytes) -> Path:
        """Write ``payload`` atomically to ``output_dir / filename``.

        The bytes are first written to a temporary file in the same directory
        and then renamed into place. The temporary file is removed on every
        exit path.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        target = self.output_dir / filename
        handle = tempfile.NamedTemporaryFile(  # noqa: SIM115 - closed below
            dir=self.output_dir,
            prefix=".scope-export-",
            suffix=".part",
            delete=False,
        )
        temp_path = Path(handle.name)
        try:
            with handle:
                handle.write(payload)
            temp_path.chmod(_FILE_MODE)
            os.replace(temp_path, target)
        finally:
            temp_path.unlink(missing_ok=True)
        return target


class MemorySink:
    """Keep delivered archives in memory, keyed by filename."""

    def __init__(self) -> None:
        self.archives: dict[str, bytes] = {}

    def deliver(self, filename: str, payload: bytes) -> None:
        """Record ``payload`` under ``filename``."""
        self.archives[filename] = payload


def _safe_name(value: str) -> str:
    """Return ``value`` reduced to characters safe for a single filename."""
    cleaned = _UNSAFE_NAME_CHARS.sub("-", value.strip()).strip("-.")
    return cleaned or _constants.DEFAULT_SITE_NAME


def derive_site_name(identity: str | None) -> str:
    """Return a site name from a user identity such as an email address.

    Examples
    --------
    >>> derive_site_name("jane.doe@example.com")
    'jane.doe'
    >>> derive_site_name("")
    'scopestudio-site'
    """
    if not identity:
        return _constants.DEFAULT_SITE_NAME
    return _safe_name(identity.split("@", 1)[0])


def archive_filename(site_name: str, export_date: dt.datetime) -> str:
    """Return ``<siteName>-<YYYY-MM-DD>.zip`` for the given export date."""
    return _constants.ARCHIVE_NAME_TEMPLATE.format(
        site_name=_safe_name(site_name), date=export_date.date().isoformat()
    )


def render_readme(
    result: ExportResult, site_name: str, *, templates_dir: Path | None = None
) -> str:
    """Render the README bundled with the archive."""
    template = build_environment(templates_dir).get_template("README.md.jinja")
    return template.render(
        site_name=site_name,
        brand_name=_constants.BRAND_NAME,
        index_filename=_constants.INDEX_FILENAME,
        stylesheet_filename=_constants.STYLESHEET_FILENAME,
        script_filename=_constants.SCRIPT_FILENAME,
        page_files=[
            (result.filenames.get(page_id, f"{page_id}.html"), page_id)
            for page_id in result.pages
        ],
        metadata=result.metadata,
    )


def _archive_entries(
    result: ExportResult, site_name: str, *, templates_dir: Path | None
) -> list[tuple[str, str]]:
    """Return ``(filename, text)`` pairs in archive order."""
    entries = [(_constants.INDEX_FILENAME, result.html)]
    entries.extend(result.documents())
    entries.extend(
        [
            (_constants.STYLESHEET_FILENAME, result.css),
            (_constants.SCRIPT_FILENAME, result.js),
            (
                _constants.README_FILENAME,
                render_readme(result, site_name, templates_dir=templates_dir),
            ),
        ]
    )
    return entries


def build_archive(
    result: ExportResult, site_name: str, *, templates_dir: Path | None = None
) -> bytes:
    """Return the zip archive bytes for ``result``.

    Entry timestamps are taken from the export date so identical results
    produce identical archives.

    Raises
    ------
    PackagingError
        If rendering the README or compressing any entry fails.
    """
    timestamp = result.metadata.export_date.timetuple()[:6]
    buffer = io.BytesIO()
    try:
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
            for name, text in _archive_entries(
                result, site_name, templates_dir=templates_dir
            ):
                info = zipfile.ZipInfo(name, date_time=timestamp)
                info.compress_type = zipfile.ZIP_DEFLATED
                info.external_attr = _FILE_MODE << 16
                archive.writestr(info, text.encode("utf-8"))
    except (OSError, ValueError, zlib.error, zipfile.LargeZipFile, TemplateError) as exc:
        msg = f"Could not build export archive for '{site_name}': {exc}"
        raise PackagingError(msg) from exc
    return buffer.getvalue()


class ArchivePackager:
    """Build export archives and hand them to a delivery sink."""

    def __init__(
        self, sink: ArchiveSink, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the packager.

        Parameters
        ----------
        sink : ArchiveSink
            Destination that receives the finished archive bytes.
        templates_dir : Path, optional
            Directory containing the README template; defaults to the package
            templates.
        """
        self.sink = sink
        self.templates_dir = templates_dir

    def package(self, result: ExportResult, site_name: str) -> Path | None:
        """Build the archive for ``result`` and deliver it.

        Returns
        -------
        Path or None
            Location reported by the sink.

        Raises
        ------
        PackagingError
            If the archive cannot be built or the sink fails to store it. The
            original exception is chained as ``__cause__``.
        """
        payload = build_archive(result, site_name, templates_dir=self.templates_dir)
        filename = archive_filename(site_name, result.metadata.export_date)
        try:
            location = self.sink.deliver(filename, payload)
        except OSError as exc:
            msg = f"Could not deliver export archive '{filename}': {exc}"
            raise PackagingError(msg) from exc
        logger.info(
            "Packaged %s (%d bytes, %d pages)",
            filename,
            len(payload),
            result.metadata.total_pages,
        )
        return location


def create_downloadable_archive(
    result: ExportResult, site_name: str, sink: ArchiveSink
) -> Path | None:
    """Package ``result`` into ``sink``; see :meth:`ArchivePackager.package`."""
    return ArchivePackager(sink).package(result, site_name)


__all__ = [
    "ArchivePackager",
    "ArchiveSink",
    "DirectorySink",
    "MemorySink",
    "PackagingError",
    "archive_filename",
    "build_archive",
    "create_downloadable_archive",
    "derive_site_name",
    "render_readme",
]
