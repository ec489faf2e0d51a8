"""Directory snapshots.

This module lists the immediate children of a directory into a ``Snapshot``:
hidden entries are skipped, directories sort before files, and names compare
case-insensitively using the active collation locale. Filesystem failures are
classified into ``AccessError`` values and returned, never raised.
"""

import asyncio
import errno
import locale
import os
from datetime import datetime, timezone
from typing import Any, Optional, Union

from folder_tools.core import get_logger, get_tracer
from folder_tools.filesystem.locations import WellKnownLocation
from folder_tools.schemas import (
    AccessError,
    Corrupt,
    Entry,
    InvalidLocation,
    NotFound,
    PermissionDenied,
    Snapshot,
    Unknown,
)

logger = get_logger(__name__)
tracer = get_tracer(__name__)

HIDDEN_PREFIX = "."

# Errors reported when the volume itself cannot be read
_CORRUPT_ERRNOS = frozenset(
    code
    for code in (
        errno.EIO,
        getattr(errno, "EUCLEAN", None),
        getattr(errno, "ESTALE", None),
    )
    if code is not None
)

PathArg = Union[str, "os.PathLike[str]", None]


def classify_error(error: Exception, path: str, label: str) -> AccessError:
    """Map a failure raised while listing a directory to an access error.

    Args:
        error: Exception raised by the listing call
        path: Path reported to the user
        label: Display name of the folder

    Returns:
        The matching AccessError; unmapped errors become Unknown with the
        original message preserved
    """
    if isinstance(error, PermissionError):
        return PermissionDenied(path=path, label=label)
    if isinstance(error, (FileNotFoundError, NotADirectoryError)):
        return NotFound(path=path, label=label)
    if isinstance(error, OSError) and error.errno in _CORRUPT_ERRNOS:
        return Corrupt(path=path)
    return Unknown(message=str(error), path=path)


def _resolve_path(path: str) -> str:
    """Follow symbolic links fully, keeping the given path if that fails."""
    try:
        return os.path.realpath(path, strict=True)
    except (OSError, ValueError):
        return path


def _read_entry(dir_entry: "os.DirEntry[str]") -> Entry:
    is_directory = dir_entry.is_dir()
    try:
        stat = dir_entry.stat()
    except FileNotFoundError:
        if not dir_entry.is_symlink():
            raise
        # Dangling link: describe the link itself
        stat = dir_entry.stat(follow_symlinks=False)

    return Entry(
        name=dir_entry.name,
        is_directory=is_directory,
        size_bytes=None if is_directory else stat.st_size,
        modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
    )


def _sort_key(entry: Entry) -> tuple[bool, str]:
    return (not entry.is_directory, locale.strxfrm(entry.name.casefold()))


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Order entries directories first, then by case-insensitive name.

    The sort is stable, so names that compare equal keep their enumeration
    order.
    """
    return sorted(entries, key=_sort_key)


class DirectorySnapshotFetcher:
    """Lists a single directory into a Snapshot.

    Holds no state between fetches, so one instance may serve concurrent
    callers.
    """

    def __init__(self, hidden_prefix: str = HIDDEN_PREFIX):
        self.hidden_prefix = hidden_prefix

    def fetch(self, path: PathArg, label: str) -> Snapshot:
        """Take a snapshot of the directory at ``path``.

        Args:
            path: Directory to list, may be a symbolic link
            label: Display name used only in error messages

        Returns:
            Snapshot with the sorted entries, or with a classified error
        """
        if path is None or not os.fspath(path):
            logger.warning("No path supplied for folder", label=label)
            return Snapshot.failure(InvalidLocation(label=label))

        resolved = _resolve_path(os.fspath(path))
        logger.info("Fetching directory snapshot", path=resolved, label=label)

        with tracer.start_as_current_span("fetch_snapshot") as span:
            span.set_attribute("folder.path", resolved)
            span.set_attribute("folder.label", label)

            try:
                with os.scandir(resolved) as it:
                    visible = [
                        dir_entry
                        for dir_entry in it
                        if not dir_entry.name.startswith(self.hidden_prefix)
                    ]
            except (OSError, ValueError) as e:
                return self._failed(classify_error(e, resolved, label), resolved, span, e)

            # An entry whose metadata cannot be read fails the whole listing
            try:
                entries = [_read_entry(dir_entry) for dir_entry in visible]
            except (OSError, ValueError) as e:
                return self._failed(Unknown(message=str(e), path=resolved), resolved, span, e)

            entries = sort_entries(entries)
            span.set_attribute("folder.entry_count", len(entries))

        logger.info(
            "Directory snapshot fetched",
            path=resolved,
            label=label,
            entry_count=len(entries),
        )
        return Snapshot.success(entries, path=resolved)

    def _failed(
        self, error: AccessError, resolved: str, span: Any, cause: Exception
    ) -> Snapshot:
        span.set_attribute("folder.error", error.kind)
        logger.warning(
            "Directory snapshot failed",
            kind=error.kind,
            path=resolved,
            error=str(cause),
        )
        return Snapshot.failure(error, path=resolved)


_default_fetcher = DirectorySnapshotFetcher()


def fetch_snapshot(path: PathArg, label: str) -> Snapshot:
    """Take a snapshot of a directory with the default fetcher."""
    return _default_fetcher.fetch(path, label)


def fetch_location(location: WellKnownLocation) -> Snapshot:
    """Take a snapshot of one of the well-known folders.

    Returns an InvalidLocation failure when the folder has no path on this
    machine.
    """
    path: Optional[str] = location.resolve()
    if path is None:
        logger.warning("Folder unavailable", location=location.value)
        return Snapshot.failure(InvalidLocation(label=location.display_name))
    return fetch_snapshot(path, location.display_name)


async def fetch_snapshot_async(path: PathArg, label: str) -> Snapshot:
    """Take a snapshot without blocking the event loop."""
    # Let pending tasks run before the blocking listing starts
    await asyncio.sleep(0)
    return await asyncio.to_thread(fetch_snapshot, path, label)


async def fetch_location_async(location: WellKnownLocation) -> Snapshot:
    """Async counterpart of :func:`fetch_location`."""
    await asyncio.sleep(0)
    return await asyncio.to_thread(fetch_location, location)
