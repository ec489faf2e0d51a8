"""Browse the well-known user folders.

This package lists the contents of the Downloads, Desktop and Documents
folders as point-in-time snapshots: directories first, then files, each with
its size and modification date. Access failures come back as classified
errors carrying a message that can be shown to the user.

Recommended Usage:

    >>> from folder_tools import WellKnownLocation, fetch_location
    >>> snapshot = fetch_location(WellKnownLocation.downloads)
    >>> if snapshot.ok:
    ...     names = [entry.name for entry in snapshot.entries]
    ... else:
    ...     message = snapshot.error.user_message()

Any directory can be listed with ``fetch_snapshot(path, label)``. For
interactive front ends, ``BrowserSession`` tracks the selected folder and
discards listings that arrive after a newer request.
"""

__version__ = "0.1.0"

from .filesystem import (
    DirectorySnapshotFetcher,
    WellKnownLocation,
    fetch_location,
    fetch_location_async,
    fetch_snapshot,
    fetch_snapshot_async,
)
from .navigation import BrowserSession, SessionState, SessionStatus
from .schemas import (
    AccessError,
    Corrupt,
    Entry,
    InvalidLocation,
    NotFound,
    PermissionDenied,
    Snapshot,
    Unknown,
)

__all__ = [
    # Snapshot schemas
    "AccessError",
    "Corrupt",
    "Entry",
    "InvalidLocation",
    "NotFound",
    "PermissionDenied",
    "Snapshot",
    "Unknown",
    # Fetching
    "DirectorySnapshotFetcher",
    "WellKnownLocation",
    "fetch_location",
    "fetch_location_async",
    "fetch_snapshot",
    "fetch_snapshot_async",
    # Navigation
    "BrowserSession",
    "SessionState",
    "SessionStatus",
]
