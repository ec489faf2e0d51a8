"""Filesystem listing for the well-known folders."""

from .locations import WellKnownLocation, parse_location
from .snapshot import (
    DirectorySnapshotFetcher,
    classify_error,
    fetch_location,
    fetch_location_async,
    fetch_snapshot,
    fetch_snapshot_async,
    sort_entries,
)

__all__ = [
    "WellKnownLocation",
    "parse_location",
    "DirectorySnapshotFetcher",
    "classify_error",
    "fetch_location",
    "fetch_location_async",
    "fetch_snapshot",
    "fetch_snapshot_async",
    "sort_entries",
]
