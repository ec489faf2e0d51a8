"""Text rendering of snapshot entries."""

from datetime import datetime
from typing import Optional

from .schemas import Entry, printable


def format_size(size_bytes: Optional[int]) -> str:
    """Render a byte count the way file browsers do."""
    if size_bytes is None:
        return "--"
    if size_bytes >= 1024**3:
        return f"{size_bytes / (1024**3):.2f} GB"
    elif size_bytes >= 1024**2:
        return f"{size_bytes / (1024**2):.2f} MB"
    elif size_bytes >= 1024:
        return f"{size_bytes / 1024:.2f} KB"
    else:
        return f"{size_bytes} bytes"


def format_modified(modified_at: Optional[datetime]) -> str:
    if modified_at is None:
        return "--"
    return modified_at.astimezone().strftime("%Y-%m-%d %H:%M")


def format_entry_row(entry: Entry, name_width: int = 40) -> str:
    """Render one entry as a fixed-width row; directories get a trailing slash."""
    name = printable(entry.name)
    if entry.is_directory:
        name += "/"
    return (
        f"{name:<{name_width}}  "
        f"{format_size(entry.size_bytes):>12}  "
        f"{format_modified(entry.modified_at)}"
    )
