"""Shared CLI parameter definitions.

Each function returns the Typer parameter for one option so that commands
declare their options with consistent names and help text.
"""

from typing import Any

import typer


def location_argument() -> Any:
    """Well-known folder argument."""
    return typer.Argument(
        help="Folder to list: downloads, desktop or documents (any case)"
    )


def json_option() -> Any:
    """JSON output option."""
    return typer.Option("--json", help="Print the snapshot as JSON")


def show_path_option() -> Any:
    """Resolved path header option."""
    return typer.Option("--show-path", help="Print the resolved folder path first")
