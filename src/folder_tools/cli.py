"""Command-line interface for folder-tools.

Commands:
    - locations: Show where each well-known folder lives on this machine
    - list: List the contents of a well-known folder
"""

import locale
from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import json_option, location_argument, show_path_option
from .core import get_logger
from .core.exceptions import ValidationError
from .filesystem import WellKnownLocation, fetch_location, parse_location
from .formatting import format_entry_row
from .schemas import printable

logger = get_logger(__name__)

app = typer.Typer(
    name="folder-tools",
    help="Browse the Downloads, Desktop and Documents folders.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"folder-tools {__version__}")
        raise typer.Exit()


def _enable_collation_locale() -> None:
    """Sort names with the user's collation rules instead of the C locale."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning("Could not enable collation locale", error=str(e))


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    Folder-Tools: list the contents of the well-known user folders.
    """
    _enable_collation_locale()


@app.command("locations")
def locations_cmd() -> None:
    """
    Show the path of each well-known folder.

    Example:
        folder-tools locations
    """
    for location in WellKnownLocation:
        path = location.resolve()
        typer.echo(
            f"{location.display_name:<10}  "
            f"{printable(path) if path else 'Folder unavailable'}"
        )


@app.command("list")
def list_cmd(
    location: Annotated[str, location_argument()],
    as_json: Annotated[bool, json_option()] = False,
    show_path: Annotated[bool, show_path_option()] = False,
) -> None:
    """
    List a folder, directories first, then files by name.

    Examples:
        folder-tools list downloads
        folder-tools list documents --json
    """
    try:
        folder = parse_location(location)
    except ValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    snapshot = fetch_location(folder)

    if as_json:
        typer.echo(snapshot.model_dump_json(indent=2))
        if not snapshot.ok:
            raise typer.Exit(1)
        return

    if snapshot.error is not None:
        typer.echo(f"Error: {printable(snapshot.error.user_message())}", err=True)
        raise typer.Exit(1)

    if show_path:
        typer.echo(printable(snapshot.path or ""))

    if snapshot.entries:
        for entry in snapshot.entries:
            typer.echo(format_entry_row(entry))
    else:
        typer.echo("This folder is empty.")


if __name__ == "__main__":
    app()
