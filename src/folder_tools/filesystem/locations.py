"""Well-known folders and their platform paths."""

from enum import Enum
from typing import Callable, Optional

from platformdirs import user_desktop_dir, user_documents_dir, user_downloads_dir

from folder_tools.core import get_logger, settings
from folder_tools.core.exceptions import ValidationError

logger = get_logger(__name__)


class WellKnownLocation(str, Enum):
    """Folders the browser can navigate to."""

    downloads = "downloads"
    desktop = "desktop"
    documents = "documents"

    @property
    def display_name(self) -> str:
        return _TITLES[self]

    def resolve(self) -> Optional[str]:
        """Return the folder's path on this machine, or None if it has none.

        A path configured through settings wins over the platform default.
        """
        override = getattr(settings, f"{self.value}_dir")
        if override:
            return override

        path = _RESOLVERS[self]()
        if not path:
            logger.warning("Well-known folder has no platform path", location=self.value)
            return None
        return path


_TITLES: dict[WellKnownLocation, str] = {
    WellKnownLocation.downloads: "Downloads",
    WellKnownLocation.desktop: "Desktop",
    WellKnownLocation.documents: "Documents",
}

_RESOLVERS: dict[WellKnownLocation, Callable[[], str]] = {
    WellKnownLocation.downloads: user_downloads_dir,
    WellKnownLocation.desktop: user_desktop_dir,
    WellKnownLocation.documents: user_documents_dir,
}


def parse_location(name: str) -> WellKnownLocation:
    """Look up a well-known folder by name, case-insensitively.

    Raises:
        ValidationError: If the name is not one of the known folders
    """
    try:
        return WellKnownLocation(name.strip().lower())
    except ValueError:
        available = ", ".join([e.value for e in WellKnownLocation])
        raise ValidationError(
            f"Unknown location: {name}. Available locations: {available}"
        )
