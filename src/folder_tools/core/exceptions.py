"""Exception hierarchy for folder-tools.

Filesystem failures are never raised from a fetch; they are returned as
classified ``AccessError`` values. These exceptions cover misuse of the API.
"""


class FolderToolsError(Exception):
    """Base exception for all folder-tools errors."""

    pass


class ValidationError(FolderToolsError):
    """Raised when validation fails."""

    pass
