"""Snapshot schemas for folder-tools.

A fetch produces a ``Snapshot`` holding either the ordered ``Entry`` list of a
directory or a classified ``AccessError``, never both.
"""

import os
from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator


def printable(text: str) -> str:
    """Return ``text`` with undecodable filename bytes shown as ``\\xNN`` escapes.

    Names read from the filesystem keep bytes that are not valid UTF-8 as
    surrogate escapes, which cannot be written to a UTF-8 stream.
    """
    return os.fsencode(text).decode("utf-8", "backslashreplace")


class Entry(BaseModel):
    """One filesystem object taken at fetch time."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Last path component")
    is_directory: bool = Field(..., description="Whether the entry is a directory")
    size_bytes: Optional[int] = Field(
        default=None, description="Size in bytes, files only"
    )
    modified_at: Optional[datetime] = Field(
        default=None, description="Last modification time"
    )

    @field_serializer("name")
    def _serialize_name(self, name: str) -> str:
        return printable(name)


class _AccessErrorBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @field_serializer("path", "message", check_fields=False)
    def _serialize_text(self, value: str) -> str:
        return printable(value)


class InvalidLocation(_AccessErrorBase):
    """The caller supplied no resolvable path."""

    kind: Literal["invalid_location"] = "invalid_location"
    label: Optional[str] = None

    def user_message(self) -> str:
        if self.label:
            return f"The {self.label} folder is unavailable."
        return "This folder is unavailable."


class PermissionDenied(_AccessErrorBase):
    """The operating system denied read access."""

    kind: Literal["permission_denied"] = "permission_denied"
    path: str
    label: str

    def user_message(self) -> str:
        return (
            f"You don't have permission to view the contents of {self.label} "
            f"({self.path}). Grant this application access to the folder in "
            f"your system privacy settings, then try again."
        )


class NotFound(_AccessErrorBase):
    """The path does not exist."""

    kind: Literal["not_found"] = "not_found"
    path: str
    label: str

    def user_message(self) -> str:
        return f"The {self.label} folder ({self.path}) could not be found."


class Corrupt(_AccessErrorBase):
    """The filesystem or volume could not be read."""

    kind: Literal["corrupt"] = "corrupt"
    path: str

    def user_message(self) -> str:
        return f"The folder at {self.path} could not be read. It may be corrupted."


class Unknown(_AccessErrorBase):
    """Any OS error without a dedicated category."""

    kind: Literal["unknown"] = "unknown"
    message: str
    path: str

    def user_message(self) -> str:
        return f"An unexpected error occurred while reading {self.path}: {self.message}"


# Discriminated union of classified access failures
AccessError = Annotated[
    Union[InvalidLocation, PermissionDenied, NotFound, Corrupt, Unknown],
    Field(discriminator="kind"),
]


class Snapshot(BaseModel):
    """Result of one directory fetch."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[Entry, ...] = ()
    error: Optional[AccessError] = None
    path: Optional[str] = Field(
        default=None, description="Resolved path that was listed"
    )

    @model_validator(mode="after")
    def _entries_or_error(self) -> "Snapshot":
        if self.error is not None and self.entries:
            raise ValueError("A snapshot carries either entries or an error, not both")
        return self

    @field_serializer("path")
    def _serialize_path(self, path: Optional[str]) -> Optional[str]:
        return printable(path) if path is not None else None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, entries: list[Entry], path: Optional[str] = None) -> "Snapshot":
        return cls(entries=tuple(entries), path=path)

    @classmethod
    def failure(cls, error: AccessError, path: Optional[str] = None) -> "Snapshot":
        return cls(error=error, path=path)
