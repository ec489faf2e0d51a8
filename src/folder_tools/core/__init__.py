"""Core utilities and shared components for folder-tools."""

from .config import settings
from .exceptions import FolderToolsError, ValidationError
from .observability import get_logger, get_tracer

__all__ = ["settings", "FolderToolsError", "ValidationError", "get_logger", "get_tracer"]
