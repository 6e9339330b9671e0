"""File operations and group dispositions."""

from .file_service import FileService
from .actions import ActionDispatcher, DeleteSession, SessionState

__all__ = ["FileService", "ActionDispatcher", "DeleteSession", "SessionState"]
