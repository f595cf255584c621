"""Exceptions raised by the timings synchronizer."""


class SyncError(Exception):
    """Base class for synchronization errors."""


class NoWorkspacesError(SyncError):
    """Raised when Toggl returns no workspaces to sync."""

    def __init__(self, message: str = "No workspaces to sync.") -> None:
        super().__init__(message)


class InvalidProjectMappingError(SyncError):
    """Raised when the configured project mapping fails validation."""


class MissingMappingFieldError(SyncError):
    """Raised when a mapping record lacks a client or project id."""
