"""Toggl API integration."""

from timings_sync.toggl.client import TogglClient
from timings_sync.toggl.models import DetailedReport, TimeEntry, Workspace

__all__ = [
    "TogglClient",
    "DetailedReport",
    "TimeEntry",
    "Workspace",
]
