"""Synchronize Toggl time entries into Invoice Ninja tasks."""

__version__ = "0.1.0"
