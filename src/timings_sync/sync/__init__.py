"""Synchronization of Toggl time entries to Invoice Ninja."""

from timings_sync.sync.engine import SyncOrchestrator, SyncResult, TaskSink, TimeReportSource
from timings_sync.sync.mapper import TaskMapper
from timings_sync.sync.window import RunWindow, parse_date_expression

__all__ = [
    "RunWindow",
    "SyncOrchestrator",
    "SyncResult",
    "TaskMapper",
    "TaskSink",
    "TimeReportSource",
    "parse_date_expression",
]
