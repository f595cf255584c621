"""Sync engine for billing Toggl time entries in Invoice Ninja."""

import logging
from datetime import date
from typing import Protocol

from timings_sync.config import ProjectMapping
from timings_sync.errors import NoWorkspacesError
from timings_sync.invoiceninja.models import Task
from timings_sync.sync.mapper import TaskMapper
from timings_sync.sync.window import RunWindow
from timings_sync.toggl.models import DetailedReport, TimeEntry, Workspace
from timings_sync.utils.reporting import Reporter

logger = logging.getLogger(__name__)


class TimeReportSource(Protocol):
    """Where time entries come from."""

    def list_workspaces(self) -> list[Workspace]: ...

    def get_detailed_report(
        self, workspace_id: int, since: date | None = None, until: date | None = None
    ) -> DetailedReport: ...


class TaskSink(Protocol):
    """Where tasks are submitted."""

    def save_new_task(self, task: Task) -> None: ...


class SyncResult:
    """Results from a sync operation."""

    def __init__(self) -> None:
        """Initialize sync result."""
        self.workspaces = 0
        self.entries_sent = 0
        self.entries_previewed = 0
        self.entries_skipped = 0

    def add_sent(self) -> None:
        """Record a submitted task."""
        self.entries_sent += 1

    def add_preview(self) -> None:
        """Record a dry-run preview."""
        self.entries_previewed += 1

    def add_skip(self) -> None:
        """Record an entry of an unmapped project."""
        self.entries_skipped += 1

    def __str__(self) -> str:
        """String representation of results."""
        return (
            f"Workspaces: {self.workspaces}, "
            f"Sent: {self.entries_sent}, "
            f"Previewed: {self.entries_previewed}, "
            f"Skipped: {self.entries_skipped}"
        )


class SyncOrchestrator:
    """Main synchronization engine."""

    def __init__(
        self,
        source: TimeReportSource,
        sink: TaskSink,
        mapping: ProjectMapping,
        reporter: Reporter | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            source: Toggl client providing workspaces and reports.
            sink: Invoice Ninja client receiving tasks.
            mapping: Validated project mapping.
            reporter: Console reporter for user-facing notifications.
        """
        self.source = source
        self.sink = sink
        self.mapper = TaskMapper(mapping)
        self.reporter = reporter or Reporter()

    def workspaces(self) -> list[Workspace]:
        """Get the workspaces to sync.

        Raises:
            NoWorkspacesError: If the source returns no workspaces.
        """
        workspaces = self.source.list_workspaces()
        if not isinstance(workspaces, list) or not workspaces:
            raise NoWorkspacesError()
        return workspaces

    def sync(self, window: RunWindow | None = None, dry_run: bool = False) -> SyncResult:
        """Send every mapped time entry of the window to Invoice Ninja.

        Network errors are not handled and abort the run.

        Args:
            window: Days to sync. Defaults to yesterday through today.
            dry_run: If True, show the payloads instead of submitting them.

        Returns:
            Sync results.
        """
        window = window or RunWindow.from_expressions()
        result = SyncResult()

        logger.info(f"Syncing time entries from {window}{' (dry run)' if dry_run else ''}")

        try:
            workspaces = self.workspaces()
        except NoWorkspacesError as e:
            logger.info("Aborting sync: Toggl returned no workspaces")
            self.reporter.error(str(e))
            return result

        for workspace in workspaces:
            result.workspaces += 1
            report = self.source.get_detailed_report(workspace.id, window.since, window.until)
            logger.info(f"Found {len(report.data)} time entries in workspace {workspace.id}")

            for entry in report.data:
                self._sync_entry(entry, result, dry_run)

        logger.info(f"Sync complete: {result}")
        return result

    def _sync_entry(self, entry: TimeEntry, result: SyncResult, dry_run: bool) -> None:
        """Submit or preview a single entry if its project is mapped."""
        if not self.mapper.is_eligible(entry):
            result.add_skip()
            return

        task = self.mapper.build_task(entry)

        if dry_run:
            self.reporter.preview(task)
            result.add_preview()
        else:
            self.sink.save_new_task(task)
            logger.info(f"Created Invoice Ninja task for Toggl entry {entry.id}")
            result.add_sent()

        self.reporter.success(
            f"TimeEntry ({entry.client_name or ''}/{entry.project_name or ''} - {entry.description}) "
            "sent to InvoiceNinja"
        )
