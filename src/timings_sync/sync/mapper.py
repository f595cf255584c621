"""Mapping of Toggl time entries to Invoice Ninja tasks."""

from collections.abc import Mapping
from typing import Any

from timings_sync.config import MappingRecord, ProjectMapping
from timings_sync.errors import MissingMappingFieldError
from timings_sync.invoiceninja.models import Task
from timings_sync.toggl.models import TimeEntry


class TaskMapper:
    """Decides which time entries are billed and builds their tasks."""

    def __init__(self, mapping: ProjectMapping) -> None:
        """Initialize task mapper.

        Args:
            mapping: Validated project mapping.
        """
        self.mapping = mapping

    def resolve(self, entry: TimeEntry) -> MappingRecord | None:
        """Get the mapping record for the entry's project, if any."""
        if entry.project_id is None:
            return None
        return self.mapping.get(entry.project_id)

    def is_eligible(self, entry: TimeEntry) -> bool:
        """Check whether an entry belongs to a configured project.

        Args:
            entry: Toggl time entry.

        Returns:
            True if the entry should be billed, False otherwise.
        """
        return entry.project_id is not None and entry.project_id in self.mapping

    def build_task(
        self,
        entry: TimeEntry,
        record: MappingRecord | Mapping[str, Any] | None = None,
    ) -> Task:
        """Build the Invoice Ninja task for a time entry.

        Args:
            entry: Toggl time entry.
            record: Mapping record to bill to. Resolved from the entry's
                project when omitted.

        Returns:
            Task holding a single [start, end] interval.

        Raises:
            MissingMappingFieldError: If no record is found or it lacks an id.
        """
        if record is None:
            record = self.resolve(entry)
        if record is None:
            raise MissingMappingFieldError(f"No project mapping for Toggl project {entry.project_id}")

        if isinstance(record, MappingRecord):
            client_id, project_id = record.client_id, record.project_id
        else:
            client_id, project_id = record.get("client_id"), record.get("project_id")

        if client_id is None or project_id is None:
            missing = "client_id" if client_id is None else "project_id"
            raise MissingMappingFieldError(
                f"Project mapping for Toggl project {entry.project_id} has no {missing}"
            )

        return Task(
            description=entry.description,
            time_log=[(entry.start_timestamp, entry.end_timestamp)],
            client_id=client_id,
            project_id=project_id,
        )
