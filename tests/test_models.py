"""Tests for Pydantic models."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from timings_sync.invoiceninja import Task
from timings_sync.toggl import DetailedReport, TimeEntry


class TestTogglModels:
    """Test Toggl models."""

    def test_time_entry_from_report_row(self) -> None:
        """Test parsing a detailed report row."""
        entry = TimeEntry(
            **{
                "id": 436694100,
                "pid": 42,
                "tid": None,
                "uid": 7,
                "description": "Fix bug",
                "start": "2024-03-01T09:00:00+01:00",
                "end": "2024-03-01T10:00:00+01:00",
                "dur": 3600000,
                "user": "Jane",
                "client": "Acme",
                "project": "Website",
                "project_color": "0",
                "billable": 120.0,
                "is_billable": True,
                "tags": [],
            }
        )

        assert entry.project_id == 42
        assert entry.client_name == "Acme"
        assert entry.project_name == "Website"
        assert entry.start_timestamp == int(
            datetime(2024, 3, 1, 8, 0, tzinfo=timezone.utc).timestamp()
        )
        assert entry.end_timestamp - entry.start_timestamp == 3600

    def test_time_entry_rejects_reversed_interval(self) -> None:
        """Test that an entry ending before it starts is invalid."""
        with pytest.raises(ValidationError):
            TimeEntry(
                pid=42,
                start=datetime(2024, 1, 1, 10, tzinfo=timezone.utc),
                end=datetime(2024, 1, 1, 9, tzinfo=timezone.utc),
            )

    def test_time_entry_is_immutable(self, mapped_entry: TimeEntry) -> None:
        """Test that entries cannot be changed after parsing."""
        with pytest.raises(ValidationError):
            mapped_entry.description = "changed"  # type: ignore[misc]

    def test_detailed_report_defaults(self) -> None:
        """Test an empty detailed report."""
        report = DetailedReport(**{"total_count": 0, "per_page": 50, "data": []})

        assert report.data == []


class TestInvoiceNinjaModels:
    """Test Invoice Ninja models."""

    def test_task_api_dict(self) -> None:
        """Test converting a task to the API payload."""
        task = Task(description="A", time_log=[(1000, 2000)], client_id=5, project_id=9)

        assert task.to_api_dict() == {
            "description": "A",
            "time_log": "[[1000,2000]]",
            "client_id": 5,
            "project_id": 9,
        }

    def test_task_by_alias(self) -> None:
        """Test building a task from camel-case names."""
        task = Task(description="A", timeLog=[[1, 2]], clientId=5, projectId=9)

        assert task.time_log == [(1, 2)]
        assert json.loads(task.serialized_time_log()) == [[1, 2]]

    def test_task_to_json(self) -> None:
        """Test the JSON rendering used for previews."""
        task = Task(description="A", time_log=[(1000, 2000)], client_id=5, project_id=9)

        assert json.loads(task.to_json())["time_log"] == "[[1000,2000]]"
