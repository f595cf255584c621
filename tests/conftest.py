"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from timings_sync.config import Config, ProjectMapping
from timings_sync.toggl import DetailedReport, TimeEntry, Workspace
from timings_sync.utils import StorageManager
from timings_sync.utils.reporting import Reporter


@pytest.fixture(autouse=True)
def clear_token_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tokens from the environment out of the tests."""
    monkeypatch.delenv("TOGGL_API_TOKEN", raising=False)
    monkeypatch.delenv("INVOICENINJA_API_TOKEN", raising=False)


@pytest.fixture
def temp_config_dir() -> Path:
    """Create a temporary configuration directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def storage_manager(temp_config_dir: Path) -> StorageManager:
    """Create a storage manager with temporary directory."""
    return StorageManager(temp_config_dir)


@pytest.fixture
def config(temp_config_dir: Path) -> Config:
    """Create a config instance with temporary directory."""
    return Config(temp_config_dir)


@pytest.fixture
def project_mapping() -> ProjectMapping:
    """Mapping billing Toggl project 42 to client 5, project 9."""
    return ProjectMapping.from_raw({42: {"client_id": 5, "project_id": 9}})


@pytest.fixture
def mapped_entry() -> TimeEntry:
    """Time entry of the mapped Toggl project 42."""
    return TimeEntry(
        id=1,
        pid=42,
        description="A",
        start=datetime.fromtimestamp(1000, tz=timezone.utc),
        end=datetime.fromtimestamp(2000, tz=timezone.utc),
        client="Acme",
        project="Website",
    )


@pytest.fixture
def unmapped_entry() -> TimeEntry:
    """Time entry of the unmapped Toggl project 99."""
    return TimeEntry(
        id=2,
        pid=99,
        description="B",
        start=datetime.fromtimestamp(3000, tz=timezone.utc),
        end=datetime.fromtimestamp(4000, tz=timezone.utc),
    )


@pytest.fixture
def mock_source(mapped_entry: TimeEntry, unmapped_entry: TimeEntry) -> MagicMock:
    """Toggl client returning one workspace with both sample entries."""
    source = MagicMock()
    source.list_workspaces.return_value = [Workspace(id=1, name="Main")]
    source.get_detailed_report.return_value = DetailedReport(
        total_count=2,
        per_page=50,
        data=[mapped_entry, unmapped_entry],
    )
    return source


@pytest.fixture
def mock_sink() -> MagicMock:
    """Invoice Ninja client."""
    return MagicMock()


@pytest.fixture
def mock_reporter() -> MagicMock:
    """Console reporter."""
    return MagicMock(spec=Reporter)
