"""Pydantic models for Toggl API and Reports API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Workspace(BaseModel):
    """Toggl workspace model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    name: str = ""


class TimeEntry(BaseModel):
    """A single row of a Toggl detailed report."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int | None = None
    project_id: int | None = Field(default=None, alias="pid")
    task_id: int | None = Field(default=None, alias="tid")
    user_id: int | None = Field(default=None, alias="uid")
    description: str = ""
    start: datetime
    end: datetime
    duration_ms: int | None = Field(default=None, alias="dur")
    user: str | None = None
    client_name: str | None = Field(default=None, alias="client")
    project_name: str | None = Field(default=None, alias="project")
    billable: bool | float | None = None
    tags: list[str] | None = None

    @model_validator(mode="after")
    def _check_interval(self) -> "TimeEntry":
        if self.end < self.start:
            raise ValueError("time entry ends before it starts")
        return self

    @property
    def start_timestamp(self) -> int:
        """Start of the entry in epoch seconds."""
        return int(self.start.timestamp())

    @property
    def end_timestamp(self) -> int:
        """End of the entry in epoch seconds."""
        return int(self.end.timestamp())


class DetailedReport(BaseModel):
    """Toggl detailed report response."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_count: int = 0
    per_page: int = 0
    data: list[TimeEntry] = Field(default_factory=list)
