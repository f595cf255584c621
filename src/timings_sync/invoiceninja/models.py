"""Pydantic models for Invoice Ninja API payloads."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """Invoice Ninja task model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    description: str
    time_log: list[tuple[int, int]] = Field(alias="timeLog")
    client_id: int = Field(alias="clientId")
    project_id: int = Field(alias="projectId")

    def serialized_time_log(self) -> str:
        """Encode the time log as a compact JSON array of [start, end] pairs."""
        return json.dumps([list(interval) for interval in self.time_log], separators=(",", ":"))

    def to_api_dict(self) -> dict[str, Any]:
        """Convert to API-compatible dictionary.

        Returns:
            Dictionary for API submission.
        """
        return {
            "description": self.description,
            "time_log": self.serialized_time_log(),
            "client_id": self.client_id,
            "project_id": self.project_id,
        }

    def to_json(self) -> str:
        """Render the API payload as JSON."""
        return json.dumps(self.to_api_dict())
