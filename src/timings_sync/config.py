"""Configuration management for the timings synchronizer."""

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError

from timings_sync.errors import InvalidProjectMappingError
from timings_sync.utils.storage import StorageManager

logger = logging.getLogger(__name__)

ProjectKey = int | str


class MappingRecord(BaseModel):
    """Invoice Ninja client and project a Toggl project is billed to."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    client_id: StrictInt
    project_id: StrictInt


def _normalize_key(key: Any) -> ProjectKey:
    if isinstance(key, bool):
        return str(key)
    if isinstance(key, int):
        return key
    text = str(key).strip()
    if text.removeprefix("-").isdecimal():
        return int(text)
    return text


class ProjectMapping(Mapping[ProjectKey, MappingRecord]):
    """Validated, read-only table of Toggl project id to Invoice Ninja ids.

    Only projects listed here are ever billed. Keys given as digit strings
    are normalised to integers so they match Toggl project ids.
    """

    def __init__(self, records: Mapping[ProjectKey, MappingRecord] | None = None) -> None:
        self._records: Mapping[ProjectKey, MappingRecord] = MappingProxyType(dict(records or {}))

    @classmethod
    def from_raw(cls, raw: Any) -> "ProjectMapping":
        """Validate raw configuration data into a project mapping.

        Args:
            raw: Mapping of Toggl project id to a record holding integer
                ``client_id`` and ``project_id``. Extra record fields are ignored.

        Returns:
            The validated mapping.

        Raises:
            InvalidProjectMappingError: If the data is not a mapping or any
                record is missing either id.
        """
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise InvalidProjectMappingError(
                f"Project mapping must be a mapping, got {type(raw).__name__}"
            )

        records: dict[ProjectKey, MappingRecord] = {}
        for key, value in raw.items():
            if not isinstance(value, Mapping):
                raise InvalidProjectMappingError(
                    f"Project mapping for {key!r} must be a mapping with client_id and project_id"
                )
            try:
                record = MappingRecord.model_validate(dict(value))
            except ValidationError as e:
                fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
                raise InvalidProjectMappingError(
                    f"Invalid project mapping for {key!r}: {fields or 'invalid record'}"
                ) from e

            normalized = _normalize_key(key)
            if not isinstance(normalized, int):
                logger.warning(f"Project mapping key {key!r} is not a Toggl project id")
            records[normalized] = record

        return cls(records)

    def __getitem__(self, key: ProjectKey) -> MappingRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[ProjectKey]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ProjectMapping({dict(self._records)!r})"


def load_project_mapping(raw: Any) -> ProjectMapping:
    """Validate raw ``projects`` configuration. See ProjectMapping.from_raw."""
    return ProjectMapping.from_raw(raw)


class Config:
    """Manages application configuration and the project mapping."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize configuration.

        Args:
            config_dir: Directory for storing configuration.
        """
        self.storage = StorageManager(config_dir)
        self._data = self.storage.load_config()

    @property
    def toggl_user_agent(self) -> str:
        return (self._data.get("toggl") or {}).get("user_agent", "toggl-ninja-sync")

    @property
    def invoiceninja_url(self) -> str | None:
        return (self._data.get("invoiceninja") or {}).get("url")

    def set_invoiceninja_url(self, url: str) -> None:
        """Store the Invoice Ninja installation URL."""
        self._data.setdefault("invoiceninja", {})["url"] = url
        self.storage.save_config(self._data)

    def set_toggl_user_agent(self, user_agent: str) -> None:
        """Store the identifier sent to the Toggl Reports API."""
        self._data.setdefault("toggl", {})["user_agent"] = user_agent
        self.storage.save_config(self._data)

    def get_token(self, service: str) -> str | None:
        """Get the API token of a service."""
        return self.storage.get_token(service)

    def project_mapping(self) -> ProjectMapping:
        """Build the validated project mapping.

        Returns:
            Project mapping.

        Raises:
            InvalidProjectMappingError: If the ``projects`` section is invalid.
        """
        return load_project_mapping(self._data.get("projects"))

    def update_project(self, toggl_project_id: int, client_id: int, project_id: int) -> None:
        """Map a Toggl project to an Invoice Ninja client and project.

        Args:
            toggl_project_id: Toggl project id.
            client_id: Invoice Ninja client id.
            project_id: Invoice Ninja project id.

        Raises:
            InvalidProjectMappingError: If the existing ``projects`` section is invalid.
        """
        self.project_mapping()
        projects = {
            key: record
            for key, record in (self._data.get("projects") or {}).items()
            if _normalize_key(key) != toggl_project_id
        }
        projects[toggl_project_id] = {
            "client_id": client_id,
            "project_id": project_id,
        }
        self._data["projects"] = projects
        self.storage.save_config(self._data)
