"""Toggl API client."""

import logging
from datetime import date, timedelta
from typing import Any

import httpx

from timings_sync.toggl.models import DetailedReport, Workspace

logger = logging.getLogger(__name__)


class TogglClient:
    """Client for the Toggl API and the Toggl Reports API."""

    BASE_URL = "https://api.track.toggl.com"
    API_VERSION = "v8"
    REPORTS_VERSION = "v2"

    def __init__(
        self,
        api_token: str,
        user_agent: str = "toggl-ninja-sync",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize Toggl client.

        Args:
            api_token: Toggl API token.
            user_agent: Identifier required by the Reports API.
            transport: Optional httpx transport, used to stub the network.
        """
        if not api_token:
            raise ValueError("Toggl API token not provided")

        self.user_agent = user_agent
        self.client = httpx.Client(
            base_url=self.BASE_URL,
            auth=(api_token, "api_token"),
            headers={"Accept": "application/json"},
            timeout=30.0,
            transport=transport,
        )

    def list_workspaces(self) -> list[Workspace]:
        """List the workspaces available to the token owner.

        Returns:
            List of workspaces, empty when the response is not a list.

        Raises:
            httpx.HTTPError: If API request fails.
        """
        response = self.client.get(f"/api/{self.API_VERSION}/workspaces")
        response.raise_for_status()
        data = response.json()

        if not isinstance(data, list):
            logger.warning(f"Unexpected workspaces payload: {type(data).__name__}")
            return []

        return [Workspace(**item) for item in data]

    def get_detailed_report(
        self,
        workspace_id: int,
        since: date | None = None,
        until: date | None = None,
    ) -> DetailedReport:
        """Get the detailed report of a workspace.

        Args:
            workspace_id: Workspace ID.
            since: First day of the report. Defaults to yesterday.
            until: Last day of the report. Defaults to today.

        Returns:
            Detailed report with its time entries.

        Raises:
            httpx.HTTPError: If API request fails.
        """
        if since is None:
            since = date.today() - timedelta(days=1)
        if until is None:
            until = date.today()

        params: dict[str, Any] = {
            "user_agent": self.user_agent,
            "workspace_id": workspace_id,
            "since": since.strftime("%Y-%m-%d"),
            "until": until.strftime("%Y-%m-%d"),
        }

        response = self.client.get(f"/reports/api/{self.REPORTS_VERSION}/details", params=params)
        response.raise_for_status()
        return DetailedReport(**response.json())

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "TogglClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
