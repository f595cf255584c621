"""Invoice Ninja API client."""

import logging
from typing import Any

import httpx

from timings_sync.invoiceninja.models import Task

logger = logging.getLogger(__name__)


class InvoiceNinjaClient:
    """Client for the Invoice Ninja API."""

    DEFAULT_URL = "https://app.invoiceninja.com"

    def __init__(
        self,
        api_token: str,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize Invoice Ninja client.

        Args:
            api_token: Invoice Ninja API token.
            base_url: Root URL of the Invoice Ninja installation.
            transport: Optional httpx transport, used to stub the network.
        """
        if not api_token:
            raise ValueError("Invoice Ninja API token not provided")

        self.base_url = (base_url or self.DEFAULT_URL).rstrip("/")
        self.client = httpx.Client(
            base_url=self.base_url,
            headers={
                "X-Ninja-Token": api_token,
                "X-Requested-With": "XMLHttpRequest",
                "Accept": "application/json",
            },
            timeout=30.0,
            transport=transport,
        )

    def save_new_task(self, task: Task) -> None:
        """Create a new task.

        Args:
            task: Task to create.

        Raises:
            httpx.HTTPError: If API request fails.
        """
        response = self.client.post("/api/v1/tasks", json=task.to_api_dict())
        response.raise_for_status()
        logger.debug(f"Invoice Ninja accepted task: {response.text}")

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> "InvoiceNinjaClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()
