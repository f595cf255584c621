"""Invoice Ninja API integration."""

from timings_sync.invoiceninja.client import InvoiceNinjaClient
from timings_sync.invoiceninja.models import Task

__all__ = ["InvoiceNinjaClient", "Task"]
