"""Utility modules for the timings synchronizer."""

from timings_sync.utils.logging import setup_logging
from timings_sync.utils.storage import StorageManager

__all__ = ["setup_logging", "StorageManager"]
