"""Logging setup: a log file per config dir, warnings on the rich console."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FILE_NAME = "toggl-ninja-sync.log"
# Set via `extra` on records whose message the CLI already printed
SHOWN_TO_USER = "shown_to_user"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    log_level: int = logging.INFO,
    config_dir: Path | None = None,
    console: Console | None = None,
) -> Path:
    """Route log records to the log file and to the console.

    The file receives everything at ``log_level``. The console only shows
    warnings and errors unless ``log_level`` is DEBUG, so sync notifications
    printed on the same console are not drowned out.

    Args:
        log_level: Level for the log file.
        config_dir: Directory holding the log file. Defaults to ~/.toggl-ninja-sync/
        console: Rich console shared with the CLI output.

    Returns:
        Path of the log file.
    """
    log_dir = config_dir or Path.home() / ".toggl-ninja-sync"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(log_level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(file_handler)

    console_handler = RichHandler(console=console, show_time=False, show_path=False)
    console_handler.setLevel(logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING)
    console_handler.addFilter(lambda record: not getattr(record, SHOWN_TO_USER, False))
    root_logger.addHandler(console_handler)

    return log_file
