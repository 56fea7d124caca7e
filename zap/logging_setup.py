"""
Logging configuration.

curses owns the terminal while the launcher runs, so records go to a
log file in the per-user data directory instead of stdout.
"""

import logging
from pathlib import Path


def setup_logging(log_level: str | int = logging.WARNING, log_file: Path | None = None) -> None:
    """
    Configure the root logger.

    Args:
        log_level: Level name ("DEBUG", "INFO", ...) or numeric level.
        log_file: Destination file. Without one, or when it cannot be
            opened, records are discarded.
    """
    root_logger = logging.getLogger()
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.WARNING
    root_logger.setLevel(log_level)

    # Remove old handlers to avoid duplicated records
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler: logging.Handler = logging.NullHandler()
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()

    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(handler)
