"""Logging configuration for the task list."""

from __future__ import annotations

import sys
import logging
from pathlib import Path
from datetime import datetime

def setup_logger(
    name: str = "task_list",
    log_dir: Path | None = None,
    level: int = logging.INFO,
    console: bool = False,
) -> logging.Logger:
    """Configure logging with a file handler and an optional console handler

    The console handler writes to stderr so it never mixes with the
    replies printed on stdout.

    Args:
        name: Logger name
        log_dir: Directory for log files (default: logs/)
        level: Logging level
        console: Also log to stderr

    Returns:
        Configured logger instance
    """

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # File handler
    if log_dir is None:
        log_dir = Path("logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / f"task_list_{datetime.now():%Y%m%d}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger
