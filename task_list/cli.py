"""Command-line entry point for the task list."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterator, Sequence
from dataclasses import replace
from pathlib import Path
from typing import Optional, TextIO

from task_list.config import ConfigManager, Settings
from task_list.display import Console
from task_list.exceptions import ConfigError
from task_list.interpreter import Interpreter
from task_list.repository import TaskRepository
from task_list.service import TaskListManager
from task_list.utils.logger import setup_logger

DEFAULT_CONFIG = "config/settings.yaml"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="task-list",
        description="Interactive task list. Type 'bye' to leave.",
    )
    parser.add_argument(
        "--config", "-c", default=DEFAULT_CONFIG, help=f"YAML config path (default: {DEFAULT_CONFIG})"
    )
    parser.add_argument("--data", "-d", help="SQLite file for saved tasks (overrides config)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Also log to stderr")
    return parser


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield input lines one at a time, stopping quietly on Ctrl-C."""
    try:
        for line in stream:
            yield line.rstrip("\n")
    except KeyboardInterrupt:
        return


def build_interpreter(settings: Settings, console: Console) -> Interpreter:
    """Wire the repository, manager and console together."""
    repository = TaskRepository(settings.storage_path)
    manager = TaskListManager(repository.load())
    return Interpreter(
        manager,
        console,
        on_change=repository.save_all,
        list_style=settings.list_style,
    )


def main(argv: Optional[Sequence[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = ConfigManager(args.config).load_settings()
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return 1

    if args.data:
        settings = replace(settings, storage_path=Path(args.data))

    level = logging.DEBUG if args.verbose else settings.level
    logger = setup_logger(log_dir=settings.log_dir, level=level, console=args.verbose)
    logger.info("Starting task list")

    console = Console(width=settings.width, indent=settings.indent)
    interpreter = build_interpreter(settings, console)

    console.welcome(os.getcwd())
    interpreter.run(read_lines(stdin if stdin is not None else sys.stdin))

    logger.info("Task list closed")
    return 0
