"""Display formatting and console output."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from tabulate import tabulate

from task_list.models import Task
from task_list.service import EMPTY_LIST_MESSAGE


def format_tasks_table(tasks: Sequence[Task]) -> str:
    """Format tasks as a table string."""
    if not tasks:
        return EMPTY_LIST_MESSAGE

    headers = ["No.", "Done", "Kind", "Task"]
    rows = [
        [
            index,
            "X" if task.is_done else "",
            task.kind.value.lower(),
            _truncate(task.text, 50),
        ]
        for index, task in enumerate(tasks, start=1)
    ]
    return tabulate(rows, headers=headers, tablefmt="simple")


def _truncate(text: str, max_len: int) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"


class Console:
    """Buffers messages and prints them between separator lines.

    Messages queued with say_later() are held until the next flush(), so
    several results can share one frame.
    """

    def __init__(self, stream: TextIO | None = None, width: int = 60, indent: int = 4) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._separator = " " * indent + "_" * width
        self._indent = " " * (indent + 1)
        self._buffer: list[str] = []

    def say_later(self, message: str) -> None:
        """Queue a message for the next flush."""
        self._buffer.append(message)

    def flush(self) -> None:
        """Print all queued messages inside one frame and empty the buffer."""
        if not self._buffer:
            return
        lines = [self._separator]
        for message in self._buffer:
            lines.extend(self._indent + line for line in message.splitlines())
        lines.append(self._separator)
        self._buffer.clear()
        self._stream.write("\n".join(lines) + "\n")
        self._stream.flush()

    def say(self, message: str) -> None:
        """Queue a message and flush immediately."""
        self.say_later(message)
        self.flush()

    def welcome(self, working_dir: str) -> None:
        """Print the startup banner."""
        self.say_later(f"Running in the folder: {working_dir}")
        self.say("Hello! I'm your task list.\nWhat can I do for you?")
