"""Business logic layer for task list operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from task_list.exceptions import InvalidArgumentError, OutOfRangeError
from task_list.models import Task, TaskKind

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "Your task list is empty."


def _count_phrase(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def numbered(index: int, task: Task) -> str:
    """Format a task as '<index>.<checkbox line>'."""
    return f"{index}.{task.render_line()}"


class TaskListManager:
    """Owns the ordered task list.

    Every read and write of tasks goes through this class. Task numbers
    are 1-based positions and shift down after a delete.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None) -> None:
        """Initialize with an optional sequence of previously saved tasks."""
        self._tasks: list[Task] = []
        if tasks:
            self.load(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> Sequence[Task]:
        """Read-only snapshot of the list, in display order."""
        return tuple(self._tasks)

    def load(self, tasks: Iterable[Task]) -> None:
        """Append reloaded tasks to the end of the list."""
        loaded = list(tasks)
        self._tasks.extend(loaded)
        logger.info(f"Loaded {len(loaded)} tasks")

    def _check_index(self, index: int) -> Task:
        """Return the task at a 1-based index or raise OutOfRangeError."""
        if index < 1 or index > len(self._tasks):
            raise OutOfRangeError(index, len(self._tasks))
        return self._tasks[index - 1]

    def add(
        self,
        description: str,
        kind: TaskKind = TaskKind.NONE,
        timing: Optional[str] = None,
    ) -> str:
        """Create a task and append it to the list."""
        task = Task(description=description, kind=kind, timing=timing)
        self._tasks.append(task)
        logger.debug(f"Added {kind.value} task #{len(self._tasks)}")
        return (
            "Got it. I've added this task:\n"
            f"  {task.render_line()}\n"
            f"{_count_phrase(len(self._tasks))}"
        )

    def list_all(self) -> list[str]:
        """Return every task as a numbered line, in insertion order."""
        if not self._tasks:
            return [EMPTY_LIST_MESSAGE]
        return [numbered(i, task) for i, task in enumerate(self._tasks, start=1)]

    def mark_done(self, index: int) -> str:
        """Mark the task at a 1-based index as done."""
        task = self._check_index(index)
        task.mark_done()
        logger.debug(f"Marked task #{index} as done")
        return f"Nice! I've marked this task as done:\n  {task.render_line()}"

    def delete(self, index: int) -> str:
        """Remove the task at a 1-based index; later tasks move up by one."""
        self._check_index(index)
        task = self._tasks.pop(index - 1)
        logger.debug(f"Deleted task #{index}")
        return (
            "Noted. I've removed this task:\n"
            f"  {task.render_line()}\n"
            f"{_count_phrase(len(self._tasks))}"
        )

    def find(self, keyword: str) -> str:
        """Case-sensitive substring search, keeping original task numbers."""
        if not keyword:
            raise InvalidArgumentError("Please specify a keyword to find.")

        matches = [
            numbered(i, task)
            for i, task in enumerate(self._tasks, start=1)
            if keyword in task.text
        ]
        if not matches:
            return f'No tasks match "{keyword}".'
        return "Here are the matching tasks in your list:\n" + "\n".join(matches)
