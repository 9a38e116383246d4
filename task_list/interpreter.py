"""Read-classify-dispatch loop."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from task_list.display import Console, format_tasks_table
from task_list.exceptions import InvalidCommandError, StorageError, TaskListError
from task_list.models import Task
from task_list.parser import CommandType, classify, parse_index, parse_keyword, parse_task
from task_list.service import TaskListManager

logger = logging.getLogger(__name__)

FAREWELL = "Bye. Hope to see you soon!"
LIST_HEADER = "Here are the tasks in your list:"

# Commands that change the list and should be written back
MUTATING = frozenset({CommandType.ADD, CommandType.MARK_DONE, CommandType.DELETE})


class Interpreter:
    """Drives the task list from lines of input until 'bye'.

    Every result or failure goes to the console. Failures never end the
    loop; only an EXIT command (or running out of input) does.
    """

    def __init__(
        self,
        manager: TaskListManager,
        console: Console,
        on_change: Optional[Callable[[Sequence[Task]], None]] = None,
        list_style: str = "plain",
    ) -> None:
        """Initialize with the list manager, the console and an optional save hook."""
        self._manager = manager
        self._console = console
        self._on_change = on_change
        self._list_style = list_style
        self.is_exited = False

    def run(self, lines: Iterable[str]) -> None:
        """Process lines until an exit command or the end of input."""
        for line in lines:
            self.process(line)
            if self.is_exited:
                return
        # End of input counts as leaving
        self._exit()

    def process(self, line: str) -> None:
        """Handle one line of input, reporting any failure to the console."""
        try:
            self._dispatch(line)
        except TaskListError as e:
            logger.debug(f"Rejected {line!r}: {e}")
            self._console.say(str(e))

    def _dispatch(self, line: str) -> None:
        command = classify(line)
        handler = getattr(self, f"_handle_{command.name.lower()}")
        handler(line)
        if command in MUTATING and self._on_change is not None:
            self._save()

    def _save(self) -> None:
        try:
            self._on_change(self._manager.tasks)
        except StorageError as e:
            logger.error(f"Saving failed: {e}")
            self._console.say(f"Warning: your changes could not be saved ({e}).")

    def _exit(self) -> None:
        self._console.say(FAREWELL)
        self.is_exited = True

    def _handle_exit(self, line: str) -> None:
        self._exit()

    def _handle_list(self, line: str) -> None:
        if self._list_style == "table":
            self._console.say(format_tasks_table(self._manager.tasks))
            return
        lines = self._manager.list_all()
        if len(self._manager):
            lines = [LIST_HEADER, *lines]
        self._console.say("\n".join(lines))

    def _handle_mark_done(self, line: str) -> None:
        index = parse_index(line, "done")
        self._console.say(self._manager.mark_done(index))

    def _handle_delete(self, line: str) -> None:
        index = parse_index(line, "delete")
        self._console.say(self._manager.delete(index))

    def _handle_find(self, line: str) -> None:
        self._console.say(self._manager.find(parse_keyword(line)))

    def _handle_add(self, line: str) -> None:
        spec = parse_task(line)
        self._console.say(self._manager.add(spec.description, spec.kind, spec.timing))

    def _handle_unknown(self, line: str) -> None:
        if line.strip():
            # Surfaces the usage hint for a malformed deadline/event
            parse_task(line)
        raise InvalidCommandError("Please enter something valid!")
