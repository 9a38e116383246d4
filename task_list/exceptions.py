"""Custom exceptions for the task list."""

from __future__ import annotations


class TaskListError(Exception):
    """Base exception for all user-facing task list errors."""


class InvalidCommandError(TaskListError):
    """Input matched no command and could not be added as a task."""


class InvalidArgumentError(TaskListError):
    """A required index or keyword was missing or malformed."""


class OutOfRangeError(TaskListError):
    """A task number falls outside the current list."""

    def __init__(self, index: int, size: int) -> None:
        """Initialize with the rejected index and the list size."""
        self.index = index
        self.size = size
        noun = "task" if size == 1 else "tasks"
        super().__init__(
            f"Task number {index} does not exist. Your list has {size} {noun}."
        )


class InvalidTaskError(TaskListError):
    """A task was created with an empty description."""


class ConfigError(Exception):
    """Configuration file is malformed or holds unsupported values."""


class StorageError(Exception):
    """Saved tasks could not be written."""
