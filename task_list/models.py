"""Task model and related types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from task_list.exceptions import InvalidTaskError


class TaskKind(Enum):
    """Task kinds."""

    NONE = "NONE"
    TODO = "TODO"
    EVENT = "EVENT"
    DEADLINE = "DEADLINE"

    @classmethod
    def from_string(cls, value: str) -> TaskKind:
        """Parse kind from string, case-insensitive."""
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Invalid task kind '{value}'. Must be one of: {valid}")


# Decoration appended to the description, keyed by kind
_TIMING_LABELS = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


@dataclass
class Task:
    """A single entry in the task list.

    Attributes:
        description: What needs doing (required, non-blank).
        kind: Task kind, fixed at creation.
        is_done: Completion status. Only ever goes from False to True.
        timing: Free text for deadline/event tasks ("Sunday", "Mon 2pm").
    """

    description: str
    kind: TaskKind = TaskKind.NONE
    is_done: bool = False
    timing: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate task data."""
        if not self.description or not self.description.strip():
            raise InvalidTaskError("The description of a task cannot be empty.")
        self.description = self.description.strip()
        if self.timing is not None:
            self.timing = self.timing.strip() or None

    @property
    def text(self) -> str:
        """Description including the kind decoration, e.g. 'return book (by: Sunday)'."""
        label = _TIMING_LABELS.get(self.kind)
        if label and self.timing:
            return f"{self.description} ({label}: {self.timing})"
        return self.description

    def mark_done(self) -> None:
        """Mark the task as done. Marking twice is harmless."""
        self.is_done = True

    def render_line(self) -> str:
        """Return the task as a single checkbox line."""
        checkbox = "[X]" if self.is_done else "[ ]"
        return f"{checkbox} {self.text}"
