"""Command classification for raw input lines.

The classifier only decides what a line means. Pulling out and validating
the argument (a task number or a search keyword) is left to the helpers
below, which the interpreter calls once it knows the command type.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from task_list.exceptions import InvalidArgumentError, InvalidCommandError
from task_list.models import TaskKind


class CommandType(Enum):
    """What a line of input asks for."""

    EXIT = auto()
    LIST = auto()
    MARK_DONE = auto()
    DELETE = auto()
    ADD = auto()
    FIND = auto()
    UNKNOWN = auto()


# Reserved leading tokens, matched case-sensitively
KEYWORDS: dict[str, CommandType] = {
    "bye": CommandType.EXIT,
    "list": CommandType.LIST,
    "done": CommandType.MARK_DONE,
    "delete": CommandType.DELETE,
    "find": CommandType.FIND,
}

KIND_KEYWORDS: dict[str, TaskKind] = {
    "todo": TaskKind.TODO,
    "deadline": TaskKind.DEADLINE,
    "event": TaskKind.EVENT,
}

TIMING_MARKERS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: "/by",
    TaskKind.EVENT: "/at",
}

# Optional sign and ASCII digits only, no underscores
INDEX_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class TaskSpec:
    """The pieces of an add command, ready to build a Task from."""

    description: str
    kind: TaskKind = TaskKind.NONE
    timing: Optional[str] = None


def _leading_token(line: str) -> str:
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def classify(line: str) -> CommandType:
    """Map a raw input line to a command type.

    Blank lines are UNKNOWN rather than an empty add. Deadline and event
    lines without their timing marker do not parse as a task and are
    UNKNOWN too.
    """
    stripped = line.strip()
    if not stripped:
        return CommandType.UNKNOWN

    token = _leading_token(stripped)
    if token in KEYWORDS:
        return KEYWORDS[token]

    try:
        parse_task(stripped)
    except InvalidCommandError:
        return CommandType.UNKNOWN
    return CommandType.ADD


def extract_argument(line: str, keyword: str) -> str:
    """Return the text after a fixed keyword token, or '' if there is none."""
    stripped = line.strip()
    # keyword plus one separating space
    return stripped[len(keyword) + 1:]


def parse_index(line: str, keyword: str) -> int:
    """Extract the 1-based task number following a keyword.

    Raises:
        InvalidArgumentError: If the number is missing or not an integer.
    """
    argument = extract_argument(line, keyword).strip()
    if not argument:
        raise InvalidArgumentError(f"Please specify a task number after '{keyword}'.")
    if not INDEX_PATTERN.fullmatch(argument):
        raise InvalidArgumentError(f"Task number must be an integer, got '{argument}'.")
    return int(argument)


def parse_keyword(line: str) -> str:
    """Extract the search keyword from a find command.

    The keyword keeps its inner spacing; an empty keyword is rejected by
    the manager.
    """
    return extract_argument(line, "find")


def parse_task(line: str) -> TaskSpec:
    """Split an add line into kind, description and timing.

    Raises:
        InvalidCommandError: If a deadline/event line lacks its timing.
    """
    stripped = line.strip()
    token = _leading_token(stripped)
    kind = KIND_KEYWORDS.get(token)
    if kind is None:
        return TaskSpec(description=stripped)

    body = stripped[len(token):].strip()
    marker = TIMING_MARKERS.get(kind)
    if marker is None:
        return TaskSpec(description=body, kind=kind)

    # marker must stand alone, so "/byline" or "/atlas" do not count
    parts = re.split(rf"(?:^|\s){re.escape(marker)}(?:\s|$)", body, maxsplit=1)
    if len(parts) < 2 or not parts[1].strip():
        raise InvalidCommandError(
            f"A {token} needs a time: {token} <description> {marker} <when>"
        )
    description, timing = parts
    return TaskSpec(description=description.strip(), kind=kind, timing=timing.strip())
