"""SQLite repository for task list persistence."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from task_list.exceptions import StorageError, TaskListError
from task_list.models import Task, TaskKind

logger = logging.getLogger(__name__)


class TaskRepository:
    """Saves and reloads the whole task list.

    The list is stored one row per task, keyed by its 1-based position,
    and is always written in full so the file never holds a half-saved
    list.
    """

    _CREATE_TABLE_SQL = """
        CREATE TABLE IF NOT EXISTS tasks (
            position INTEGER PRIMARY KEY,
            description TEXT NOT NULL,
            kind TEXT NOT NULL,
            is_done INTEGER DEFAULT 0,
            timing TEXT
        )
    """

    def __init__(self, db_path: str | Path) -> None:
        """Initialize repository with database path."""
        self._db_path = Path(db_path)

    @property
    def path(self) -> Path:
        return self._db_path

    def _ensure_directory(self) -> None:
        """Create database directory if needed."""
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute(self._CREATE_TABLE_SQL)
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _row_to_task(self, row: sqlite3.Row) -> Task:
        """Convert database row to Task object."""
        return Task(
            description=row["description"],
            kind=TaskKind.from_string(row["kind"]),
            is_done=bool(row["is_done"]),
            timing=row["timing"],
        )

    def load(self) -> list[Task]:
        """Reload the saved list in order.

        Returns an empty list when nothing was saved yet or when any row
        cannot be read back; a partly valid list is never returned.
        """
        if not self._db_path.exists():
            logger.info(f"No saved tasks at {self._db_path}")
            return []

        try:
            with self._connection() as conn:
                rows = conn.execute("SELECT * FROM tasks ORDER BY position").fetchall()
            tasks = [self._row_to_task(row) for row in rows]
        except (sqlite3.Error, ValueError, TaskListError) as e:
            logger.warning(f"Could not reload tasks from {self._db_path}: {e}")
            return []

        logger.info(f"Reloaded {len(tasks)} tasks from {self._db_path}")
        return tasks

    def save_all(self, tasks: Sequence[Task]) -> None:
        """Replace the saved list with the given tasks.

        Raises:
            StorageError: If the database cannot be written.
        """
        rows = [
            (position, task.description, task.kind.value, int(task.is_done), task.timing)
            for position, task in enumerate(tasks, start=1)
        ]
        try:
            self._ensure_directory()
            with self._connection() as conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    """
                    INSERT INTO tasks (position, description, kind, is_done, timing)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    rows,
                )
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Could not write {self._db_path}: {e}") from e

        logger.debug(f"Saved {len(rows)} tasks to {self._db_path}")

    def clear(self) -> None:
        """Remove all saved tasks."""
        self.save_all([])
