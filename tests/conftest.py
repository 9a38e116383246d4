"""Shared pytest fixtures."""

import io
import tempfile
from pathlib import Path

import pytest
from task_list.display import Console
from task_list.service import TaskListManager


@pytest.fixture
def temp_db():
    """Create a temporary database path for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "tasks.db"


@pytest.fixture
def manager():
    """Create an empty task list manager."""
    return TaskListManager()


@pytest.fixture
def output():
    """In-memory stream standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def console(output):
    """Console writing to the in-memory stream."""
    return Console(stream=output)
