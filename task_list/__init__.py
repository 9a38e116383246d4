"""Task List - an interactive line-oriented task list."""

from task_list.models import Task, TaskKind
from task_list.parser import CommandType, classify
from task_list.repository import TaskRepository
from task_list.service import TaskListManager

__all__ = ["CommandType", "Task", "TaskKind", "TaskListManager", "TaskRepository", "classify"]
