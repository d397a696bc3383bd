"""
TaskMaster core package.

A single-user task list kept in memory and persisted as one JSON file:
the Task model, the JSON file store, the mutation and query operations,
and a TaskContext that ties them together for a shell.
"""

from .context import TaskContext
from .logging_setup import setup_logging
from .models import Task, TaskList
from .mutations import NOT_FOUND_MESSAGE, add_task, edit_task, mark_completed, remove_task
from .queries import filter_by_completion, filter_by_description, find_task, list_tasks
from .results import OperationResult, SaveResult
from .settings import Settings, get_settings
from .storage import JsonFileStore, JsonOptions, TaskStore

__all__ = [
    "NOT_FOUND_MESSAGE",
    "JsonFileStore",
    "JsonOptions",
    "OperationResult",
    "SaveResult",
    "Settings",
    "Task",
    "TaskContext",
    "TaskList",
    "TaskStore",
    "add_task",
    "edit_task",
    "filter_by_completion",
    "filter_by_description",
    "find_task",
    "get_settings",
    "list_tasks",
    "mark_completed",
    "remove_task",
    "setup_logging",
]
