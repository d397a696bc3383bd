from __future__ import annotations

import logging

from .models import Task, TaskList
from .queries import find_task
from .results import OperationResult
from .utils import Clock, IdFactory, generate_id, now

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Task with the provided ID was not found"


def _not_found(tasks: TaskList, task_id: str) -> OperationResult:
    logger.warning("%s: %s", NOT_FOUND_MESSAGE, task_id)
    return OperationResult(ok=False, message=NOT_FOUND_MESSAGE, tasks=tasks)


def _failed(tasks: TaskList, action: str, ex: Exception) -> OperationResult:
    logger.exception("Unexpected error while %s", action)
    return OperationResult(ok=False, message=f"An error occurred while {action}: {ex}", tasks=tasks)


# PUBLIC_INTERFACE
def add_task(
    tasks: TaskList,
    description: str,
    *,
    id_factory: IdFactory = generate_id,
    clock: Clock = now,
) -> OperationResult:
    """
    Append a new, not yet completed task to `tasks`.

    The description is stored as given (an empty string is allowed). The new
    task only becomes durable once the collection is saved.
    """
    try:
        created = clock()
        task = Task(
            id=id_factory(),
            description=description,
            completed=False,
            created_at=created,
            modified_at=created,
        )
        tasks.append(task)
    except Exception as ex:
        return _failed(tasks, "adding the task", ex)

    logger.info("Task added id=%s", task.id)
    return OperationResult(ok=True, message="Task added successfully", tasks=tasks, task=task)


# PUBLIC_INTERFACE
def edit_task(
    tasks: TaskList,
    task_id: str,
    new_description: str,
    *,
    clock: Clock = now,
) -> OperationResult:
    """Replace the description of the first task with `task_id`."""
    try:
        task = find_task(tasks, task_id)
        if task is None:
            return _not_found(tasks, task_id)
        modified = clock()
        task.description = new_description
        task.modified_at = modified
    except Exception as ex:
        return _failed(tasks, "editing the task", ex)

    logger.info("Task edited id=%s", task.id)
    return OperationResult(ok=True, message="Task edited successfully", tasks=tasks, task=task)


# PUBLIC_INTERFACE
def remove_task(tasks: TaskList, task_id: str) -> OperationResult:
    """Remove the first task with `task_id`. Removal is permanent once saved."""
    try:
        task = find_task(tasks, task_id)
        if task is None:
            return _not_found(tasks, task_id)
        # Remove by identity so an equal-valued duplicate elsewhere stays put.
        index = next(i for i, t in enumerate(tasks) if t is task)
        del tasks[index]
    except Exception as ex:
        return _failed(tasks, "removing the task", ex)

    logger.info("Task removed id=%s", task.id)
    return OperationResult(ok=True, message="Task removed successfully", tasks=tasks, task=task)


# PUBLIC_INTERFACE
def mark_completed(tasks: TaskList, task_id: str, *, clock: Clock = now) -> OperationResult:
    """
    Mark the first task with `task_id` as completed.

    Marking an already completed task succeeds again and refreshes modified_at.
    """
    try:
        task = find_task(tasks, task_id)
        if task is None:
            return _not_found(tasks, task_id)
        modified = clock()
        task.completed = True
        task.modified_at = modified
    except Exception as ex:
        return _failed(tasks, "marking the task as completed", ex)

    logger.info("Task marked as completed id=%s", task.id)
    return OperationResult(ok=True, message="Task marked as completed successfully", tasks=tasks, task=task)
