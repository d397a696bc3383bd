from __future__ import annotations

from typing import Iterable, List, Optional

from .models import Task


# PUBLIC_INTERFACE
def find_task(tasks: Iterable[Task], task_id: str) -> Optional[Task]:
    """
    Return the first task whose id equals task_id, or None.

    Ids are expected to be unique but this is not enforced; when duplicates
    exist the earliest one in collection order wins.
    """
    for task in tasks:
        if task.id == task_id:
            return task
    return None


# PUBLIC_INTERFACE
def list_tasks(tasks: Iterable[Task]) -> List[Task]:
    """Return every task in collection order (a new list, same Task objects)."""
    return list(tasks)


# PUBLIC_INTERFACE
def filter_by_completion(tasks: Iterable[Task], completed: bool) -> List[Task]:
    """Return the tasks whose completion flag equals `completed`, keeping their order."""
    return [t for t in tasks if t.completed == completed]


# PUBLIC_INTERFACE
def filter_by_description(tasks: Iterable[Task], needle: str) -> List[Task]:
    """
    Return the tasks whose description contains `needle`, ignoring case.

    - Tasks without a description (None) never match
    - An empty needle matches every task that has a description
    - Relative order is preserved
    """
    s = needle.casefold()
    return [t for t in tasks if t.description is not None and s in t.description.casefold()]
