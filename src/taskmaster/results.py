from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import Task, TaskList


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a mutation operation.

    `tasks` is always the collection that was passed in (mutated in place on
    success, untouched on failure). `task` is the affected task, if any.
    """
    ok: bool
    message: str
    tasks: TaskList
    task: Optional[Task] = None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class SaveResult:
    """Outcome of writing the collection to disk."""
    ok: bool
    message: str
    path: Path

    def __bool__(self) -> bool:
        return self.ok
