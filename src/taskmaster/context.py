from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from . import mutations, queries
from .models import Task, TaskList
from .logging_setup import setup_logging
from .results import OperationResult, SaveResult
from .settings import Settings, get_settings
from .storage import TaskStore
from .utils import Clock, IdFactory, generate_id, now

logger = logging.getLogger(__name__)


@dataclass
class TaskContext:
    """
    The task list of one running session together with its collaborators.

    A shell creates one context at startup (loading the file once) and passes
    it around instead of keeping the store and list in module globals. The
    list is mutated in place by the mutation methods; with `autosave` on,
    every successful mutation is followed by a full save and the outcome is
    kept in `last_save`.

    Single writer: nothing here guards against concurrent use.
    """

    store: TaskStore
    tasks: TaskList = field(default_factory=list)
    id_factory: IdFactory = generate_id
    clock: Clock = now
    autosave: bool = True
    last_save: Optional[SaveResult] = None

    @classmethod
    def open(
        cls,
        settings: Optional[Settings] = None,
        *,
        id_factory: IdFactory = generate_id,
        clock: Clock = now,
        autosave: bool = True,
        configure_logging: bool = False,
    ) -> "TaskContext":
        """
        Build the store from settings and load the task list from disk.

        With `configure_logging`, the root logger is set up first from
        settings.log_level and settings.log_file so load failures are reported.
        """
        s = settings or get_settings()
        if configure_logging:
            setup_logging(level=s.log_level, log_file=s.log_file)
        store = TaskStore(s.tasks_file, s.json_options())
        tasks = store.load_all()
        logger.info("Task session opened file=%s tasks=%d", store.path, len(tasks))
        return cls(store=store, tasks=tasks, id_factory=id_factory, clock=clock, autosave=autosave)

    # ---- persistence ----

    def save(self) -> SaveResult:
        """Write the whole list to the store's file."""
        self.last_save = self.store.save_all(self.tasks)
        return self.last_save

    def _after_mutation(self, result: OperationResult) -> OperationResult:
        if result.ok and self.autosave:
            self.save()
        return result

    # ---- mutations ----

    def add(self, description: str) -> OperationResult:
        return self._after_mutation(
            mutations.add_task(self.tasks, description, id_factory=self.id_factory, clock=self.clock)
        )

    def edit(self, task_id: str, new_description: str) -> OperationResult:
        return self._after_mutation(mutations.edit_task(self.tasks, task_id, new_description, clock=self.clock))

    def remove(self, task_id: str) -> OperationResult:
        return self._after_mutation(mutations.remove_task(self.tasks, task_id))

    def mark_completed(self, task_id: str) -> OperationResult:
        return self._after_mutation(mutations.mark_completed(self.tasks, task_id, clock=self.clock))

    # ---- queries ----

    def find(self, task_id: str) -> Optional[Task]:
        return queries.find_task(self.tasks, task_id)

    def list_all(self) -> List[Task]:
        return queries.list_tasks(self.tasks)

    def by_completion(self, completed: bool) -> List[Task]:
        return queries.filter_by_completion(self.tasks, completed)

    def by_description(self, needle: str) -> List[Task]:
        return queries.filter_by_description(self.tasks, needle)
