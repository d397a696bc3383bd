from datetime import datetime, timedelta
from itertools import count

import pytest

from taskmaster import Task, TaskStore


class StepClock:
    """Deterministic clock: each call is one second after the previous one."""

    def __init__(self, start=datetime(2025, 1, 25, 10, 0, 0)):
        self.current = start

    def __call__(self):
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture()
def clock():
    return StepClock()


@pytest.fixture()
def id_factory():
    seq = count(1)
    return lambda: f"t{next(seq)}"


@pytest.fixture()
def tasks_file(tmp_path):
    return tmp_path / "tasks.json"


@pytest.fixture()
def store(tasks_file):
    return TaskStore(tasks_file)


@pytest.fixture()
def make_task():
    def _make(task_id, description="Do something", completed=False):
        ts = datetime(2025, 1, 1, 9, 30, 0)
        return Task(id=task_id, description=description, completed=completed, created_at=ts, modified_at=ts)

    return _make
