from __future__ import annotations

import uuid
from datetime import datetime
from typing import Callable

IdFactory = Callable[[], str]
Clock = Callable[[], datetime]

ID_LENGTH = 8


# PUBLIC_INTERFACE
def generate_id() -> str:
    """
    Return a new opaque task identifier.

    The id is the first ID_LENGTH hex digits of a random UUID: short enough
    to type at a prompt, and unique in practice for a personal task list.
    """
    return uuid.uuid4().hex[:ID_LENGTH]


# PUBLIC_INTERFACE
def now() -> datetime:
    """Local wall-clock time used for CreatedAt/ModifiedAt."""
    return datetime.now()
