from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class Task(BaseModel):
    """
    A single to-do item as held in memory and persisted to the tasks file.

    Fields:
    - id: Opaque unique identifier supplied by the id factory; never changes
    - description: Free text; may be empty, and may be null when read from a file
    - completed: Completion flag; starts False and can only be set to True
    - created_at: Creation timestamp, set once
    - modified_at: Last change of description or completed

    The JSON representation uses PascalCase keys (Id, Description, Completed,
    CreatedAt, ModifiedAt). Unknown keys are ignored on read.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "Id": "3f2a9c1e",
                "Description": "Buy groceries",
                "Completed": False,
                "CreatedAt": "2025-01-25T10:15:30.123456",
                "ModifiedAt": "2025-01-25T10:15:30.123456",
            }
        },
    )

    id: str = Field(..., alias="Id", description="Unique identifier of the task")
    description: Optional[str] = Field(default=None, alias="Description", description="Task description")
    completed: bool = Field(default=False, alias="Completed", description="Completion status flag")
    created_at: datetime = Field(default_factory=datetime.now, alias="CreatedAt", description="Creation timestamp")
    modified_at: datetime = Field(
        default_factory=datetime.now, alias="ModifiedAt", description="Last modification timestamp"
    )


# The in-memory collection owned by the caller and shared with every operation.
TaskList = List[Task]
