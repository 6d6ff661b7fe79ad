"""Pydantic models for task API."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class TaskStatus(str, Enum):
    """Task status enumeration."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Task(BaseModel):
    """Persisted task record.

    ``id`` and ``created_at`` stay ``None`` until storage assigns them.
    """

    id: int | None = None
    title: str
    description: str | None = None
    status: TaskStatus
    created_at: datetime | None = None


class TaskRequest(BaseModel):
    """Request model for creating or updating a task."""

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", "Title is required")
        return value


class TaskResponse(BaseModel):
    """Response model for a task."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str | None = None
    status: TaskStatus
    created_at: datetime
