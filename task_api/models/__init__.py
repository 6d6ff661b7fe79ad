"""Models package."""

from .error import ApiError, FieldError
from .task import Task, TaskRequest, TaskResponse, TaskStatus

__all__ = [
    "TaskStatus",
    "Task",
    "TaskRequest",
    "TaskResponse",
    "ApiError",
    "FieldError",
]
