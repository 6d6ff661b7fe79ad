"""Services package."""

from .tasks import TaskService, get_task_service

__all__ = ["TaskService", "get_task_service"]
