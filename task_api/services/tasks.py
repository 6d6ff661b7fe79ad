"""Task service: validation, lookup and persistence orchestration."""

import logging
from contextlib import AbstractContextManager
from typing import Callable

from ..db import DataAccessError, TaskRepository, transaction
from ..errors import InternalError, InvalidInputError, NotFoundError
from ..mapper import apply_request_to_entity, entity_to_response, request_to_entity
from ..models import Task, TaskRequest, TaskResponse

logger = logging.getLogger(__name__)

TransactionFactory = Callable[[], AbstractContextManager[TaskRepository]]


def check_task_id(task_id: int | None) -> None:
    """Reject a missing or non-positive task id."""
    if task_id is None or task_id <= 0:
        raise InvalidInputError(f"Invalid task ID: {task_id}")


def find_task_or_raise(repo: TaskRepository, task_id: int) -> Task:
    """Load a task or raise NotFoundError."""
    task = repo.find_by_id(task_id)
    if task is None:
        raise NotFoundError(f"Task not found with id: {task_id}")
    return task


class TaskService:
    """Task operations, each run inside a single transaction.

    ``transaction`` is called once per operation and must return a context
    manager yielding a repository; it commits on normal exit and rolls back
    when the block raises.
    """

    def __init__(self, transaction: TransactionFactory = transaction):
        self.transaction = transaction

    def get_task(self, task_id: int | None) -> TaskResponse:
        check_task_id(task_id)
        try:
            with self.transaction() as repo:
                return entity_to_response(find_task_or_raise(repo, task_id))
        except DataAccessError as e:
            raise InternalError(
                "Failed to retrieve task due to database error", cause=e
            ) from e

    def get_all_tasks(self) -> list[TaskResponse]:
        try:
            with self.transaction() as repo:
                return [entity_to_response(task) for task in repo.find_all()]
        except DataAccessError as e:
            raise InternalError(
                "Failed to retrieve tasks due to database error", cause=e
            ) from e

    def create_task(self, request: TaskRequest) -> TaskResponse:
        try:
            with self.transaction() as repo:
                saved = repo.save(request_to_entity(request))
        except DataAccessError as e:
            raise InternalError(
                "Failed to create task due to database error", cause=e
            ) from e
        logger.info("Created task %s", saved.id)
        return entity_to_response(saved)

    def update_task(self, task_id: int | None, request: TaskRequest) -> TaskResponse:
        check_task_id(task_id)
        try:
            with self.transaction() as repo:
                task = find_task_or_raise(repo, task_id)
                apply_request_to_entity(request, task)
                return entity_to_response(repo.save(task))
        except DataAccessError as e:
            raise InternalError(
                "Failed to update task due to database error", cause=e
            ) from e

    def delete_task(self, task_id: int | None) -> None:
        check_task_id(task_id)
        try:
            with self.transaction() as repo:
                repo.delete(find_task_or_raise(repo, task_id))
        except DataAccessError as e:
            raise InternalError(
                "Failed to delete task due to database error", cause=e
            ) from e
        logger.info("Deleted task %s", task_id)


def get_task_service() -> TaskService:
    """FastAPI dependency providing the task service."""
    return TaskService()
