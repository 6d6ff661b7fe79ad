"""Conversions between wire models and the task entity."""

from .models import Task, TaskRequest, TaskResponse


def entity_to_response(task: Task) -> TaskResponse:
    """Project a stored task onto the response model."""
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        created_at=task.created_at,
    )


def request_to_entity(request: TaskRequest) -> Task:
    """Build an unsaved task; storage assigns id and created_at."""
    return Task(
        title=request.title,
        description=request.description,
        status=request.status,
    )


def apply_request_to_entity(request: TaskRequest, task: Task) -> None:
    """Copy the request onto the task in place, skipping fields that are None."""
    if request.title is not None:
        task.title = request.title
    if request.description is not None:
        task.description = request.description
    if request.status is not None:
        task.status = request.status
