"""Task API router."""

from fastapi import APIRouter, Depends, Path, Request, Response, status

from ..models import ApiError, TaskRequest, TaskResponse
from ..services import TaskService, get_task_service

# Largest id SQLite can store in an INTEGER column.
MAX_TASK_ID = 2**63 - 1

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ApiError, "description": "Task not found"}}
BAD_REQUEST = {
    status.HTTP_400_BAD_REQUEST: {"model": ApiError, "description": "Invalid input data"}
}


def task_id_path():
    """Path parameter for task ids, bounded to what SQLite can store."""
    return Path(..., le=MAX_TASK_ID, description="ID of the task")


@router.get("/{task_id}", response_model=TaskResponse, responses={**NOT_FOUND, **BAD_REQUEST})
def get_task(
    task_id: int = task_id_path(),
    service: TaskService = Depends(get_task_service),
):
    """Get a task by ID."""
    return service.get_task(task_id)


@router.get("", response_model=list[TaskResponse])
def list_tasks(service: TaskService = Depends(get_task_service)):
    """Get all tasks."""
    return service.get_all_tasks()


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
def create_task(
    task_data: TaskRequest,
    request: Request,
    response: Response,
    service: TaskService = Depends(get_task_service),
):
    """Create a new task and point the Location header at it."""
    created = service.create_task(task_data)
    response.headers["Location"] = str(request.url_for("get_task", task_id=created.id))
    return created


@router.put("/{task_id}", response_model=TaskResponse, responses={**NOT_FOUND, **BAD_REQUEST})
def update_task(
    task_data: TaskRequest,
    task_id: int = task_id_path(),
    service: TaskService = Depends(get_task_service),
):
    """Update a task; fields sent as null keep their stored value."""
    return service.update_task(task_id, task_data)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
def delete_task(
    task_id: int = task_id_path(),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task."""
    service.delete_task(task_id)
