"""Task persistence operations."""

import sqlite3
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from ..models import Task, TaskStatus


class DataAccessError(Exception):
    """Raised when the backing store fails for any reason."""


class TaskRepository(ABC):
    """CRUD operations over tasks keyed by numeric id."""

    @abstractmethod
    def find_by_id(self, task_id: int) -> Task | None:
        """Get a task by ID, or None if absent."""

    @abstractmethod
    def find_all(self) -> list[Task]:
        """Get all tasks in insertion order."""

    @abstractmethod
    def save(self, task: Task) -> Task:
        """Insert the task when it has no id, update it otherwise."""

    @abstractmethod
    def delete(self, task: Task) -> None:
        """Delete a task."""


def row_to_task(row: sqlite3.Row) -> Task:
    """Convert a database row to a task."""
    return Task(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        status=TaskStatus(row["status"]),
        created_at=datetime.fromisoformat(row["created_at"]),
    )


class SqliteTaskRepository(TaskRepository):
    """Task repository bound to a single open connection."""

    def __init__(self, conn: sqlite3.Connection):
        """Bind the repository to an open connection."""
        self.conn = conn

    def find_by_id(self, task_id: int) -> Task | None:
        """Get a task by ID."""
        cursor = self.conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,))
        row = cursor.fetchone()
        return row_to_task(row) if row else None

    def find_all(self) -> list[Task]:
        """Get all tasks ordered by id."""
        cursor = self.conn.execute("SELECT * FROM tasks ORDER BY id")
        return [row_to_task(row) for row in cursor.fetchall()]

    def save(self, task: Task) -> Task:
        """Insert or update a task, assigning id and created_at on insert."""
        if task.id is None:
            created_at = datetime.now(timezone.utc)
            cursor = self.conn.execute(
                """
                INSERT INTO tasks (title, description, status, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (task.title, task.description, task.status.value, created_at.isoformat()),
            )
            return task.model_copy(update={"id": cursor.lastrowid, "created_at": created_at})

        cursor = self.conn.execute(
            "UPDATE tasks SET title = ?, description = ?, status = ? WHERE id = ?",
            (task.title, task.description, task.status.value, task.id),
        )
        if cursor.rowcount == 0:
            raise DataAccessError(f"Task {task.id} no longer exists")
        return self.find_by_id(task.id)

    def delete(self, task: Task) -> None:
        """Delete a task by its id."""
        self.conn.execute("DELETE FROM tasks WHERE id = ?", (task.id,))
