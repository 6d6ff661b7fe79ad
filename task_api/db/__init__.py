"""Database package."""

from .client import get_db, init_db, transaction
from .repository import DataAccessError, SqliteTaskRepository, TaskRepository

__all__ = [
    "init_db",
    "get_db",
    "transaction",
    "DataAccessError",
    "TaskRepository",
    "SqliteTaskRepository",
]
