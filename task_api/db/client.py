"""SQLite connection and transaction handling."""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .repository import DataAccessError, SqliteTaskRepository

logger = logging.getLogger(__name__)

DATABASE_PATH = Path(
    os.getenv("TASKS_DB_PATH", Path(__file__).parent.parent.parent / "tasks.db")
)


def get_connection() -> sqlite3.Connection:
    """Get a database connection with WAL mode enabled."""
    conn = sqlite3.connect(DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


@contextmanager
def get_db() -> Iterator[sqlite3.Connection]:
    """Context manager for database connections."""
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def transaction() -> Iterator[SqliteTaskRepository]:
    """Run a block inside one transaction and hand it a task repository.

    Commits when the block finishes, rolls back when it raises. Driver
    errors, including those from connect and commit, surface as
    DataAccessError.
    """
    try:
        with get_db() as conn:
            conn.execute("BEGIN")
            yield SqliteTaskRepository(conn)
    except sqlite3.Error as e:
        raise DataAccessError(str(e)) from e


def init_db() -> None:
    """Initialize the database schema."""
    logger.info("Initializing task database at %s", DATABASE_PATH)
    with get_db() as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                title TEXT NOT NULL,
                description TEXT,
                status TEXT NOT NULL,
                created_at TEXT NOT NULL
            )
        """)
