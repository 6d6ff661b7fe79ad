"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .db import init_db
from .handlers import register_exception_handlers
from .logging_config import configure_logging
from .routers import tasks

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and initialize database on startup."""
    configure_logging()
    init_db()
    yield


app = FastAPI(
    title="Task Manager API",
    description="REST API for managing tasks with full CRUD operations",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(tasks.router)


def main():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "task_api.main:app",
        host=HOST,
        port=PORT,
    )


if __name__ == "__main__":
    main()
