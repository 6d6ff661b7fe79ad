import pytest
from fastapi.testclient import TestClient

from task_api.db import client as db_client
from task_api.db import init_db
from task_api.main import app


@pytest.fixture
def database(tmp_path, monkeypatch):
    path = tmp_path / "tasks.db"
    monkeypatch.setattr(db_client, "DATABASE_PATH", path)
    init_db()
    return path


@pytest.fixture
def client(database):
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()

