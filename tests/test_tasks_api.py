def create_payload(**overrides):
    payload = {"title": "Write report", "description": "Q1 summary", "status": "TODO"}
    payload.update(overrides)
    return payload


def test_create_task_returns_201_with_location(client) -> None:
    resp = client.post("/api/tasks", json=create_payload())
    assert resp.status_code == 201
    data = resp.json()
    assert isinstance(data["id"], int) and data["id"] > 0
    assert data["title"] == "Write report"
    assert data["description"] == "Q1 summary"
    assert data["status"] == "TODO"
    assert data["createdAt"]
    assert resp.headers["location"].endswith(f"/api/tasks/{data['id']}")


def test_created_task_is_readable_at_location(client) -> None:
    created = client.post("/api/tasks", json=create_payload(description=None))
    resp = client.get(created.headers["location"])
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == created.json()["id"]
    assert data["description"] is None
    assert data["createdAt"] == created.json()["createdAt"]


def test_list_tasks_in_insertion_order(client) -> None:
    assert client.get("/api/tasks").json() == []
    for title in ("first", "second", "third"):
        client.post("/api/tasks", json=create_payload(title=title))

    resp = client.get("/api/tasks")
    assert resp.status_code == 200
    assert [t["title"] for t in resp.json()] == ["first", "second", "third"]


def test_create_task_with_empty_title_fails_validation(client) -> None:
    resp = client.post("/api/tasks", json=create_payload(title=""))
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Validation Failed"
    assert data["message"] == "Validation failed for one or more fields"
    assert data["path"] == "/api/tasks"
    assert data["validationErrors"][0]["field"] == "title"
    assert data["validationErrors"][0]["rejectedValue"] == ""
    assert client.get("/api/tasks").json() == []


def test_create_task_with_blank_title_fails_validation(client) -> None:
    resp = client.post("/api/tasks", json=create_payload(title="   "))
    assert resp.status_code == 400
    errors = resp.json()["validationErrors"]
    assert errors == [
        {"field": "title", "message": "Title is required", "rejectedValue": "   "}
    ]


def test_create_task_reports_every_invalid_field(client) -> None:
    resp = client.post(
        "/api/tasks",
        json={"title": "x" * 101, "description": "d" * 501},
    )
    assert resp.status_code == 400
    errors = {e["field"]: e for e in resp.json()["validationErrors"]}
    assert errors["title"]["message"] == "Title must be between 1 and 100 characters"
    assert errors["description"]["message"] == "Description cannot exceed 500 characters"
    assert errors["status"]["message"] == "Status is required"
    assert errors["status"]["rejectedValue"] is None


def test_create_task_with_unknown_status_fails_validation(client) -> None:
    resp = client.post("/api/tasks", json=create_payload(status="ARCHIVED"))
    assert resp.status_code == 400
    (error,) = resp.json()["validationErrors"]
    assert error["field"] == "status"
    assert error["rejectedValue"] == "ARCHIVED"


def test_get_missing_task_returns_404(client) -> None:
    resp = client.get("/api/tasks/999")
    assert resp.status_code == 404
    data = resp.json()
    assert data["status"] == 404
    assert data["error"] == "Resource Not Found"
    assert data["message"] == "Task not found with id: 999"
    assert data["path"] == "/api/tasks/999"
    assert data["timestamp"]
    assert "validationErrors" not in data


def test_get_task_with_non_positive_id_returns_400(client) -> None:
    for task_id in (0, -1):
        resp = client.get(f"/api/tasks/{task_id}")
        assert resp.status_code == 400
        assert resp.json()["error"] == "Bad Request"
        assert resp.json()["message"] == f"Invalid task ID: {task_id}"


def test_get_task_with_non_numeric_id_fails_validation(client) -> None:
    resp = client.get("/api/tasks/abc")
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "Validation Failed"
    assert data["validationErrors"][0]["field"] == "task_id"
    assert data["validationErrors"][0]["rejectedValue"] == "abc"


def test_update_task_changes_status(client) -> None:
    task_id = client.post("/api/tasks", json=create_payload()).json()["id"]

    resp = client.put(f"/api/tasks/{task_id}", json=create_payload(status="DONE"))
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == task_id
    assert data["status"] == "DONE"
    assert client.get(f"/api/tasks/{task_id}").json()["status"] == "DONE"


def test_update_task_with_null_description_keeps_stored_value(client) -> None:
    task_id = client.post("/api/tasks", json=create_payload()).json()["id"]

    resp = client.put(
        f"/api/tasks/{task_id}",
        json={"title": "Write final report", "description": None, "status": "IN_PROGRESS"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Write final report"
    assert data["description"] == "Q1 summary"
    assert data["status"] == "IN_PROGRESS"


def test_update_missing_task_returns_404(client) -> None:
    resp = client.put("/api/tasks/999", json=create_payload())
    assert resp.status_code == 404
    assert resp.json()["error"] == "Resource Not Found"


def test_update_task_with_invalid_body_does_not_touch_storage(client) -> None:
    task_id = client.post("/api/tasks", json=create_payload()).json()["id"]

    resp = client.put(f"/api/tasks/{task_id}", json=create_payload(title=""))
    assert resp.status_code == 400
    assert client.get(f"/api/tasks/{task_id}").json()["title"] == "Write report"


def test_delete_task(client) -> None:
    task_id = client.post("/api/tasks", json=create_payload()).json()["id"]

    resp = client.delete(f"/api/tasks/{task_id}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/api/tasks/{task_id}").status_code == 404


def test_delete_missing_task_returns_404(client) -> None:
    resp = client.delete("/api/tasks/999")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Task not found with id: 999"


def test_create_task_accepts_maximum_lengths(client) -> None:
    resp = client.post(
        "/api/tasks",
        json=create_payload(title="x" * 100, description="d" * 500),
    )
    assert resp.status_code == 201
    data = resp.json()
    assert len(data["title"]) == 100
    assert len(data["description"]) == 500


def test_ids_beyond_storage_range_fail_validation(client) -> None:
    path = "/api/tasks/99999999999999999999"
    responses = [
        client.get(path),
        client.put(path, json=create_payload()),
        client.delete(path),
    ]
    for resp in responses:
        assert resp.status_code == 400
        data = resp.json()
        assert data["error"] == "Validation Failed"
        assert data["validationErrors"][0]["field"] == "task_id"


def test_openapi_metadata_and_error_responses(client) -> None:
    schema = client.get("/openapi.json").json()
    assert schema["info"]["title"] == "Task Manager API"
    assert schema["info"]["version"] == "1.0.0"
    assert schema["info"]["description"] == "REST API for managing tasks with full CRUD operations"
    get_responses = schema["paths"]["/api/tasks/{task_id}"]["get"]["responses"]
    assert {"200", "400", "404"} <= set(get_responses)
    assert "400" in schema["paths"]["/api/tasks"]["post"]["responses"]
