from __future__ import annotations

from fastapi.testclient import TestClient

from tests.fakes import StubTaskRepository


def _create(client: TestClient, **fields) -> dict:
    response = client.post("/tasks", json={"title": "A", "description": "B", **fields})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_returns_defaults_in_camel_case(api_client: TestClient) -> None:
    body = _create(api_client)

    assert body["isDeleted"] is False
    assert body["status"] == "pending"
    assert body["priority"] == "normal"
    assert body["title"] == "A"
    assert body["description"] == "B"
    assert body["id"]
    assert "createdAt" in body and "updatedAt" in body


def test_full_lifecycle_scenario(api_client: TestClient) -> None:
    task = _create(api_client)
    task_id = task["id"]

    listed = api_client.get("/tasks")
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()] == [task_id]

    deleted = api_client.delete(f"/tasks/{task_id}")
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "The task was successfully deleted."}

    assert api_client.get(f"/tasks/{task_id}").status_code == 404
    assert api_client.get("/tasks").json() == []
    assert [item["id"] for item in api_client.get("/tasks/deleted").json()] == [task_id]

    restored = api_client.patch(f"/tasks/{task_id}/restore")
    assert restored.status_code == 200
    body = restored.json()
    assert body["message"] == "The task was successfully restored."
    assert body["task"]["id"] == task_id
    assert body["task"]["isDeleted"] is False
    assert body["task"]["createdAt"] == task["createdAt"]

    fetched = api_client.get(f"/tasks/{task_id}")
    assert fetched.status_code == 200
    assert fetched.json()["id"] == task_id


def test_create_with_out_of_range_rating_never_reaches_store(
    api_client: TestClient, repository: StubTaskRepository
) -> None:
    response = api_client.post(
        "/tasks", json={"title": "A", "description": "B", "rating": 6}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation error"
    assert [error["field"] for error in body["detail"]] == ["rating"]
    assert repository.insert_calls == 0


def test_create_requires_title_and_description(api_client: TestClient) -> None:
    response = api_client.post("/tasks", json={"title": ""})

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["detail"]}
    assert fields == {"title", "description"}


def test_create_rejects_unknown_and_status_fields(api_client: TestClient) -> None:
    response = api_client.post(
        "/tasks",
        json={"title": "A", "description": "B", "status": "completed", "owner": "x"},
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["detail"]}
    assert fields == {"status", "owner"}


def test_create_rejects_bad_enum_and_date(api_client: TestClient) -> None:
    response = api_client.post(
        "/tasks",
        json={
            "title": "A",
            "description": "B",
            "priority": "urgent",
            "startDate": "not-a-date",
        },
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["detail"]}
    assert fields == {"priority", "startDate"}


def test_create_accepts_dates_and_rating(api_client: TestClient) -> None:
    body = _create(
        api_client,
        assignee="Max Burtton",
        priority="high",
        startDate="2025-01-01",
        endDate="2025-01-15",
        rating=4,
    )

    assert body["startDate"] == "2025-01-01"
    assert body["endDate"] == "2025-01-15"
    assert body["rating"] == 4
    assert body["priority"] == "high"
    assert body["assignee"] == "Max Burtton"


def test_list_active_is_oldest_first(api_client: TestClient) -> None:
    first = _create(api_client, title="first")
    second = _create(api_client, title="second")

    ids = [item["id"] for item in api_client.get("/tasks").json()]

    assert ids == [first["id"], second["id"]]


def test_patch_updates_fields(api_client: TestClient) -> None:
    task = _create(api_client)

    response = api_client.patch(
        f"/tasks/{task['id']}", json={"status": "in-progress", "rating": 3}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "in-progress"
    assert body["rating"] == 3
    assert body["title"] == "A"
    assert body["id"] == task["id"]
    assert body["createdAt"] == task["createdAt"]


def test_patch_unknown_task_is_not_found(api_client: TestClient) -> None:
    response = api_client.patch("/tasks/unknown-id", json={"title": "x"})

    assert response.status_code == 404
    assert "unknown-id" in response.json()["detail"]


def test_patch_rejects_invalid_fields(api_client: TestClient) -> None:
    task = _create(api_client)

    response = api_client.patch(
        f"/tasks/{task['id']}",
        json={"status": "done", "title": None, "isDeleted": True},
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["detail"]}
    assert fields == {"status", "title", "isDeleted"}


def test_delete_twice_returns_not_found(api_client: TestClient) -> None:
    task = _create(api_client)

    assert api_client.delete(f"/tasks/{task['id']}").status_code == 200
    second = api_client.delete(f"/tasks/{task['id']}")

    assert second.status_code == 404
    assert "already marked as deleted" in second.json()["detail"]


def test_restore_active_task_returns_not_found(api_client: TestClient) -> None:
    task = _create(api_client)

    response = api_client.patch(f"/tasks/{task['id']}/restore")

    assert response.status_code == 404
    assert "not marked as deleted" in response.json()["detail"]


def test_unknown_ids_are_not_found(api_client: TestClient) -> None:
    assert api_client.get("/tasks/nope").status_code == 404
    assert api_client.delete("/tasks/nope").status_code == 404
    assert api_client.patch("/tasks/nope/restore").status_code == 404


def test_store_failure_is_a_generic_server_error(
    api_client: TestClient, repository: StubTaskRepository
) -> None:
    repository.fail = True

    response = api_client.get("/tasks")

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An error occurred while fetching tasks. Please try again later."
    }


def test_health(api_client: TestClient) -> None:
    assert api_client.get("/health").json() == {"status": "healthy"}


def test_create_rejects_non_string_dates_and_non_numeric_ratings(
    api_client: TestClient, repository: StubTaskRepository
) -> None:
    for fields in ({"startDate": 0}, {"endDate": True}, {"rating": True}, {"rating": "4"}):
        response = api_client.post(
            "/tasks", json={"title": "A", "description": "B", **fields}
        )

        assert response.status_code == 400, fields
        assert [error["field"] for error in response.json()["detail"]] == list(fields)
    assert repository.insert_calls == 0


def test_patch_rejects_non_string_dates_and_boolean_rating(api_client: TestClient) -> None:
    task = _create(api_client)

    response = api_client.patch(
        f"/tasks/{task['id']}", json={"startDate": 20250101, "rating": False}
    )

    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["detail"]}
    assert fields == {"startDate", "rating"}


def test_create_reduces_iso_datetimes_to_dates(api_client: TestClient) -> None:
    body = _create(
        api_client,
        startDate="2025-01-01T10:30:00.000Z",
        endDate="2025-01-15T23:59:59+02:00",
    )

    assert body["startDate"] == "2025-01-01"
    assert body["endDate"] == "2025-01-15"


def test_patch_reduces_iso_datetime_to_date(api_client: TestClient) -> None:
    task = _create(api_client)

    response = api_client.patch(
        f"/tasks/{task['id']}", json={"endDate": "2025-02-03T08:00:00Z"}
    )

    assert response.status_code == 200
    assert response.json()["endDate"] == "2025-02-03"


def test_validation_messages_name_the_rule(api_client: TestClient) -> None:
    response = api_client.post(
        "/tasks",
        json={"title": "A", "description": "B", "rating": 0, "priority": "urgent"},
    )

    messages = {error["field"]: error["message"] for error in response.json()["detail"]}
    assert "Rating must be at least 1." in messages["rating"]
    assert "Priority must be one of: high, medium, normal." in messages["priority"]
