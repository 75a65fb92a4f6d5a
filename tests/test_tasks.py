"""Tests for task endpoints."""

import pytest


@pytest.fixture
def board(create_board):
    return create_board("Sprint 1", color="blue")


class TestListTasks:
    def test_list_tasks_empty(self, client, db):
        response = client.get("/api/tasks")
        assert response.status_code == 200
        assert response.get_json() == []

    def test_list_tasks_newest_first(self, client, board, create_task):
        create_task(board["id"], "Old")
        create_task(board["id"], "New")

        titles = [task["title"] for task in client.get("/api/tasks").get_json()]
        assert titles == ["New", "Old"]

    def test_list_tasks_filtered_by_board(self, client, board, create_board, create_task):
        other = create_board("Other")
        mine = create_task(board["id"], "Mine")
        create_task(other["id"], "Theirs")

        response = client.get(f"/api/tasks?boardId={board['id']}")
        assert response.status_code == 200
        assert [task["id"] for task in response.get_json()] == [mine["id"]]

    def test_list_tasks_invalid_board_filter(self, client, db):
        response = client.get("/api/tasks?boardId=abc")
        assert response.status_code == 400


class TestCreateTask:
    def test_create_task_defaults(self, client, board):
        response = client.post("/api/tasks", json={"board_id": board["id"], "title": "Write docs"})
        assert response.status_code == 201
        data = response.get_json()
        assert isinstance(data["id"], int)
        assert data["board_id"] == board["id"]
        assert data["status"] == "todo"
        assert data["priority"] is None
        assert data["assigned_to"] is None
        assert data["due_date"] is None
        assert data["updated_at"] >= data["created_at"]

    def test_create_task_all_fields(self, client, board):
        response = client.post(
            "/api/tasks",
            json={
                "board_id": board["id"],
                "title": "Ship release",
                "description": "Tag and publish",
                "status": "in_progress",
                "priority": "high",
                "assigned_to": "sam",
                "due_date": "2026-11-01T09:30:00",
            },
        )
        assert response.status_code == 201
        data = response.get_json()
        assert data["status"] == "in_progress"
        assert data["priority"] == "high"
        assert data["assigned_to"] == "sam"
        assert data["due_date"] == "2026-11-01T09:30:00"

    def test_create_task_board_id_as_numeric_string(self, client, board):
        response = client.post("/api/tasks", json={"board_id": str(board["id"]), "title": "Parse me"})
        assert response.status_code == 201
        assert response.get_json()["board_id"] == board["id"]

    def test_create_task_accepts_bare_date(self, client, board):
        response = client.post(
            "/api/tasks",
            json={"board_id": board["id"], "title": "Dated", "due_date": "2026-12-24"},
        )
        assert response.status_code == 201
        assert response.get_json()["due_date"] == "2026-12-24T00:00:00"

    def test_create_task_empty_due_date_means_unset(self, client, board):
        response = client.post(
            "/api/tasks",
            json={"board_id": board["id"], "title": "Undated", "due_date": ""},
        )
        assert response.status_code == 201
        assert response.get_json()["due_date"] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": "No board"},
            {"board_id": "abc", "title": "Bad board id"},
            {"board_id": True, "title": "Boolean board id"},
            {"board_id": 0, "title": "Zero board id"},
            {"board_id": None, "title": "Null board id"},
            {"board_id": 1.5, "title": "Fractional board id"},
            {"board_id": "1.5", "title": "Fractional string board id"},
        ],
    )
    def test_create_task_invalid_board_id(self, client, db, payload):
        response = client.post("/api/tasks", json=payload)
        assert response.status_code == 400
        assert "board_id" in response.get_json()["error"]
        assert client.get("/api/tasks").get_json() == []

    def test_create_task_unknown_board(self, client, db):
        response = client.post("/api/tasks", json={"board_id": 999, "title": "Orphan"})
        assert response.status_code == 400
        assert "does not exist" in response.get_json()["error"]
        assert client.get("/api/tasks").get_json() == []

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_create_task_missing_title(self, client, board, title):
        payload = {"board_id": board["id"]}
        if title is not None:
            payload["title"] = title

        response = client.post("/api/tasks", json=payload)
        assert response.status_code == 400
        assert "title" in response.get_json()["error"]
        assert client.get("/api/tasks").get_json() == []

    def test_create_task_unknown_status(self, client, board):
        response = client.post(
            "/api/tasks",
            json={"board_id": board["id"], "title": "Odd", "status": "blocked"},
        )
        assert response.status_code == 400
        error = response.get_json()["error"]
        assert error.startswith("status:")
        for value in ("todo", "in_progress", "done"):
            assert value in error
        assert client.get("/api/tasks").get_json() == []

    def test_create_task_unknown_priority(self, client, board):
        response = client.post(
            "/api/tasks",
            json={"board_id": board["id"], "title": "Odd", "priority": "urgent"},
        )
        assert response.status_code == 400
        assert "low, medium, high" in response.get_json()["error"]

    def test_create_task_invalid_due_date(self, client, board):
        response = client.post(
            "/api/tasks",
            json={"board_id": board["id"], "title": "Odd", "due_date": "next tuesday"},
        )
        assert response.status_code == 400
        assert "due_date" in response.get_json()["error"]


class TestGetTask:
    def test_get_task(self, client, board, create_task):
        task = create_task(board["id"], "Find me")

        response = client.get(f"/api/tasks/{task['id']}")
        assert response.status_code == 200
        assert response.get_json()["title"] == "Find me"

    def test_get_task_not_found(self, client, db):
        response = client.get("/api/tasks/12345")
        assert response.status_code == 404
        assert response.get_json()["error"] == "Task 12345 not found"

    def test_get_task_invalid_id(self, client, db):
        response = client.get("/api/tasks/abc")
        assert response.status_code == 400


class TestUpdateTask:
    def test_update_status_only_keeps_other_fields(self, client, board, create_task):
        task = create_task(
            board["id"],
            "Review PR",
            description="Check the migration",
            assigned_to="alex",
            priority="medium",
            due_date="2026-11-05",
        )

        response = client.put(f"/api/tasks/{task['id']}", json={"status": "done"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["status"] == "done"
        for field in ("title", "description", "assigned_to", "priority", "due_date", "board_id"):
            assert data[field] == task[field], field
        assert data["updated_at"] >= data["created_at"]

    def test_update_clears_priority_with_null(self, client, board, create_task):
        task = create_task(board["id"], priority="high")

        response = client.put(f"/api/tasks/{task['id']}", json={"priority": None})
        assert response.status_code == 200
        assert response.get_json()["priority"] is None

    def test_update_rejects_null_status(self, client, board, create_task):
        task = create_task(board["id"])

        response = client.put(f"/api/tasks/{task['id']}", json={"status": None})
        assert response.status_code == 400
        assert client.get(f"/api/tasks/{task['id']}").get_json()["status"] == "todo"

    def test_update_rejects_unknown_status(self, client, board, create_task):
        task = create_task(board["id"])

        response = client.put(f"/api/tasks/{task['id']}", json={"status": "archived", "title": "Renamed"})
        assert response.status_code == 400
        unchanged = client.get(f"/api/tasks/{task['id']}").get_json()
        assert unchanged["status"] == "todo"
        assert unchanged["title"] == task["title"]

    def test_move_task_to_another_board(self, client, board, create_board, create_task):
        target = create_board("Target")
        task = create_task(board["id"], "Mover")

        response = client.put(f"/api/tasks/{task['id']}", json={"board_id": target["id"]})
        assert response.status_code == 200
        assert response.get_json()["board_id"] == target["id"]

        assert client.get(f"/api/boards/{board['id']}").get_json()["tasks"] == []
        moved = client.get(f"/api/boards/{target['id']}").get_json()["tasks"]
        assert [t["id"] for t in moved] == [task["id"]]

    def test_move_task_rejects_fractional_board_id(self, client, board, create_board, create_task):
        target = create_board("Target")
        task = create_task(board["id"])

        response = client.put(f"/api/tasks/{task['id']}", json={"board_id": target["id"] + 0.5})
        assert response.status_code == 400
        assert "board_id" in response.get_json()["error"]
        assert client.get(f"/api/tasks/{task['id']}").get_json()["board_id"] == board["id"]

    def test_update_malformed_json(self, client, board, create_task):
        task = create_task(board["id"], "Keep")

        response = client.put(f"/api/tasks/{task['id']}", data="{not json", content_type="application/json")
        assert response.status_code == 400
        assert client.get(f"/api/tasks/{task['id']}").get_json()["title"] == "Keep"

    def test_move_task_to_unknown_board(self, client, board, create_task):
        task = create_task(board["id"])

        response = client.put(f"/api/tasks/{task['id']}", json={"board_id": 999})
        assert response.status_code == 400
        assert client.get(f"/api/tasks/{task['id']}").get_json()["board_id"] == board["id"]

    def test_update_not_found(self, client, db):
        response = client.put("/api/tasks/999", json={"status": "done"})
        assert response.status_code == 404


class TestDeleteTask:
    def test_delete_task_keeps_board(self, client, board, create_task):
        task = create_task(board["id"])

        response = client.delete(f"/api/tasks/{task['id']}")
        assert response.status_code == 204
        assert client.get(f"/api/tasks/{task['id']}").status_code == 404
        assert client.get(f"/api/boards/{board['id']}").status_code == 200

    def test_delete_not_found(self, client, db):
        response = client.delete("/api/tasks/999")
        assert response.status_code == 404
