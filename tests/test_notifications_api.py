"""
TASKPACE API - Notification Endpoint Tests
"""

import pytest

from taskpace.tasks.models import Subtask, Task


@pytest.fixture
def overdue_task(task_repository, user_id):
    task = Task(
        id="t1",
        title="Essay",
        deadline="2025-01-14T00:00:00Z",
        subtasks=[Subtask(id=1, title="Outline", deadline="2025-01-13T00:00:00Z")],
        owner_id=user_id,
        created_at=1,
    )
    task_repository.add(task)
    return task


class TestListNotifications:
    def test_requires_identity(self, client):
        assert client.get("/notifications").status_code == 401

    def test_empty_inbox(self, client, auth_headers):
        response = client.get("/notifications", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"notifications": [], "total": 0, "unread_count": 0}


class TestRefresh:
    """Tests for POST /notifications/refresh."""

    def test_refresh_raises_overdue_notifications(self, client, auth_headers, overdue_task):
        response = client.post("/notifications/refresh", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert [n["type"] for n in data["added"]] == ["task_overdue", "subtask_overdue"]
        assert data["removed"] == []
        assert data["unread_count"] == 2

        listed = client.get("/notifications", headers=auth_headers).json()
        assert listed["total"] == 2

    def test_second_refresh_adds_nothing(self, client, auth_headers, overdue_task):
        client.post("/notifications/refresh", headers=auth_headers)
        data = client.post("/notifications/refresh", headers=auth_headers).json()
        assert data["added"] == []
        assert data["unread_count"] == 2

    def test_refresh_retracts_completed_subtask(self, client, auth_headers, overdue_task):
        client.post("/notifications/refresh", headers=auth_headers)
        overdue_task.subtasks[0].done = True

        data = client.post("/notifications/refresh", headers=auth_headers).json()
        assert [n["subtask_id"] for n in data["removed"]] == [1]
        assert data["unread_count"] == 1

    def test_refresh_with_invalid_deadline_is_422(self, client, auth_headers, task_repository, user_id):
        task_repository.add(Task(id="bad", title="Bad", deadline="whenever", owner_id=user_id))
        response = client.post("/notifications/refresh", headers=auth_headers)
        assert response.status_code == 422

    def test_other_users_are_untouched(self, client, overdue_task):
        client.post("/notifications/refresh", headers={"X-User-Id": "someone-else"})
        data = client.get("/notifications", headers={"X-User-Id": "someone-else"}).json()
        assert data["total"] == 0


class TestReadAndClear:
    """Tests for read state and clearing."""

    def test_mark_one_as_read(self, client, auth_headers, overdue_task):
        added = client.post("/notifications/refresh", headers=auth_headers).json()["added"]
        response = client.post(f"/notifications/{added[0]['id']}/read", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["unread_count"] == 1
        assert data["notifications"][0]["read"] is True

    def test_mark_unknown_as_read_is_404(self, client, auth_headers):
        response = client.post("/notifications/missing/read", headers=auth_headers)
        assert response.status_code == 404

    def test_mark_all_as_read(self, client, auth_headers, overdue_task):
        client.post("/notifications/refresh", headers=auth_headers)
        data = client.post("/notifications/read-all", headers=auth_headers).json()
        assert data["unread_count"] == 0
        assert data["total"] == 2

    def test_clear_all(self, client, auth_headers, overdue_task):
        client.post("/notifications/refresh", headers=auth_headers)
        response = client.delete("/notifications", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["total"] == 0

    def test_read_notifications_are_not_raised_again(self, client, auth_headers, overdue_task):
        client.post("/notifications/refresh", headers=auth_headers)
        client.post("/notifications/read-all", headers=auth_headers)
        data = client.post("/notifications/refresh", headers=auth_headers).json()
        assert data["added"] == []
        assert data["unread_count"] == 0
