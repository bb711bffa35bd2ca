"""
TASKPACE API - Calendar Endpoint Tests
"""

import pytest

from taskpace.tasks.models import Subtask, Task


@pytest.fixture
def essay(task_repository, user_id):
    task = Task(
        id="t1",
        title="Essay",
        deadline="2025-01-20T17:00:00Z",
        subtasks=[
            Subtask(id=1, title="Outline", deadline="2025-01-15T09:00:00Z"),
            Subtask(id=2, title="Final read", deadline="2025-01-20T08:00:00Z"),
        ],
        owner_id=user_id,
        created_at=1,
    )
    task_repository.add(task)
    return task


def cells(month_json):
    return {day["date"]: day for week in month_json["weeks"] for day in week["days"]}


class TestMonthView:
    """Tests for GET /calendar/month."""

    def test_requires_identity(self, client):
        assert client.get("/calendar/month", params={"year": 2025, "month": 0}).status_code == 401

    def test_month_grid(self, client, auth_headers, essay):
        response = client.get("/calendar/month", params={"year": 2025, "month": 0}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert (data["year"], data["month"]) == (2025, 0)
        assert len(data["weeks"]) == 5

        grid = cells(data)
        assert grid["2024-12-30"]["is_current_month"] is False
        assert grid["2025-01-15"]["is_today"] is True
        assert [item["id"] for item in grid["2025-01-15"]["items"]] == ["t1-1"]
        assert [item["id"] for item in grid["2025-01-20"]["items"]] == ["t1", "t1-2"]

    def test_subtask_item_links_parent(self, client, auth_headers, essay):
        data = client.get("/calendar/month", params={"year": 2025, "month": 0}, headers=auth_headers).json()
        outline = cells(data)["2025-01-15"]["items"][0]
        assert outline["type"] == "subtask"
        assert outline["parent_task_id"] == "t1"
        assert outline["parent_task_title"] == "Essay"

    @pytest.mark.parametrize("month", [-1, 12])
    def test_month_out_of_range_is_422(self, client, auth_headers, month):
        response = client.get("/calendar/month", params={"year": 2025, "month": month}, headers=auth_headers)
        assert response.status_code == 422

    def test_invalid_deadline_is_422(self, client, auth_headers, task_repository, user_id):
        task_repository.add(Task(id="bad", title="Bad", deadline="2025-02-30", owner_id=user_id))
        response = client.get("/calendar/month", params={"year": 2025, "month": 1}, headers=auth_headers)
        assert response.status_code == 422


class TestWeekAndDayViews:
    def test_week_view(self, client, auth_headers, essay):
        response = client.get("/calendar/week", params={"date": "2025-01-19"}, headers=auth_headers)
        assert response.status_code == 200
        days = response.json()["days"]
        assert [day["date"] for day in (days[0], days[-1])] == ["2025-01-13", "2025-01-19"]
        assert [item["id"] for item in days[2]["items"]] == ["t1-1"]

    def test_day_groups_nest_subtask_under_task(self, client, auth_headers, essay):
        response = client.get("/calendar/day", params={"date": "2025-01-20"}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["is_today"] is False
        assert len(data["groups"]) == 1
        group = data["groups"][0]
        assert group["type"] == "task-with-subtasks"
        assert group["main_item"]["id"] == "t1"
        assert [item["id"] for item in group["sub_items"]] == ["t1-2"]

    def test_day_with_orphan_subtask(self, client, auth_headers, essay):
        data = client.get("/calendar/day", params={"date": "2025-01-15"}, headers=auth_headers).json()
        assert data["is_today"] is True
        assert [group["type"] for group in data["groups"]] == ["single-subtask"]

    def test_empty_day(self, client, auth_headers, essay):
        data = client.get("/calendar/day", params={"date": "2025-01-16"}, headers=auth_headers).json()
        assert data["groups"] == []


class TestPeriodView:
    def test_weekly_period(self, client, auth_headers):
        response = client.get("/calendar/period", params={"mode": "weekly", "date": "2025-01-29"}, headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Jan 27 - Feb 2, 2025"
        assert data["range"] == {"start": "2025-01-27", "end": "2025-02-02"}
        assert (data["previous"], data["next"]) == ("2025-01-22", "2025-02-05")
        assert data["weekday_names"][0] == "Mon"

    def test_monthly_period_is_default(self, client, auth_headers):
        data = client.get("/calendar/period", params={"date": "2025-03-31"}, headers=auth_headers).json()
        assert data["mode"] == "monthly"
        assert data["title"] == "March 2025"
        assert data["previous"] == "2025-02-28"


class TestItemLookup:
    """Tests for GET /calendar/items/{item_id}."""

    def test_task_item(self, client, auth_headers, essay):
        data = client.get("/calendar/items/t1", headers=auth_headers).json()
        assert data["type"] == "task"
        assert data["task_title"] == "Essay"
        assert data["subtask"] is None

    def test_subtask_item(self, client, auth_headers, essay):
        data = client.get("/calendar/items/t1-2", headers=auth_headers).json()
        assert data["type"] == "subtask"
        assert data["task_id"] == "t1"
        assert data["subtask"]["title"] == "Final read"

    def test_unknown_item_is_404(self, client, auth_headers, essay):
        response = client.get("/calendar/items/t1-9", headers=auth_headers)
        assert response.status_code == 404
