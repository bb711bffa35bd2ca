"""
TASKPACE API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from taskpace.main import app
from taskpace.database import get_database
from taskpace.dependencies import get_clock, get_timezone
from taskpace.tasks.repository import InMemoryTaskRepository
from taskpace.tasks.router import get_task_repository
from taskpace.notifications.repository import InMemoryNotificationRepository
from taskpace.notifications.router import get_notification_repository


# Global in-memory repositories for tests
_test_task_repository = InMemoryTaskRepository()
_test_notification_repository = InMemoryNotificationRepository()

TEST_USER_ID = "test-user-123"


# Time control fixtures for deterministic testing
class FrozenClock:
    """A clock that returns a fixed time for deterministic testing."""

    def __init__(self, frozen_time: datetime):
        self._frozen_time = frozen_time

    def __call__(self) -> datetime:
        return self._frozen_time

    def set(self, new_time: datetime) -> None:
        self._frozen_time = new_time

    def advance(self, delta: timedelta) -> None:
        self._frozen_time += delta


@pytest.fixture
def frozen_now() -> datetime:
    """A fixed 'now' time for testing (a Wednesday)."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock(frozen_now) -> FrozenClock:
    """A controllable clock."""
    return FrozenClock(frozen_now)


@pytest.fixture
def task_repository():
    """Provide a fresh in-memory task repository for each test."""
    _test_task_repository.clear()
    return _test_task_repository


@pytest.fixture
def notification_repository():
    """Provide a fresh in-memory notification repository for each test."""
    _test_notification_repository.clear()
    return _test_notification_repository


async def override_get_task_repository():
    """Override dependency to use in-memory repository."""
    return _test_task_repository


async def override_get_notification_repository():
    """Override dependency to use in-memory repository."""
    return _test_notification_repository


async def override_get_database():
    """Override database dependency (not used in tests, but required by some dependencies)."""
    return MagicMock()


def override_get_timezone():
    return timezone.utc


@pytest.fixture
def client(task_repository, notification_repository, frozen_clock):
    """Create test client with in-memory repositories and a frozen clock."""
    app.dependency_overrides[get_task_repository] = override_get_task_repository
    app.dependency_overrides[get_notification_repository] = override_get_notification_repository
    app.dependency_overrides[get_database] = override_get_database
    app.dependency_overrides[get_timezone] = override_get_timezone
    app.dependency_overrides[get_clock] = lambda: frozen_clock

    yield TestClient(app)
    # Clean up override after test
    app.dependency_overrides.clear()


@pytest.fixture
def user_id() -> str:
    return TEST_USER_ID


@pytest.fixture
def auth_headers(user_id):
    """Identity headers for requests made as the test user."""
    return {"X-User-Id": user_id}
