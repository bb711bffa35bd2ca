"""
TASKPACE API - Database Module Tests
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from taskpace.database import Database


@pytest.fixture
def mock_db():
    """Mock Motor database whose collections record index creation."""
    collections = {}

    def get_collection(name):
        if name not in collections:
            collection = MagicMock()
            collection.create_index = AsyncMock()
            collections[name] = collection
        return collections[name]

    db = MagicMock()
    db.__getitem__.side_effect = get_collection
    return db


class TestDatabase:
    """Tests for the connection manager."""

    def test_get_database_requires_connection(self):
        with pytest.raises(RuntimeError):
            Database().get_database()

    @pytest.mark.asyncio
    async def test_ensure_indexes(self, mock_db):
        """Task listings and the inbox owner scan are both indexed."""
        database = Database()
        database.db = mock_db

        await database.ensure_indexes()

        mock_db["tasks"].create_index.assert_awaited_once_with(
            [("userId", 1), ("done", 1), ("createdAt", -1)]
        )
        mock_db["notification_inboxes"].create_index.assert_awaited_once_with("notifications.id", sparse=True)
