"""
TASKPACE API - Notification Repository

Load/save boundary for per-user notification inboxes.
Each inbox is stored as a single document so a delta lands atomically.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase

from taskpace.notifications.models import NotificationInbox


class NotificationRepositoryInterface(ABC):
    """Abstract interface for notification inbox storage."""

    @abstractmethod
    async def load(self, owner_id: str) -> NotificationInbox:
        """Load the owner's inbox; an empty inbox if none was saved."""
        pass

    @abstractmethod
    async def save(self, owner_id: str, inbox: NotificationInbox) -> None:
        """Replace the owner's inbox."""
        pass

    @abstractmethod
    async def list_owner_ids(self) -> List[str]:
        """List every owner whose saved inbox still holds notifications."""
        pass


class MongoNotificationRepository(NotificationRepositoryInterface):
    """MongoDB implementation of inbox storage."""

    COLLECTION_NAME = "notification_inboxes"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[self.COLLECTION_NAME]

    async def load(self, owner_id: str) -> NotificationInbox:
        doc = await self.collection.find_one({"_id": owner_id})
        if doc is None:
            return NotificationInbox()
        return NotificationInbox.from_dict(doc)

    async def save(self, owner_id: str, inbox: NotificationInbox) -> None:
        doc = inbox.to_dict()
        doc["updated_at"] = datetime.now(timezone.utc)
        await self.collection.replace_one({"_id": owner_id}, doc, upsert=True)

    async def list_owner_ids(self) -> List[str]:
        return await self.collection.distinct("_id", {"notifications.id": {"$exists": True}})


class InMemoryNotificationRepository(NotificationRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._inboxes: dict[str, NotificationInbox] = {}

    def clear(self) -> None:
        self._inboxes.clear()

    async def load(self, owner_id: str) -> NotificationInbox:
        return self._inboxes.get(owner_id, NotificationInbox())

    async def save(self, owner_id: str, inbox: NotificationInbox) -> None:
        self._inboxes[owner_id] = inbox

    async def list_owner_ids(self) -> List[str]:
        return [owner_id for owner_id, inbox in self._inboxes.items() if inbox.notifications]
