"""
TASKPACE API - Notification Service

Loads an inbox, applies the overdue rules to the current task snapshot,
and saves the result.
"""

import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional, Tuple

from taskpace.notifications.models import NotificationDelta, NotificationInbox
from taskpace.notifications.repository import NotificationRepositoryInterface
from taskpace.notifications.rules import evaluate
from taskpace.tasks.repository import TaskRepositoryInterface

logger = logging.getLogger(__name__)


class NotificationService:
    """Service layer for overdue notifications."""

    def __init__(
        self,
        notification_repo: NotificationRepositoryInterface,
        task_repo: TaskRepositoryInterface,
        clock: Optional[Callable[[], datetime]] = None,
        tz: tzinfo = timezone.utc,
    ):
        self.notification_repo = notification_repo
        self.task_repo = task_repo
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.tz = tz

    async def get_inbox(self, owner_id: str) -> NotificationInbox:
        return await self.notification_repo.load(owner_id)

    async def refresh(self, owner_id: str) -> Tuple[NotificationDelta, NotificationInbox]:
        """
        Bring the owner's inbox in line with their active tasks.

        Scan and cleanup run on one snapshot and the delta is saved in a
        single write.
        """
        tasks = await self.task_repo.list_active(owner_id)
        inbox = await self.notification_repo.load(owner_id)

        delta = evaluate(tasks, inbox.notifications, self._clock(), self.tz)
        if delta.is_empty:
            logger.debug(f"No notification changes for user {owner_id}")
            return delta, inbox

        inbox = inbox.apply(delta)
        await self.notification_repo.save(owner_id, inbox)
        logger.info(
            f"Notifications for user {owner_id}: {len(delta.added)} added, {len(delta.removed)} removed"
        )
        return delta, inbox

    async def mark_as_read(self, owner_id: str, notification_id: str) -> Optional[NotificationInbox]:
        """Mark one notification read. Returns None if it does not exist."""
        inbox = await self.notification_repo.load(owner_id)
        if inbox.get(notification_id) is None:
            return None
        inbox = inbox.mark_as_read(notification_id)
        await self.notification_repo.save(owner_id, inbox)
        return inbox

    async def mark_all_as_read(self, owner_id: str) -> NotificationInbox:
        inbox = (await self.notification_repo.load(owner_id)).mark_all_as_read()
        await self.notification_repo.save(owner_id, inbox)
        return inbox

    async def clear_all(self, owner_id: str) -> NotificationInbox:
        inbox = (await self.notification_repo.load(owner_id)).clear_all()
        await self.notification_repo.save(owner_id, inbox)
        return inbox
