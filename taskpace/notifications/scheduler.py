import asyncio
import logging
from datetime import timezone, tzinfo
from typing import Optional

from taskpace.config import settings
from taskpace.notifications.repository import NotificationRepositoryInterface
from taskpace.notifications.service import NotificationService
from taskpace.tasks.repository import TaskRepositoryInterface

logger = logging.getLogger(__name__)


class OverdueScanScheduler:
    """Background scheduler that keeps every user's overdue notifications current."""

    def __init__(
        self,
        task_repo: TaskRepositoryInterface,
        notification_repo: NotificationRepositoryInterface,
        tz: tzinfo = timezone.utc,
        interval_seconds: Optional[int] = None,
    ):
        self.task_repo = task_repo
        self.notification_repo = notification_repo
        self.service = NotificationService(
            notification_repo=notification_repo,
            task_repo=task_repo,
            tz=tz,
        )
        self.interval_seconds = interval_seconds or settings.OVERDUE_SCAN_INTERVAL_SECONDS
        self._task: asyncio.Task | None = None
        self._running = False

    async def start(self) -> None:
        """Start the scheduler background task."""
        if self._running:
            return

        if not settings.OVERDUE_SCAN_ENABLED:
            logger.info("Overdue scan scheduler is disabled via config")
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info("Overdue scan scheduler started")

    async def stop(self) -> None:
        """Stop the scheduler background task."""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Overdue scan scheduler stopped")

    async def _run_loop(self) -> None:
        """Main scheduler loop."""
        while self._running:
            try:
                await self.run_once()
            except Exception as e:
                logger.error(f"Error in overdue scan job: {e}", exc_info=True)

            # Sleep until next run
            await asyncio.sleep(self.interval_seconds)

    async def run_once(self) -> int:
        """
        Refresh notifications for every user with active tasks or a non-empty
        inbox. Returns users refreshed.
        """
        owner_ids = await self.task_repo.list_owner_ids()
        # Owners without active tasks still need their stale notifications retracted
        for owner_id in await self.notification_repo.list_owner_ids():
            if owner_id not in owner_ids:
                owner_ids.append(owner_id)
        logger.info(f"Overdue scan: checking {len(owner_ids)} users")

        refreshed = 0
        for owner_id in owner_ids:
            try:
                await self.service.refresh(owner_id)
                refreshed += 1
            except Exception as e:
                logger.error(f"Error refreshing notifications for user {owner_id}: {e}", exc_info=True)
                # Continue with next user
        return refreshed
