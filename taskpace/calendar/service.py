"""
TASKPACE API - Calendar Service

Feeds task snapshots through projection, grouping and the grid builder.
"""

import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Callable, Dict, List, Optional

from taskpace.calendar.dates import date_key, is_today
from taskpace.calendar.enums import CalendarMode, ItemType
from taskpace.calendar.grid import build_month, build_week
from taskpace.calendar.grouping import group_by_date, group_for_display
from taskpace.calendar.navigation import (
    date_range,
    format_period_title,
    next_period,
    previous_period,
    weekday_names,
)
from taskpace.calendar.projector import find_source, project_to_calendar_items
from taskpace.calendar.schemas import (
    CalendarDayGroupsResponse,
    CalendarItem,
    CalendarItemSourceResponse,
    CalendarMonth,
    CalendarPeriodResponse,
    CalendarWeek,
)
from taskpace.tasks.repository import TaskRepositoryInterface
from taskpace.tasks.schemas import SubtaskResponse

logger = logging.getLogger(__name__)


class CalendarService:
    """Service layer for calendar views of an owner's active tasks."""

    def __init__(
        self,
        repository: TaskRepositoryInterface,
        clock: Optional[Callable[[], datetime]] = None,
        tz: tzinfo = timezone.utc,
    ):
        self.repository = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.tz = tz

    async def _items_by_date(self, owner_id: str) -> Dict[str, List[CalendarItem]]:
        tasks = await self.repository.list_active(owner_id)
        items = project_to_calendar_items(tasks)
        logger.debug(f"Projected {len(items)} calendar items from {len(tasks)} tasks for user {owner_id}")
        return group_by_date(items, self.tz)

    async def get_month(self, owner_id: str, year: int, month: int) -> CalendarMonth:
        """Month grid; ``month`` is 0-based."""
        items_by_date = await self._items_by_date(owner_id)
        return build_month(year, month, items_by_date, self._clock(), self.tz)

    async def get_week(self, owner_id: str, anchor: date) -> CalendarWeek:
        items_by_date = await self._items_by_date(owner_id)
        return build_week(anchor, items_by_date, self._clock(), self.tz)

    async def get_day_groups(self, owner_id: str, day: date) -> CalendarDayGroupsResponse:
        items_by_date = await self._items_by_date(owner_id)
        day_items = items_by_date.get(date_key(day, self.tz), [])
        return CalendarDayGroupsResponse(
            date=day,
            is_today=is_today(day, self._clock(), self.tz),
            groups=group_for_display(day_items),
        )

    def get_period(self, mode: CalendarMode, anchor: date) -> CalendarPeriodResponse:
        return CalendarPeriodResponse(
            mode=mode,
            date=anchor,
            range=date_range(mode, anchor),
            title=format_period_title(mode, anchor),
            previous=previous_period(mode, anchor),
            next=next_period(mode, anchor),
            weekday_names=weekday_names(),
        )

    async def find_item(self, owner_id: str, item_id: str) -> Optional[CalendarItemSourceResponse]:
        """Resolve a clicked calendar item back to its task and subtask."""
        tasks = await self.repository.list_active(owner_id)
        source = find_source(item_id, tasks)
        if source is None:
            return None

        task, subtask = source
        if subtask is None:
            return CalendarItemSourceResponse(
                item_id=item_id,
                type=ItemType.TASK,
                task_id=task.id,
                task_title=task.title,
            )
        return CalendarItemSourceResponse(
            item_id=item_id,
            type=ItemType.SUBTASK,
            task_id=task.id,
            task_title=task.title,
            subtask=SubtaskResponse(
                id=subtask.id,
                title=subtask.title,
                deadline=subtask.deadline,
                done=subtask.done,
            ),
        )
