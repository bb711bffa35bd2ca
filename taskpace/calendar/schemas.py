"""
TASKPACE API - Calendar Schemas

Pydantic models for the calendar structures handed to the rendering layer.
They are rebuilt on every projection and never persisted.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field

from taskpace.calendar.enums import CalendarMode, DisplayGroupType, ItemType
from taskpace.tasks.schemas import SubtaskResponse


class CalendarItem(BaseModel):
    """One task or subtask placed on the calendar."""

    id: str = Field(description="Task id, or '{taskId}-{subtaskId}' for subtasks")
    title: str
    type: ItemType
    deadline: str
    done: bool
    parent_task_id: Optional[str] = Field(default=None, description="Owning task id (subtasks only)")
    parent_task_title: Optional[str] = Field(default=None, description="Owning task title (subtasks only)")
    color: str = Field(description="Hex display color")


class CalendarDay(BaseModel):
    """A single grid cell."""

    date: dt.date
    is_current_month: bool
    is_today: bool
    items: List[CalendarItem] = Field(default_factory=list)


class CalendarWeek(BaseModel):
    """Seven days, Monday first."""

    days: List[CalendarDay]


class CalendarMonth(BaseModel):
    """A month grid padded with adjacent-month days."""

    year: int
    month: int = Field(description="0-based month (0 = January)")
    weeks: List[CalendarWeek]


class DisplayGroup(BaseModel):
    """A task nested with its same-day subtasks, or a standalone item."""

    type: DisplayGroupType
    main_item: CalendarItem
    sub_items: List[CalendarItem] = Field(default_factory=list)


class CalendarDayGroupsResponse(BaseModel):
    """Display groups for one calendar day."""

    date: dt.date
    is_today: bool
    groups: List[DisplayGroup]


class DateRange(BaseModel):
    start: dt.date
    end: dt.date


class CalendarPeriodResponse(BaseModel):
    """Navigation data for the current calendar view."""

    mode: CalendarMode
    date: dt.date
    range: DateRange
    title: str = Field(description="Human readable period title")
    previous: dt.date = Field(description="Anchor date of the previous period")
    next: dt.date = Field(description="Anchor date of the next period")
    weekday_names: List[str]


class CalendarItemSourceResponse(BaseModel):
    """The task (and subtask) a calendar item was projected from."""

    item_id: str
    type: ItemType
    task_id: str
    task_title: str
    subtask: Optional[SubtaskResponse] = None
