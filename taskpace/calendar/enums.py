"""
TASKPACE API - Calendar Enums
"""

from enum import Enum


class ItemType(str, Enum):
    """Kind of calendar item. Tasks sort before subtasks within a day."""
    TASK = "task"
    SUBTASK = "subtask"


class DisplayGroupType(str, Enum):
    """How one day's items are nested for rendering."""
    SINGLE_TASK = "single-task"
    TASK_WITH_SUBTASKS = "task-with-subtasks"
    SINGLE_SUBTASK = "single-subtask"


class CalendarMode(str, Enum):
    """Calendar view granularity."""
    MONTHLY = "monthly"
    WEEKLY = "weekly"
