"""
TASKPACE API - Task Enums

Enums for task-related derived values and listing options.
"""

from enum import Enum


class DeadlineStatus(str, Enum):
    """
    Derived deadline status computed from deadline and current time.

    - NORMAL: more than the warning window remains
    - WARNING: due within the warning window (6 hours by default)
    - OVERDUE: deadline strictly in the past
    """
    NORMAL = "normal"
    WARNING = "warning"
    OVERDUE = "overdue"


class SortOption(str, Enum):
    """Task list ordering keys."""
    CREATED_TIME = "created_time"
    DEADLINE = "deadline"


class SortDirection(str, Enum):
    """Task list ordering direction."""
    ASC = "asc"
    DESC = "desc"
