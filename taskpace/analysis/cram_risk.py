"""
TASKPACE API - Cram Risk Gauge

How many open items fall due per day over the next few days.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import List, Optional

from taskpace.analysis.enums import RiskLevel
from taskpace.tasks.deadlines import parse_deadline
from taskpace.tasks.models import Task

CRAM_RISK_DAY_OPTIONS = (7, 14, 30)


@dataclass
class CramRisk:
    total_items: int
    days_range: int
    avg_per_day: float
    max_due_date: Optional[datetime]
    was_range_limited: bool
    selected_days: int
    level: RiskLevel


def risk_level(avg_per_day: float) -> RiskLevel:
    if avg_per_day <= 1:
        return RiskLevel.LOW
    if avg_per_day <= 3:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def _open_due_dates(tasks: List[Task], tz: tzinfo) -> List[datetime]:
    """Deadlines of incomplete tasks and their incomplete subtasks."""
    due_dates: List[datetime] = []
    for task in tasks:
        if task.done:
            continue
        due_dates.append(parse_deadline(task.deadline, tz))
        due_dates.extend(
            parse_deadline(subtask.deadline, tz)
            for subtask in task.subtasks
            if not subtask.done
        )
    return due_dates


def compute_cram_risk(
    tasks: List[Task],
    now: datetime,
    days: int = 7,
    tz: tzinfo = timezone.utc,
) -> CramRisk:
    """
    Average open items due per day between now and ``days`` ahead.

    The window shrinks to the latest open deadline when that comes sooner,
    but never below one day.
    """
    due_dates = _open_due_dates(tasks, tz)
    if not due_dates:
        return CramRisk(
            total_items=0,
            days_range=days,
            avg_per_day=0.0,
            max_due_date=None,
            was_range_limited=False,
            selected_days=days,
            level=RiskLevel.LOW,
        )

    max_due_date = max(due_dates)
    days_till_max = math.ceil((max_due_date - now) / timedelta(days=1))
    days_range = min(days, max(1, days_till_max))
    range_end = now + timedelta(days=days_range)

    total_items = sum(1 for due in due_dates if now <= due <= range_end)
    avg_per_day = total_items / days_range

    return CramRisk(
        total_items=total_items,
        days_range=days_range,
        avg_per_day=avg_per_day,
        max_due_date=max_due_date,
        was_range_limited=days > days_till_max,
        selected_days=days,
        level=risk_level(avg_per_day),
    )
