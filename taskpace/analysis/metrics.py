"""
TASKPACE API - Analysis Metrics

Pace, streak and outcome metrics for the analysis dashboard.
This is a deterministic, side-effect free computation: "now" is always
passed in.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from typing import List

from taskpace.tasks.deadlines import from_epoch_ms, parse_deadline
from taskpace.tasks.models import CompletedTask, Task

# The streak looks at this many most recently due completed subtasks
STREAK_WINDOW = 10
STREAK_LOOKBACK_DAYS = 7
STREAK_CAP = 30


@dataclass
class SubtaskMetrics:
    """Pace classification of incomplete tasks."""

    on_pace: int = 0
    behind: int = 0
    total: int = 0
    streak: int = 0
    on_pace_tasks: List[Task] = field(default_factory=list)
    behind_tasks: List[Task] = field(default_factory=list)


@dataclass
class TaskMetrics:
    """Outcome counts across active and completed tasks."""

    completion_rate: float = 0.0
    on_time: int = 0
    overdue: int = 0
    total: int = 0


@dataclass
class AnalysisData:
    subtask_metrics: SubtaskMetrics
    task_metrics: TaskMetrics


def has_overdue_subtask(task: Task, now: datetime, tz: tzinfo = timezone.utc) -> bool:
    """True if any incomplete subtask's deadline is strictly in the past."""
    return any(
        not subtask.done and parse_deadline(subtask.deadline, tz) < now
        for subtask in task.subtasks
    )


def compute_streak(
    tasks: List[Task],
    now: datetime,
    tz: tzinfo = timezone.utc,
    window: int = STREAK_WINDOW,
    cap: int = STREAK_CAP,
) -> int:
    """
    Approximate run of timely completions.

    Takes the ``window`` most recently due completed subtasks across all
    tasks, newest first, and counts leading entries due no more than
    seven whole days ago. This is not true per-day tracking.
    """
    completed = [
        (parse_deadline(subtask.deadline, tz), subtask)
        for task in tasks
        for subtask in task.subtasks
        if subtask.done
    ]
    completed.sort(key=lambda entry: entry[0], reverse=True)

    streak = 0
    for deadline, _ in completed[:window]:
        days_ago = math.floor((now - deadline) / timedelta(days=1))
        if days_ago > STREAK_LOOKBACK_DAYS:
            break
        streak += 1

    return min(streak, cap)


def compute_subtask_metrics(tasks: List[Task], now: datetime, tz: tzinfo = timezone.utc) -> SubtaskMetrics:
    """
    Classify incomplete tasks as on pace or behind.

    A task is behind when any of its incomplete subtasks is overdue. Tasks
    without subtasks are on pace.
    """
    metrics = SubtaskMetrics()

    for task in tasks:
        if task.done:
            continue
        metrics.total += 1
        if has_overdue_subtask(task, now, tz):
            metrics.behind += 1
            metrics.behind_tasks.append(task)
        else:
            metrics.on_pace += 1
            metrics.on_pace_tasks.append(task)

    metrics.streak = compute_streak(tasks, now, tz)
    return metrics


def is_completed_on_time(task: CompletedTask, tz: tzinfo = timezone.utc) -> bool:
    """Completed no later than the deadline. No completion time means late."""
    if not task.completed_at:
        return False
    return from_epoch_ms(task.completed_at) <= parse_deadline(task.deadline, tz)


def compute_task_metrics(
    active_tasks: List[Task],
    completed_tasks: List[CompletedTask],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> TaskMetrics:
    """
    Completion rate plus on-time/overdue counts.

    Late completions and active tasks past their deadline both count as
    overdue. An active task that is not yet due counts as neither.
    """
    total = len(active_tasks) + len(completed_tasks)
    metrics = TaskMetrics(total=total)
    if total:
        metrics.completion_rate = 100 * len(completed_tasks) / total

    for task in completed_tasks:
        if is_completed_on_time(task, tz):
            metrics.on_time += 1
        else:
            metrics.overdue += 1

    for task in active_tasks:
        if not task.done and parse_deadline(task.deadline, tz) < now:
            metrics.overdue += 1

    return metrics


def generate_analysis(
    active_tasks: List[Task],
    completed_tasks: List[CompletedTask],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> AnalysisData:
    return AnalysisData(
        subtask_metrics=compute_subtask_metrics(active_tasks, now, tz),
        task_metrics=compute_task_metrics(active_tasks, completed_tasks, now, tz),
    )
