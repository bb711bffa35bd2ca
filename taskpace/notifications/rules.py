"""
TASKPACE API - Overdue Notification Rules

Decides which overdue notifications to raise and which to retract. Both
decisions read the same task snapshot; the caller applies the resulting
delta in one step.
"""

from datetime import datetime, timezone, tzinfo
from typing import Dict, List, Set

from taskpace.notifications.models import (
    Notification,
    NotificationDelta,
    NotificationKey,
    NotificationType,
)
from taskpace.tasks.deadlines import is_overdue
from taskpace.tasks.models import Task


def scan(
    tasks: List[Task],
    existing: List[Notification],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> List[Notification]:
    """
    Notifications to add for overdue tasks and subtasks.

    Only incomplete tasks, and incomplete subtasks of incomplete tasks, are
    considered. Anything whose (type, task, subtask) key already has a
    notification is skipped.
    """
    seen: Set[NotificationKey] = {n.key for n in existing}
    added: List[Notification] = []

    def _add(notification: Notification) -> None:
        if notification.key not in seen:
            seen.add(notification.key)
            added.append(notification)

    for task in tasks:
        if task.done:
            continue

        if is_overdue(task.deadline, now, tz):
            _add(Notification.task_overdue(task, now))

        for subtask in task.subtasks:
            if not subtask.done and is_overdue(subtask.deadline, now, tz):
                _add(Notification.subtask_overdue(task, subtask, now))

    return added


def _still_valid(notification: Notification, tasks_by_id: Dict[str, Task], now: datetime, tz: tzinfo) -> bool:
    task = tasks_by_id.get(notification.task_id)
    if task is None:
        return False

    if notification.type == NotificationType.TASK_OVERDUE:
        return not task.done and is_overdue(task.deadline, now, tz)

    # A subtask notice without a subtask id points at nothing
    if notification.subtask_id is None:
        return False

    subtask = task.find_subtask(notification.subtask_id)
    if subtask is None:
        return False
    return not subtask.done and is_overdue(subtask.deadline, now, tz)


def cleanup(
    tasks: List[Task],
    existing: List[Notification],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> List[Notification]:
    """
    Notifications to remove.

    A notification goes once its task no longer exists, or once the task
    (or subtask) it points to is done, gone, or no longer overdue.
    """
    tasks_by_id: Dict[str, Task] = {}
    for task in tasks:
        tasks_by_id.setdefault(task.id, task)

    return [n for n in existing if not _still_valid(n, tasks_by_id, now, tz)]


def evaluate(
    tasks: List[Task],
    existing: List[Notification],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> NotificationDelta:
    """Run cleanup and scan against one snapshot."""
    return NotificationDelta(
        added=scan(tasks, existing, now, tz),
        removed=cleanup(tasks, existing, now, tz),
    )
