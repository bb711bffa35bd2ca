"""
TASKPACE API - Notification Models

Overdue notifications and the per-user inbox that holds them.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from taskpace.tasks.deadlines import to_epoch_ms
from taskpace.tasks.models import Task, Subtask


class NotificationType(str, Enum):
    TASK_OVERDUE = "task_overdue"
    SUBTASK_OVERDUE = "subtask_overdue"


NotificationKey = Tuple[NotificationType, str, Optional[int]]


@dataclass
class Notification:
    """An overdue notice for a task or one of its subtasks."""

    id: str
    type: NotificationType
    task_id: str
    task_name: str
    message: str
    created_at: int
    subtask_id: Optional[int] = None
    subtask_name: Optional[str] = None
    read: bool = False

    @property
    def key(self) -> NotificationKey:
        """Identity used for de-duplication, independent of the generated id."""
        return (self.type, self.task_id, self.subtask_id)

    @classmethod
    def task_overdue(cls, task: Task, now: datetime) -> "Notification":
        created_at = to_epoch_ms(now)
        return cls(
            id=f"{NotificationType.TASK_OVERDUE.value}_{task.id}_{created_at}",
            type=NotificationType.TASK_OVERDUE,
            task_id=task.id,
            task_name=task.title,
            message=f"Task {task.title} is overdue",
            created_at=created_at,
        )

    @classmethod
    def subtask_overdue(cls, task: Task, subtask: Subtask, now: datetime) -> "Notification":
        created_at = to_epoch_ms(now)
        return cls(
            id=f"{NotificationType.SUBTASK_OVERDUE.value}_{task.id}_{subtask.id}_{created_at}",
            type=NotificationType.SUBTASK_OVERDUE,
            task_id=task.id,
            task_name=task.title,
            subtask_id=subtask.id,
            subtask_name=subtask.title,
            message=(
                f"You’re falling behind your pace on task {task.title} "
                f"because subtask {subtask.title} is incomplete."
            ),
            created_at=created_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "taskId": self.task_id,
            "taskName": self.task_name,
            "subtaskId": self.subtask_id,
            "subtaskName": self.subtask_name,
            "message": self.message,
            "createdAt": self.created_at,
            "read": self.read,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Notification":
        return cls(
            id=data["id"],
            type=NotificationType(data["type"]),
            task_id=data["taskId"],
            task_name=data["taskName"],
            subtask_id=data.get("subtaskId"),
            subtask_name=data.get("subtaskName"),
            message=data["message"],
            created_at=data["createdAt"],
            read=bool(data.get("read", False)),
        )


@dataclass
class NotificationDelta:
    """Notifications to add and to remove, computed from one task snapshot."""

    added: List[Notification] = field(default_factory=list)
    removed: List[Notification] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.added and not self.removed


@dataclass
class NotificationInbox:
    """
    A user's notifications as a value.

    Operations return a new inbox; callers persist it explicitly. Removal
    is permanent and marking as read never deletes.
    """

    notifications: List[Notification] = field(default_factory=list)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self.notifications if not n.read)

    def get(self, notification_id: str) -> Optional[Notification]:
        for notification in self.notifications:
            if notification.id == notification_id:
                return notification
        return None

    def apply(self, delta: NotificationDelta) -> "NotificationInbox":
        removed_ids = {n.id for n in delta.removed}
        kept = [n for n in self.notifications if n.id not in removed_ids]
        return NotificationInbox(notifications=kept + list(delta.added))

    def mark_as_read(self, notification_id: str) -> "NotificationInbox":
        return NotificationInbox(notifications=[
            replace(n, read=True) if n.id == notification_id else n
            for n in self.notifications
        ])

    def mark_all_as_read(self) -> "NotificationInbox":
        return NotificationInbox(notifications=[replace(n, read=True) for n in self.notifications])

    def clear_all(self) -> "NotificationInbox":
        return NotificationInbox()

    def to_dict(self) -> dict:
        return {"notifications": [n.to_dict() for n in self.notifications]}

    @classmethod
    def from_dict(cls, data: dict) -> "NotificationInbox":
        return cls(notifications=[Notification.from_dict(n) for n in data.get("notifications") or []])
