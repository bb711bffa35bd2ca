"""
TASKPACE API - Task Models

Task snapshots as supplied by the persistence layer. The engines read
these and never mutate them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional

from taskpace.config import settings
from taskpace.tasks.deadlines import to_epoch_ms


@dataclass
class Subtask:
    """A subtask owned by exactly one Task."""

    id: int
    title: str
    deadline: str
    done: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "deadline": self.deadline,
            "done": self.done,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Subtask":
        return cls(
            id=int(data["id"]),
            title=data["title"],
            deadline=data["deadline"],
            done=bool(data.get("done", False)),
        )


@dataclass
class Task:
    """Task entity with its ordered subtasks (insertion order = display order)."""

    id: str
    title: str
    deadline: str
    subtasks: List[Subtask] = field(default_factory=list)
    done: bool = False
    created_at: Optional[int] = None
    owner_id: Optional[str] = None

    def find_subtask(self, subtask_id: int) -> Optional[Subtask]:
        """Return the subtask with the given id, if it still exists."""
        for subtask in self.subtasks:
            if subtask.id == subtask_id:
                return subtask
        return None

    def to_dict(self) -> dict:
        """Convert task to dictionary for MongoDB storage."""
        return {
            "_id": self.id,
            "title": self.title,
            "deadline": self.deadline,
            "subtasks": [subtask.to_dict() for subtask in self.subtasks],
            "done": self.done,
            "createdAt": self.created_at,
            "userId": self.owner_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create task from MongoDB document."""
        return cls(
            id=str(data.get("_id", data.get("id"))),
            title=data["title"],
            deadline=data["deadline"],
            subtasks=[Subtask.from_dict(s) for s in data.get("subtasks") or []],
            done=bool(data.get("done", False)),
            created_at=data.get("createdAt"),
            owner_id=data.get("userId"),
        )


@dataclass
class CompletedTask(Task):
    """A task that moved to the completed collection."""

    completed_at: Optional[int] = None
    expires_at: Optional[int] = None

    @classmethod
    def from_task(
        cls,
        task: Task,
        completed_at: datetime,
        retention_days: Optional[int] = None,
    ) -> "CompletedTask":
        """Stamp a task as completed; it expires ``retention_days`` later."""
        if retention_days is None:
            retention_days = settings.COMPLETED_TASK_RETENTION_DAYS
        return cls(
            id=task.id,
            title=task.title,
            deadline=task.deadline,
            subtasks=list(task.subtasks),
            done=True,
            created_at=task.created_at,
            owner_id=task.owner_id,
            completed_at=to_epoch_ms(completed_at),
            expires_at=to_epoch_ms(completed_at + timedelta(days=retention_days)),
        )

    def is_expired(self, now: datetime) -> bool:
        """True once the retention window has elapsed."""
        if self.expires_at is None:
            return False
        return self.expires_at <= to_epoch_ms(now)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["completedAt"] = self.completed_at
        data["expiresAt"] = self.expires_at
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "CompletedTask":
        task = Task.from_dict(data)
        return cls(
            id=task.id,
            title=task.title,
            deadline=task.deadline,
            subtasks=task.subtasks,
            done=True,
            created_at=task.created_at,
            owner_id=task.owner_id,
            completed_at=data.get("completedAt"),
            expires_at=data.get("expiresAt"),
        )
