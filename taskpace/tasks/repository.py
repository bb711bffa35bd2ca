"""
TASKPACE API - Task Repository

Read-only access to task snapshots.
Includes MongoDB implementation for runtime and in-memory one for testing.
Writes belong to the persistence layer and are not exposed here.
"""

from abc import ABC, abstractmethod
from typing import List, Union

from motor.motor_asyncio import AsyncIOMotorDatabase

from taskpace.tasks.models import Task, CompletedTask


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task snapshots.

    Active and completed tasks are two disjoint collections; a task is
    never returned by both.
    """

    @abstractmethod
    async def list_active(self, owner_id: str) -> List[Task]:
        """List incomplete tasks for owner, newest first."""
        pass

    @abstractmethod
    async def list_completed(self, owner_id: str) -> List[CompletedTask]:
        """List completed tasks for owner, newest first."""
        pass

    @abstractmethod
    async def list_owner_ids(self) -> List[str]:
        """List every owner with at least one active task."""
        pass


class TaskRepository(TaskRepositoryInterface):
    """MongoDB implementation of the task snapshot repository."""

    COLLECTION_NAME = "tasks"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def list_active(self, owner_id: str) -> List[Task]:
        cursor = self.collection.find({"userId": owner_id, "done": {"$ne": True}}).sort("createdAt", -1)
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def list_completed(self, owner_id: str) -> List[CompletedTask]:
        cursor = self.collection.find({"userId": owner_id, "done": True}).sort("createdAt", -1)
        tasks: List[CompletedTask] = []
        async for doc in cursor:
            tasks.append(CompletedTask.from_dict(doc))
        return tasks

    async def list_owner_ids(self) -> List[str]:
        owner_ids = await self.collection.distinct("userId", {"done": {"$ne": True}})
        return [owner_id for owner_id in owner_ids if owner_id]


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._tasks: dict[str, Union[Task, CompletedTask]] = {}

    def clear(self) -> None:
        self._tasks.clear()

    def add(self, task: Union[Task, CompletedTask]) -> None:
        self._tasks[task.id] = task

    def _for_owner(self, owner_id: str) -> List[Task]:
        results = [t for t in self._tasks.values() if t.owner_id == owner_id]
        results.sort(key=lambda t: t.created_at or 0, reverse=True)
        return results

    async def list_active(self, owner_id: str) -> List[Task]:
        return [t for t in self._for_owner(owner_id) if not t.done]

    async def list_completed(self, owner_id: str) -> List[CompletedTask]:
        return [t for t in self._for_owner(owner_id) if isinstance(t, CompletedTask)]

    async def list_owner_ids(self) -> List[str]:
        owner_ids: List[str] = []
        for task in self._tasks.values():
            if not task.done and task.owner_id and task.owner_id not in owner_ids:
                owner_ids.append(task.owner_id)
        return owner_ids
