"""
TASKPACE API - Task Service

Listing of active tasks with ordering and derived deadline status.
"""

from datetime import datetime, timezone, tzinfo
from typing import Callable, List, Optional

from taskpace.tasks.deadlines import deadline_status, hours_until_deadline, parse_deadline
from taskpace.tasks.enums import SortDirection, SortOption
from taskpace.tasks.models import Task, Subtask
from taskpace.tasks.repository import TaskRepositoryInterface
from taskpace.tasks.schemas import SubtaskResponse, TaskListResponse, TaskResponse


def _created_time(task: Task) -> int:
    """Creation time, falling back to a numeric id (ids used to be timestamps)."""
    if task.created_at:
        return task.created_at
    return int(task.id) if task.id.isdigit() else 0


def sort_tasks(
    tasks: List[Task],
    option: SortOption,
    direction: SortDirection,
    tz: tzinfo = timezone.utc,
) -> List[Task]:
    """Return a new, stably sorted list; the input is left untouched."""
    reverse = direction == SortDirection.DESC
    if option == SortOption.CREATED_TIME:
        return sorted(tasks, key=_created_time, reverse=reverse)
    if option == SortOption.DEADLINE:
        return sorted(tasks, key=lambda t: parse_deadline(t.deadline, tz), reverse=reverse)
    return list(tasks)


class TaskService:
    """Service layer for task listing."""

    def __init__(
        self,
        repository: TaskRepositoryInterface,
        clock: Optional[Callable[[], datetime]] = None,
        tz: tzinfo = timezone.utc,
        warning_hours: Optional[int] = None,
    ):
        """
        Initialize the task service.

        Args:
            repository: Task snapshot repository
            clock: Optional clock function for testing (returns current datetime)
            tz: Wall-clock zone for deadlines without an offset
            warning_hours: Width of the deadline warning window
        """
        self.repository = repository
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.tz = tz
        self.warning_hours = warning_hours

    def _subtask_to_response(self, subtask: Subtask) -> SubtaskResponse:
        return SubtaskResponse(
            id=subtask.id,
            title=subtask.title,
            deadline=subtask.deadline,
            done=subtask.done,
        )

    def _task_to_response(self, task: Task, now: datetime) -> TaskResponse:
        """Convert a Task model to TaskResponse with derived deadline status."""
        return TaskResponse(
            id=task.id,
            title=task.title,
            deadline=task.deadline,
            subtasks=[self._subtask_to_response(s) for s in task.subtasks],
            done=task.done,
            created_at=task.created_at,
            deadline_status=deadline_status(task.deadline, now, self.tz, self.warning_hours),
            hours_until_deadline=hours_until_deadline(task.deadline, now, self.tz),
        )

    async def list_active_tasks(
        self,
        owner_id: str,
        option: SortOption = SortOption.CREATED_TIME,
        direction: SortDirection = SortDirection.DESC,
    ) -> TaskListResponse:
        """List active tasks for owner in the requested order."""
        tasks = await self.repository.list_active(owner_id)
        ordered = sort_tasks(tasks, option, direction, self.tz)
        now = self._clock()
        responses = [self._task_to_response(task, now) for task in ordered]
        return TaskListResponse(tasks=responses, total=len(responses))
