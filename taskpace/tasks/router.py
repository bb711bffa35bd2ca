"""
TASKPACE API - Task Router

Read-only listing of the current user's active tasks.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from taskpace.auth.dependencies import CurrentUserId
from taskpace.config import settings
from taskpace.database import get_database
from taskpace.dependencies import Clock, LocalZone
from taskpace.tasks.deadlines import InvalidDeadlineError
from taskpace.tasks.enums import SortDirection, SortOption
from taskpace.tasks.repository import TaskRepository, TaskRepositoryInterface
from taskpace.tasks.schemas import TaskListResponse
from taskpace.tasks.service import TaskService


router = APIRouter(prefix="/tasks", tags=["Tasks"])


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return TaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    clock: Clock,
    tz: LocalZone,
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(
        repository,
        clock=clock,
        tz=tz,
        warning_hours=settings.DEADLINE_WARNING_HOURS,
    )


@router.get(
    "",
    response_model=TaskListResponse,
    summary="List active tasks",
)
async def list_tasks(
    current_user_id: CurrentUserId,
    service: Annotated[TaskService, Depends(get_task_service)],
    sort: SortOption = Query(default=SortOption.CREATED_TIME, description="Ordering key"),
    direction: SortDirection = Query(default=SortDirection.DESC, description="Ordering direction"),
) -> TaskListResponse:
    """
    List the current user's active tasks.

    Each task carries a derived deadline status (normal, warning, overdue).
    """
    try:
        return await service.list_active_tasks(current_user_id, sort, direction)
    except InvalidDeadlineError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )
