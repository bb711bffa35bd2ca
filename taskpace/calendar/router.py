"""
TASKPACE API - Calendar Router

Month, week and day views of the current user's active tasks.
"""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from taskpace.auth.dependencies import CurrentUserId
from taskpace.calendar.enums import CalendarMode
from taskpace.calendar.schemas import (
    CalendarDayGroupsResponse,
    CalendarItemSourceResponse,
    CalendarMonth,
    CalendarPeriodResponse,
    CalendarWeek,
)
from taskpace.calendar.service import CalendarService
from taskpace.dependencies import Clock, LocalZone
from taskpace.tasks.deadlines import InvalidDeadlineError
from taskpace.tasks.repository import TaskRepositoryInterface
from taskpace.tasks.router import get_task_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calendar", tags=["Calendar"])


async def get_calendar_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    clock: Clock,
    tz: LocalZone,
) -> CalendarService:
    """Dependency to get calendar service instance."""
    return CalendarService(repository, clock=clock, tz=tz)


def _invalid_deadline(exc: InvalidDeadlineError) -> HTTPException:
    logger.warning(f"Rejected calendar projection: {exc}")
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=str(exc),
    )


@router.get("/month", response_model=CalendarMonth, summary="Month grid")
async def get_month(
    current_user_id: CurrentUserId,
    service: Annotated[CalendarService, Depends(get_calendar_service)],
    year: int = Query(ge=1, le=9999, description="Calendar year"),
    month: int = Query(ge=0, le=11, description="0-based month (0 = January)"),
) -> CalendarMonth:
    try:
        return await service.get_month(current_user_id, year, month)
    except InvalidDeadlineError as exc:
        raise _invalid_deadline(exc)


@router.get("/week", response_model=CalendarWeek, summary="Week row")
async def get_week(
    current_user_id: CurrentUserId,
    service: Annotated[CalendarService, Depends(get_calendar_service)],
    anchor: date = Query(alias="date", description="Any day in the week"),
) -> CalendarWeek:
    try:
        return await service.get_week(current_user_id, anchor)
    except InvalidDeadlineError as exc:
        raise _invalid_deadline(exc)


@router.get("/day", response_model=CalendarDayGroupsResponse, summary="Display groups for one day")
async def get_day(
    current_user_id: CurrentUserId,
    service: Annotated[CalendarService, Depends(get_calendar_service)],
    day: date = Query(alias="date", description="Calendar day"),
) -> CalendarDayGroupsResponse:
    """
    Items of a single day, with each task nested together with its
    subtasks that fall on the same day.
    """
    try:
        return await service.get_day_groups(current_user_id, day)
    except InvalidDeadlineError as exc:
        raise _invalid_deadline(exc)


@router.get("/period", response_model=CalendarPeriodResponse, summary="Navigation for a view")
async def get_period(
    current_user_id: CurrentUserId,
    service: Annotated[CalendarService, Depends(get_calendar_service)],
    mode: CalendarMode = Query(default=CalendarMode.MONTHLY),
    anchor: date = Query(alias="date", description="Current anchor date"),
) -> CalendarPeriodResponse:
    return service.get_period(mode, anchor)


@router.get("/items/{item_id}", response_model=CalendarItemSourceResponse, summary="Resolve a calendar item")
async def get_item_source(
    item_id: str,
    current_user_id: CurrentUserId,
    service: Annotated[CalendarService, Depends(get_calendar_service)],
) -> CalendarItemSourceResponse:
    """
    Find the task (and subtask) a calendar item was projected from.

    Returns 404 if the task or subtask no longer exists.
    """
    source = await service.find_item(current_user_id, item_id)
    if source is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Calendar item not found",
        )
    return source
