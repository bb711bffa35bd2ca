"""
TASKPACE API - Notification Router

Overdue notifications for the current user.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from taskpace.auth.dependencies import CurrentUserId
from taskpace.database import get_database
from taskpace.dependencies import Clock, LocalZone
from taskpace.notifications.models import Notification, NotificationInbox
from taskpace.notifications.repository import (
    MongoNotificationRepository,
    NotificationRepositoryInterface,
)
from taskpace.notifications.schemas import (
    NotificationListResponse,
    NotificationRefreshResponse,
    NotificationResponse,
)
from taskpace.notifications.service import NotificationService
from taskpace.tasks.deadlines import InvalidDeadlineError
from taskpace.tasks.repository import TaskRepositoryInterface
from taskpace.tasks.router import get_task_repository


router = APIRouter(prefix="/notifications", tags=["Notifications"])


async def get_notification_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> NotificationRepositoryInterface:
    """Dependency to get notification repository instance."""
    return MongoNotificationRepository(db)


async def get_notification_service(
    notification_repo: Annotated[NotificationRepositoryInterface, Depends(get_notification_repository)],
    task_repo: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    clock: Clock,
    tz: LocalZone,
) -> NotificationService:
    """Dependency to get notification service instance."""
    return NotificationService(notification_repo, task_repo, clock=clock, tz=tz)


def _to_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        type=notification.type,
        task_id=notification.task_id,
        task_name=notification.task_name,
        subtask_id=notification.subtask_id,
        subtask_name=notification.subtask_name,
        message=notification.message,
        created_at=notification.created_at,
        read=notification.read,
    )


def _to_list_response(inbox: NotificationInbox) -> NotificationListResponse:
    notifications: List[NotificationResponse] = [_to_response(n) for n in inbox.notifications]
    return NotificationListResponse(
        notifications=notifications,
        total=len(notifications),
        unread_count=inbox.unread_count,
    )


@router.get("", response_model=NotificationListResponse, summary="List notifications")
async def list_notifications(
    current_user_id: CurrentUserId,
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationListResponse:
    inbox = await service.get_inbox(current_user_id)
    return _to_list_response(inbox)


@router.post("/refresh", response_model=NotificationRefreshResponse, summary="Scan for overdue items")
async def refresh_notifications(
    current_user_id: CurrentUserId,
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationRefreshResponse:
    """
    Raise notifications for newly overdue tasks and subtasks, and retract
    the ones that no longer apply.
    """
    try:
        delta, inbox = await service.refresh(current_user_id)
    except InvalidDeadlineError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )
    return NotificationRefreshResponse(
        added=[_to_response(n) for n in delta.added],
        removed=[_to_response(n) for n in delta.removed],
        unread_count=inbox.unread_count,
    )


@router.post("/read-all", response_model=NotificationListResponse, summary="Mark all as read")
async def mark_all_as_read(
    current_user_id: CurrentUserId,
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationListResponse:
    inbox = await service.mark_all_as_read(current_user_id)
    return _to_list_response(inbox)


@router.post("/{notification_id}/read", response_model=NotificationListResponse, summary="Mark as read")
async def mark_as_read(
    notification_id: str,
    current_user_id: CurrentUserId,
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationListResponse:
    """
    Mark one notification as read.

    Returns 404 if the notification doesn't exist.
    """
    inbox = await service.mark_as_read(current_user_id, notification_id)
    if inbox is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )
    return _to_list_response(inbox)


@router.delete("", response_model=NotificationListResponse, summary="Clear all notifications")
async def clear_notifications(
    current_user_id: CurrentUserId,
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> NotificationListResponse:
    inbox = await service.clear_all(current_user_id)
    return _to_list_response(inbox)
