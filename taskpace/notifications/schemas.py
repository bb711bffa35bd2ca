"""
TASKPACE API - Notification Schemas

Pydantic models for notification API responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from taskpace.notifications.models import NotificationType


class NotificationResponse(BaseModel):
    """Response model for a single notification."""

    id: str
    type: NotificationType
    task_id: str
    task_name: str
    subtask_id: Optional[int] = None
    subtask_name: Optional[str] = None
    message: str
    created_at: int = Field(description="Creation time, epoch milliseconds")
    read: bool


class NotificationListResponse(BaseModel):
    """Response model for a user's inbox."""

    notifications: List[NotificationResponse]
    total: int = Field(description="Number of notifications in the inbox")
    unread_count: int = Field(description="Number of unread notifications")


class NotificationRefreshResponse(BaseModel):
    """Changes applied by one overdue scan."""

    added: List[NotificationResponse] = Field(description="Newly raised notifications")
    removed: List[NotificationResponse] = Field(description="Retracted notifications")
    unread_count: int = Field(description="Unread notifications after the refresh")
