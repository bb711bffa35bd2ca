"""
TASKPACE API - Notifications Module

Overdue notifications: decision rules, per-user inbox and background scan.
"""

from taskpace.notifications.router import router as notifications_router

__all__ = ["notifications_router"]
