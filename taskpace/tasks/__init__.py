"""
TASKPACE API - Tasks Module

Task snapshots, deadline parsing and active task listing.
"""

from taskpace.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
