"""
TASKPACE API - Calendar Module

Projection of tasks and subtasks onto month and week grids.
"""

from taskpace.calendar.router import router as calendar_router

__all__ = ["calendar_router"]
