"""
TASKPACE API - Task Schemas

Pydantic models for task API responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from taskpace.tasks.enums import DeadlineStatus


class SubtaskResponse(BaseModel):
    """Response model for a subtask."""

    id: int = Field(description="Subtask ID, unique within its task")
    title: str = Field(description="Subtask title")
    deadline: str = Field(description="Subtask deadline")
    done: bool = Field(description="Completion flag")


class TaskResponse(BaseModel):
    """Response model for a single active task."""

    id: str = Field(description="Task ID")
    title: str = Field(description="Task title")
    deadline: str = Field(description="Task deadline")
    subtasks: List[SubtaskResponse] = Field(default_factory=list, description="Ordered subtasks")
    done: bool = Field(description="Completion flag")
    created_at: Optional[int] = Field(default=None, description="Creation time, epoch milliseconds")
    deadline_status: DeadlineStatus = Field(description="Derived status based on deadline")
    hours_until_deadline: int = Field(description="Whole hours left, negative once overdue")


class TaskListResponse(BaseModel):
    """Response model for a list of tasks."""

    tasks: List[TaskResponse] = Field(description="List of tasks")
    total: int = Field(description="Total number of tasks in the list")
