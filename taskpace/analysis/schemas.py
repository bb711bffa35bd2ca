"""
TASKPACE API - Analysis Schemas

Pydantic models for the analysis dashboard responses.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from taskpace.analysis.enums import RiskLevel


class TaskSummary(BaseModel):
    """Minimal task representation for drill-down lists."""

    id: str
    title: str
    deadline: str
    subtasks_total: int
    subtasks_done: int


class SubtaskMetricsResponse(BaseModel):
    """Pace classification of incomplete tasks."""

    on_pace: int = Field(description="Incomplete tasks without overdue subtasks")
    behind: int = Field(description="Incomplete tasks with at least one overdue subtask")
    total: int = Field(description="Number of incomplete tasks")
    streak: int = Field(description="Recent timely subtask completions, capped at 30")
    on_pace_tasks: List[TaskSummary]
    behind_tasks: List[TaskSummary]


class TaskMetricsResponse(BaseModel):
    """Outcome counts across active and completed tasks."""

    completion_rate: float = Field(description="Percentage of tasks completed (0-100)")
    on_time: int = Field(description="Tasks completed on or before their deadline")
    overdue: int = Field(description="Late completions plus active tasks past their deadline")
    total: int = Field(description="Active plus completed tasks")


class AnalysisResponse(BaseModel):
    """Complete analysis dashboard data."""

    generated_at: datetime = Field(description="Reference time of the computation")
    subtask_metrics: SubtaskMetricsResponse
    task_metrics: TaskMetricsResponse


class CramRiskResponse(BaseModel):
    """Workload density over the selected window."""

    total_items: int = Field(description="Open items due inside the window")
    days_range: int = Field(description="Effective window length in days")
    avg_per_day: float
    max_due_date: Optional[datetime] = Field(default=None, description="Latest open deadline")
    was_range_limited: bool = Field(description="True when the latest deadline cut the window short")
    selected_days: int
    level: RiskLevel
