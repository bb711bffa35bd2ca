"""
TASKPACE API - Analysis Service

Turns metric results into dashboard responses.
This is a deterministic, side-effect free computation.
"""

from datetime import datetime, timezone, tzinfo
from typing import List

from taskpace.analysis.cram_risk import compute_cram_risk
from taskpace.analysis.metrics import generate_analysis
from taskpace.analysis.schemas import (
    AnalysisResponse,
    CramRiskResponse,
    SubtaskMetricsResponse,
    TaskMetricsResponse,
    TaskSummary,
)
from taskpace.tasks.models import CompletedTask, Task


class AnalysisService:
    """
    Service for computing dashboard analytics.

    All computations are read-only and take "now" as an argument.
    """

    def __init__(self, tz: tzinfo = timezone.utc):
        self.tz = tz

    def _task_to_summary(self, task: Task) -> TaskSummary:
        return TaskSummary(
            id=task.id,
            title=task.title,
            deadline=task.deadline,
            subtasks_total=len(task.subtasks),
            subtasks_done=sum(1 for s in task.subtasks if s.done),
        )

    def generate(
        self,
        active_tasks: List[Task],
        completed_tasks: List[CompletedTask],
        now: datetime,
    ) -> AnalysisResponse:
        """
        Generate pace and outcome metrics.

        Args:
            active_tasks: Incomplete tasks (should be user-scoped)
            completed_tasks: Completed tasks (disjoint from active_tasks); expired ones are skipped
            now: Reference time for calculations
        """
        # Completed tasks past their retention window no longer count
        completed_tasks = [t for t in completed_tasks if not t.is_expired(now)]
        data = generate_analysis(active_tasks, completed_tasks, now, self.tz)
        pace = data.subtask_metrics
        outcome = data.task_metrics

        return AnalysisResponse(
            generated_at=now,
            subtask_metrics=SubtaskMetricsResponse(
                on_pace=pace.on_pace,
                behind=pace.behind,
                total=pace.total,
                streak=pace.streak,
                on_pace_tasks=[self._task_to_summary(t) for t in pace.on_pace_tasks],
                behind_tasks=[self._task_to_summary(t) for t in pace.behind_tasks],
            ),
            task_metrics=TaskMetricsResponse(
                completion_rate=outcome.completion_rate,
                on_time=outcome.on_time,
                overdue=outcome.overdue,
                total=outcome.total,
            ),
        )

    def cram_risk(self, active_tasks: List[Task], now: datetime, days: int) -> CramRiskResponse:
        risk = compute_cram_risk(active_tasks, now, days, self.tz)
        return CramRiskResponse(
            total_items=risk.total_items,
            days_range=risk.days_range,
            avg_per_day=risk.avg_per_day,
            max_due_date=risk.max_due_date,
            was_range_limited=risk.was_range_limited,
            selected_days=risk.selected_days,
            level=risk.level,
        )
