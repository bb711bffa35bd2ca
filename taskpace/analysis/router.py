from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from taskpace.analysis.cram_risk import CRAM_RISK_DAY_OPTIONS
from taskpace.analysis.schemas import AnalysisResponse, CramRiskResponse
from taskpace.analysis.service import AnalysisService
from taskpace.auth.dependencies import CurrentUserId
from taskpace.dependencies import Clock, LocalZone
from taskpace.tasks.deadlines import InvalidDeadlineError
from taskpace.tasks.repository import TaskRepositoryInterface
from taskpace.tasks.router import get_task_repository


router = APIRouter(prefix="/analysis", tags=["Analysis"])


async def get_analysis_service(tz: LocalZone) -> AnalysisService:
    """Dependency to get analysis service instance."""
    return AnalysisService(tz=tz)


@router.get("", response_model=AnalysisResponse)
async def get_analysis(
    current_user_id: CurrentUserId,
    task_repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    analysis_service: Annotated[AnalysisService, Depends(get_analysis_service)],
    clock: Clock,
) -> AnalysisResponse:
    active_tasks = await task_repository.list_active(current_user_id)
    completed_tasks = await task_repository.list_completed(current_user_id)

    try:
        return analysis_service.generate(active_tasks, completed_tasks, clock())
    except InvalidDeadlineError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )


@router.get("/cram-risk", response_model=CramRiskResponse)
async def get_cram_risk(
    current_user_id: CurrentUserId,
    task_repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)],
    analysis_service: Annotated[AnalysisService, Depends(get_analysis_service)],
    clock: Clock,
    days: int = Query(default=7, description="Look-ahead window: 7, 14 or 30 days"),
) -> CramRiskResponse:
    if days not in CRAM_RISK_DAY_OPTIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"days must be one of {list(CRAM_RISK_DAY_OPTIONS)}",
        )

    active_tasks = await task_repository.list_active(current_user_id)
    try:
        return analysis_service.cram_risk(active_tasks, clock(), days)
    except InvalidDeadlineError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )
