"""Portfolio dashboard and recent activity endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from cohort_insights.api.v1.dependencies import (
    get_dashboard_use_case,
    get_recent_activity_use_case,
)
from cohort_insights.application.dtos.dashboard import (
    PortfolioDashboard,
    RecentActivity,
)
from cohort_insights.application.use_cases.dashboard import (
    GetPortfolioDashboardUseCase,
    GetRecentActivityUseCase,
)

router = APIRouter()


@router.get("/dashboard", response_model=PortfolioDashboard)
async def get_dashboard(
    use_case: Annotated[GetPortfolioDashboardUseCase, Depends(get_dashboard_use_case)],
) -> PortfolioDashboard:
    """Headline totals, completion and employment KPIs, recent activity and alert counts."""
    return await use_case.execute()


@router.get("/activity", response_model=list[RecentActivity])
async def get_recent_activity(
    use_case: Annotated[GetRecentActivityUseCase, Depends(get_recent_activity_use_case)],
    limit: int = Query(20, ge=1, le=200),
) -> list[RecentActivity]:
    return await use_case.execute(limit)
