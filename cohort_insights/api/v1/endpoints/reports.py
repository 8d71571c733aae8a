"""Report preview endpoint. Assembles a periodic report without exporting it."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from cohort_insights.api.v1.dependencies import get_report_use_case
from cohort_insights.application.dtos.reports import PortfolioReport
from cohort_insights.application.use_cases.scheduled_reports import (
    GeneratePortfolioReportUseCase,
    parse_period_kind,
)

router = APIRouter()


@router.get("/{period}/preview", response_model=PortfolioReport)
async def preview_report(
    period: str,
    use_case: Annotated[GeneratePortfolioReportUseCase, Depends(get_report_use_case)],
    as_of: date | None = Query(
        None, description="Run date the period is computed from (defaults to today)"
    ),
) -> PortfolioReport:
    """Preview the weekly, monthly or quarterly report as of the given date.

    Unknown periods return 400 UNKNOWN_REPORT_PERIOD.
    """
    kind = parse_period_kind(period)
    return await use_case.preview(kind=kind, today=as_of)
