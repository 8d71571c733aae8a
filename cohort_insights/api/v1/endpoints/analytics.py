"""Portfolio analytics endpoints: one route per aggregation module."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from cohort_insights.api.v1.dependencies import get_analytics_use_case
from cohort_insights.application.dtos.analytics import (
    CompletionMetrics,
    DemographicAnalytics,
    EmploymentAnalytics,
    EnrollmentAnalytics,
    LongitudinalImpact,
    RegionalAnalytics,
    SurveyImpactSummary,
)
from cohort_insights.application.use_cases.analytics import (
    GetPortfolioAnalyticsUseCase,
)
from cohort_insights.core.config import get_settings
from cohort_insights.shared.utils import today_in

router = APIRouter()

AnalyticsDep = Annotated[GetPortfolioAnalyticsUseCase, Depends(get_analytics_use_case)]


@router.get("/enrollments", response_model=EnrollmentAnalytics)
async def get_enrollment_analytics(use_case: AnalyticsDep) -> EnrollmentAnalytics:
    """Totals, month-over-month growth, and enrollment share by partner and program."""
    return await use_case.enrollment()


@router.get("/completion", response_model=CompletionMetrics)
async def get_completion_metrics(use_case: AnalyticsDep) -> CompletionMetrics:
    return await use_case.completion()


@router.get("/employment", response_model=EmploymentAnalytics)
async def get_employment_analytics(use_case: AnalyticsDep) -> EmploymentAnalytics:
    """Employment rate over completed enrollments, by partner and cohort, plus internship conversion."""
    return await use_case.employment()


@router.get("/longitudinal", response_model=LongitudinalImpact)
async def get_longitudinal_impact(
    use_case: AnalyticsDep,
    as_of: date | None = Query(
        None, description="Reference date for survey ages (defaults to today)"
    ),
) -> LongitudinalImpact:
    today = as_of or today_in(get_settings().timezone)
    return await use_case.longitudinal(today=today)


@router.get("/demographics", response_model=DemographicAnalytics)
async def get_demographics(use_case: AnalyticsDep) -> DemographicAnalytics:
    return await use_case.demographics()


@router.get("/regions", response_model=RegionalAnalytics)
async def get_regional_analytics(use_case: AnalyticsDep) -> RegionalAnalytics:
    """Center, region and country rollups."""
    return await use_case.regional()


@router.get("/surveys", response_model=SurveyImpactSummary)
async def get_survey_impact(use_case: AnalyticsDep) -> SurveyImpactSummary:
    return await use_case.survey_impact()
