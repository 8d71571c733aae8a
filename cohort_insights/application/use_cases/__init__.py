"""Application use cases (orchestration over ports and aggregation modules)."""

from cohort_insights.application.use_cases.analytics import (
    GetPortfolioAnalyticsUseCase,
    PortfolioSnapshot,
)
from cohort_insights.application.use_cases.dashboard import (
    GetPortfolioDashboardUseCase,
    GetRecentActivityUseCase,
)
from cohort_insights.application.use_cases.kpi_anomaly import (
    KpiThresholds,
    RunKpiAnomalyCheckUseCase,
)
from cohort_insights.application.use_cases.scheduled_reports import (
    GeneratePortfolioReportUseCase,
    parse_period_kind,
    report_period,
)

__all__ = [
    "GeneratePortfolioReportUseCase",
    "GetPortfolioAnalyticsUseCase",
    "GetPortfolioDashboardUseCase",
    "GetRecentActivityUseCase",
    "KpiThresholds",
    "PortfolioSnapshot",
    "RunKpiAnomalyCheckUseCase",
    "parse_period_kind",
    "report_period",
]
