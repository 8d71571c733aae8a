"""Scheduled portfolio reports: calendar periods, assembly and export."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from cohort_insights.application.dtos.reports import (
    PortfolioReport,
    ReportPeriod,
    ReportRunResult,
)
from cohort_insights.application.use_cases.analytics import PortfolioSnapshot
from cohort_insights.domain.exceptions import UnknownReportPeriodException
from cohort_insights.shared.enums import ReportPeriodKind
from cohort_insights.shared.telemetry import get_logger, traced
from cohort_insights.shared.utils import generate_cuid, today_in, utc_now

if TYPE_CHECKING:
    from cohort_insights.application.interfaces.repositories import IRecordStore
    from cohort_insights.application.interfaces.services import IReportExporter

logger = get_logger(__name__)


def parse_period_kind(value: str) -> ReportPeriodKind:
    """Parse weekly/monthly/quarterly (case-insensitive)."""
    try:
        return ReportPeriodKind(value.strip().lower())
    except ValueError as e:
        raise UnknownReportPeriodException(value) from e


def _quarter_start(day: date) -> date:
    return date(day.year, 3 * ((day.month - 1) // 3) + 1, 1)


def report_period(kind: ReportPeriodKind, today: date) -> ReportPeriod:
    """Period a report run on today covers.

    weekly: the 7 days ending yesterday. monthly: the previous calendar month.
    quarterly: the previous calendar quarter.
    """
    if kind == ReportPeriodKind.WEEKLY:
        end = today - timedelta(days=1)
        return ReportPeriod(kind, end - timedelta(days=6), end)
    if kind == ReportPeriodKind.MONTHLY:
        end = today.replace(day=1) - timedelta(days=1)
        return ReportPeriod(kind, end.replace(day=1), end)
    end = _quarter_start(today) - timedelta(days=1)
    return ReportPeriod(kind, _quarter_start(end), end)


class GeneratePortfolioReportUseCase:
    """Builds a comprehensive portfolio report and hands it to the exporter."""

    def __init__(
        self,
        record_store: IRecordStore,
        exporter: IReportExporter,
        timezone: ZoneInfo | None = None,
    ) -> None:
        self._store = record_store
        self._exporter = exporter
        self._timezone = timezone

    async def assemble(self, period: ReportPeriod, today: date) -> PortfolioReport:
        """Compute every report section from one record snapshot."""
        snapshot = await PortfolioSnapshot.load(self._store)
        return PortfolioReport(
            report_id=generate_cuid(),
            period=period,
            generated_at=utc_now(),
            enrollment=snapshot.enrollment(),
            completion=snapshot.completion(),
            employment=snapshot.employment(),
            longitudinal=snapshot.longitudinal(today),
            demographics=snapshot.demographics(),
            regional=snapshot.regional(),
            survey_impact=snapshot.survey_impact(),
        )

    @traced("scheduled_report.preview")
    async def preview(
        self, *, kind: ReportPeriodKind, today: date | None = None
    ) -> PortfolioReport:
        """Assemble without exporting."""
        today = today or today_in(self._timezone)
        return await self.assemble(report_period(kind, today), today)

    @traced("scheduled_report.run")
    async def run(
        self, *, kind: ReportPeriodKind, today: date | None = None
    ) -> ReportRunResult:
        """Assemble and export one report; never raises.

        Returns:
            ReportRunResult with the export reference, or the error message.
        """
        today = today or today_in(self._timezone)
        period = report_period(kind, today)
        logger.info(
            "Generating %s for %s..%s",
            period.report_type,
            period.start_date.isoformat(),
            period.end_date.isoformat(),
        )
        report_id: str | None = None
        try:
            report = await self.assemble(period, today)
            report_id = report.report_id
            exported = await self._exporter.export(report)
        except Exception as e:
            logger.exception("Scheduled %s failed", period.report_type)
            return ReportRunResult(period=period, report_id=report_id, error=str(e))
        logger.info(
            "%s %s exported to %s (%d bytes)",
            period.report_type,
            report_id,
            exported.reference,
            exported.size_bytes,
        )
        return ReportRunResult(period=period, report_id=report_id, exported=exported)
