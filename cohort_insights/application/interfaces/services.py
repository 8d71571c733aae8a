"""Service interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cohort_insights.application.dtos.reports import ExportedReport, PortfolioReport


# Report exporter interface
class IReportExporter(Protocol):
    """Renders an assembled portfolio report and stores it somewhere retrievable."""

    async def export(self, report: PortfolioReport) -> ExportedReport:
        """Render and store the report; raise ReportExportException on failure."""
        ...
