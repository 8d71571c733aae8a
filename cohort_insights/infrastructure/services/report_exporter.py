"""Local filesystem report exporter: JSON rendering with atomic writes."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os
from pydantic import TypeAdapter

from cohort_insights.application.dtos.reports import ExportedReport, PortfolioReport
from cohort_insights.domain.exceptions import ReportExportException
from cohort_insights.shared.telemetry import get_logger

logger = get_logger(__name__)

SUPPORTED_FORMATS = ("JSON",)

_report_adapter: TypeAdapter[PortfolioReport] = TypeAdapter(PortfolioReport)


def render_report_json(report: PortfolioReport) -> bytes:
    """Serialize the report tree (dates as ISO strings, enums as values)."""
    return _report_adapter.dump_json(report, indent=2)


class LocalJsonReportExporter:
    """Writes reports under output_dir as <report_type>_<start>_<end>_<id>.json.

    Writes go to a temp file in the target directory and are renamed into
    place, so readers never see a partial report.
    """

    def __init__(self, output_dir: str, file_format: str = "JSON") -> None:
        self.output_dir = Path(output_dir).resolve()
        self.file_format = file_format.upper()

    def _target_path(self, report: PortfolioReport) -> Path:
        period = report.period
        name = (
            f"{period.report_type.lower()}_{period.start_date.isoformat()}_"
            f"{period.end_date.isoformat()}_{report.report_id}.json"
        )
        return self.output_dir / name

    async def export(self, report: PortfolioReport) -> ExportedReport:
        """Render and write the report; raise ReportExportException on failure."""
        if self.file_format not in SUPPORTED_FORMATS:
            raise ReportExportException(
                f"Unsupported report format: {self.file_format}", self.file_format
            )
        target = self._target_path(report)
        try:
            content = render_report_json(report)
            target.parent.mkdir(parents=True, exist_ok=True, mode=0o750)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=target.parent, prefix=".tmp_", suffix=".json"
            )
            os.close(temp_fd)
            try:
                async with aiofiles.open(temp_path, "wb") as f:
                    await f.write(content)
                os.chmod(temp_path, 0o640)
                await aiofiles.os.replace(temp_path, target)
            finally:
                if Path(temp_path).exists():
                    await aiofiles.os.remove(temp_path)
        except OSError as e:
            raise ReportExportException(
                f"Could not write report {report.report_id}: {e}", self.file_format
            ) from e
        logger.debug("Wrote %s (%d bytes)", target, len(content))
        return ExportedReport(
            reference=str(target),
            file_format=self.file_format,
            size_bytes=len(content),
        )
