"""Generate and export one periodic portfolio report outside the scheduler.

Usage:
    python -m scripts.run_portfolio_report [weekly|monthly|quarterly]
Defaults to weekly. Requires DATABASE_URL; writes under REPORT_OUTPUT_DIR.
"""

import asyncio
import sys

import cohort_insights.infrastructure.persistence.database as database
from cohort_insights.application.use_cases.scheduled_reports import parse_period_kind
from cohort_insights.core.config import get_settings
from cohort_insights.domain.exceptions import UnknownReportPeriodException
from cohort_insights.infrastructure.jobs import run_portfolio_report_job, sql_repositories
from cohort_insights.shared.telemetry import setup_logging


async def main() -> int:
    setup_logging()
    try:
        kind = parse_period_kind(sys.argv[1] if len(sys.argv) > 1 else "weekly")
    except UnknownReportPeriodException as e:
        print(e.message, file=sys.stderr)
        return 2
    if not database.is_sql_configured():
        print("DATABASE_URL is not set", file=sys.stderr)
        return 1
    try:
        result = await run_portfolio_report_job(kind, get_settings(), sql_repositories)
    finally:
        await database.dispose_engine()

    period = result.period
    if not result.succeeded:
        print(
            f"{period.report_type} {period.start_date}..{period.end_date} failed: "
            f"{result.error}",
            file=sys.stderr,
        )
        return 1
    assert result.exported is not None
    print(
        f"{period.report_type} {period.start_date}..{period.end_date} -> "
        f"{result.exported.reference} ({result.exported.size_bytes} bytes)"
    )
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
