"""Run one KPI anomaly check pass outside the scheduler.

Usage:
    python -m scripts.run_kpi_anomaly_check
Requires DATABASE_URL. Alerts are written as notifications to every active
portfolio user, with one audit row per alert type.
"""

import asyncio
import sys

import cohort_insights.infrastructure.persistence.database as database
from cohort_insights.core.config import get_settings
from cohort_insights.infrastructure.jobs import run_kpi_anomaly_job, sql_repositories
from cohort_insights.shared.telemetry import setup_logging


async def main() -> int:
    setup_logging()
    settings = get_settings()
    if not database.is_sql_configured():
        print("DATABASE_URL is not set", file=sys.stderr)
        return 1
    try:
        result = await run_kpi_anomaly_job(settings, sql_repositories)
    finally:
        await database.dispose_engine()

    if result.skipped_reason:
        print(f"Skipped: {result.skipped_reason}")
        return 0
    print(f"Recipients: {result.recipients}")
    for alert in result.raised:
        print(f"Raised {alert.alert_type.value}: {alert.message}")
    for alert_type in result.suppressed:
        print(f"Suppressed {alert_type.value} (already alerted today)")
    if result.failed_checks:
        print(f"Failed checks: {', '.join(result.failed_checks)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
