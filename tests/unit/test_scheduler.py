"""Calendar rules and the asyncio job scheduler."""

import asyncio
from datetime import UTC, datetime
from unittest.mock import AsyncMock
from zoneinfo import ZoneInfo

import pytest

from cohort_insights.domain.exceptions import ResourceNotFoundException
from cohort_insights.infrastructure.services.scheduler import (
    JobScheduler,
    ScheduledJob,
    ScheduleRule,
    daily,
    monthly,
    weekly,
    yearly_months,
)


@pytest.mark.parametrize(
    ("rule", "after", "expected"),
    [
        # Sunday noon -> Monday 08:00
        (weekly(0, 8), datetime(2025, 3, 9, 12, tzinfo=UTC), datetime(2025, 3, 10, 8, tzinfo=UTC)),
        # exactly at fire time -> the following week
        (weekly(0, 8), datetime(2025, 3, 10, 8, tzinfo=UTC), datetime(2025, 3, 17, 8, tzinfo=UTC)),
        (monthly(1, 9), datetime(2025, 1, 31, 23, tzinfo=UTC), datetime(2025, 2, 1, 9, tzinfo=UTC)),
        (
            yearly_months({1, 4, 7, 10}, 1, 10),
            datetime(2025, 1, 2, tzinfo=UTC),
            datetime(2025, 4, 1, 10, tzinfo=UTC),
        ),
        (daily(6), datetime(2025, 3, 10, 5, 59, tzinfo=UTC), datetime(2025, 3, 10, 6, tzinfo=UTC)),
    ],
)
def test_next_fire_time(rule: ScheduleRule, after: datetime, expected: datetime) -> None:
    """Next fire time for daily, weekly, monthly and quarterly rules."""
    assert rule.next_fire_time(after) == expected


def test_next_fire_time_in_timezone() -> None:
    """Fire times are computed in the scheduler timezone."""
    nairobi = ZoneInfo("Africa/Nairobi")
    fire = daily(6).next_fire_time(datetime(2025, 3, 10, 2, tzinfo=UTC), nairobi)
    assert fire.astimezone(UTC) == datetime(2025, 3, 10, 3, tzinfo=UTC)


def test_invalid_rules() -> None:
    """Invalid times and rules that never fire raise ValueError."""
    with pytest.raises(ValueError):
        ScheduleRule(hour=24)
    with pytest.raises(ValueError):
        yearly_months({2}, 31, 9).next_fire_time(datetime(2025, 1, 1, tzinfo=UTC))


def test_duplicate_job_names_rejected() -> None:
    """Two jobs with the same name are rejected."""
    job = ScheduledJob("kpi", daily(6), AsyncMock())
    with pytest.raises(ValueError):
        JobScheduler([job, job])


async def test_tick_sleeps_until_due_and_runs_each_fire_once() -> None:
    """tick sleeps until the next fire and runs each due job once."""
    now = datetime(2025, 3, 10, 5, 0, tzinfo=UTC)
    sleep = AsyncMock()
    kpi = AsyncMock()
    report = AsyncMock()
    scheduler = JobScheduler(
        [
            ScheduledJob("kpi", daily(6), kpi),
            ScheduledJob("report", weekly(0, 8), report),
        ],
        clock=lambda: now,
        sleep=sleep,
    )

    assert await scheduler.tick() == ["kpi"]
    sleep.assert_awaited_once_with(3600.0)
    kpi.assert_awaited_once()
    report.assert_not_awaited()

    # Clock has not moved; the next tick must not re-run the 06:00 fire.
    assert await scheduler.tick() == ["report"]
    assert sleep.await_args.args[0] == 3 * 3600.0
    assert kpi.await_count == 1

    assert await scheduler.tick() == ["kpi"]
    assert kpi.await_count == 2


async def test_failing_job_is_logged_and_loop_continues(caplog) -> None:
    """A failing job is logged and the scheduler keeps going."""
    now = datetime(2025, 3, 10, 5, 0, tzinfo=UTC)
    broken = AsyncMock(side_effect=RuntimeError("boom"))
    scheduler = JobScheduler(
        [ScheduledJob("broken", daily(6), broken)], clock=lambda: now, sleep=AsyncMock()
    )
    assert await scheduler.run_job("broken") is False
    assert await scheduler.tick() == ["broken"]
    assert broken.await_count == 2
    assert "Scheduled job broken failed" in caplog.text


async def test_next_runs() -> None:
    """next_runs gives the next fire time per job."""
    now = datetime(2025, 3, 10, 7, 0, tzinfo=UTC)
    scheduler = JobScheduler(
        [ScheduledJob("report", weekly(0, 8), AsyncMock())], clock=lambda: now
    )
    assert scheduler.next_runs() == {"report": datetime(2025, 3, 10, 8, tzinfo=UTC)}


async def test_start_and_stop() -> None:
    """start runs the loop task and stop cancels it."""
    scheduler = JobScheduler([ScheduledJob("kpi", daily(6), AsyncMock())])
    scheduler.start()
    await asyncio.sleep(0)
    assert scheduler.running
    await scheduler.stop()
    assert not scheduler.running


async def test_run_unknown_job_raises() -> None:
    """Running an unknown job raises ResourceNotFoundException."""
    scheduler = JobScheduler([ScheduledJob("kpi", daily(6), AsyncMock())])
    with pytest.raises(ResourceNotFoundException):
        await scheduler.run_job("nightly")
