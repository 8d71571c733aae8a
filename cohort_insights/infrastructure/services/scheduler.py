"""Calendar-rule job scheduler on a single asyncio task.

Jobs run one at a time and each run is awaited to completion before the
next fire time is computed, so a job never overlaps its own next run. Fire
times missed while a job was running are skipped, not queued. A failing job
is logged and the loop keeps going.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Any
from zoneinfo import ZoneInfo

from cohort_insights.domain.exceptions import ResourceNotFoundException
from cohort_insights.shared.telemetry import get_logger
from cohort_insights.shared.utils.datetime import utc_now

logger = get_logger(__name__)

# Four years covers every satisfiable rule, Feb 29 included.
_SEARCH_DAYS = 366 * 4 + 1


@dataclass(frozen=True)
class ScheduleRule:
    """Fires at hour:minute on days matching every given constraint.

    weekdays use date.weekday() numbering (Monday is 0). None means any.
    """

    hour: int
    minute: int = 0
    weekdays: frozenset[int] | None = None
    days_of_month: frozenset[int] | None = None
    months: frozenset[int] | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise ValueError(f"Invalid time {self.hour:02d}:{self.minute:02d}")

    def matches(self, day: date) -> bool:
        if self.weekdays is not None and day.weekday() not in self.weekdays:
            return False
        if self.days_of_month is not None and day.day not in self.days_of_month:
            return False
        if self.months is not None and day.month not in self.months:
            return False
        return True

    def next_fire_time(self, after: datetime, tz: ZoneInfo | None = None) -> datetime:
        """First fire time strictly after `after`, as an aware datetime in tz."""
        zone = tz or UTC
        local = after.astimezone(zone)
        day = local.date()
        for _ in range(_SEARCH_DAYS):
            if self.matches(day):
                fire = datetime.combine(day, time(self.hour, self.minute), tzinfo=zone)
                if fire > local:
                    return fire
            day += timedelta(days=1)
        raise ValueError(f"Schedule rule never fires: {self!r}")


def daily(hour: int, minute: int = 0) -> ScheduleRule:
    return ScheduleRule(hour, minute)


def weekly(weekday: int, hour: int, minute: int = 0) -> ScheduleRule:
    return ScheduleRule(hour, minute, weekdays=frozenset({weekday}))


def monthly(day: int, hour: int, minute: int = 0) -> ScheduleRule:
    return ScheduleRule(hour, minute, days_of_month=frozenset({day}))


def yearly_months(
    months: set[int], day: int, hour: int, minute: int = 0
) -> ScheduleRule:
    return ScheduleRule(
        hour, minute, days_of_month=frozenset({day}), months=frozenset(months)
    )


@dataclass(frozen=True)
class ScheduledJob:
    name: str
    rule: ScheduleRule
    func: Callable[[], Awaitable[Any]]


class JobScheduler:
    """Runs ScheduledJobs at their rule's fire times in the given timezone."""

    def __init__(
        self,
        jobs: list[ScheduledJob],
        timezone: ZoneInfo | None = None,
        *,
        clock: Callable[[], datetime] = utc_now,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        names = [job.name for job in jobs]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate job names: {names}")
        self._jobs = {job.name: job for job in jobs}
        self._timezone = timezone
        self._clock = clock
        self._sleep = sleep
        self._last_fire: dict[str, datetime] = {}
        self._task: asyncio.Task[None] | None = None

    @property
    def job_names(self) -> list[str]:
        return list(self._jobs)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def next_runs(self) -> dict[str, datetime]:
        """Next fire time per job, from the current clock."""
        now = self._clock()
        result: dict[str, datetime] = {}
        for name, job in self._jobs.items():
            after = max(now, self._last_fire.get(name, now))
            result[name] = job.rule.next_fire_time(after, self._timezone)
        return result

    async def run_job(self, name: str) -> bool:
        """Run one job now. Returns False if it raised (the error is logged).

        Raises:
            ResourceNotFoundException: No job with that name.
        """
        job = self._jobs.get(name)
        if job is None:
            raise ResourceNotFoundException("ScheduledJob", name)
        logger.info("Running scheduled job %s", name)
        try:
            await job.func()
        except Exception:
            logger.exception("Scheduled job %s failed", name)
            return False
        return True

    async def tick(self) -> list[str]:
        """Sleep until the earliest next fire time, then run every job due then."""
        upcoming = self.next_runs()
        fire_at = min(upcoming.values())
        delay = (fire_at - self._clock()).total_seconds()
        if delay > 0:
            await self._sleep(delay)
        due = [name for name, at in upcoming.items() if at == fire_at]
        for name in due:
            self._last_fire[name] = fire_at
            await self.run_job(name)
        return due

    async def run_forever(self) -> None:
        logger.info("Scheduler started with jobs: %s", ", ".join(self._jobs))
        while True:
            await self.tick()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self.run_forever(), name="job-scheduler")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Scheduler stopped")
