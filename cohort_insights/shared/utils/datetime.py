"""
UTC datetime utilities for consistent timezone handling.

All persisted timestamps are timezone-aware UTC. Calendar logic (report
periods, stagnation windows, schedule rules) works on dates in the
scheduler timezone.
"""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of datetime.now() or datetime.utcnow().

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Use at repository boundaries to normalize datetimes.

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def today_in(tz: ZoneInfo | None = None) -> date:
    """Return today's date in the given timezone (UTC when omitted)."""
    return datetime.now(tz or UTC).date()


def whole_days_between(start: datetime, end: datetime) -> int:
    """
    Whole days elapsed from start to end, truncated toward zero.

    Naive values are treated as UTC. A submission 36 hours after creation
    counts as 1 day; one 36 hours before counts as -1.
    """
    delta = ensure_utc(end) - ensure_utc(start)  # type: ignore[operator]
    seconds = delta.total_seconds()
    days = int(abs(seconds) // 86400)
    return days if seconds >= 0 else -days
