"""Shared utilities: datetime and id generators."""

from cohort_insights.shared.utils.datetime import (
    ensure_utc,
    today_in,
    utc_now,
    whole_days_between,
)
from cohort_insights.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "today_in",
    "whole_days_between",
]
