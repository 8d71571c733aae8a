"""Participant demographics: gender, disability status, education level."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cohort_insights.application.dtos.analytics import (
    CategoryBreakdown,
    DemographicAnalytics,
)
from cohort_insights.application.dtos.records import ParticipantRecord
from cohort_insights.application.services.analytics._common import (
    clean_label,
    percentage,
)


def _breakdown(values: Iterable[str | None], total: int) -> list[CategoryBreakdown]:
    # None is excluded, not bucketed; percentages still use the full total.
    counts: dict[str, int] = {}
    for value in values:
        if value is not None:
            counts[value] = counts.get(value, 0) + 1
    entries = [
        CategoryBreakdown(value, count, percentage(count, total))
        for value, count in counts.items()
    ]
    entries.sort(key=lambda entry: entry.count, reverse=True)
    return entries


def compute_demographics(
    participants: Sequence[ParticipantRecord],
) -> DemographicAnalytics:
    total = len(participants)
    if total == 0:
        return DemographicAnalytics()
    return DemographicAnalytics(
        total_participants=total,
        gender_breakdown=_breakdown((p.gender for p in participants), total),
        disability_breakdown=_breakdown(
            (p.disability_status for p in participants), total
        ),
        education_breakdown=_breakdown(
            (clean_label(p.education_level) for p in participants), total
        ),
    )
