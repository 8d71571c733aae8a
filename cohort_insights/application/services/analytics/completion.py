"""Completion and dropout metrics over all enrollments."""

from __future__ import annotations

from collections.abc import Sequence

from cohort_insights.application.dtos.analytics import (
    CompletionMetrics,
    DropoutReasonGroup,
)
from cohort_insights.application.dtos.records import EnrollmentRecord
from cohort_insights.application.services.analytics._common import (
    NOT_SPECIFIED,
    clean_label,
    percentage,
)
from cohort_insights.domain.enums import EnrollmentStatus

_ACTIVE_STATUSES = (EnrollmentStatus.ACTIVE, EnrollmentStatus.ENROLLED)


def compute_completion_metrics(
    enrollments: Sequence[EnrollmentRecord],
) -> CompletionMetrics:
    """Completion, dropout and active rates plus a dropout-reason histogram.

    Rates use the total enrollment count as denominator. Reason percentages
    use the dropped-out count. WITHDRAWN enrollments count only in the total,
    so the three rates may sum to less than 100.
    """
    total = len(enrollments)
    if total == 0:
        return CompletionMetrics()

    completed = 0
    active = 0
    reasons: dict[str, int] = {}
    for enrollment in enrollments:
        if enrollment.status == EnrollmentStatus.COMPLETED:
            completed += 1
        elif enrollment.status in _ACTIVE_STATUSES:
            active += 1
        elif enrollment.status == EnrollmentStatus.DROPPED_OUT:
            reason = clean_label(enrollment.dropout_reason) or NOT_SPECIFIED
            reasons[reason] = reasons.get(reason, 0) + 1

    dropped_out = sum(reasons.values())
    histogram = [
        DropoutReasonGroup(reason, count, percentage(count, dropped_out))
        for reason, count in reasons.items()
    ]
    histogram.sort(key=lambda group: group.count, reverse=True)

    return CompletionMetrics(
        completion_rate=percentage(completed, total),
        dropout_rate=percentage(dropped_out, total),
        active_rate=percentage(active, total),
        total_completed=completed,
        total_dropped_out=dropped_out,
        total_active=active,
        total_enrollments=total,
        dropout_reasons=histogram,
    )
