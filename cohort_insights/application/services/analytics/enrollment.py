"""Enrollment KPIs: totals, monthly growth, partner and program breakdowns."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cohort_insights.application.dtos.analytics import (
    EnrollmentAnalytics,
    EnrollmentByPartner,
    EnrollmentByProgram,
    EnrollmentGrowth,
)
from cohort_insights.application.dtos.records import (
    CohortRecord,
    EnrollmentRecord,
    ParticipantRecord,
    PartnerRecord,
    ProgramRecord,
)
from cohort_insights.application.services.analytics._common import (
    index_by_id,
    percentage,
)


def monthly_growth(buckets: Iterable[tuple[str, int]]) -> list[EnrollmentGrowth]:
    """Growth series over chronologically ordered (YYYY-MM, count) buckets.

    The first bucket has growth 0. A bucket following a zero bucket has growth
    100 when it has any enrollments.
    """
    series: list[EnrollmentGrowth] = []
    previous: int | None = None
    for period, count in buckets:
        if previous is None:
            growth = 0.0
        elif previous == 0:
            growth = 100.0 if count > 0 else 0.0
        else:
            growth = percentage(count - previous, previous)
        series.append(EnrollmentGrowth(period, count, growth))
        previous = count
    return series


def _month_buckets(enrollments: Iterable[EnrollmentRecord]) -> list[tuple[str, int]]:
    counts: dict[str, int] = {}
    for enrollment in enrollments:
        if enrollment.enrollment_date is None:
            continue
        d = enrollment.enrollment_date
        key = f"{d.year:04d}-{d.month:02d}"
        counts[key] = counts.get(key, 0) + 1
    return sorted(counts.items())


def compute_enrollment_analytics(
    enrollments: Sequence[EnrollmentRecord],
    participants: Iterable[ParticipantRecord],
    partners: Iterable[PartnerRecord],
    cohorts: Iterable[CohortRecord],
    programs: Iterable[ProgramRecord],
) -> EnrollmentAnalytics:
    """Portfolio enrollment totals, growth series and breakdowns.

    Partner is resolved Enrollment -> Participant -> Partner; program is
    resolved Enrollment -> Cohort -> Program. Enrollments whose chain does not
    resolve are left out of that breakdown only.
    """
    total = len(enrollments)
    if total == 0:
        return EnrollmentAnalytics()

    participant_by_id = index_by_id(participants)
    partner_by_id = index_by_id(partners)
    cohort_by_id = index_by_id(cohorts)
    program_by_id = index_by_id(programs)

    partner_counts: dict[str, int] = {}
    program_counts: dict[str, int] = {}
    for enrollment in enrollments:
        participant = participant_by_id.get(enrollment.participant_id)
        if participant is not None and participant.partner_id in partner_by_id:
            partner_counts[participant.partner_id] = (
                partner_counts.get(participant.partner_id, 0) + 1
            )
        cohort = cohort_by_id.get(enrollment.cohort_id)
        if cohort is not None and cohort.program_id in program_by_id:
            program_counts[cohort.program_id] = (
                program_counts.get(cohort.program_id, 0) + 1
            )

    by_partner = [
        EnrollmentByPartner(
            partner_id=partner_id,
            partner_name=partner_by_id[partner_id].name,
            total_enrollments=count,
            percentage=percentage(count, total),
        )
        for partner_id, count in partner_counts.items()
    ]
    by_partner.sort(key=lambda entry: entry.total_enrollments, reverse=True)

    by_program: list[EnrollmentByProgram] = []
    for program_id, count in program_counts.items():
        program = program_by_id[program_id]
        owner = partner_by_id.get(program.partner_id)
        by_program.append(
            EnrollmentByProgram(
                program_id=program_id,
                program_name=program.name,
                partner_id=owner.id if owner else None,
                partner_name=owner.name if owner else None,
                total_enrollments=count,
                percentage=percentage(count, total),
            )
        )
    by_program.sort(key=lambda entry: entry.total_enrollments, reverse=True)

    return EnrollmentAnalytics(
        total_enrollments=total,
        enrollment_growth=monthly_growth(_month_buckets(enrollments)),
        enrollment_by_partner=by_partner,
        enrollment_by_program=by_program,
    )
