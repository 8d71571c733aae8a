"""Employment outcomes for completed enrollments and internship conversion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cohort_insights.application.dtos.analytics import (
    EmploymentAnalytics,
    EmploymentByCohort,
    EmploymentByPartner,
    InternshipConversion,
)
from cohort_insights.application.dtos.records import (
    CohortRecord,
    EmploymentOutcomeRecord,
    EnrollmentRecord,
    InternshipRecord,
    ParticipantRecord,
    PartnerRecord,
    ProgramRecord,
)
from cohort_insights.application.services.analytics._common import (
    group_by,
    index_by_id,
    percentage,
)
from cohort_insights.domain.enums import EnrollmentStatus, InternshipStatus


def _internship_conversion(
    internships: Iterable[InternshipRecord],
    outcomes_by_enrollment: dict[str, list[EmploymentOutcomeRecord]],
) -> InternshipConversion:
    completed = [i for i in internships if i.status == InternshipStatus.COMPLETED]
    converted = 0
    for internship in completed:
        for outcome in outcomes_by_enrollment.get(internship.enrollment_id, []):
            # An outcome with no internship reference also counts.
            if outcome.is_employed and outcome.internship_id in (None, internship.id):
                converted += 1
                break
    return InternshipConversion(
        total_completed_internships=len(completed),
        internships_converted_to_employment=converted,
        conversion_rate=percentage(converted, len(completed)),
    )


def _cohort_sort_key(entry: EmploymentByCohort) -> tuple[bool, int]:
    end = entry.cohort_end_date
    return (end is None, -end.toordinal() if end is not None else 0)


def compute_employment_analytics(
    enrollments: Iterable[EnrollmentRecord],
    outcomes: Iterable[EmploymentOutcomeRecord],
    internships: Iterable[InternshipRecord],
    participants: Iterable[ParticipantRecord],
    partners: Iterable[PartnerRecord],
    cohorts: Iterable[CohortRecord],
    programs: Iterable[ProgramRecord],
) -> EmploymentAnalytics:
    """Employment rate over completed enrollments, overall and per partner/cohort.

    An enrollment counts as employed when at least one of its outcomes is
    EMPLOYED or SELF_EMPLOYED, so no rate can exceed 100.
    """
    completed: Sequence[EnrollmentRecord] = [
        e for e in enrollments if e.status == EnrollmentStatus.COMPLETED
    ]
    outcomes_by_enrollment = group_by(outcomes, lambda o: o.enrollment_id)
    conversion = _internship_conversion(internships, outcomes_by_enrollment)

    if not completed:
        return EmploymentAnalytics(internship_conversion=conversion)

    employed_ids = {
        enrollment_id
        for enrollment_id, items in outcomes_by_enrollment.items()
        if any(o.is_employed for o in items)
    }
    participant_by_id = index_by_id(participants)
    partner_by_id = index_by_id(partners)
    cohort_by_id = index_by_id(cohorts)
    program_by_id = index_by_id(programs)

    by_partner: dict[str, list[int]] = {}
    by_cohort: dict[str, list[int]] = {}
    total_employed = 0
    for enrollment in completed:
        employed = 1 if enrollment.id in employed_ids else 0
        total_employed += employed

        participant = participant_by_id.get(enrollment.participant_id)
        if participant is not None and participant.partner_id in partner_by_id:
            tally = by_partner.setdefault(participant.partner_id, [0, 0])
            tally[0] += 1
            tally[1] += employed

        if enrollment.cohort_id in cohort_by_id:
            tally = by_cohort.setdefault(enrollment.cohort_id, [0, 0])
            tally[0] += 1
            tally[1] += employed

    partner_entries = [
        EmploymentByPartner(
            partner_id=partner_id,
            partner_name=partner_by_id[partner_id].name,
            total_completed_enrollments=done,
            total_employed=employed,
            employment_rate=percentage(employed, done),
        )
        for partner_id, (done, employed) in by_partner.items()
    ]
    partner_entries.sort(key=lambda entry: entry.employment_rate, reverse=True)

    cohort_entries: list[EmploymentByCohort] = []
    for cohort_id, (done, employed) in by_cohort.items():
        cohort = cohort_by_id[cohort_id]
        program = program_by_id.get(cohort.program_id)
        partner = partner_by_id.get(program.partner_id) if program else None
        cohort_entries.append(
            EmploymentByCohort(
                cohort_id=cohort.id,
                cohort_name=cohort.name,
                program_id=program.id if program else None,
                program_name=program.name if program else None,
                partner_id=partner.id if partner else None,
                partner_name=partner.name if partner else None,
                cohort_start_date=cohort.start_date,
                cohort_end_date=cohort.end_date,
                total_completed_enrollments=done,
                total_employed=employed,
                employment_rate=percentage(employed, done),
            )
        )
    cohort_entries.sort(key=_cohort_sort_key)

    return EmploymentAnalytics(
        overall_employment_rate=percentage(total_employed, len(completed)),
        total_completed_enrollments=len(completed),
        total_employed=total_employed,
        employment_by_partner=partner_entries,
        employment_by_cohort=cohort_entries,
        internship_conversion=conversion,
    )
