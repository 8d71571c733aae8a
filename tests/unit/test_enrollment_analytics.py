"""Enrollment KPIs: totals, monthly growth, partner and program shares."""

from datetime import date

from cohort_insights.application.dtos.analytics import EnrollmentAnalytics
from cohort_insights.application.dtos.records import EnrollmentRecord
from cohort_insights.application.services.analytics import (
    compute_enrollment_analytics,
    monthly_growth,
)


def test_empty_input_returns_zero_dto() -> None:
    """No enrollments gives the all-zero DTO."""
    result = compute_enrollment_analytics([], [], [], [], [])
    assert result == EnrollmentAnalytics()
    assert result.total_enrollments == 0
    assert result.enrollment_growth == []


def test_growth_after_a_zero_month_is_100() -> None:
    """Growth after a zero month is 100."""
    series = monthly_growth([("2025-01", 0), ("2025-02", 5)])
    assert [g.growth_percentage for g in series] == [0.0, 100.0]


def test_growth_zero_after_zero_stays_zero() -> None:
    """Zero after zero is 0 growth."""
    series = monthly_growth([("2025-01", 0), ("2025-02", 0)])
    assert [g.growth_percentage for g in series] == [0.0, 0.0]


def test_growth_is_signed_month_over_month() -> None:
    """Growth is signed against the previous month."""
    series = monthly_growth([("2025-01", 4), ("2025-02", 6), ("2025-03", 3)])
    assert [(g.period, g.enrollments, g.growth_percentage) for g in series] == [
        ("2025-01", 4, 0.0),
        ("2025-02", 6, 50.0),
        ("2025-03", 3, -50.0),
    ]


def test_breakdowns_over_portfolio(portfolio_store) -> None:
    """Monthly, partner, program and cohort breakdowns over the fixture portfolio."""
    s = portfolio_store
    result = compute_enrollment_analytics(
        s.enrollments, s.participants, s.partners, s.cohorts, s.programs
    )
    assert result.total_enrollments == 4
    assert [(g.period, g.enrollments) for g in result.enrollment_growth] == [
        ("2025-01", 2),
        ("2025-02", 2),
    ]
    assert {(p.partner_id, p.total_enrollments, p.percentage) for p in result.enrollment_by_partner} == {
        ("p1", 2, 50.0),
        ("p2", 2, 50.0),
    }
    welding = next(p for p in result.enrollment_by_program if p.program_id == "prog1")
    assert welding.partner_name == "Acme Skills"
    assert welding.percentage == 50.0


def test_unresolved_chain_counts_in_total_only(portfolio_store) -> None:
    """Enrollments with missing relations count only in the total."""
    s = portfolio_store
    enrollments = s.enrollments + [
        EnrollmentRecord("ghost", "missing-participant", "co1", date(2025, 3, 2)),
        EnrollmentRecord("undated", "pa1", "missing-cohort"),
    ]
    result = compute_enrollment_analytics(
        enrollments, s.participants, s.partners, s.cohorts, s.programs
    )
    assert result.total_enrollments == 6
    by_partner = {p.partner_id: p for p in result.enrollment_by_partner}
    assert by_partner["p1"].total_enrollments == 3
    assert by_partner["p1"].percentage == 50.0
    by_program = {p.program_id: p for p in result.enrollment_by_program}
    assert by_program["prog1"].total_enrollments == 3
    assert sum(g.enrollments for g in result.enrollment_growth) == 5
    assert result.enrollment_by_program[0].program_id == "prog1"
