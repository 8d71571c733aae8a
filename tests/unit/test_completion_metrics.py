"""Completion and dropout metrics."""

from cohort_insights.application.dtos.analytics import CompletionMetrics
from cohort_insights.application.dtos.records import EnrollmentRecord
from cohort_insights.application.services.analytics import compute_completion_metrics
from cohort_insights.domain.enums import EnrollmentStatus


def _enrollment(i: int, status: EnrollmentStatus, reason: str | None = None) -> EnrollmentRecord:
    return EnrollmentRecord(f"e{i}", f"pa{i}", "co1", status=status, dropout_reason=reason)


def test_ten_enrollments_with_two_dropouts() -> None:
    """Completion, dropout and active rates over a mixed cohort of ten."""
    enrollments = (
        [_enrollment(i, EnrollmentStatus.COMPLETED) for i in range(3)]
        + [_enrollment(3, EnrollmentStatus.DROPPED_OUT, None)]
        + [_enrollment(4, EnrollmentStatus.DROPPED_OUT, "Relocated")]
        + [_enrollment(i, EnrollmentStatus.ACTIVE) for i in range(5, 10)]
    )
    result = compute_completion_metrics(enrollments)
    assert result.completion_rate == 30.0
    assert result.dropout_rate == 20.0
    assert result.active_rate == 50.0
    assert [(g.reason, g.count, g.percentage) for g in result.dropout_reasons] == [
        ("Not specified", 1, 50.0),
        ("Relocated", 1, 50.0),
    ]


def test_empty_input_returns_zero_dto() -> None:
    """No enrollments gives the all-zero metrics."""
    assert compute_completion_metrics([]) == CompletionMetrics()


def test_withdrawn_only_counts_in_total() -> None:
    """WITHDRAWN and ENROLLED count toward the total but no rate."""
    enrollments = [
        _enrollment(1, EnrollmentStatus.COMPLETED),
        _enrollment(2, EnrollmentStatus.WITHDRAWN),
        _enrollment(3, EnrollmentStatus.ENROLLED),
    ]
    result = compute_completion_metrics(enrollments)
    assert result.total_enrollments == 3
    assert result.total_active == 1
    assert result.completion_rate + result.dropout_rate + result.active_rate <= 100


def test_reason_histogram_sorted_and_sums_to_dropouts() -> None:
    """Dropout reasons are trimmed, merged, sorted and sum to the dropout count."""
    enrollments = [
        _enrollment(1, EnrollmentStatus.DROPPED_OUT, "Found a job"),
        _enrollment(2, EnrollmentStatus.DROPPED_OUT, " Relocated "),
        _enrollment(3, EnrollmentStatus.DROPPED_OUT, "Relocated"),
        _enrollment(4, EnrollmentStatus.DROPPED_OUT, "   "),
    ]
    result = compute_completion_metrics(enrollments)
    assert result.dropout_reasons[0].reason == "Relocated"
    assert result.dropout_reasons[0].count == 2
    assert sum(g.count for g in result.dropout_reasons) == result.total_dropped_out == 4
    assert {g.reason for g in result.dropout_reasons} == {"Relocated", "Found a job", "Not specified"}


def test_raw_status_strings_are_accepted() -> None:
    """Records built from raw status strings are counted."""
    result = compute_completion_metrics(
        [EnrollmentRecord("e1", "pa1", "co1", status="COMPLETED")]
    )
    assert result.completion_rate == 100.0
