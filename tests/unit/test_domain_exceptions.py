"""Tests for domain exceptions (error_code, message, details)."""

from cohort_insights.domain.exceptions import (
    InsightsException,
    ReportExportException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    UnknownReportPeriodException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """InsightsException uses the class name as error_code when not provided."""
    exc = InsightsException("Something failed")
    assert exc.error_code == "InsightsException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_to_dict() -> None:
    """to_dict returns error, message and details."""
    exc = InsightsException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    """ValidationException records the field when given."""
    exc = ValidationException("limit must be at least 1", "limit")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "limit"}
    assert ValidationException("bad").details == {}


def test_resource_not_found() -> None:
    """ResourceNotFoundException names the resource type and id."""
    exc = ResourceNotFoundException("ScheduledJob", "nightly")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "ScheduledJob not found: nightly"
    assert exc.details == {"resource_type": "ScheduledJob", "resource_id": "nightly"}


def test_unknown_report_period() -> None:
    """UnknownReportPeriodException carries the rejected period."""
    exc = UnknownReportPeriodException("daily")
    assert exc.error_code == "UNKNOWN_REPORT_PERIOD"
    assert exc.details["period"] == "daily"


def test_report_export_and_sql_not_configured() -> None:
    """Error codes of the export and database exceptions."""
    assert ReportExportException("disk full", "JSON").error_code == "REPORT_EXPORT_ERROR"
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"
