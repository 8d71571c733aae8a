"""Domain exceptions for the portfolio analytics engine.

Aggregation modules never raise on empty or malformed records; these cover
the surrounding adapters (store configuration, report export, request
validation). The presentation layer maps them to HTTP responses in
exception handlers.
"""

from typing import Any


class InsightsException(Exception):
    """Base exception for all cohort-insights errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(InsightsException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(InsightsException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UnknownReportPeriodException(InsightsException):
    """Raised when a report period name is not weekly, monthly or quarterly."""

    def __init__(self, period: str) -> None:
        super().__init__(
            f"Unknown report period: {period}",
            "UNKNOWN_REPORT_PERIOD",
            {"period": period, "allowed": ["weekly", "monthly", "quarterly"]},
        )


class ReportExportException(InsightsException):
    """Raised when a portfolio report cannot be rendered or written."""

    def __init__(self, message: str, file_format: str | None = None) -> None:
        details = {"format": file_format} if file_format else {}
        super().__init__(message, "REPORT_EXPORT_ERROR", details)


class SqlNotConfiguredException(InsightsException):
    """Raised when an operation requires Postgres but DATABASE_URL is unset."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
