"""Pydantic request/response schemas for the API.

Analytics responses are the application's frozen dataclass DTOs, which
FastAPI serializes directly.
"""

from cohort_insights.schemas.health import HealthResponse

__all__ = ["HealthResponse"]
