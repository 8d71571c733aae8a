"""Health check endpoint. No dependencies on the record store; used for liveness probes."""

from fastapi import APIRouter, Request

from cohort_insights.core.config import get_settings
from cohort_insights.infrastructure.persistence.database import is_sql_configured
from cohort_insights.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(request: Request) -> HealthResponse:
    """Return ok plus which record store and scheduler are active."""
    settings = get_settings()
    scheduler = getattr(request.app.state, "scheduler", None)
    return HealthResponse(
        version=settings.app_version,
        record_store="sql" if is_sql_configured() else "memory",
        scheduler_running=bool(scheduler is not None and scheduler.running),
    )
