"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    version: str = Field(..., description="Application version")
    record_store: str = Field(..., description="Active record store: sql or memory")
    scheduler_running: bool = Field(
        default=False, description="Whether the periodic job scheduler is running"
    )
