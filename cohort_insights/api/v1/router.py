"""API v1 router: includes all endpoint routers with prefixes and tags."""

from fastapi import APIRouter

from cohort_insights.api.v1.endpoints import analytics, dashboard, health, reports

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(dashboard.router, prefix="/portfolio", tags=["portfolio"])
api_router.include_router(
    analytics.router, prefix="/portfolio/analytics", tags=["analytics"]
)
api_router.include_router(reports.router, prefix="/portfolio/reports", tags=["reports"])
