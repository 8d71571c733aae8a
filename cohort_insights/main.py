"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers. Settings are
loaded inside create_app() so tests can set env (and clear the get_settings
cache) before calling it.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cohort_insights.api.v1.router import api_router
from cohort_insights.core.config import get_settings
from cohort_insights.core.exception_handlers import register_exception_handlers
from cohort_insights.core.lifespan import create_lifespan
from cohort_insights.middleware import RequestIDMiddleware


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # First added = innermost.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
