"""ASGI middleware."""

from cohort_insights.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
