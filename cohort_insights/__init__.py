"""cohort-insights: portfolio analytics for multi-tenant training programs."""

__version__ = "1.0.0"
