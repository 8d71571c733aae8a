"""Pure aggregation modules over whole record collections.

Each function builds its id-keyed lookups once per call, never mutates its
inputs and never calls another module.
"""

from cohort_insights.application.services.analytics.completion import (
    compute_completion_metrics,
)
from cohort_insights.application.services.analytics.demographics import (
    compute_demographics,
)
from cohort_insights.application.services.analytics.employment import (
    compute_employment_analytics,
)
from cohort_insights.application.services.analytics.enrollment import (
    compute_enrollment_analytics,
    monthly_growth,
)
from cohort_insights.application.services.analytics.longitudinal import (
    compute_longitudinal_impact,
)
from cohort_insights.application.services.analytics.regional import (
    compute_regional_analytics,
)
from cohort_insights.application.services.analytics.survey_impact import (
    compute_survey_impact,
)

__all__ = [
    "compute_completion_metrics",
    "compute_demographics",
    "compute_employment_analytics",
    "compute_enrollment_analytics",
    "compute_longitudinal_impact",
    "compute_regional_analytics",
    "compute_survey_impact",
    "monthly_growth",
]
