"""Longitudinal survey impact: response metrics across BASELINE, ENDLINE and TRACER."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from cohort_insights.application.dtos.analytics import (
    LongitudinalImpact,
    SurveyComparison,
    SurveyMetrics,
    SurveyTimeSeriesEntry,
)
from cohort_insights.application.dtos.records import (
    SurveyRecord,
    SurveyResponseRecord,
)
from cohort_insights.application.services.analytics._common import (
    difference,
    group_by,
    mean,
    percentage,
)
from cohort_insights.domain.enums import SurveyType
from cohort_insights.shared.utils.datetime import ensure_utc, whole_days_between

# MIDLINE surveys are excluded from the series and the comparison.
LONGITUDINAL_TYPES = (SurveyType.BASELINE, SurveyType.ENDLINE, SurveyType.TRACER)


@dataclass
class _Pool:
    surveys: int = 0
    submitted: int = 0
    responses: int = 0
    days: list[int] = field(default_factory=list)

    def metrics(self) -> SurveyMetrics:
        return SurveyMetrics(
            total_surveys=self.surveys,
            total_responses=self.submitted,
            response_rate=percentage(self.submitted, self.responses),
            average_response_time=mean(self.days),
        )


def _survey_date(survey: SurveyRecord, today: date) -> date:
    if survey.start_date is not None:
        return survey.start_date
    created = ensure_utc(survey.created_at)
    return created.date() if created is not None else today


def compute_longitudinal_impact(
    surveys: Iterable[SurveyRecord],
    responses: Iterable[SurveyResponseRecord],
    today: date,
) -> LongitudinalImpact:
    """Per-survey time series and pooled per-type comparison.

    Response time is whole days from survey creation to submission; surveys
    without a creation timestamp contribute no response-time samples.
    """
    responses_by_survey = group_by(responses, lambda r: r.survey_id)
    pools = {survey_type: _Pool() for survey_type in LONGITUDINAL_TYPES}
    series: list[SurveyTimeSeriesEntry] = []

    for survey in surveys:
        if survey.survey_type not in LONGITUDINAL_TYPES:
            continue
        all_responses = responses_by_survey.get(survey.id, [])
        submitted_at = [r.submitted_at for r in all_responses if r.submitted_at]
        created_at = survey.created_at
        days = (
            [whole_days_between(created_at, at) for at in submitted_at]
            if created_at is not None
            else []
        )

        pool = pools[survey.survey_type]
        pool.surveys += 1
        pool.submitted += len(submitted_at)
        pool.responses += len(all_responses)
        pool.days.extend(days)

        series.append(
            SurveyTimeSeriesEntry(
                survey_type=survey.survey_type.value,
                survey_date=_survey_date(survey, today),
                total_surveys=1,
                total_responses=len(submitted_at),
                response_rate=percentage(len(submitted_at), len(all_responses)),
                average_response_time=mean(days),
            )
        )

    series.sort(key=lambda entry: entry.survey_date)

    baseline = pools[SurveyType.BASELINE].metrics()
    endline = pools[SurveyType.ENDLINE].metrics()
    tracer = pools[SurveyType.TRACER].metrics()
    return LongitudinalImpact(
        time_series=series,
        comparison=SurveyComparison(
            baseline=baseline,
            endline=endline,
            tracer=tracer,
            baseline_to_endline_change=difference(
                endline.response_rate, baseline.response_rate
            ),
            endline_to_tracer_change=difference(
                tracer.response_rate, endline.response_rate
            ),
        ),
    )
