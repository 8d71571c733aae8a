"""Survey impact summaries: completion, sentiment and positivity per survey."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from cohort_insights.application.dtos.analytics import (
    SurveyImpactSummary,
    SurveySummary,
)
from cohort_insights.application.dtos.records import (
    CohortRecord,
    PartnerRecord,
    SurveyAnswerRecord,
    SurveyQuestionRecord,
    SurveyRecord,
    SurveyResponseRecord,
)
from cohort_insights.application.services.analytics._common import (
    group_by,
    index_by_id,
    mean,
    parse_decimal,
    percentage,
)
from cohort_insights.domain.enums import QuestionType

POSITIVE_SCALE_THRESHOLD = Decimal(3)
POSITIVE_KEYWORDS = (
    "YES",
    "POSITIVE",
    "AGREE",
    "SATISFIED",
    "GOOD",
    "EXCELLENT",
    "VERY GOOD",
)
_CHOICE_TYPES = (QuestionType.SINGLE_CHOICE, QuestionType.MULTIPLE_CHOICE)


def is_positive_choice(answer: str) -> bool:
    """Keyword heuristic for choice answers (substring, case-insensitive)."""
    text = answer.upper()
    return any(keyword in text for keyword in POSITIVE_KEYWORDS)


@dataclass
class _AnswerStats:
    sentiment: list[Decimal] = field(default_factory=list)
    evaluated: int = 0
    positive: int = 0

    def add(self, question_type: QuestionType, raw: str | None) -> None:
        if raw is None or not raw.strip():
            return
        if question_type == QuestionType.SCALE:
            value = parse_decimal(raw)
            if value is None:
                return
            self.evaluated += 1
            if value >= POSITIVE_SCALE_THRESHOLD:
                self.positive += 1
            if value >= 0:
                self.sentiment.append(value)
        elif question_type in _CHOICE_TYPES:
            self.evaluated += 1
            if is_positive_choice(raw):
                self.positive += 1


def compute_survey_impact(
    surveys: Iterable[SurveyRecord],
    responses: Iterable[SurveyResponseRecord],
    answers: Iterable[SurveyAnswerRecord],
    questions: Sequence[SurveyQuestionRecord],
    partners: Iterable[PartnerRecord],
    cohorts: Iterable[CohortRecord],
) -> SurveyImpactSummary:
    """Per-survey summaries sorted by completion rate, plus portfolio roll-up.

    Only answers belonging to submitted responses are evaluated. The portfolio
    sentiment is the plain mean of per-survey sentiments, skipping surveys
    whose sentiment is exactly 0.
    """
    question_by_id = index_by_id(questions)
    question_counts: dict[str, int] = {}
    for question in questions:
        question_counts[question.survey_id] = question_counts.get(question.survey_id, 0) + 1
    responses_by_survey = group_by(responses, lambda r: r.survey_id)
    answers_by_response = group_by(answers, lambda a: a.response_id)
    partner_by_id = index_by_id(partners)
    cohort_by_id = index_by_id(cohorts)

    summaries: list[SurveySummary] = []
    total_targeted = 0
    total_submitted = 0
    for survey in surveys:
        targeted = responses_by_survey.get(survey.id, [])
        submitted = [r for r in targeted if r.submitted_at is not None]
        stats = _AnswerStats()
        for response in submitted:
            for answer in answers_by_response.get(response.id, []):
                question = question_by_id.get(answer.question_id)
                if question is not None:
                    stats.add(question.question_type, answer.answer_value)

        total_targeted += len(targeted)
        total_submitted += len(submitted)
        partner = partner_by_id.get(survey.partner_id)
        cohort = cohort_by_id.get(survey.cohort_id) if survey.cohort_id else None
        summaries.append(
            SurveySummary(
                survey_id=survey.id,
                survey_title=survey.title,
                survey_type=survey.survey_type.value,
                partner_id=survey.partner_id,
                partner_name=partner.name if partner else None,
                cohort_id=survey.cohort_id,
                cohort_name=cohort.name if cohort else None,
                start_date=survey.start_date,
                end_date=survey.end_date,
                status=survey.status.value,
                total_targeted=len(targeted),
                total_submitted=len(submitted),
                completion_rate=percentage(len(submitted), len(targeted)),
                average_sentiment=mean(stats.sentiment),
                positive_response_rate=percentage(stats.positive, stats.evaluated),
                total_questions=question_counts.get(survey.id, 0),
            )
        )

    summaries.sort(key=lambda summary: summary.completion_rate, reverse=True)
    return SurveyImpactSummary(
        total_surveys=len(summaries),
        survey_summaries=summaries,
        overall_completion_rate=percentage(total_submitted, total_targeted),
        overall_average_sentiment=mean(
            s.average_sentiment for s in summaries if s.average_sentiment != 0
        ),
    )
