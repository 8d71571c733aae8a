"""Survey impact summaries: completion, sentiment, positivity."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from cohort_insights.application.dtos.records import (
    SurveyAnswerRecord,
    SurveyQuestionRecord,
    SurveyRecord,
    SurveyResponseRecord,
)
from cohort_insights.application.services.analytics import compute_survey_impact
from cohort_insights.application.services.analytics.survey_impact import (
    is_positive_choice,
)
from cohort_insights.domain.enums import QuestionType, SurveyType

SUBMITTED = datetime(2025, 3, 1, tzinfo=UTC)
TWENTY_SEVEN_DIGITS = "123456789012345678901234567"


def _survey(survey_id: str) -> SurveyRecord:
    return SurveyRecord(survey_id, "p1", f"Survey {survey_id}", SurveyType.ENDLINE, cohort_id="co1")


def test_malformed_scale_answer_is_skipped(portfolio_store) -> None:
    """Unparseable SCALE answers are left out of sentiment and positivity."""
    responses = [
        SurveyResponseRecord("r1", "s1", "pa1", SUBMITTED),
        SurveyResponseRecord("r2", "s1", "pa2", SUBMITTED),
        SurveyResponseRecord("r3", "s1", "pa3"),
        SurveyResponseRecord("r4", "s1", "pa4"),
    ]
    questions = [SurveyQuestionRecord("q1", "s1", "Rate the course", QuestionType.SCALE)]
    answers = [
        SurveyAnswerRecord("a1", "r1", "q1", "4"),
        SurveyAnswerRecord("a2", "r2", "q1", "bad"),
    ]
    result = compute_survey_impact(
        [_survey("s1")], responses, answers, questions,
        portfolio_store.partners, portfolio_store.cohorts,
    )
    summary = result.survey_summaries[0]
    assert summary.average_sentiment == 4.0
    assert summary.completion_rate == 50.0
    assert summary.positive_response_rate == 100.0
    assert summary.partner_name == "Acme Skills"
    assert summary.cohort_name == "Welding 2025A"
    assert summary.total_questions == 1


def test_choice_answers_use_keywords_and_pending_answers_are_ignored() -> None:
    """Choice answers use positive keywords; TEXT and pending answers are ignored."""
    responses = [
        SurveyResponseRecord("r1", "s1", "pa1", SUBMITTED),
        SurveyResponseRecord("r2", "s1", "pa2"),
    ]
    questions = [
        SurveyQuestionRecord("q1", "s1", "Did it help?", QuestionType.SINGLE_CHOICE),
        SurveyQuestionRecord("q2", "s1", "Overall?", QuestionType.MULTIPLE_CHOICE),
        SurveyQuestionRecord("q3", "s1", "Comments", QuestionType.TEXT),
    ]
    answers = [
        SurveyAnswerRecord("a1", "r1", "q1", "yes, a lot"),
        SurveyAnswerRecord("a2", "r1", "q2", "Neutral"),
        SurveyAnswerRecord("a3", "r1", "q3", "Great trainers"),
        SurveyAnswerRecord("a4", "r2", "q1", "Yes"),
    ]
    summary = compute_survey_impact([_survey("s1")], responses, answers, questions, [], []).survey_summaries[0]
    assert summary.positive_response_rate == 50.0
    assert summary.average_sentiment == 0.0
    assert summary.partner_name is None


def test_negative_scale_values_count_for_positivity_only() -> None:
    """Negative SCALE values count for positivity but not sentiment."""
    responses = [SurveyResponseRecord("r1", "s1", "pa1", SUBMITTED)]
    questions = [
        SurveyQuestionRecord("q1", "s1", "A", QuestionType.SCALE),
        SurveyQuestionRecord("q2", "s1", "B", QuestionType.SCALE),
    ]
    answers = [
        SurveyAnswerRecord("a1", "r1", "q1", "-1"),
        SurveyAnswerRecord("a2", "r1", "q2", "2"),
    ]
    summary = compute_survey_impact([_survey("s1")], responses, answers, questions, [], []).survey_summaries[0]
    assert summary.average_sentiment == 2.0
    assert summary.positive_response_rate == 0.0


def test_portfolio_rollup_excludes_zero_sentiment_surveys() -> None:
    """The portfolio sentiment skips surveys with zero sentiment."""
    surveys = [_survey("s1"), _survey("s2"), _survey("s3")]
    responses = [
        SurveyResponseRecord("r1", "s1", "pa1", SUBMITTED),
        SurveyResponseRecord("r2", "s2", "pa1", SUBMITTED),
        SurveyResponseRecord("r3", "s2", "pa2"),
        SurveyResponseRecord("r4", "s3", "pa1"),
    ]
    questions = [
        SurveyQuestionRecord("q1", "s1", "A", QuestionType.SCALE),
        SurveyQuestionRecord("q2", "s2", "A", QuestionType.SCALE),
    ]
    answers = [
        SurveyAnswerRecord("a1", "r1", "q1", "5"),
        SurveyAnswerRecord("a2", "r2", "q2", "2"),
    ]
    result = compute_survey_impact(surveys, responses, answers, questions, [], [])
    assert result.total_surveys == 3
    assert [s.survey_id for s in result.survey_summaries] == ["s1", "s2", "s3"]
    assert result.overall_average_sentiment == 3.5
    assert result.overall_completion_rate == 50.0


def test_is_positive_choice() -> None:
    """Keyword matching is substring and case-insensitive."""
    assert is_positive_choice("Very Good")
    assert is_positive_choice("I agree")
    assert not is_positive_choice("Poor")


def test_empty_input() -> None:
    """No surveys gives zero rollups."""
    result = compute_survey_impact([], [], [], [], [], [])
    assert result.total_surveys == 0
    assert result.overall_completion_rate == 0.0
    assert result.overall_average_sentiment == 0.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1e30", 1e30), (TWENTY_SEVEN_DIGITS, float(Decimal(TWENTY_SEVEN_DIGITS)))],
)
def test_very_large_scale_answer_is_averaged(raw: str, expected: float) -> None:
    """A SCALE answer with more than 28 significant digits still rounds to a sentiment."""
    responses = [SurveyResponseRecord("r1", "s1", "pa1", SUBMITTED)]
    questions = [SurveyQuestionRecord("q1", "s1", "Rate the course", QuestionType.SCALE)]
    answers = [SurveyAnswerRecord("a1", "r1", "q1", raw)]
    result = compute_survey_impact([_survey("s1")], responses, answers, questions, [], [])
    summary = result.survey_summaries[0]
    assert summary.average_sentiment == expected
    assert summary.positive_response_rate == 100.0
    assert result.overall_average_sentiment == expected


def test_scale_answer_beyond_float_range_is_skipped() -> None:
    """An answer too large for a float is treated like an unparseable one."""
    responses = [SurveyResponseRecord("r1", "s1", "pa1", SUBMITTED)]
    questions = [
        SurveyQuestionRecord("q1", "s1", "A", QuestionType.SCALE),
        SurveyQuestionRecord("q2", "s1", "B", QuestionType.SCALE),
    ]
    answers = [
        SurveyAnswerRecord("a1", "r1", "q1", "1e400"),
        SurveyAnswerRecord("a2", "r1", "q2", "5"),
    ]
    summary = compute_survey_impact([_survey("s1")], responses, answers, questions, [], []).survey_summaries[0]
    assert summary.average_sentiment == 5.0
    assert summary.positive_response_rate == 100.0
