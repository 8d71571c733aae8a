"""Analytics use cases: load record snapshots and run the aggregation modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from cohort_insights.application.dtos.analytics import (
    CompletionMetrics,
    DemographicAnalytics,
    EmploymentAnalytics,
    EnrollmentAnalytics,
    LongitudinalImpact,
    RegionalAnalytics,
    SurveyImpactSummary,
)
from cohort_insights.application.services.analytics import (
    compute_completion_metrics,
    compute_demographics,
    compute_employment_analytics,
    compute_enrollment_analytics,
    compute_longitudinal_impact,
    compute_regional_analytics,
    compute_survey_impact,
)
from cohort_insights.shared.telemetry import traced

if TYPE_CHECKING:
    from cohort_insights.application.dtos.records import (
        CenterRecord,
        CohortRecord,
        EmploymentOutcomeRecord,
        EnrollmentRecord,
        InternshipRecord,
        ParticipantRecord,
        PartnerRecord,
        ProgramRecord,
        SurveyAnswerRecord,
        SurveyQuestionRecord,
        SurveyRecord,
        SurveyResponseRecord,
    )
    from cohort_insights.application.interfaces.repositories import IRecordStore


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Every domain collection the aggregation modules read, loaded once."""

    partners: list[PartnerRecord]
    centers: list[CenterRecord]
    programs: list[ProgramRecord]
    cohorts: list[CohortRecord]
    participants: list[ParticipantRecord]
    enrollments: list[EnrollmentRecord]
    internships: list[InternshipRecord]
    outcomes: list[EmploymentOutcomeRecord]
    surveys: list[SurveyRecord]
    questions: list[SurveyQuestionRecord]
    responses: list[SurveyResponseRecord]
    answers: list[SurveyAnswerRecord]

    @classmethod
    async def load(cls, store: IRecordStore) -> PortfolioSnapshot:
        return cls(
            partners=await store.list_partners(),
            centers=await store.list_centers(),
            programs=await store.list_programs(),
            cohorts=await store.list_cohorts(),
            participants=await store.list_participants(),
            enrollments=await store.list_enrollments(),
            internships=await store.list_internships(),
            outcomes=await store.list_employment_outcomes(),
            surveys=await store.list_surveys(),
            questions=await store.list_survey_questions(),
            responses=await store.list_survey_responses(),
            answers=await store.list_survey_answers(),
        )

    def enrollment(self) -> EnrollmentAnalytics:
        return compute_enrollment_analytics(
            self.enrollments, self.participants, self.partners, self.cohorts, self.programs
        )

    def completion(self) -> CompletionMetrics:
        return compute_completion_metrics(self.enrollments)

    def employment(self) -> EmploymentAnalytics:
        return compute_employment_analytics(
            self.enrollments,
            self.outcomes,
            self.internships,
            self.participants,
            self.partners,
            self.cohorts,
            self.programs,
        )

    def longitudinal(self, today: date) -> LongitudinalImpact:
        return compute_longitudinal_impact(self.surveys, self.responses, today)

    def demographics(self) -> DemographicAnalytics:
        return compute_demographics(self.participants)

    def regional(self) -> RegionalAnalytics:
        return compute_regional_analytics(
            self.centers, self.cohorts, self.enrollments, self.participants, self.partners
        )

    def survey_impact(self) -> SurveyImpactSummary:
        return compute_survey_impact(
            self.surveys,
            self.responses,
            self.answers,
            self.questions,
            self.partners,
            self.cohorts,
        )


class GetPortfolioAnalyticsUseCase:
    """Runs one aggregation module against only the collections it reads."""

    def __init__(self, record_store: IRecordStore) -> None:
        self._store = record_store

    @traced("analytics.enrollment")
    async def enrollment(self) -> EnrollmentAnalytics:
        store = self._store
        return compute_enrollment_analytics(
            await store.list_enrollments(),
            await store.list_participants(),
            await store.list_partners(),
            await store.list_cohorts(),
            await store.list_programs(),
        )

    @traced("analytics.completion")
    async def completion(self) -> CompletionMetrics:
        return compute_completion_metrics(await self._store.list_enrollments())

    @traced("analytics.employment")
    async def employment(self) -> EmploymentAnalytics:
        store = self._store
        return compute_employment_analytics(
            await store.list_enrollments(),
            await store.list_employment_outcomes(),
            await store.list_internships(),
            await store.list_participants(),
            await store.list_partners(),
            await store.list_cohorts(),
            await store.list_programs(),
        )

    @traced("analytics.longitudinal")
    async def longitudinal(self, *, today: date) -> LongitudinalImpact:
        return compute_longitudinal_impact(
            await self._store.list_surveys(),
            await self._store.list_survey_responses(),
            today,
        )

    @traced("analytics.demographics")
    async def demographics(self) -> DemographicAnalytics:
        return compute_demographics(await self._store.list_participants())

    @traced("analytics.regional")
    async def regional(self) -> RegionalAnalytics:
        store = self._store
        return compute_regional_analytics(
            await store.list_centers(),
            await store.list_cohorts(),
            await store.list_enrollments(),
            await store.list_participants(),
            await store.list_partners(),
        )

    @traced("analytics.survey_impact")
    async def survey_impact(self) -> SurveyImpactSummary:
        store = self._store
        return compute_survey_impact(
            await store.list_surveys(),
            await store.list_survey_responses(),
            await store.list_survey_answers(),
            await store.list_survey_questions(),
            await store.list_partners(),
            await store.list_cohorts(),
        )
