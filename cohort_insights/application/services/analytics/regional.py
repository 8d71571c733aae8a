"""Regional rollups: center, (region, country) and country levels.

Participant counts are distinct at every level; a participant enrolled at two
centers of the same region counts once for that region.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from cohort_insights.application.dtos.analytics import (
    CenterAnalytics,
    CountryAnalytics,
    RegionAnalytics,
    RegionalAnalytics,
)
from cohort_insights.application.dtos.records import (
    CenterRecord,
    CohortRecord,
    EnrollmentRecord,
    ParticipantRecord,
    PartnerRecord,
)
from cohort_insights.application.services.analytics._common import (
    UNKNOWN,
    clean_label,
    group_by,
    index_by_id,
)
from cohort_insights.domain.enums import CohortStatus


@dataclass
class _CenterTotals:
    center: CenterRecord
    participant_ids: set[str] = field(default_factory=set)
    enrollments: int = 0
    active_cohorts: int = 0


@dataclass
class _Rollup:
    participant_ids: set[str] = field(default_factory=set)
    enrollments: int = 0
    active_cohorts: int = 0
    center_ids: set[str] = field(default_factory=set)
    partner_ids: set[str] = field(default_factory=set)
    regions: set[str] = field(default_factory=set)

    def add(self, totals: _CenterTotals, region: str | None) -> None:
        self.participant_ids |= totals.participant_ids
        self.enrollments += totals.enrollments
        self.active_cohorts += totals.active_cohorts
        self.center_ids.add(totals.center.id)
        self.partner_ids.add(totals.center.partner_id)
        if region is not None:
            self.regions.add(region)


def _center_totals(
    centers: Iterable[CenterRecord],
    cohorts: Iterable[CohortRecord],
    enrollments: Iterable[EnrollmentRecord],
    participants: Iterable[ParticipantRecord],
) -> list[_CenterTotals]:
    known_participants = {p.id for p in participants}
    cohorts_by_center = group_by(cohorts, lambda c: c.center_id)
    enrollments_by_cohort = group_by(enrollments, lambda e: e.cohort_id)

    result: list[_CenterTotals] = []
    for center in centers:
        totals = _CenterTotals(center)
        for cohort in cohorts_by_center.get(center.id, []):
            if cohort.status == CohortStatus.ACTIVE:
                totals.active_cohorts += 1
            for enrollment in enrollments_by_cohort.get(cohort.id, []):
                totals.enrollments += 1
                if enrollment.participant_id in known_participants:
                    totals.participant_ids.add(enrollment.participant_id)
        result.append(totals)
    return result


def compute_regional_analytics(
    centers: Sequence[CenterRecord],
    cohorts: Iterable[CohortRecord],
    enrollments: Iterable[EnrollmentRecord],
    participants: Iterable[ParticipantRecord],
    partners: Iterable[PartnerRecord],
) -> RegionalAnalytics:
    """Three-level rollup sorted by distinct participants, descending.

    Regions are keyed by (region, country) so same-named regions in different
    countries stay apart. A center with a blank region is left out of the
    region level; a blank country inside a region group becomes "Unknown".
    A center with a blank country is left out of the country level. Every
    center appears at the center level.
    """
    if not centers:
        return RegionalAnalytics()

    partner_by_id = index_by_id(partners)
    per_center = _center_totals(centers, cohorts, enrollments, participants)

    center_rows: list[CenterAnalytics] = []
    regions: dict[tuple[str, str], _Rollup] = {}
    countries: dict[str, _Rollup] = {}
    for totals in per_center:
        center = totals.center
        partner = partner_by_id.get(center.partner_id)
        center_rows.append(
            CenterAnalytics(
                center_id=center.id,
                center_name=center.name,
                partner_id=partner.id if partner else None,
                partner_name=partner.name if partner else None,
                region=center.region,
                country=center.country,
                location=center.location,
                total_participants=len(totals.participant_ids),
                total_enrollments=totals.enrollments,
                total_active_cohorts=totals.active_cohorts,
            )
        )

        region = clean_label(center.region)
        country = clean_label(center.country)
        if region is not None:
            regions.setdefault((region, country or UNKNOWN), _Rollup()).add(
                totals, region
            )
        if country is not None:
            countries.setdefault(country, _Rollup()).add(totals, region)

    region_rows = [
        RegionAnalytics(
            region=region,
            country=country,
            total_participants=len(rollup.participant_ids),
            total_enrollments=rollup.enrollments,
            total_active_cohorts=rollup.active_cohorts,
            total_centers=len(rollup.center_ids),
            total_partners=len(rollup.partner_ids),
        )
        for (region, country), rollup in regions.items()
    ]
    country_rows = [
        CountryAnalytics(
            country=country,
            total_participants=len(rollup.participant_ids),
            total_enrollments=rollup.enrollments,
            total_active_cohorts=rollup.active_cohorts,
            total_centers=len(rollup.center_ids),
            total_regions=len(rollup.regions),
            total_partners=len(rollup.partner_ids),
        )
        for country, rollup in countries.items()
    ]

    center_rows.sort(key=lambda row: row.total_participants, reverse=True)
    region_rows.sort(key=lambda row: row.total_participants, reverse=True)
    country_rows.sort(key=lambda row: row.total_participants, reverse=True)
    return RegionalAnalytics(
        center_breakdown=center_rows,
        region_breakdown=region_rows,
        country_breakdown=country_rows,
    )
