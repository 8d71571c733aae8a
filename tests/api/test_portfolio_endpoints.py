"""Portfolio API: dashboard, activity, analytics and report preview.

The record store dependency is overridden with the in-memory portfolio from
conftest, so no database is needed.
"""

import pytest
from httpx import AsyncClient

from cohort_insights.application.dtos.records import SurveyAnswerRecord


async def test_dashboard(client: AsyncClient) -> None:
    """GET /portfolio/dashboard returns summary, alerts, activity and quick links."""
    response = await client.get("/api/v1/portfolio/dashboard")
    assert response.status_code == 200
    data = response.json()
    assert data["summary"]["total_enrollments"] == 4
    assert data["summary"]["overall_completion_rate"] == 50.0
    assert data["summary"]["overall_employment_rate"] == 50.0
    assert data["alert_summary"]["total_unresolved"] == 1
    assert data["recent_activities"][0]["activity_type"] == "KPI_ANOMALY_DETECTED"
    assert data["quick_links"]["enrollment_analytics"] == "/api/v1/portfolio/analytics/enrollments"


async def test_activity_limit(client: AsyncClient) -> None:
    """The limit query parameter caps the activity feed."""
    response = await client.get("/api/v1/portfolio/activity", params={"limit": 1})
    assert response.status_code == 200
    assert len(response.json()) == 1


async def test_activity_limit_validation(client: AsyncClient) -> None:
    """A limit below 1 is rejected with 422 VALIDATION_ERROR."""
    response = await client.get("/api/v1/portfolio/activity", params={"limit": 0})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


@pytest.mark.parametrize(
    ("path", "key", "expected"),
    [
        ("enrollments", "total_enrollments", 4),
        ("completion", "dropout_rate", 25.0),
        ("employment", "overall_employment_rate", 50.0),
        ("demographics", "total_participants", 4),
        ("surveys", "total_surveys", 1),
    ],
)
async def test_analytics_modules(client: AsyncClient, path: str, key: str, expected) -> None:
    """Each analytics route returns its module over the fixture portfolio."""
    response = await client.get(f"/api/v1/portfolio/analytics/{path}")
    assert response.status_code == 200
    assert response.json()[key] == expected


async def test_regions_keep_same_named_regions_apart(client: AsyncClient) -> None:
    """Two regions called North in different countries are reported separately."""
    response = await client.get("/api/v1/portfolio/analytics/regions")
    assert response.status_code == 200
    regions = response.json()["region_breakdown"]
    assert sorted((r["region"], r["country"]) for r in regions) == [
        ("North", "Kenya"),
        ("North", "Uganda"),
    ]


async def test_longitudinal_as_of(client: AsyncClient) -> None:
    """The as_of parameter sets the day the longitudinal series is computed for."""
    response = await client.get(
        "/api/v1/portfolio/analytics/longitudinal", params={"as_of": "2025-06-01"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["comparison"]["baseline"]["response_rate"] == 50.0
    assert data["time_series"][0]["survey_date"] == "2025-01-10"


async def test_report_preview(client: AsyncClient) -> None:
    """Quarterly preview covers the previous calendar quarter."""
    response = await client.get(
        "/api/v1/portfolio/reports/quarterly/preview", params={"as_of": "2025-04-01"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["period"] == {"kind": "quarterly", "start_date": "2025-01-01", "end_date": "2025-03-31"}
    assert data["scope"] == "COMPREHENSIVE"
    assert data["enrollment"]["total_enrollments"] == 4
    assert data["report_id"]


async def test_report_preview_unknown_period(client: AsyncClient) -> None:
    """An unknown period name returns 400 with the allowed names."""
    response = await client.get("/api/v1/portfolio/reports/daily/preview")
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "UNKNOWN_REPORT_PERIOD"
    assert data["details"]["allowed"] == ["weekly", "monthly", "quarterly"]


async def test_surveys_with_very_large_scale_answer(client: AsyncClient, portfolio_store) -> None:
    """A huge but parseable SCALE answer is averaged, not a server error."""
    portfolio_store.survey_answers[0] = SurveyAnswerRecord("a1", "r1", "q1", "1e30")
    response = await client.get("/api/v1/portfolio/analytics/surveys")
    assert response.status_code == 200
    assert response.json()["survey_summaries"][0]["average_sentiment"] == 1e30
