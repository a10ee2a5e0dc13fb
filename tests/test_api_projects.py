"""Tests for projects, trends and filter options API endpoints."""

from datetime import date

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from rera_insights.db import repo
from rera_insights.db.schema import Base
from rera_insights.models.types import ProjectRecord


def create_test_app_and_client():
    """Create app with test database and return (client, engine)."""
    from rera_insights.api.app import create_app, get_db_session

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    app = create_app()

    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db
    client = TestClient(app)

    return client, engine


def setup_test_data(engine) -> None:
    """Store three dated projects."""
    records = [
        ProjectRecord(
            id="GJ-001",
            name="Riverside Towers",
            type="Residential",
            status="ongoing",
            location="Ahmedabad",
            promoter_type="Company",
            progress=45,
            total_value=4_000_000,
            approved_on=date(2019, 6, 1),
            submitted_on=date(2019, 5, 1),
        ),
        ProjectRecord(
            id="GJ-002",
            type="Commercial",
            status="completed",
            location="Surat",
            total_value=6_000_000,
            approved_on=date(2019, 9, 1),
            submitted_on=date(2021, 2, 1),
        ),
        ProjectRecord(
            id="GJ-003",
            type="Residential",
            status="delayed",
            location="Surat",
            total_value=0,
            approved_on=date(2021, 1, 15),
            submitted_on=date(2020, 8, 1),
        ),
    ]
    with Session(engine) as db_session:
        repo.add_projects(db_session, records)
        db_session.commit()


class TestHealthEndpoint:
    """Test GET /health."""

    def test_health(self):
        """Health check returns ok."""
        client, _ = create_test_app_and_client()
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestListProjectsEndpoint:
    """Test GET /api/projects."""

    def test_lists_newest_first(self):
        """Projects are ordered by submission date, newest first."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/projects").json()

        assert data["totalCount"] == 3
        assert [p["id"] for p in data["projects"]] == ["GJ-002", "GJ-003", "GJ-001"]

    def test_limit_keeps_total_count(self):
        """limit caps the page but not the count."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/projects", params={"limit": 1}).json()

        assert len(data["projects"]) == 1
        assert data["totalCount"] == 3

    def test_invalid_limit_is_422(self):
        """limit must be positive."""
        client, _ = create_test_app_and_client()
        assert client.get("/api/projects", params={"limit": 0}).status_code == 422

    def test_filters_by_status(self):
        """Status filter restricts the listing."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/projects", params={"status": "delayed"}).json()
        assert [p["id"] for p in data["projects"]] == ["GJ-003"]


class TestGetProjectEndpoint:
    """Test GET /api/projects/{project_id}."""

    def test_returns_project_in_camel_case(self):
        """Project detail uses wire names."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        response = client.get("/api/projects/GJ-001")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Riverside Towers"
        assert data["promoterType"] == "Company"
        assert data["totalValue"] == 4_000_000
        assert data["approvedOn"] == "2019-06-01"

    def test_returns_404_for_missing_project(self):
        """Unknown ids return 404."""
        client, _ = create_test_app_and_client()
        response = client.get("/api/projects/missing")
        assert response.status_code == 404


class TestYearlyTrendsEndpoint:
    """Test GET /api/trends/yearly."""

    def test_yearly_series(self):
        """Approvals and mean value per year."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/trends/yearly").json()

        assert data["projectsApproved"] == [
            {"year": 2019, "value": 2},
            {"year": 2021, "value": 1},
        ]
        assert data["avgUnitConsideration"] == [
            {"year": 2019, "value": 5_000_000},
            {"year": 2021, "value": 0},
        ]

    def test_all_means_no_filter(self):
        """'all' leaves a dimension unfiltered."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get(
            "/api/trends/yearly", params={"status": "all", "type": "all", "location": "Surat"}
        ).json()

        assert data["projectsApproved"] == [
            {"year": 2019, "value": 1},
            {"year": 2021, "value": 1},
        ]


class TestFilterOptionsEndpoint:
    """Test GET /api/filters."""

    def test_lists_distinct_values(self):
        """Each dimension lists its sorted distinct values."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/filters").json()

        assert [o["value"] for o in data["status"]] == ["completed", "delayed", "ongoing"]
        assert [o["value"] for o in data["type"]] == ["Commercial", "Residential"]
        assert data["location"] == [
            {"value": "Ahmedabad", "label": "Ahmedabad"},
            {"value": "Surat", "label": "Surat"},
        ]
