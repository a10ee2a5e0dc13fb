"""Tests for summary API endpoints."""

import os
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from rera_insights.db import repo
from rera_insights.db.schema import Base
from rera_insights.db.session import init_db
from rera_insights.models.types import ProjectRecord


def create_test_app_and_client():
    """Create app with test database and return (client, engine)."""
    from rera_insights.api.app import create_app, get_db_session

    # Create in-memory database with StaticPool to share connection
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
    """Store five projects across two types and three statuses."""
    records = [
        ProjectRecord(
            id=f"P{index}",
            type="Residential" if index % 2 else "Commercial",
            status=["ongoing", "completed", "delayed"][index % 3],
            location="Surat" if index < 3 else "Rajkot",
            promoter="Patel Builders" if index < 4 else "Shree Infra",
            total_value=1_000_000 * (index + 1),
            booking_percentage=0 if index == 0 else 50,
            submitted_on=date(2020 + index, 1, 1),
        )
        for index in range(5)
    ]
    with Session(engine) as db_session:
        repo.add_projects(db_session, records)
        db_session.commit()


class TestGetSummaryEndpoint:
    """Test GET /api/summary."""

    def test_returns_200_on_empty_store(self):
        """An empty store summarizes to zeros."""
        client, _ = create_test_app_and_client()
        response = client.get("/api/summary")

        assert response.status_code == 200
        data = response.json()
        assert data["totalProjects"] == 0
        assert data["projectsByStatus"] == {}
        assert data["financialSummary"]["totalValue"] == 0

    def test_summarizes_all_projects(self):
        """Without filters every stored project is summarized."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/summary").json()

        assert data["totalProjects"] == 5
        assert data["totalValue"] == 15_000_000
        assert data["avgBookingPercentage"] == 50
        assert data["projectsByType"] == {"Residential": 2, "Commercial": 3}
        assert data["projectsByStatus"] == {
            "Active": 2,
            "Completed": 2,
            "Delayed": 1,
            "Unreported": 0,
        }
        assert data["topPromoters"] == {"Patel Builders": 4, "Shree Infra": 1}

    def test_applies_filters(self):
        """Query parameters restrict the summarized projects."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/summary", params={"type": "Residential"}).json()

        assert data["totalProjects"] == 2
        assert data["projectsByType"] == {"Residential": 2}

    def test_repeated_filter_values(self):
        """Repeated parameters match any of the values."""
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        response = client.get("/api/summary", params=[("location", "Surat"), ("location", "Rajkot")])
        assert response.json()["totalProjects"] == 5

    def test_fetch_limit_keeps_authoritative_count(self, monkeypatch):
        """A capped fetch still reports the full project count."""
        monkeypatch.setenv("RERA_SUMMARY_FETCH_LIMIT", "2")
        client, engine = create_test_app_and_client()
        setup_test_data(engine)

        data = client.get("/api/summary").json()

        assert data["totalProjects"] == 5
        assert sum(data["projectsByType"].values()) == 2


class TestPostSummaryEndpoint:
    """Test POST /api/summary."""

    def test_summarizes_posted_records(self):
        """Posted records are summarized directly."""
        client, _ = create_test_app_and_client()
        body = {
            "records": [
                {"id": 1, "type": "Residential", "promoter": "A", "totalValue": 100},
                {"id": 2, "type": "Residential", "promoter": "B", "totalValue": 200},
                {"id": 3, "type": "Commercial", "promoter": "A", "totalValue": 50},
            ]
        }

        response = client.post("/api/summary", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["projectsByType"] == {"Residential": 2, "Commercial": 1}
        assert data["totalValue"] == 350
        assert data["topPromoters"] == {"A": 2, "B": 1}

    def test_total_count_override(self):
        """totalCount replaces the record count."""
        client, _ = create_test_app_and_client()
        body = {"records": [{"id": 1}], "totalCount": 15000}

        data = client.post("/api/summary", json=body).json()
        assert data["totalProjects"] == 15000

    def test_negative_total_count_is_422(self):
        """Negative counts fail validation."""
        client, _ = create_test_app_and_client()
        response = client.post("/api/summary", json={"records": [], "totalCount": -1})
        assert response.status_code == 422

    def test_record_without_id_is_422(self):
        """Malformed records fail validation."""
        client, _ = create_test_app_and_client()
        response = client.post("/api/summary", json={"records": [{"type": "Residential"}]})
        assert response.status_code == 422

    def test_numeric_progress_strings_averaged(self):
        """Progress posted as numeric text counts toward avgProgress."""
        client, _ = create_test_app_and_client()
        body = {"records": [{"id": 1, "progress": "50"}, {"id": 2, "progress": 30}]}

        data = client.post("/api/summary", json=body).json()

        assert data["avgProgress"] == 40
        assert data["unreportedProjects"] == 2

    def test_status_token_in_progress_classified(self):
        """A status word posted as progress still classifies the record."""
        client, _ = create_test_app_and_client()
        body = {"records": [{"id": 1, "progress": "completed"}, {"id": 2, "progress": "75"}]}

        data = client.post("/api/summary", json=body).json()

        assert data["completedProjects"] == 1
        assert data["avgProgress"] == 75

    def test_sales_and_velocity_sections(self):
        """Unit sales and duration are computed for posted records."""
        client, _ = create_test_app_and_client()
        body = {
            "records": [
                {
                    "id": 1,
                    "unitsTotal": 10,
                    "unitsBooked": 4,
                    "receivedAmount": 800,
                    "startOn": "2022-01-01",
                    "completionOn": "2022-01-31",
                    "landCost": 50,
                    "constructionCost": 150,
                }
            ]
        }

        data = client.post("/api/summary", json=body).json()

        assert data["salesPerformance"]["revenuePerUnit"] == 200
        assert data["projectVelocity"]["avgProjectDuration"] == 30
        assert data["financials"] == {"landCost": 50, "developmentCost": 150}


class TestAppConfiguration:
    """Test settings read by create_app."""

    @pytest.mark.parametrize("raw", ["abc", "0", "-5", "2.5"])
    def test_invalid_fetch_limit_fails_at_startup(self, monkeypatch, raw):
        """A bad RERA_SUMMARY_FETCH_LIMIT is rejected when the app is built."""
        from rera_insights.api.app import create_app

        monkeypatch.setenv("RERA_SUMMARY_FETCH_LIMIT", raw)
        with pytest.raises(ValueError):
            create_app()

    def test_blank_fetch_limit_means_no_cap(self, monkeypatch):
        """An empty value leaves fetches uncapped."""
        from rera_insights.api.app import create_app

        monkeypatch.setenv("RERA_SUMMARY_FETCH_LIMIT", " ")
        assert create_app().state.fetch_limit is None

    def test_db_path_kept_on_app(self, monkeypatch, tmp_path):
        """Each app reads its own database without touching the environment."""
        from rera_insights.api.app import create_app
        from rera_insights.db.session import get_db_session

        monkeypatch.delenv("RERA_DB_PATH", raising=False)
        first_path = tmp_path / "first.db"
        second_path = tmp_path / "second.db"
        for db_path in (first_path, second_path):
            init_db(db_path)
        with get_db_session(first_path) as db_session:
            repo.add_projects(db_session, [ProjectRecord(id="F1")])

        first = create_app(first_path)
        second = create_app(second_path)

        assert "RERA_DB_PATH" not in os.environ
        assert first.state.db_path == first_path
        assert TestClient(first).get("/api/summary").json()["totalProjects"] == 1
        assert TestClient(second).get("/api/summary").json()["totalProjects"] == 0
