"""
Tests for the /opportunities endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app


@pytest.fixture
def client():
    """Create test client for FastAPI app."""
    return TestClient(app)


def test_list_all(client):
    response = client.get("/opportunities")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["count"] == 6
    assert data["filters"]["location"] == "all"


def test_budget_filter(client):
    response = client.get("/opportunities", params={"budget_min": 10000, "budget_max": 50000})

    data = response.json()
    assert [o["budget"] for o in data["opportunities"]] == [12000, 15000, 20000]


def test_combined_filters(client):
    response = client.get(
        "/opportunities",
        params={"location": "koregaon-park", "category": "photography"}
    )

    data = response.json()
    assert [o["title"] for o in data["opportunities"]] == ["Photographer Needed"]


def test_no_matches_is_empty_state(client):
    response = client.get("/opportunities", params={"location": "mumbai"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "empty"
    assert data["opportunities"] == []
    assert data["message"] == "No opportunities match your filters. Try adjusting your criteria."


def test_negative_budget_is_422(client):
    response = client.get("/opportunities", params={"budget_min": -1})
    assert response.status_code == 422


def test_filter_options(client):
    response = client.get("/opportunities/filters")

    assert response.status_code == 200
    data = response.json()
    assert data["locations"]["koregaon-park"] == "Koregaon Park"
    assert "content" in data["categories"]
    assert set(data["date_posted"]) == {"today", "week", "month"}
    assert data["defaults"] == {
        "location": "all",
        "category": "all",
        "budget_min": 0,
        "budget_max": 50000,
        "date_posted": "all",
    }
