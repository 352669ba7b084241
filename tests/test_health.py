"""
Tests for the public health endpoint.
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from backend.config import settings
from backend.main import app


def test_health_check():
    client = TestClient(app)

    with patch.object(settings, "GOOGLE_API_KEY", "test-google-api-key"):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "service": "hobby-to-hustle-backend",
        "ai_configured": True,
    }


def test_health_reports_missing_ai_key():
    client = TestClient(app)

    with patch.object(settings, "GOOGLE_API_KEY", ""):
        response = client.get("/health")

    assert response.json()["ai_configured"] is False
