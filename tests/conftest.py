"""
Pytest configuration for Hobby to Hustle backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest
from unittest.mock import MagicMock, patch

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_PUBLISHABLE_KEY", "test-publishable-key")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")


def _make_gemini_response(text):
    part = MagicMock()
    part.text = text
    candidate = MagicMock()
    candidate.content.parts = [part]
    response = MagicMock()
    response.candidates = [candidate]
    response.text = text
    return response


@pytest.fixture
def supabase_client():
    """
    Mock Supabase client for testing learning hub queries.
    Returns a MagicMock that simulates Supabase client behavior.
    """
    mock_client = MagicMock()
    return mock_client


@pytest.fixture
def mock_gemini():
    """
    Patch the lazily created Gemini client.

    Set mock_gemini.models.generate_content.return_value (see the
    gemini_response fixture) or .side_effect in the test.
    """
    mock_client = MagicMock()
    with patch(
        "backend.services.recommendation_pipeline._get_gemini_client",
        return_value=mock_client
    ):
        yield mock_client


@pytest.fixture
def gemini_response():
    """Factory for MagicMocks shaped like a google-genai GenerateContentResponse."""
    return _make_gemini_response
