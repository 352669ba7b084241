"""
Tests for environment-backed settings.
"""

import pytest

from backend.config import Settings


def test_jwks_url_is_derived_from_project_url():
    settings = Settings()
    settings.SUPABASE_URL = "https://abc.supabase.co/"

    assert settings.SUPABASE_JWKS_URL == "https://abc.supabase.co/auth/v1/.well-known/jwks.json"


def test_jwks_url_empty_without_project_url():
    settings = Settings()
    settings.SUPABASE_URL = ""

    assert settings.SUPABASE_JWKS_URL == ""


def test_validate_lists_missing_variables():
    settings = Settings()
    settings.SUPABASE_URL = ""
    settings.GOOGLE_API_KEY = ""

    assert settings.ai_configured is False
    with pytest.raises(ValueError, match="SUPABASE_URL, GOOGLE_API_KEY"):
        settings.validate()


def test_validate_passes_when_configured():
    settings = Settings()
    settings.SUPABASE_URL = "http://localhost:54321"
    settings.GOOGLE_API_KEY = "key"

    settings.validate()
    assert settings.missing_settings() == []
