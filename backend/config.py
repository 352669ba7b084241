"""
Configuration module for Hobby to Hustle backend.

Settings come from the process environment, optionally seeded from a local
.env file. Only the Supabase project URL is needed to boot: without a Gemini
key the suggestion endpoints still answer, using their default batches.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Environment-backed settings for the API process."""

    # Supabase project (auth for the learning hub, saved_course / learning_progress tables)
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_PUBLISHABLE_KEY: str = os.getenv("SUPABASE_PUBLISHABLE_KEY", "")

    # Gemini (hobby ideas, course recommendations, trending hobbies)
    GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Comma-separated; "*" lets the web client call from any origin
    CORS_ORIGINS: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))

    # Supabase publishes its ES256 signing keys here
    @property
    def SUPABASE_JWKS_URL(self) -> str:
        if not self.SUPABASE_URL:
            return ""
        return f"{self.SUPABASE_URL.rstrip('/')}/auth/v1/.well-known/jwks.json"

    @property
    def ai_configured(self) -> bool:
        """False means every suggestion endpoint serves default batches."""
        return bool(self.GOOGLE_API_KEY)

    def missing_settings(self) -> List[str]:
        """Names of required variables that are empty."""
        required = {
            "SUPABASE_URL": self.SUPABASE_URL,
            "GOOGLE_API_KEY": self.GOOGLE_API_KEY,
        }
        return [name for name, value in required.items() if not value]

    def validate(self) -> None:
        """
        Raises:
            ValueError: If any required variable is empty.
        """
        missing = self.missing_settings()
        if missing:
            raise ValueError(
                f"Missing environment variables: {', '.join(missing)}. "
                "Set them in the environment or in .env."
            )

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"


settings = Settings()

# VALIDATE_CONFIG=false is used by the test suite
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        if not settings.is_development():
            raise
        print(f"⚠️  Warning: {e}")
        print("   AI endpoints will serve default suggestions until your .env file is configured.")
