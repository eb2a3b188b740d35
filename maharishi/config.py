"""
Configuration module for the Maharishi agri assistant backend.

Loads environment variables and validates required settings.
"""
import logging
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini API (API_KEY kept for parity with the web client's env)
    GOOGLE_API_KEY: str = os.getenv("GOOGLE_API_KEY", os.getenv("API_KEY", ""))
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_TIMEOUT_SECONDS: float = float(os.getenv("GEMINI_TIMEOUT_SECONDS", "30"))

    # Sampling temperatures
    RECOMMENDATION_TEMPERATURE: float = float(os.getenv("RECOMMENDATION_TEMPERATURE", "0.7"))
    CHAT_TEMPERATURE: float = float(os.getenv("CHAT_TEMPERATURE", "0.5"))

    # Retry policy for structured recommendation calls
    RECOMMENDATION_MAX_ATTEMPTS: int = int(os.getenv("RECOMMENDATION_MAX_ATTEMPTS", "3"))
    RETRY_BACKOFF_SECONDS: float = float(os.getenv("RETRY_BACKOFF_SECONDS", "1"))
    RETRY_BACKOFF_MAX_SECONDS: float = float(os.getenv("RETRY_BACKOFF_MAX_SECONDS", "8"))

    # Chat sessions idle longer than the TTL are evicted; the cap bounds memory
    CHAT_SESSION_TTL_SECONDS: float = float(os.getenv("CHAT_SESSION_TTL_SECONDS", "1800"))
    CHAT_MAX_SESSIONS: int = int(os.getenv("CHAT_MAX_SESSIONS", "1000"))

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (production only, see main._get_cors_origins)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @property
    def ai_enabled(self) -> bool:
        """AI features are only available when a Gemini key is configured."""
        return bool(self.GOOGLE_API_KEY)

    @classmethod
    def validate(cls) -> None:
        """
        Validate that settings are usable.

        A missing GOOGLE_API_KEY is not an error: the AI features degrade to
        fixed fallback messages instead.

        Raises:
            ValueError: If any numeric setting is out of range.
        """
        problems = []

        for name in ("RECOMMENDATION_TEMPERATURE", "CHAT_TEMPERATURE"):
            value = getattr(cls, name)
            if not 0.0 <= value <= 2.0:
                problems.append(f"{name} must be between 0.0 and 2.0 (got {value})")

        if cls.RECOMMENDATION_MAX_ATTEMPTS < 1:
            problems.append("RECOMMENDATION_MAX_ATTEMPTS must be at least 1")

        if cls.GEMINI_TIMEOUT_SECONDS <= 0:
            problems.append("GEMINI_TIMEOUT_SECONDS must be positive")

        if cls.CHAT_SESSION_TTL_SECONDS <= 0:
            problems.append("CHAT_SESSION_TTL_SECONDS must be positive")

        if cls.CHAT_MAX_SESSIONS < 1:
            problems.append("CHAT_MAX_SESSIONS must be at least 1")

        if problems:
            raise ValueError(
                f"Invalid configuration: {'; '.join(problems)}. "
                "Please check your .env file."
            )

        if not cls.GOOGLE_API_KEY:
            logger.warning("Gemini API key not found. AI features will be disabled.")

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The app may not work correctly until you configure your .env file.")
        else:
            raise
