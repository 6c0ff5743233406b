"""
Configuration module for the PC Build Advisor backend.

Loads environment variables (optionally from a .env file) and exposes them
through a single ``settings`` object.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini API
    # Read on every access so a credential rotated on the platform is picked up
    # by the next invocation.
    @property
    def GEMINI_API_KEY(self) -> str:
        """Get the Gemini API key (empty string when not configured)."""
        return os.getenv("GEMINI_API_KEY", "")

    @property
    def GEMINI_MODEL(self) -> str:
        """Get the Gemini model used for build generation."""
        return os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only consulted in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()
