"""Configuration settings for the set ingestor API."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:3001"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Voice parsing
    MAX_TRANSCRIPT_LENGTH: int = 500
    ENFORCE_POSITIVE_VALUES: bool = True

    # HTTP
    CORS_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_LEVEL = level if level in LOG_LEVELS else "INFO"

        # Voice parsing
        try:
            self.MAX_TRANSCRIPT_LENGTH = int(os.getenv("MAX_TRANSCRIPT_LENGTH", "500"))
        except ValueError:
            self.MAX_TRANSCRIPT_LENGTH = 500
        self.ENFORCE_POSITIVE_VALUES = os.getenv("ENFORCE_POSITIVE_VALUES", "true").lower() == "true"

        # HTTP
        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()
