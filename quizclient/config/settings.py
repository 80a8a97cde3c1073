"""Application settings and configuration."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend
    api_base_url: str = Field(
        default="http://localhost:3000",
        description="Base URL of the quiz generation backend",
        validation_alias="QUIZ_API_BASE_URL",
    )
    generate_path: str = Field(
        default="/api/quiz/generate",
        description="Path of the quiz generation endpoint",
        validation_alias="QUIZ_GENERATE_PATH",
    )

    # Only connection establishment is bounded, never the full round trip
    connect_timeout_seconds: float = Field(
        default=10.0,
        gt=0.0,
        description="Connection establishment timeout in seconds",
        validation_alias="QUIZ_CONNECT_TIMEOUT",
    )

    # Request defaults
    default_question_count: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Questions requested when none are given",
        validation_alias="QUIZ_DEFAULT_QUESTIONS",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Log level for the command line tool",
        validation_alias="QUIZ_LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def generate_url(self) -> str:
        """Full URL of the quiz generation endpoint."""
        return self.api_base_url.rstrip("/") + self.generate_path


# Loaded once and shared by the service and the CLI
@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
