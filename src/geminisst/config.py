"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel

from .constants import DEFAULT_MODEL


class GeminiConfig(BaseModel, frozen=True):
    """Gemini API configuration."""

    api_key: str
    model_name: str = DEFAULT_MODEL


class LoggingConfig(BaseModel, frozen=True):
    """Logging configuration."""

    level: str = "INFO"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    logging: LoggingConfig = LoggingConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        ),
        logging=LoggingConfig(
            level=os.getenv("GEMINISST_LOG_LEVEL", "INFO").upper(),
        ),
    )
