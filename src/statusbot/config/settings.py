"""
Statusbot Configuration

Centralized configuration for the recognizer, search index, session store and
logging. All settings can be overridden via environment variables.

Example:
    >>> from statusbot.config import get_settings
    >>> settings = get_settings()
    >>> settings.SEARCH_INDEX_NAME
    'azuresql-index'
"""
import os
from typing import Optional


def _env_float(name: str, default: str) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return float(default)


def _env_int(name: str, default: str) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return int(default)


class Settings:
    """
    Settings snapshot taken from the environment at construction time.

    Credentials and endpoints are never defaulted; a missing recognizer
    setting leaves the recognizer unconfigured and a missing search setting
    makes the search client refuse to run.
    """

    def __init__(self):
        # ====================================================================
        # Recognizer (Conversational Language Understanding)
        # ====================================================================
        self.CLU_ENDPOINT: Optional[str] = os.getenv("CLU_ENDPOINT")
        self.CLU_API_KEY: Optional[str] = os.getenv("CLU_API_KEY")
        self.CLU_PROJECT_NAME: Optional[str] = os.getenv("CLU_PROJECT_NAME")
        self.CLU_DEPLOYMENT_NAME: Optional[str] = os.getenv("CLU_DEPLOYMENT_NAME")
        self.CLU_API_VERSION: str = os.getenv("CLU_API_VERSION", "2023-04-01")

        self.STATUS_INTENT_NAME: str = os.getenv("STATUS_INTENT_NAME", "count")
        """Top intent label that starts the status flow"""

        # ====================================================================
        # Search index
        # ====================================================================
        self.SEARCH_ENDPOINT: Optional[str] = os.getenv("SEARCH_ENDPOINT")
        self.SEARCH_API_KEY: Optional[str] = os.getenv("SEARCH_API_KEY")
        self.SEARCH_INDEX_NAME: str = os.getenv("SEARCH_INDEX_NAME", "azuresql-index")
        self.SEARCH_API_VERSION: str = os.getenv("SEARCH_API_VERSION", "2023-11-01")
        self.SEARCH_QUERY_TYPE: str = os.getenv("SEARCH_QUERY_TYPE", "simple")

        # ====================================================================
        # HTTP / API
        # ====================================================================
        self.HTTP_TIMEOUT_SECONDS: float = _env_float("HTTP_TIMEOUT_SECONDS", "30")
        self.API_HOST: str = os.getenv("HOST", "0.0.0.0")
        self.API_PORT: int = _env_int("PORT", "8000")

        # ====================================================================
        # Sessions
        # ====================================================================
        self.REDIS_URL: Optional[str] = os.getenv("REDIS_URL")

        # ====================================================================
        # Logging
        # ====================================================================
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"""

        self.LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")
        """Log format: 'json' (structured) or 'pretty' (readable)"""

        self.LOG_FILE: Optional[str] = os.getenv("LOG_FILE")

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from the current environment."""
        return cls()

    @property
    def recognizer_configured(self) -> bool:
        return all([
            self.CLU_ENDPOINT,
            self.CLU_API_KEY,
            self.CLU_PROJECT_NAME,
            self.CLU_DEPLOYMENT_NAME,
        ])

    @property
    def search_configured(self) -> bool:
        return bool(self.SEARCH_ENDPOINT and self.SEARCH_API_KEY)

    def summary(self) -> str:
        """
        Get configuration summary as formatted string.

        Secrets are reported as set/not set only.
        """
        def _flag(value) -> str:
            return "set" if value else "not set"

        lines = [
            "=" * 60,
            "Statusbot Configuration",
            "=" * 60,
            "",
            "Recognizer:",
            f"  Endpoint:           {self.CLU_ENDPOINT or 'None'}",
            f"  API Key:            {_flag(self.CLU_API_KEY)}",
            f"  Project:            {self.CLU_PROJECT_NAME or 'None'}",
            f"  Deployment:         {self.CLU_DEPLOYMENT_NAME or 'None'}",
            f"  Status Intent:      {self.STATUS_INTENT_NAME}",
            "",
            "Search:",
            f"  Endpoint:           {self.SEARCH_ENDPOINT or 'None'}",
            f"  API Key:            {_flag(self.SEARCH_API_KEY)}",
            f"  Index:              {self.SEARCH_INDEX_NAME}",
            f"  Query Type:         {self.SEARCH_QUERY_TYPE}",
            "",
            "Sessions:",
            f"  Redis:              {_flag(self.REDIS_URL)}",
            "",
            "Logging:",
            f"  Level:              {self.LOG_LEVEL}",
            f"  Format:             {self.LOG_FORMAT}",
            f"  File:               {self.LOG_FILE or 'None'}",
            "=" * 60,
        ]
        return "\n".join(lines)


def get_settings() -> Settings:
    """Return settings read from the current environment."""
    return Settings.from_env()
