"""
Configuration Management

Loads environment variables and provides settings for the sheet sync job.
Uses python-dotenv for local development and environment variables for production.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_WRITE_RANGE = "シート!A2"
DEFAULT_CLEAR_RANGE = "シート!A12:Z2000"


class ConfigError(ValueError):
    """Raised when a mandatory setting is missing or empty."""


@dataclass(frozen=True, repr=False)
class Settings:
    """
    Job settings resolved once per run.

    Built explicitly with ``Settings.from_env()`` and passed into each
    component, so nothing reads process-wide state after startup.
    """

    # Source API
    SOURCE_API_URL: str
    SOURCE_API_KEY: str

    # Google Sheets Configuration
    SHEET_ID: str
    WRITE_RANGE: str = DEFAULT_WRITE_RANGE
    CLEAR_RANGE: str = DEFAULT_CLEAR_RANGE
    GOOGLE_CREDENTIALS_PATH: Optional[str] = None

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    REQUIRED_FIELDS = ("SHEET_ID", "SOURCE_API_URL", "SOURCE_API_KEY")

    def __post_init__(self):
        """Validate required settings on initialization."""
        self._validate_settings()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Validated Settings instance

        Raises:
            ConfigError: If required settings are missing
        """
        env = os.environ if environ is None else environ
        return cls(
            SHEET_ID=env.get("SHEET_ID", ""),
            SOURCE_API_URL=env.get("SOURCE_API_URL", ""),
            SOURCE_API_KEY=env.get("SOURCE_API_KEY", ""),
            WRITE_RANGE=env.get("WRITE_RANGE") or DEFAULT_WRITE_RANGE,
            CLEAR_RANGE=env.get("CLEAR_RANGE") or DEFAULT_CLEAR_RANGE,
            GOOGLE_CREDENTIALS_PATH=env.get("GOOGLE_CREDENTIALS_PATH") or None,
            LOG_LEVEL=env.get("LOG_LEVEL") or "INFO",
            LOG_FILE=env.get("LOG_FILE") or None,
        )

    def _validate_settings(self) -> None:
        """
        Validate that all required settings are provided.

        Raises:
            ConfigError: If required settings are missing
        """
        missing_fields = [
            field for field in self.REQUIRED_FIELDS
            if not getattr(self, field, None)
        ]

        if missing_fields:
            raise ConfigError(
                f"Missing required env: {', '.join(missing_fields)}. "
                f"Please check your .env file."
            )

    def __repr__(self) -> str:
        """Return string representation (excluding sensitive data)."""
        return (
            f"Settings("
            f"SHEET_ID={self.SHEET_ID}, "
            f"SOURCE_API_URL={self.SOURCE_API_URL}, "
            f"WRITE_RANGE={self.WRITE_RANGE}, "
            f"CLEAR_RANGE={self.CLEAR_RANGE}"
            f")"
        )
