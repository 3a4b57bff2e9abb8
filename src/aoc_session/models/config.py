"""Application configuration with Pydantic Settings."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .session import SESSION_COOKIE_NAME


AOC_DOMAIN = "adventofcode.com"

# Lookup order used when several browsers hold a session cookie
DEFAULT_BROWSERS = [
    "firefox",
    "librewolf",
    "chrome",
    "chromium",
    "brave",
    "edge",
    "vivaldi",
    "opera",
    "opera_gx",
    "safari",
]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AocSessionConfig(BaseSettings):
    """Application configuration with environment variable support.

    Configuration can be set via:
    1. Environment variables (prefixed with AOC_SESSION_)
    2. .env file
    3. Direct instantiation

    Example:
        export AOC_SESSION_BROWSERS='["chrome", "firefox"]'
        export AOC_SESSION_LOG_LEVEL=DEBUG

        config = AocSessionConfig()
        print(config.browsers)  # ['chrome', 'firefox']
    """

    model_config = SettingsConfigDict(
        env_prefix="AOC_SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Lookup
    domains: list[str] = Field(
        default_factory=lambda: [AOC_DOMAIN], min_length=1, description="Cookie domains to read"
    )
    cookie_name: str = Field(
        default=SESSION_COOKIE_NAME, min_length=1, description="Name of the session cookie"
    )
    browsers: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BROWSERS),
        description="Browsers to read, in priority order",
    )

    # Logging
    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @field_validator("browsers")
    @classmethod
    def check_browsers(cls, value: list[str]) -> list[str]:
        browsers = [name.strip().lower() for name in value]
        unknown = [name for name in browsers if name not in DEFAULT_BROWSERS]
        if unknown:
            raise ValueError(
                f"Unsupported browser(s): {', '.join(unknown)}. "
                f"Choose from: {', '.join(DEFAULT_BROWSERS)}"
            )
        return browsers

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level {value!r}. Choose from: {', '.join(LOG_LEVELS)}")
        return level
