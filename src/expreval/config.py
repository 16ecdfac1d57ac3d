"""
Configuration management for Expreval.

Handles loading configuration from environment variables, YAML files,
and provides sensible defaults for all settings.
"""

import logging
from pathlib import Path

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="EXPREVAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "Expreval"
    log_level: str = "INFO"

    # Server settings
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    # Evaluation settings
    strict: bool = False  # Reject trailing input after the expression
    max_expression_length: int | None = 1000  # None disables the limit

    # CLI settings
    repl_prompt: str = "> "

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Build settings with values from a YAML file taking precedence."""
        return cls(**load_yaml_config(path))


# Global settings instance
settings = Settings()


def load_yaml_config(path: Path) -> dict:
    """Load configuration from a YAML file."""
    import yaml

    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


def apply_yaml_config(path: Path) -> Settings:
    """Update the global settings in place from a YAML file."""
    loaded = Settings.from_yaml(path)
    for name in Settings.model_fields:
        setattr(settings, name, getattr(loaded, name))
    return settings


LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def configure_logging(level: str | None = None) -> None:
    """
    Configure structlog to drop events below the given level.

    Raises:
        ValueError: if the level is not one of LOG_LEVELS.
    """
    name = (level or settings.log_level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level or settings.log_level}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVELS[name]),
    )
