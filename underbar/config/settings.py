"""
Library settings using Pydantic BaseSettings.

Minimal configuration management with environment variable support.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library and command line configuration settings."""

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="console", description="Log format: json or console"
    )
    log_file: Path | None = Field(default=None, description="Optional log file")

    # Combinator behaviour
    memoize_cache: bool = Field(
        default=True,
        description="Cache results in memoize wrappers; off delegates every call",
    )
    delay_use_event_loop: bool = Field(
        default=True,
        description="Schedule delay() on a running asyncio loop when available",
    )

    # Randomness
    shuffle_seed: int | None = Field(
        default=None, description="Seed for the default shuffle random source"
    )

    model_config = {
        "env_prefix": "UNDERBAR_",
        "env_file": ".env",
        "case_sensitive": False,
    }


def get_settings() -> Settings:
    """Get library settings instance."""
    return Settings()
