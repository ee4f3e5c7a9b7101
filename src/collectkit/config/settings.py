"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from collectkit.config import RandomSettings, LoggingSettings

    # Load from environment variables (COLLECTKIT_RANDOM_*, COLLECTKIT_LOG_*)
    rng_settings = RandomSettings()
    log_settings = LoggingSettings()

    # Or override with explicit values
    rng_settings = RandomSettings(seed=42)
"""

from __future__ import annotations

from pydantic import Field

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install collectkit[config]"
    ) from e


class RandomSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the random-number wrappers.

    Attributes:
        seed: Seed for reproducible draws (None seeds from system entropy).
        bit_probability: Default probability of `random_bit()` returning True.

    Environment Variables:
        COLLECTKIT_RANDOM_SEED
        COLLECTKIT_RANDOM_BIT_PROBABILITY
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLECTKIT_RANDOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    seed: int | None = None
    bit_probability: float = Field(default=0.5, ge=0.0, le=1.0)


class LoggingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for collectkit's loggers.

    Attributes:
        level: Level name applied to the `collectkit` logger.
        format: Format string for the stream handler.

    Environment Variables:
        COLLECTKIT_LOG_LEVEL
        COLLECTKIT_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLECTKIT_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
