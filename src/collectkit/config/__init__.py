"""Configuration module using Pydantic Settings.

Provides typed configuration for the random-number wrappers and logging,
with environment variable support.

Usage:
    from collectkit.config import RandomSettings, configure_logging

    settings = RandomSettings(seed=42)
    configure_logging()
"""

from collectkit.config.log import configure_logging
from collectkit.config.settings import LoggingSettings, RandomSettings

__all__ = [
    "RandomSettings",
    "LoggingSettings",
    "configure_logging",
]
