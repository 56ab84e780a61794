"""Configuration management for Momentum."""

from momentum.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from momentum.core.config.models import AnimationDefaults, AppConfig, LoggingConfig

__all__ = [
    "AnimationDefaults",
    "AppConfig",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
