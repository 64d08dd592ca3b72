"""Configuration management for modpack."""

from modpack.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from modpack.core.config.models import AppConfig, LoggingConfig

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "LoggingConfig",
]
