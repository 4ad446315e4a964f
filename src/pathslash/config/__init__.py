"""Configuration management for pathslash."""

from pathslash.config.loader import load_config
from pathslash.config.models import ConversionConfig, LoggingConfig, PathSlashConfig

__all__ = ["ConversionConfig", "LoggingConfig", "PathSlashConfig", "load_config"]
