"""Configuration loading utilities."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from pathslash.config.models import PathSlashConfig
from pathslash.errors import ConfigurationError


def load_config(config_path: Path | None) -> PathSlashConfig:
    """
    Load configuration from YAML file or return defaults.

    Args:
        config_path: Path to YAML config file, or None for defaults.

    Returns:
        Validated PathSlashConfig object.

    Raises:
        FileNotFoundError: If config_path doesn't exist.
        ConfigurationError: If YAML is invalid or fails validation.
    """
    if config_path is None:
        return PathSlashConfig()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"YAML root must be a mapping, not {type(data).__name__}")

    try:
        return PathSlashConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e
