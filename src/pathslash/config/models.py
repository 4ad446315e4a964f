"""Pydantic configuration models for pathslash."""

import codecs
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class ConversionConfig(BaseModel):
    """Separator conversion configuration."""

    flavour: Literal["auto", "posix", "windows"] = "auto"
    encoding: str | None = None

    @field_validator("flavour", mode="before")
    @classmethod
    def lower_flavour(cls, v: object) -> object:
        """Accept flavour names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str | None) -> str | None:
        """Validate codec name and return its canonical form."""
        if v is None:
            return None
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class PathSlashConfig(BaseSettings):
    """Root configuration for pathslash."""

    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "PATHSLASH_",
        "env_nested_delimiter": "__",
    }
