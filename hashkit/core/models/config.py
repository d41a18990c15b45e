"""
Configuration models.

Provides Pydantic models for hashkit configuration with validation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from ...hashing.algorithm import Algorithm

# Type aliases
FileMode = Literal["lines", "bytes"]
LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BaseModel):
    """Base model for config sections; values from TOML and env are coerced."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML/env types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class HashConfig(ConfigBaseModel):
    """Hash defaults used by the CLI."""

    algorithm: str = Algorithm.SHA256.value
    file_mode: FileMode = "lines"

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: object) -> str:
        """Accept any spelling Algorithm.from_name understands."""
        if isinstance(v, Algorithm):
            return v.value
        if not isinstance(v, str):
            raise ValueError(f"algorithm must be a string, got {type(v).__name__}")
        return Algorithm.from_name(v).value

    @field_validator("file_mode", mode="before")
    @classmethod
    def lowercase_mode(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False
    file_path: str | None = None
