"""Pydantic models for hashkit configuration."""

from .config import ConfigBaseModel, FileMode, HashConfig, LoggingConfig, LogLevel

__all__ = [
    "ConfigBaseModel",
    "FileMode",
    "HashConfig",
    "LogLevel",
    "LoggingConfig",
]
