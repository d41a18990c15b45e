"""Abstract interfaces for hashkit services."""

from .logger import ILogger

__all__ = ["ILogger"]
