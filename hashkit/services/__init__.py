"""Services for hashkit."""

from .logging import HashkitLogger, NullLogger, configure_logging, get_logger, set_logger

__all__ = [
    "HashkitLogger",
    "NullLogger",
    "configure_logging",
    "get_logger",
    "set_logger",
]
