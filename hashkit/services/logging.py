"""
Logger implementation for hashkit internal diagnostics.

Wraps stdlib logging with configurable handlers for console (stderr) and file.
Library code resolves the active logger through get_logger(); until
something installs a real logger, diagnostics go to a NullLogger.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from ..core.interfaces.logger import ILogger

if TYPE_CHECKING:
    from ..core.models.config import LoggingConfig


class HashkitLogger(ILogger):
    """
    Logger implementation using stdlib logging.

    Supports dual output to stderr and ~/.hashkit/hashkit.log.
    """

    LOG_FILE_PATH = Path.home() / ".hashkit" / "hashkit.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 3

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "hashkit",
        level: str = "warning",
        console_enabled: bool = True,
        file_enabled: bool = False,
        file_path: Path | None = None,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
            file_enabled: Enable rotating file output
            file_path: Log file location (default: ~/.hashkit/hashkit.log)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)  # Let handlers filter
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)
        self._logger.propagate = False

        self._console_handler: logging.Handler | None = None
        self._file_handler: logging.Handler | None = None

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        log_level = self.LEVEL_MAP.get(level.lower(), logging.WARNING)

        if console_enabled:
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(log_level)
            console.setFormatter(formatter)
            self._logger.addHandler(console)
            self._console_handler = console

        if file_enabled:
            self._setup_file_handler(formatter, log_level, file_path or self.LOG_FILE_PATH)

    def _setup_file_handler(self, formatter: logging.Formatter, level: int, path: Path) -> None:
        """Set up rotating file handler."""
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=self.MAX_FILE_SIZE,
            backupCount=self.BACKUP_COUNT,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)
        self._file_handler = file_handler

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level for all handlers."""
        lvl = self.LEVEL_MAP.get(level.lower(), logging.WARNING)
        if self._console_handler:
            self._console_handler.setLevel(lvl)
        if self._file_handler:
            self._file_handler.setLevel(lvl)

    def close(self) -> None:
        """Detach and close this logger's handlers."""
        for handler in (self._console_handler, self._file_handler):
            if handler is not None:
                handler.close()
                self._logger.removeHandler(handler)
        self._console_handler = None
        self._file_handler = None


class NullLogger(ILogger):
    """No-op logger for testing or when logging is disabled."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def set_level(self, level: str) -> None:
        """No-op."""
        pass


_active_logger: ILogger = NullLogger()


def get_logger() -> ILogger:
    """Return the logger library code should write diagnostics to."""
    return _active_logger


def set_logger(logger: ILogger | None) -> ILogger:
    """
    Install a logger for hashkit diagnostics.

    Args:
        logger: Logger to install, or None to restore the NullLogger

    Returns:
        The previously installed logger
    """
    global _active_logger

    previous = _active_logger
    _active_logger = logger if logger is not None else NullLogger()
    return previous


def configure_logging(config: LoggingConfig) -> ILogger:
    """
    Build and install a logger from a logging config section.

    Installs a NullLogger when both console and file output are disabled.
    Handlers of a previously configured HashkitLogger are closed.
    """
    logger: ILogger
    if config.console or config.file:
        logger = HashkitLogger(
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            file_path=Path(config.file_path).expanduser() if config.file_path else None,
        )
    else:
        logger = NullLogger()
    previous = set_logger(logger)
    if isinstance(previous, HashkitLogger) and previous is not logger:
        previous.close()
    return logger
