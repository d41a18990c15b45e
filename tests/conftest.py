"""
Shared pytest fixtures for hashkit tests.

- hello_file: a file holding exactly b"Hello, World!" (no trailing newline)
- write_file: helper to create files with given bytes
- recording_logger: installs a logger that keeps messages in memory
- isolated_env: cwd in tmp_path and no HASHKIT_* environment variables
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from hashkit.core.interfaces.logger import ILogger
from hashkit.services.logging import NullLogger, set_logger

DATA_TO_DIGEST = b"Hello, World!"


class RecordingLogger(ILogger):
    """Logger that records (level, formatted message) pairs."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []
        self.level = "debug"

    def _record(self, level: str, message: str, *args: Any) -> None:
        self.records.append((level, message % args if args else message))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("debug", message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("info", message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("warning", message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._record("error", message, *args)

    def set_level(self, level: str) -> None:
        self.level = level

    def messages(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.records if lvl == level]


@pytest.fixture(autouse=True)
def reset_logger():
    """Restore the NullLogger after every test."""
    yield
    set_logger(NullLogger())


@pytest.fixture
def recording_logger() -> RecordingLogger:
    logger = RecordingLogger()
    set_logger(logger)
    return logger


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a helper that writes bytes to tmp_path/<name>."""

    def write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return write


@pytest.fixture
def hello_file(write_file: Callable[[str, bytes], Path]) -> Path:
    return write_file("testfile.txt", DATA_TO_DIGEST)


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no HASHKIT_* variables set."""
    for key in list(os.environ):
        if key.startswith("HASHKIT_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
