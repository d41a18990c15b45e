"""
File hashing.

Two read modes are supported:

- LINES (default): the file is split on b"\\n" and each line is fed to
  the hasher without its terminator (a "\\r\\n" pair is dropped as a
  whole). Every line must be valid UTF-8. Digests from this mode only
  match the raw file bytes when the file has no newline at all.
- BYTES: the file is fed verbatim in fixed-size chunks.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING, BinaryIO

from ..core.exceptions import FileOpenError, FileReadError
from ..services.logging import get_logger

if TYPE_CHECKING:
    from .algorithm import Algorithm
    from .context import HashContext
    from .digest import Digest

CHUNK_SIZE = 8192


class FileReadMode(Enum):
    """How hash_file feeds file contents to the hasher."""

    LINES = "lines"
    BYTES = "bytes"


def hash_file(
    algorithm: Algorithm,
    path: str | os.PathLike[str],
    mode: FileReadMode | str = FileReadMode.LINES,
) -> Digest:
    """
    Hash a file with the given algorithm.

    Args:
        algorithm: Algorithm to hash with
        path: File to read
        mode: FileReadMode or its string value ("lines" or "bytes")

    Returns:
        Digest of the fed contents

    Raises:
        FileOpenError: If the file cannot be opened
        FileReadError: If reading fails, or a line is not valid UTF-8
        ValueError: If mode is not a known read mode
    """
    mode = FileReadMode(mode)
    path_str = os.fspath(path)
    logger = get_logger()

    try:
        f = open(path_str, "rb")
    except OSError as e:
        logger.warning("Failed to open %s for hashing: %s", path_str, e)
        raise FileOpenError(
            f"cannot open file at {path_str}: {e.strerror or e}",
            path=path_str,
            cause=e,
        ) from e

    logger.debug("Hashing %s with %s (%s mode)", path_str, algorithm.value, mode.value)
    ctx = algorithm.new_context()
    with f:
        if mode is FileReadMode.LINES:
            fed = _feed_lines(ctx, f, path_str)
            logger.debug("Fed %d lines from %s", fed, path_str)
        else:
            fed = _feed_chunks(ctx, f, path_str)
            logger.debug("Fed %d bytes from %s", fed, path_str)

    return ctx.finish()


def _feed_lines(ctx: HashContext, f: BinaryIO, path: str) -> int:
    """Feed each line without its terminator. Returns the line count."""
    line_no = 0
    try:
        for raw in f:
            line_no += 1
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            try:
                raw.decode("utf-8")
            except UnicodeDecodeError as e:
                get_logger().warning("Line %d of %s is not valid UTF-8", line_no, path)
                raise FileReadError(
                    f"cannot read line {line_no} of {path}: invalid UTF-8",
                    path=path,
                    line=line_no,
                    cause=e,
                ) from e
            ctx.update(raw)
    except OSError as e:
        get_logger().warning("Failed reading %s at line %d: %s", path, line_no + 1, e)
        raise FileReadError(
            f"cannot read line {line_no + 1} of {path}: {e.strerror or e}",
            path=path,
            line=line_no + 1,
            cause=e,
        ) from e
    return line_no


def _feed_chunks(ctx: HashContext, f: BinaryIO, path: str) -> int:
    """Feed raw bytes in CHUNK_SIZE pieces. Returns the byte count."""
    total = 0
    try:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            ctx.update(chunk)
            total += len(chunk)
    except OSError as e:
        get_logger().warning("Failed reading %s after %d bytes: %s", path, total, e)
        raise FileReadError(
            f"cannot read {path}: {e.strerror or e}",
            path=path,
            context={"offset": total},
            cause=e,
        ) from e
    return total
