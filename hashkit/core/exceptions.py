"""
Custom exception hierarchy for hashkit.

Only the file-reading path can fail at runtime; in-memory hashing is
infallible. Validation and programming errors get their own branches so
callers can tell them apart from I/O problems.
"""

from __future__ import annotations


class HashkitException(Exception):
    """
    Base exception for all hashkit errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, line numbers, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether the caller can reasonably handle and continue
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# File Errors
# =============================================================================


class FileHashError(HashkitException):
    """
    Base class for failures while hashing a file.

    Attributes:
        path: The path that was being hashed
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)
        self.path = path


class FileOpenError(FileHashError):
    """
    The file could not be opened for reading.

    Raised for missing files, permission errors, directories, etc.
    The underlying OSError is available as ``__cause__``.
    """

    @property
    def not_found(self) -> bool:
        """True when the file does not exist."""
        return isinstance(self.__cause__, FileNotFoundError)


class FileReadError(FileHashError):
    """
    The file was opened but reading failed part way through.

    Raised for I/O errors during reading and, in line mode, for lines
    that are not valid UTF-8.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        line: int | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if line is not None:
            ctx["line"] = line
        super().__init__(message, path=path, context=ctx, cause=cause)
        self.line = line


# =============================================================================
# Validation Errors
# =============================================================================


class HashkitValidationError(HashkitException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError so callers can catch it generically.
    """

    exit_code: int = 2


class UnknownAlgorithmError(HashkitValidationError):
    """An algorithm name did not match any supported algorithm."""

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if name is not None:
            ctx["name"] = name
        super().__init__(message, context=ctx, cause=cause)


class InvalidDigestError(HashkitValidationError):
    """A hex digest was malformed or had the wrong length for its algorithm."""

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Programming Errors
# =============================================================================


class ContextFinalizedError(HashkitException, RuntimeError):
    """
    A hash context was used after ``finish()``.

    This is a bug in the calling code, never a runtime condition.
    """

    recoverable: bool = False


# =============================================================================
# Configuration Errors
# =============================================================================


class HashkitConfigError(HashkitException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(HashkitConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, unreadable files, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)
