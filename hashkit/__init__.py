"""
hashkit - message digests over bytes, strings and files.

Usage:
    from hashkit import Algorithm

    Algorithm.SHA256.hash_str("Hello, World!").to_hex()
"""

from .core.exceptions import (
    ContextFinalizedError,
    FileHashError,
    FileOpenError,
    FileReadError,
    HashkitException,
    InvalidDigestError,
    UnknownAlgorithmError,
)
from .hashing import Algorithm, Digest, FileReadMode, HashContext, hash_file

__all__ = [
    "Algorithm",
    "ContextFinalizedError",
    "Digest",
    "FileHashError",
    "FileOpenError",
    "FileReadError",
    "FileReadMode",
    "HashContext",
    "HashkitException",
    "InvalidDigestError",
    "UnknownAlgorithmError",
    "hash_file",
]
