"""
Digest computation.

Algorithm selects the hash function and acts as the factory for
incremental contexts and one-shot hashing; HashContext accumulates data;
Digest holds the finished result.
"""

from .algorithm import Algorithm
from .context import HashContext
from .digest import Digest
from .files import CHUNK_SIZE, FileReadMode, hash_file

__all__ = [
    "CHUNK_SIZE",
    "Algorithm",
    "Digest",
    "FileReadMode",
    "HashContext",
    "hash_file",
]
