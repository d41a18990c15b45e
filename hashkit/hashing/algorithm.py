"""
Hash algorithm selector.

A single enum stands in for the whole family: the algorithms differ only
in which hashlib constructor they use, so one class dispatches on its own
value instead of one subclass per algorithm.
"""

from __future__ import annotations

import hashlib
import os
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..core.exceptions import UnknownAlgorithmError
from .context import HashContext

if TYPE_CHECKING:
    from .digest import Digest
    from .files import FileReadMode


class Algorithm(Enum):
    """
    Supported digest algorithms.

    Each member's value is its hashlib name.

    Example:
        digest = Algorithm.SHA256.hash_str("Hello, World!")
        print(digest.to_hex())

        ctx = Algorithm.SHA512.new_context()
        ctx.update(b"Hello, ")
        ctx.update(b"World!")
        assert ctx.finish() == Algorithm.SHA512.hash(b"Hello, World!")
    """

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA512_256 = "sha512_256"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Length of the hex encoding of a digest."""
        return 2 * self.digest_size

    @classmethod
    def from_name(cls, name: str) -> Algorithm:
        """
        Look up an algorithm by a user-supplied name.

        Matching ignores case and dashes, and treats '/' like '_', so
        'sha256', 'SHA-256', 'sha512/256' and 'SHA-512/256' all resolve.

        Raises:
            UnknownAlgorithmError: If the name matches no algorithm
        """
        key = name.strip().lower().replace("-", "").replace("/", "_")
        algorithm = _ALIASES.get(key)
        if algorithm is None:
            raise UnknownAlgorithmError(
                f"Unknown hash algorithm: {name}",
                context={"available": cls.names()},
                name=name,
            )
        return algorithm

    @classmethod
    def names(cls) -> list[str]:
        """Canonical algorithm names in declaration order."""
        return [algorithm.value for algorithm in cls]

    def create_hasher(self) -> Any:
        """Create a raw hashlib object for this algorithm."""
        return hashlib.new(self.value)

    def new_context(self) -> HashContext:
        """Create a fresh incremental hashing context."""
        return HashContext(self)

    def hash(self, data: bytes | bytearray | memoryview) -> Digest:
        """Hash a complete byte buffer in one call."""
        ctx = self.new_context()
        ctx.update(data)
        return ctx.finish()

    def hash_vec(self, data: bytearray | bytes) -> Digest:
        """Hash an owned buffer; same result as hash()."""
        return self.hash(data)

    def hash_str(self, data: str) -> Digest:
        """Hash the UTF-8 encoding of a string."""
        return self.hash(data.encode("utf-8"))

    def hash_file(
        self,
        path: str | os.PathLike[str],
        mode: FileReadMode | str | None = None,
    ) -> Digest:
        """
        Hash the contents of a file.

        By default the file is read line by line and each line is fed
        without its terminator, so a file with newlines does not hash to
        the same value as its raw bytes. Pass ``mode=FileReadMode.BYTES``
        to hash the file verbatim.

        Raises:
            FileOpenError: If the file cannot be opened
            FileReadError: If reading fails part way through
        """
        from .files import FileReadMode, hash_file

        return hash_file(self, path, mode if mode is not None else FileReadMode.LINES)

    def verify(self, data: bytes | bytearray | memoryview | str, expected: str) -> bool:
        """
        Check data against an expected hex digest.

        The comparison ignores case and surrounding whitespace. It is not
        constant time.
        """
        if isinstance(data, str):
            digest = self.hash_str(data)
        else:
            digest = self.hash(data)
        return digest.to_hex() == expected.strip().lower()


_DIGEST_SIZES: dict[Algorithm, int] = {
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA384: 48,
    Algorithm.SHA512: 64,
    Algorithm.SHA512_256: 32,
}

_ALIASES: dict[str, Algorithm] = {algorithm.value: algorithm for algorithm in Algorithm}
_ALIASES["sha512256"] = Algorithm.SHA512_256
