"""
Immutable digest value with bytes, buffer and hex views.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.exceptions import InvalidDigestError

if TYPE_CHECKING:
    from .algorithm import Algorithm


class Digest:
    """
    Result of finishing a hash context.

    The length of the digest is fixed by its algorithm. Two digests are
    equal when both the algorithm and the bytes match.
    """

    __slots__ = ("_algorithm", "_value")

    def __init__(self, algorithm: Algorithm, value: bytes) -> None:
        if len(value) != algorithm.digest_size:
            raise InvalidDigestError(
                f"Expected {algorithm.digest_size} bytes, got {len(value)}",
                algorithm=algorithm.value,
            )
        self._algorithm = algorithm
        self._value = bytes(value)

    @classmethod
    def from_hex(cls, algorithm: Algorithm, text: str) -> Digest:
        """
        Parse a hex digest produced by to_hex() (either case).

        Raises:
            InvalidDigestError: If text is not hex or has the wrong length
        """
        stripped = text.strip()
        if len(stripped) != algorithm.hex_length:
            raise InvalidDigestError(
                f"Expected {algorithm.hex_length} hex characters, got {len(stripped)}",
                algorithm=algorithm.value,
                value=text,
            )
        try:
            value = bytes.fromhex(stripped)
        except ValueError as e:
            raise InvalidDigestError(
                "Malformed hex digest",
                algorithm=algorithm.value,
                value=text,
                cause=e,
            ) from e
        return cls(algorithm, value)

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    def as_bytes(self) -> bytes:
        """The digest bytes. Shared, but immutable."""
        return self._value

    def to_vec(self) -> bytearray:
        """An independent, mutable copy of the digest bytes."""
        return bytearray(self._value)

    def to_hex(self) -> str:
        """Lowercase hex, two characters per byte, no prefix."""
        return self._value.hex()

    def __bytes__(self) -> bytes:
        return self._value

    def __len__(self) -> int:
        return len(self._value)

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"Digest({self._algorithm.name}, {self.to_hex()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self._algorithm is other._algorithm and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._algorithm, self._value))
