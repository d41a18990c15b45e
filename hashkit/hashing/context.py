"""
Incremental hashing context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.exceptions import ContextFinalizedError
from ..services.logging import get_logger
from .digest import Digest

if TYPE_CHECKING:
    from .algorithm import Algorithm


class HashContext:
    """
    Running hash state for one algorithm.

    Feed data with update() in order, then call finish() exactly once.
    The digest depends only on the concatenated input, not on how it was
    split across update() calls. A finished context refuses further use.

    Not safe for concurrent update() calls from several threads.
    """

    __slots__ = ("_algorithm", "_hasher")

    def __init__(self, algorithm: Algorithm) -> None:
        self._algorithm = algorithm
        self._hasher = algorithm.create_hasher()

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def finished(self) -> bool:
        """True once finish() has been called."""
        return self._hasher is None

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """
        Append data to the running state.

        Raises:
            ContextFinalizedError: If the context was already finished
            TypeError: If data is not bytes-like (e.g. an unencoded str)
        """
        if self._hasher is None:
            raise ContextFinalizedError(
                "Cannot update a finished hash context",
                context={"algorithm": self._algorithm.value},
            )
        self._hasher.update(data)

    def finish(self) -> Digest:
        """
        Finalize the running state into a Digest.

        Raises:
            ContextFinalizedError: If the context was already finished
        """
        hasher = self._hasher
        if hasher is None:
            raise ContextFinalizedError(
                "Hash context already finished",
                context={"algorithm": self._algorithm.value},
            )
        self._hasher = None
        get_logger().debug("Finished %s context", self._algorithm.value)
        return Digest(self._algorithm, hasher.digest())

    def __repr__(self) -> str:
        state = "finished" if self.finished else "open"
        return f"<HashContext {self._algorithm.value} {state}>"
