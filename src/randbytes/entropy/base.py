"""Abstract base class for all byte sources.

Every byte source (OS randomness, a seeded software PRNG, or an entropy
device) implements this interface. The ABC provides a default
``get_random_bytes()`` that delegates to ``fill()`` and a concrete
``health_check()`` method. Subclasses must implement the four abstract
members: ``name``, ``is_available``, ``fill()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ByteSource(ABC):
    """Abstract base for all byte sources.

    ``fill()`` populates a caller-owned buffer in place. Sources never
    retry: they either fill the whole buffer or raise.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier of the source (e.g., ``'secure'``, ``'pcg32'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide bytes."""

    @abstractmethod
    def fill(self, buffer: bytearray) -> None:
        """Populate every byte of *buffer*.

        Args:
            buffer: Mutable buffer to overwrite; its length is the request size.

        Raises:
            EntropyUnavailableError: If the source cannot provide the bytes.
        """

    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes from this source.
        """
        buffer = bytearray(n)
        self.fill(buffer)
        return bytes(buffer)

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}

    def __enter__(self) -> ByteSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
