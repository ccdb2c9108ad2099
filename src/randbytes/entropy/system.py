"""Secure byte source using ``os.urandom()``.

This is the default source. It draws from the operating system's CSPRNG
and cannot be seeded.
"""

from __future__ import annotations

import os

from randbytes.config import SourceKind
from randbytes.entropy.base import ByteSource
from randbytes.entropy.registry import register_byte_source
from randbytes.exceptions import EntropyUnavailableError


@register_byte_source(SourceKind.SECURE)
class SecureByteSource(ByteSource):
    """``os.urandom()`` wrapper, cryptographically secure and not seedable."""

    @property
    def name(self) -> str:
        """Return ``'secure'``."""
        return "secure"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    def fill(self, buffer: bytearray) -> None:
        """Overwrite *buffer* with bytes from the OS CSPRNG.

        Raises:
            EntropyUnavailableError: If the OS random API fails.
        """
        try:
            buffer[:] = os.urandom(len(buffer))
        except OSError as exc:
            raise EntropyUnavailableError(f"OS random source failed: {exc}") from exc

    def close(self) -> None:
        """No-op, no resources to release."""
