"""PCG32 deterministic byte source with stream selection.

Implements the PCG XSH-RR 64/32 generator as seeded by the reference
``pcg32_srandom_r(initstate, initseq)``: the sequence selects one of 2**63
independent streams. Output words are serialized little-endian.
"""

from __future__ import annotations

import secrets

from randbytes.config import SourceKind
from randbytes.entropy.base import ByteSource
from randbytes.entropy.registry import register_byte_source

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MULTIPLIER = 6364136223846793005


@register_byte_source(SourceKind.PCG32)
class Pcg32ByteSource(ByteSource):
    """Seeded PCG32 generator.

    Args:
        seed: Unsigned 64-bit initial state. Drawn at random when omitted.
        sequence: Unsigned 64-bit stream selector. Defaults to 0.
    """

    def __init__(self, seed: int | None = None, sequence: int | None = None) -> None:
        if seed is None:
            seed = secrets.randbits(64)
        if sequence is None:
            sequence = 0
        self._seed = seed
        self._sequence = sequence
        self._state = 0
        self._inc = ((sequence << 1) | 1) & _MASK64
        self._step()
        self._state = (self._state + seed) & _MASK64
        self._step()
        self._pending = b""

    @property
    def name(self) -> str:
        """Return ``'pcg32'``."""
        return "pcg32"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int:
        """Initial state the generator was seeded with."""
        return self._seed

    @property
    def sequence(self) -> int:
        """Stream selector in use."""
        return self._sequence

    def _step(self) -> None:
        self._state = (self._state * _MULTIPLIER + self._inc) & _MASK64

    def next_u32(self) -> int:
        """Advance the generator and return the next 32-bit output."""
        old = self._state
        self._step()
        xorshifted = (((old >> 18) ^ old) >> 27) & _MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & _MASK32

    def fill(self, buffer: bytearray) -> None:
        """Overwrite *buffer* with the next ``len(buffer)`` stream bytes."""
        needed = len(buffer)
        words = (needed - len(self._pending) + 3) // 4
        data = self._pending + b"".join(
            self.next_u32().to_bytes(4, "little") for _ in range(max(words, 0))
        )
        buffer[:] = data[:needed]
        self._pending = data[needed:]

    def close(self) -> None:
        """No-op, no resources to release."""
