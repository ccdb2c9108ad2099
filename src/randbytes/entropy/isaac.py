"""ISAAC-32 deterministic byte source.

Bob Jenkins' ISAAC generator in pure integer arithmetic, masked to 32 bits,
so a given seed yields the same byte stream on every platform. The 64-bit
seed is split into its low and high 32-bit words, which become the first two
seed words; the remaining 254 words are zero. Each 256-word result block is
serialized little-endian, in index order.

The internal state matches Jenkins' reference ``randinit``/``isaac``, but the
byte stream is not ``randvect.txt``: emission starts with the block computed
during initialization, and words are read in ascending index order rather
than from index 255 down.
"""

from __future__ import annotations

import secrets
import struct

from randbytes.config import SourceKind
from randbytes.entropy.base import ByteSource
from randbytes.entropy.registry import register_byte_source

_MASK = 0xFFFFFFFF
_GOLDEN_RATIO = 0x9E3779B9
_SIZE = 256
_BLOCK = struct.Struct(f"<{_SIZE}I")


def _mix(s: list[int]) -> None:
    a, b, c, d, e, f, g, h = s
    a ^= (b << 11) & _MASK
    d = (d + a) & _MASK
    b = (b + c) & _MASK
    b ^= c >> 2
    e = (e + b) & _MASK
    c = (c + d) & _MASK
    c ^= (d << 8) & _MASK
    f = (f + c) & _MASK
    d = (d + e) & _MASK
    d ^= e >> 16
    g = (g + d) & _MASK
    e = (e + f) & _MASK
    e ^= (f << 10) & _MASK
    h = (h + e) & _MASK
    f = (f + g) & _MASK
    f ^= g >> 4
    a = (a + f) & _MASK
    g = (g + h) & _MASK
    g ^= (h << 8) & _MASK
    b = (b + g) & _MASK
    h = (h + a) & _MASK
    h ^= a >> 9
    c = (c + h) & _MASK
    a = (a + b) & _MASK
    s[:] = [a, b, c, d, e, f, g, h]


@register_byte_source(SourceKind.ISAAC)
class IsaacByteSource(ByteSource):
    """Seeded ISAAC-32 generator.

    Args:
        seed: Unsigned 64-bit seed. A random seed is drawn when omitted;
            it is exposed via :attr:`seed` so a run can be reproduced.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = secrets.randbits(64)
        self._seed = seed
        self._mem = [0] * _SIZE
        self._results = [0] * _SIZE
        self._a = self._b = self._c = 0
        self._pending = b""
        self._init([seed & _MASK, (seed >> 32) & _MASK])

    @property
    def name(self) -> str:
        """Return ``'isaac'``."""
        return "isaac"

    @property
    def is_available(self) -> bool:
        """Always returns ``True``."""
        return True

    @property
    def seed(self) -> int:
        """Seed the generator was initialized with."""
        return self._seed

    def _init(self, seed_words: list[int]) -> None:
        self._results = seed_words + [0] * (_SIZE - len(seed_words))
        state = [_GOLDEN_RATIO] * 8
        for _ in range(4):
            _mix(state)
        # Second pass over the memory so every seed word affects every memory word.
        for block in (self._results, self._mem):
            for i in range(0, _SIZE, 8):
                state = [(x + y) & _MASK for x, y in zip(state, block[i : i + 8])]
                _mix(state)
                self._mem[i : i + 8] = state
        self._isaac()

    def _isaac(self) -> None:
        mem = self._mem
        self._c = (self._c + 1) & _MASK
        a = self._a
        b = (self._b + self._c) & _MASK
        for i in range(_SIZE):
            x = mem[i]
            shift = i & 3
            if shift == 0:
                a ^= (a << 13) & _MASK
            elif shift == 1:
                a ^= a >> 6
            elif shift == 2:
                a ^= (a << 2) & _MASK
            else:
                a ^= a >> 16
            a = (mem[(i + 128) & 0xFF] + a) & _MASK
            y = (mem[(x >> 2) & 0xFF] + a + b) & _MASK
            mem[i] = y
            b = (mem[(y >> 10) & 0xFF] + x) & _MASK
            self._results[i] = b
        self._a = a
        self._b = b

    def _next_block(self) -> bytes:
        data = _BLOCK.pack(*self._results)
        self._isaac()
        return data

    def fill(self, buffer: bytearray) -> None:
        """Overwrite *buffer* with the next ``len(buffer)`` stream bytes."""
        needed = len(buffer)
        chunks = [self._pending]
        have = len(self._pending)
        while have < needed:
            block = self._next_block()
            chunks.append(block)
            have += len(block)
        data = b"".join(chunks)
        buffer[:] = data[:needed]
        self._pending = data[needed:]

    def close(self) -> None:
        """No-op, no resources to release."""
