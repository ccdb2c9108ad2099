"""Percent-encoding codec.

Bytes in ``[A-Za-z0-9]`` and ``_ . - ~ /`` pass through unchanged; every
other byte becomes ``%`` followed by two uppercase hex digits. The
classification is done with numpy range comparisons over the whole buffer,
then each byte expands to a three-column row of which one or three columns
are kept.
"""

from __future__ import annotations

import numpy as np

from randbytes.config import OutputFormat
from randbytes.encoding.base import Codec
from randbytes.encoding.registry import register_codec

_HEX_DIGITS = np.frombuffer(b"0123456789ABCDEF", dtype=np.uint8)
_PERCENT = ord("%")


def unreserved_mask(values: np.ndarray) -> np.ndarray:
    """Return a boolean mask of the bytes that pass through unencoded.

    Args:
        values: uint8 array of byte values.

    Returns:
        Boolean array, ``True`` where the byte is emitted as-is.
    """
    return (
        ((values >= ord("0")) & (values <= ord("9")))
        | ((values >= ord("A")) & (values <= ord("Z")))
        | ((values >= ord("a")) & (values <= ord("z")))
        | (values == ord("_"))
        | (values == ord("."))
        | (values == ord("-"))
        | (values == ord("~"))
        | (values == ord("/"))
    )


@register_codec(OutputFormat.URL_ENCODED)
class URLEncodedCodec(Codec):
    """Percent-encodes every byte outside the unreserved set."""

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.URL_ENCODED

    def encode_bytes(self, buffer: bytes) -> bytes:
        values = np.frombuffer(bytes(buffer), dtype=np.uint8)
        if values.size == 0:
            return b""
        plain = unreserved_mask(values)

        rows = np.empty((values.size, 3), dtype=np.uint8)
        rows[:, 0] = _PERCENT
        rows[:, 1] = _HEX_DIGITS[values >> 4]
        rows[:, 2] = _HEX_DIGITS[values & 0x0F]
        rows[plain, 0] = values[plain]

        keep = np.ones((values.size, 3), dtype=bool)
        keep[plain, 1:] = False
        return rows[keep].tobytes()

    def encoded_length(self, n: int) -> int:
        return 3 * n
