"""Hexadecimal codecs: two digits per byte, no separators."""

from __future__ import annotations

from randbytes.config import OutputFormat
from randbytes.encoding.base import Codec
from randbytes.encoding.registry import register_codec


@register_codec(OutputFormat.HEX_LOWER)
class HexLowerCodec(Codec):
    """Lowercase hex digits."""

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.HEX_LOWER

    def encode_bytes(self, buffer: bytes) -> bytes:
        return buffer.hex().encode("ascii")

    def encoded_length(self, n: int) -> int:
        return 2 * n


@register_codec(OutputFormat.HEX_UPPER)
class HexUpperCodec(Codec):
    """Uppercase hex digits."""

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.HEX_UPPER

    def encode_bytes(self, buffer: bytes) -> bytes:
        return buffer.hex().upper().encode("ascii")

    def encoded_length(self, n: int) -> int:
        return 2 * n
