"""Identity codec for binary output."""

from __future__ import annotations

from randbytes.config import OutputFormat
from randbytes.encoding.base import Codec
from randbytes.encoding.registry import register_codec


@register_codec(OutputFormat.RAW)
class RawCodec(Codec):
    """Passes the buffer through unchanged.

    Raw output is binary: it is never followed by a synthetic newline.
    """

    binary = True

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.RAW

    def encode_bytes(self, buffer: bytes) -> bytes:
        return bytes(buffer)

    def encoded_length(self, n: int) -> int:
        return n
