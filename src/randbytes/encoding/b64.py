"""Base64 codecs, standard and URL-safe alphabets.

Both emit padded output on a single line. Any wrapping is applied later by
the line-wrapping writer, in terms of output bytes.
"""

from __future__ import annotations

import base64

from randbytes.config import OutputFormat
from randbytes.encoding.base import Codec
from randbytes.encoding.registry import register_codec


def _base64_length(n: int) -> int:
    return 4 * ((n + 2) // 3)


@register_codec(OutputFormat.BASE64)
class Base64Codec(Codec):
    """Standard alphabet (``+``, ``/``), ``=`` padded."""

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.BASE64

    def encode_bytes(self, buffer: bytes) -> bytes:
        return base64.b64encode(buffer).replace(b"\n", b"")

    def encoded_length(self, n: int) -> int:
        return _base64_length(n)


@register_codec(OutputFormat.URL_BASE64)
class URLBase64Codec(Codec):
    """URL-safe alphabet (``-``, ``_``), ``=`` padded."""

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.URL_BASE64

    def encode_bytes(self, buffer: bytes) -> bytes:
        return base64.urlsafe_b64encode(buffer).replace(b"\n", b"")

    def encoded_length(self, n: int) -> int:
        return _base64_length(n)
