"""Tests for the raw codec."""

from __future__ import annotations

from randbytes.config import OutputFormat
from randbytes.encoding import encode
from randbytes.encoding.raw import RawCodec


class TestRawCodec:
    def test_identity(self) -> None:
        buffer = bytes(range(256))
        assert encode(buffer, OutputFormat.RAW).data == buffer

    def test_accepts_bytearray(self) -> None:
        out = RawCodec().encode(bytearray(b"\x00\n\xff"))
        assert out.data == b"\x00\n\xff"
        assert isinstance(out.data, bytes)

    def test_never_gets_a_terminal_newline(self) -> None:
        out = RawCodec().encode(b"abc")
        assert out.binary is True
        assert out.has_natural_terminator is False
        assert out.needs_terminal_newline is False

    def test_length(self) -> None:
        assert RawCodec().encoded_length(17) == 17
