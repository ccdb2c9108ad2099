"""Tests for LineWrappingWriter."""

from __future__ import annotations

import io

import pytest

from randbytes.exceptions import WriterContractError
from randbytes.writer import LineWrappingWriter


def _wrap(data: bytes, width: int, chunks: int = 1) -> bytes:
    sink = io.BytesIO()
    writer = LineWrappingWriter(sink, width)
    step = max(1, len(data) // chunks)
    for start in range(0, len(data), step):
        writer.write(data[start : start + step])
    return sink.getvalue()


class TestLineWrappingWriter:
    """Newline after every (width + 1)-th payload byte."""

    def test_exactly_width_bytes_inserts_nothing(self) -> None:
        assert _wrap(b"abcd", 4) == b"abcd"

    def test_width_plus_one_inserts_one_newline_at_the_end(self) -> None:
        assert _wrap(b"abcde", 4) == b"abcde\n"

    def test_longer_stream(self) -> None:
        assert _wrap(b"abcdefghijk", 4) == b"abcde\nfghij\nk"

    def test_width_one(self) -> None:
        assert _wrap(b"abcd", 1) == b"ab\ncd\n"

    def test_content_preserved(self) -> None:
        data = bytes(range(256)) * 3
        out = _wrap(data, 63)
        # Strip only the inserted newlines: every 65th output byte.
        payload = b"".join(out[i : i + 64] for i in range(0, len(out), 65))
        assert payload == data

    @pytest.mark.parametrize("chunks", [1, 2, 7, 300])
    def test_chunking_does_not_matter(self, chunks: int) -> None:
        data = bytes(range(256)) + b"tail"
        assert _wrap(data, 9, chunks) == _wrap(data, 9, 1)

    @pytest.mark.parametrize("n", [0, 1, 10, 11, 12, 33, 100])
    def test_newline_count(self, n: int) -> None:
        width = 10
        out = _wrap(b"x" * n, width)
        assert out.count(b"\n") == n // (width + 1)
        assert len(out) == n + n // (width + 1)

    def test_column_tracking(self) -> None:
        writer = LineWrappingWriter(io.BytesIO(), 4)
        writer.write(b"abc")
        assert writer.column == 3
        writer.write(b"de")
        assert writer.column == 0
        writer.write(b"f")
        assert writer.column == 1

    def test_write_returns_payload_length(self) -> None:
        writer = LineWrappingWriter(io.BytesIO(), 2)
        assert writer.write(b"abcdefg") == 7

    def test_read_fails_loudly(self) -> None:
        writer = LineWrappingWriter(io.BytesIO(b"data"), 4)
        with pytest.raises(WriterContractError):
            writer.read()
        assert writer.readable() is False
        assert writer.writable() is True

    @pytest.mark.parametrize("width", [0, -3])
    def test_non_positive_width_rejected(self, width: int) -> None:
        with pytest.raises(ValueError, match="positive"):
            LineWrappingWriter(io.BytesIO(), width)

    def test_flush_reaches_sink(self) -> None:
        sink = io.BytesIO()
        writer = LineWrappingWriter(sink, 3)
        writer.write(b"ab")
        writer.flush()
        assert sink.getvalue() == b"ab"
        assert writer.sink is sink
        assert writer.width == 3
