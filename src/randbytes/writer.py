"""Write-only output wrapper that inserts periodic line breaks.

The wrapper counts payload bytes, not lines of the encoded content: after
every ``width + 1`` bytes a single ``\\n`` is emitted. Byte content is
passed through untouched.
"""

from __future__ import annotations

from typing import BinaryIO

from randbytes.exceptions import WriterContractError

_NEWLINE = b"\n"


class LineWrappingWriter:
    """Wrap a binary sink, emitting a newline once the column exceeds *width*.

    The check happens after each byte is counted, so with ``width=4`` the
    bytes ``abcdefghij`` come out as ``abcde\\nfghij\\n``. Writing exactly
    *width* bytes inserts no newline at all.

    Only the write side of a stream is offered; :meth:`read` raises.

    Args:
        sink: Binary stream receiving the output.
        width: Positive column limit.

    Raises:
        ValueError: If *width* is not positive.
    """

    def __init__(self, sink: BinaryIO, width: int) -> None:
        if width <= 0:
            raise ValueError(f"line width must be positive, got {width}")
        self._sink = sink
        self._width = width
        self._column = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def column(self) -> int:
        """Payload bytes written since the last inserted newline."""
        return self._column

    @property
    def sink(self) -> BinaryIO:
        return self._sink

    def write(self, data: bytes) -> int:
        """Write *data*, inserting newlines as the column limit is crossed.

        Args:
            data: Payload bytes.

        Returns:
            Number of payload bytes accepted, inserted newlines excluded.
        """
        view = memoryview(data).cast("B")
        span = self._width + 1
        pos = 0
        total = len(view)
        while pos < total:
            take = min(span - self._column, total - pos)
            self._sink.write(view[pos : pos + take])
            self._column += take
            pos += take
            if self._column > self._width:
                self._sink.write(_NEWLINE)
                self._column = 0
        return total

    def flush(self) -> None:
        self._sink.flush()

    def writable(self) -> bool:
        return True

    def readable(self) -> bool:
        return False

    def read(self, size: int = -1) -> bytes:
        """Always raises: the wrapper is write-only.

        Raises:
            WriterContractError: On every call.
        """
        raise WriterContractError("cannot read from LineWrappingWriter")
