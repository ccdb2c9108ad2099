"""Base classes for output encoding.

Defines the abstract codec interface and the result type for turning the
raw byte buffer into its output representation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from randbytes.config import OutputFormat


@dataclass(frozen=True, slots=True)
class EncodedOutput:
    """Result of encoding a byte buffer.

    Attributes:
        data: Bytes to write. ASCII text for textual formats, the original
            buffer for raw output.
        has_natural_terminator: Whether *data* already ends the line, so no
            newline is needed for terminal display.
        binary: Whether *data* is arbitrary binary that must never be
            followed by a synthetic newline.
    """

    data: bytes
    has_natural_terminator: bool = False
    binary: bool = False

    @property
    def needs_terminal_newline(self) -> bool:
        """Whether a newline should follow *data* on an interactive terminal."""
        return not self.binary and not self.has_natural_terminator


class Codec(ABC):
    """Abstract base class for output encodings.

    Implementations are pure: ``encode()`` has no side effects and the same
    buffer always yields the same output.
    """

    has_natural_terminator: bool = False
    binary: bool = False

    @property
    @abstractmethod
    def format(self) -> OutputFormat:
        """The output format this codec produces."""

    @abstractmethod
    def encode_bytes(self, buffer: bytes) -> bytes:
        """Encode *buffer* into the output representation.

        Args:
            buffer: Raw bytes to encode. Any length, any byte values.

        Returns:
            The encoded bytes.
        """

    @abstractmethod
    def encoded_length(self, n: int) -> int:
        """Return the output length for *n* input bytes.

        For content-dependent encodings this is an upper bound.
        """

    def encode(self, buffer: bytes) -> EncodedOutput:
        """Encode *buffer* and tag the result with this codec's flags.

        Args:
            buffer: Raw bytes to encode.

        Returns:
            EncodedOutput carrying the encoded bytes.
        """
        return EncodedOutput(
            data=self.encode_bytes(buffer),
            has_natural_terminator=self.has_natural_terminator,
            binary=self.binary,
        )
