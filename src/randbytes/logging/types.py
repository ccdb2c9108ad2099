"""Data types for the run logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationRecord:
    """Immutable record of a single generation run.

    Attributes:
        timestamp_ns: Wall-clock time the run started (nanoseconds since epoch).
        fill_ms: Time spent filling the buffer from the source (milliseconds).
        encode_ms: Time spent encoding the buffer (milliseconds).
        total_ms: Total time for the run, output included (milliseconds).
        source: Name of the byte source.
        seed: Seed used by a deterministic source, ``None`` otherwise.
        sequence: Stream selector used by pcg32, ``None`` otherwise.
        output_format: Value of the output format.
        byte_count: Number of random bytes generated.
        encoded_length: Length of the encoded output before line wrapping.
        line_wrap_width: Wrap width, ``None`` when wrapping was off.
        interactive: Whether the sink was an interactive terminal.
    """

    # Timing
    timestamp_ns: int
    fill_ms: float
    encode_ms: float
    total_ms: float

    # Source
    source: str
    seed: int | None
    sequence: int | None

    # Output
    output_format: str
    byte_count: int
    encoded_length: int
    line_wrap_width: int | None
    interactive: bool
