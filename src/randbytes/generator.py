"""Generator: the orchestration layer for randbytes.

Runs the one-shot pipeline:
    validate config → build byte source → fill buffer → encode → write.

Each Generator performs exactly one run. The whole buffer is allocated and
filled before anything is written; nothing is streamed.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import TYPE_CHECKING, BinaryIO

from randbytes.config import RandBytesConfig, validate_config
from randbytes.encoding import encode
from randbytes.entropy.registry import ByteSourceRegistry
from randbytes.exceptions import RandBytesError
from randbytes.logging.logger import GenerationLogger
from randbytes.logging.types import GenerationRecord
from randbytes.writer import LineWrappingWriter

if TYPE_CHECKING:
    from randbytes.entropy.base import ByteSource

logger = logging.getLogger("randbytes")


def _is_interactive(sink: BinaryIO) -> bool:
    isatty = getattr(sink, "isatty", None)
    return bool(isatty()) if isatty is not None else False


def build_byte_source(config: RandBytesConfig) -> ByteSource:
    """Instantiate the byte source selected by *config*.

    Seed and sequence are only passed to sources that accept them. Device
    sources open their file here, so this is the first point where an I/O
    error can surface.

    Args:
        config: Run configuration.

    Returns:
        A ready-to-use ByteSource.

    Raises:
        EntropyUnavailableError: If the source cannot be opened.
    """
    source_cls = ByteSourceRegistry.get(config.source)
    kwargs: dict[str, int | None] = {}
    if config.source.seedable:
        kwargs["seed"] = config.seed
    if config.source.has_sequence:
        kwargs["sequence"] = config.sequence
    return source_cls(**kwargs)


class Generator:
    """Single-run random byte generator.

    Args:
        config: Validated field values for the run.
        sink: Binary output stream. Defaults to ``sys.stdout.buffer``.
        interactive: Whether *sink* is a terminal. Detected with
            ``sink.isatty()`` when omitted.
        source: Pre-built byte source, bypassing the registry (tests,
            embedding). The generator closes it after the fill.
    """

    def __init__(
        self,
        config: RandBytesConfig,
        sink: BinaryIO | None = None,
        interactive: bool | None = None,
        source: ByteSource | None = None,
    ) -> None:
        self._config = config
        self._sink = sink if sink is not None else sys.stdout.buffer
        self._interactive = _is_interactive(self._sink) if interactive is None else interactive
        self._source = source
        self._run_logger = GenerationLogger(config)
        self._done = False

    @property
    def config(self) -> RandBytesConfig:
        return self._config

    @property
    def interactive(self) -> bool:
        return self._interactive

    @property
    def run_logger(self) -> GenerationLogger:
        return self._run_logger

    def run(self) -> GenerationRecord:
        """Generate, encode and write the configured bytes.

        Returns:
            Record describing the run.

        Raises:
            ConfigValidationError: Before any I/O, if the config is invalid
                for this sink.
            EntropyUnavailableError: If the source fails. Output already
                written is not rolled back.
            RandBytesError: If the generator was already run.
        """
        if self._done:
            raise RandBytesError("Generator instances run only once")
        self._done = True

        config = self._config
        validate_config(config, interactive=self._interactive)

        t_start = time.perf_counter()
        timestamp_ns = time.time_ns()

        source = self._source if self._source is not None else build_byte_source(config)
        logger.debug("Using byte source %r for %d bytes", source.name, config.byte_count)
        try:
            buffer = bytearray(config.byte_count)
            source.fill(buffer)
        finally:
            source.close()
        t_filled = time.perf_counter()

        output = encode(bytes(buffer), config.format)
        t_encoded = time.perf_counter()

        if config.line_wrap_width is not None:
            LineWrappingWriter(self._sink, config.line_wrap_width).write(output.data)
        else:
            self._sink.write(output.data)
        if self._interactive and output.needs_terminal_newline:
            self._sink.write(b"\n")
        self._sink.flush()
        t_end = time.perf_counter()

        record = GenerationRecord(
            timestamp_ns=timestamp_ns,
            fill_ms=(t_filled - t_start) * 1000.0,
            encode_ms=(t_encoded - t_filled) * 1000.0,
            total_ms=(t_end - t_start) * 1000.0,
            source=source.name,
            seed=getattr(source, "seed", None),
            sequence=getattr(source, "sequence", None),
            output_format=config.format.value,
            byte_count=config.byte_count,
            encoded_length=len(output.data),
            line_wrap_width=config.line_wrap_width,
            interactive=self._interactive,
        )
        self._run_logger.log_run(record)
        return record
