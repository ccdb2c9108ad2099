"""Run logger for generation events.

Uses the standard ``logging`` module with the ``"randbytes"`` logger.
No ``print()`` statements: generated bytes own stdout, log records go to
whatever handler the application configured (stderr for the CLI).
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from randbytes.config import RandBytesConfig
    from randbytes.logging.types import GenerationRecord

logger = logging.getLogger("randbytes")


class GenerationLogger:
    """Per-run logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line with source, seed, format, size and timing.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: RandBytesConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[GenerationRecord] = []

    def log_run(self, record: GenerationRecord) -> None:
        """Log a single generation run.

        Args:
            record: Immutable record of the run.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "source=%s%s format=%s bytes=%d encoded=%d wrap=%s fill=%.2fms total=%.2fms",
                record.source,
                "" if record.seed is None else f" seed={record.seed}",
                record.output_format,
                record.byte_count,
                record.encoded_length,
                record.line_wrap_width or "off",
                record.fill_ms,
                record.total_ms,
            )
        elif self._log_level == "full":
            logger.info("generation_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[GenerationRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)
