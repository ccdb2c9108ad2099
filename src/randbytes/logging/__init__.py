"""Run logging subsystem for randbytes.

Provides immutable per-run generation records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from randbytes.logging.logger import GenerationLogger
from randbytes.logging.types import GenerationRecord

__all__ = [
    "GenerationLogger",
    "GenerationRecord",
]
