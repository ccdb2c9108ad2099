"""randbytes: emit random bytes from a selectable source and encoding.

Bytes come from the OS secure random API, a seeded ISAAC or PCG32
generator, or the kernel entropy devices, and are written as hex, base64,
URL-safe base64, percent-encoded text or raw binary, optionally wrapped at
a fixed line width.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("randbytes")
except PackageNotFoundError:
    __version__ = "0.0.0"

from randbytes.config import OutputFormat, RandBytesConfig, SourceKind, load_config, validate_config
from randbytes.exceptions import (
    ConfigValidationError,
    EntropyUnavailableError,
    RandBytesError,
    WriterContractError,
)
from randbytes.generator import Generator

__all__ = [
    "ConfigValidationError",
    "EntropyUnavailableError",
    "Generator",
    "OutputFormat",
    "RandBytesConfig",
    "RandBytesError",
    "SourceKind",
    "WriterContractError",
    "__version__",
    "load_config",
    "validate_config",
]
