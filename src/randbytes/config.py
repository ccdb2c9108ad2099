"""Configuration system for randbytes.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (RANDBYTES_*) -> .env file -> field defaults.

The command-line front end only passes the options the user actually gave,
so environment variables act as personal defaults (e.g.
``RANDBYTES_FORMAT=base64``). Cross-field rules that depend on the output
sink are checked separately by :func:`validate_config`.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from randbytes.exceptions import ConfigValidationError

DEFAULT_BYTE_COUNT = 16

_U32_LIMIT = 1 << 32
_U64_LIMIT = 1 << 64


class SourceKind(str, enum.Enum):
    """Origin of the random bytes."""

    SECURE = "secure"
    ISAAC = "isaac"
    PCG32 = "pcg32"
    DEV_RANDOM = "dev_random"
    DEV_URANDOM = "dev_urandom"

    @property
    def seedable(self) -> bool:
        """Whether the source is a deterministic PRNG accepting a seed."""
        return self in (SourceKind.ISAAC, SourceKind.PCG32)

    @property
    def has_sequence(self) -> bool:
        """Whether the source accepts a stream/sequence selector."""
        return self is SourceKind.PCG32


class OutputFormat(str, enum.Enum):
    """Rendering of the generated bytes."""

    BASE64 = "base64"
    URL_BASE64 = "url_base64"
    RAW = "raw"
    HEX_UPPER = "hex_upper"
    HEX_LOWER = "hex_lower"
    URL_ENCODED = "url_encoded"


class RandBytesConfig(BaseSettings):
    """Configuration for a single randbytes run.

    Resolution order: init kwargs -> env vars (RANDBYTES_*) -> .env file -> defaults.
    Instances are frozen; a run never mutates its configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="RANDBYTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # --- Generation ---

    source: SourceKind = Field(
        default=SourceKind.SECURE,
        description="Byte source: 'secure', 'isaac', 'pcg32', 'dev_random', 'dev_urandom'",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        lt=_U64_LIMIT,
        description="Unsigned 64-bit seed for the deterministic sources",
    )
    sequence: int | None = Field(
        default=None,
        ge=0,
        lt=_U64_LIMIT,
        description="Unsigned 64-bit stream selector for pcg32",
    )
    byte_count: int = Field(
        default=DEFAULT_BYTE_COUNT,
        gt=0,
        lt=_U32_LIMIT,
        description="Number of random bytes to generate",
    )

    # --- Output ---

    format: OutputFormat = Field(
        default=OutputFormat.HEX_LOWER,
        description="Output encoding",
    )
    line_wrap_width: int | None = Field(
        default=None,
        gt=0,
        description="Insert a newline after every N+1 output bytes (None disables)",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Run logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Keep generation records in memory for inspection",
    )


def load_config(**overrides: Any) -> RandBytesConfig:
    """Build a config, converting pydantic validation errors.

    ``None`` values in *overrides* are dropped so that they do not shadow
    values coming from the environment.

    Args:
        **overrides: Field values, typically from parsed command-line options.

    Returns:
        A validated, frozen RandBytesConfig.

    Raises:
        ConfigValidationError: If any field fails type or range validation.
    """
    kwargs = {key: value for key, value in overrides.items() if value is not None}
    try:
        return RandBytesConfig(**kwargs)
    except ValidationError as exc:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigValidationError(messages) from exc


def validate_config(config: RandBytesConfig, *, interactive: bool) -> None:
    """Check the cross-field rules of a configuration.

    Args:
        config: The configuration to check.
        interactive: Whether the output sink is an interactive terminal.

    Raises:
        ConfigValidationError: If a seed or sequence is given for a source
            that does not accept it, or raw output targets a terminal.
    """
    if config.seed is not None and not config.source.seedable:
        raise ConfigValidationError("seed only valid with --isaac or --pcg32")
    if config.sequence is not None and not config.source.has_sequence:
        raise ConfigValidationError("sequence only valid with --pcg32")
    if config.format is OutputFormat.RAW and interactive:
        raise ConfigValidationError("will not output raw bytes to a TTY")
    if config.log_level not in ("none", "summary", "full"):
        raise ConfigValidationError(
            f"Unknown log_level {config.log_level!r} (expected 'none', 'summary' or 'full')"
        )
