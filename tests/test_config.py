"""Tests for randbytes.config.

Covers:
- Default values
- Environment variable loading (monkeypatch os.environ)
- load_config dropping None values and converting validation errors
- Range checks on byte_count, seed, sequence and line_wrap_width
- validate_config cross-field rules (seed, sequence, raw on a TTY)
- Frozen immutability of RandBytesConfig
"""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError

from randbytes.config import (
    DEFAULT_BYTE_COUNT,
    OutputFormat,
    RandBytesConfig,
    SourceKind,
    load_config,
    validate_config,
)
from randbytes.exceptions import ConfigValidationError
from randbytes.writer import LineWrappingWriter


class TestRandBytesConfigDefaults:
    """Verify the default field values."""

    def test_generation_defaults(self) -> None:
        cfg = RandBytesConfig()
        assert cfg.source is SourceKind.SECURE
        assert cfg.seed is None
        assert cfg.sequence is None
        assert cfg.byte_count == DEFAULT_BYTE_COUNT == 16

    def test_output_defaults(self) -> None:
        cfg = RandBytesConfig()
        assert cfg.format is OutputFormat.HEX_LOWER
        assert cfg.line_wrap_width is None

    def test_logging_defaults(self) -> None:
        cfg = RandBytesConfig()
        assert cfg.log_level == "none"
        assert cfg.diagnostic_mode is False

    def test_frozen_immutability(self) -> None:
        cfg = RandBytesConfig()
        with pytest.raises(ValidationError):
            cfg.byte_count = 32  # type: ignore[misc]


class TestSourceKind:
    def test_seedable_sources(self) -> None:
        assert {k for k in SourceKind if k.seedable} == {SourceKind.ISAAC, SourceKind.PCG32}

    def test_only_pcg32_has_sequence(self) -> None:
        assert [k for k in SourceKind if k.has_sequence] == [SourceKind.PCG32]


class TestEnvironmentLoading:
    """RANDBYTES_* variables act as defaults."""

    def test_format_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANDBYTES_FORMAT", "base64")
        assert RandBytesConfig().format is OutputFormat.BASE64

    def test_byte_count_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANDBYTES_BYTE_COUNT", "64")
        assert RandBytesConfig().byte_count == 64

    def test_kwargs_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANDBYTES_FORMAT", "base64")
        cfg = load_config(format=OutputFormat.HEX_UPPER)
        assert cfg.format is OutputFormat.HEX_UPPER

    def test_none_does_not_shadow_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RANDBYTES_FORMAT", "url_encoded")
        cfg = load_config(format=None, byte_count=None)
        assert cfg.format is OutputFormat.URL_ENCODED
        assert cfg.byte_count == DEFAULT_BYTE_COUNT


class TestLoadConfig:
    """Range validation and error conversion."""

    def test_valid_values(self) -> None:
        cfg = load_config(source="pcg32", seed=2**64 - 1, sequence=0, byte_count=2**32 - 1)
        assert cfg.source is SourceKind.PCG32
        assert cfg.seed == 2**64 - 1
        assert cfg.byte_count == 2**32 - 1

    @pytest.mark.parametrize("count", [0, -1, 2**32])
    def test_byte_count_out_of_range(self, count: int) -> None:
        with pytest.raises(ConfigValidationError, match="byte_count"):
            load_config(byte_count=count)

    @pytest.mark.parametrize("field", ["seed", "sequence"])
    def test_u64_fields_reject_overflow(self, field: str) -> None:
        with pytest.raises(ConfigValidationError, match=field):
            load_config(source="pcg32", **{field: 2**64})

    @pytest.mark.parametrize("field", ["seed", "sequence"])
    def test_u64_fields_reject_negative(self, field: str) -> None:
        with pytest.raises(ConfigValidationError, match=field):
            load_config(source="pcg32", **{field: -1})

    def test_line_wrap_width_must_be_positive(self) -> None:
        with pytest.raises(ConfigValidationError, match="line_wrap_width"):
            load_config(line_wrap_width=0)

    def test_line_wrap_width_counts_width_plus_one(self) -> None:
        """The documented wrap period is N+1 bytes, as the writer applies it."""
        description = RandBytesConfig.model_fields["line_wrap_width"].description
        assert "every N+1 output bytes" in description
        sink = io.BytesIO()
        LineWrappingWriter(sink, load_config(line_wrap_width=3).line_wrap_width).write(b"abcdefgh")
        assert sink.getvalue() == b"abcd\nefgh\n"

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigValidationError, match="format"):
            load_config(format="rot13")

    def test_cause_is_chained(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(byte_count=0)
        assert isinstance(exc_info.value.__cause__, ValidationError)


class TestValidateConfig:
    """Cross-field rules checked before any I/O."""

    def test_defaults_pass(self, default_config: RandBytesConfig) -> None:
        validate_config(default_config, interactive=True)

    def test_seed_rejected_for_secure(self) -> None:
        cfg = RandBytesConfig(source=SourceKind.SECURE, seed=1)
        with pytest.raises(ConfigValidationError, match="seed only valid"):
            validate_config(cfg, interactive=False)

    @pytest.mark.parametrize("source", [SourceKind.DEV_RANDOM, SourceKind.DEV_URANDOM])
    def test_seed_rejected_for_devices(self, source: SourceKind) -> None:
        cfg = RandBytesConfig(source=source, seed=1)
        with pytest.raises(ConfigValidationError, match="seed only valid"):
            validate_config(cfg, interactive=False)

    @pytest.mark.parametrize("source", [SourceKind.ISAAC, SourceKind.PCG32])
    def test_seed_accepted_for_prngs(self, source: SourceKind) -> None:
        validate_config(RandBytesConfig(source=source, seed=1), interactive=False)

    @pytest.mark.parametrize("source", [SourceKind.SECURE, SourceKind.ISAAC, SourceKind.DEV_URANDOM])
    def test_sequence_rejected_without_pcg32(self, source: SourceKind) -> None:
        cfg = RandBytesConfig(source=source, sequence=3)
        with pytest.raises(ConfigValidationError, match="sequence only valid"):
            validate_config(cfg, interactive=False)

    def test_sequence_accepted_for_pcg32(self) -> None:
        cfg = RandBytesConfig(source=SourceKind.PCG32, seed=1, sequence=3)
        validate_config(cfg, interactive=False)

    def test_raw_rejected_on_tty(self) -> None:
        cfg = RandBytesConfig(format=OutputFormat.RAW)
        with pytest.raises(ConfigValidationError, match="TTY"):
            validate_config(cfg, interactive=True)

    def test_raw_accepted_when_redirected(self) -> None:
        validate_config(RandBytesConfig(format=OutputFormat.RAW), interactive=False)

    def test_unknown_log_level(self) -> None:
        cfg = RandBytesConfig(log_level="verbose")
        with pytest.raises(ConfigValidationError, match="log_level"):
            validate_config(cfg, interactive=False)
