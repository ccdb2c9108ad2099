"""Shared pytest fixtures for randbytes tests.

Provides reusable configuration objects, seeded byte sources, an in-memory
output sink and a fake entropy device file.
"""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from randbytes.config import OutputFormat, RandBytesConfig, SourceKind
from randbytes.entropy.isaac import IsaacByteSource
from randbytes.entropy.pcg32 import Pcg32ByteSource


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep RANDBYTES_* variables and stray .env files out of every test."""
    for key in list(os.environ):
        if key.startswith("RANDBYTES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def default_config() -> RandBytesConfig:
    """Return a RandBytesConfig with all default values."""
    return RandBytesConfig()


@pytest.fixture
def pcg32_config() -> RandBytesConfig:
    """Return a reproducible PCG32 config producing 8 hex-encoded bytes."""
    return RandBytesConfig(
        source=SourceKind.PCG32,
        seed=42,
        sequence=54,
        byte_count=8,
        format=OutputFormat.HEX_LOWER,
    )


@pytest.fixture
def isaac_source() -> IsaacByteSource:
    """Return an ISAAC source with a fixed seed."""
    return IsaacByteSource(seed=42)


@pytest.fixture
def pcg32_source() -> Pcg32ByteSource:
    """Return a PCG32 source seeded with the reference demo values."""
    return Pcg32ByteSource(seed=42, sequence=54)


@pytest.fixture
def sink() -> io.BytesIO:
    """Return an in-memory binary output stream (never a TTY)."""
    return io.BytesIO()


@pytest.fixture
def fake_device(tmp_path: Path) -> Path:
    """Return a regular file holding 64 known bytes, standing in for /dev/urandom."""
    path = tmp_path / "fake_urandom"
    path.write_bytes(bytes(range(64)))
    return path
