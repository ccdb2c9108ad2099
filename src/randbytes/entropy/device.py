"""Byte sources backed by the OS entropy device files.

The device is opened read-only and unbuffered when the source is built, and
read synchronously. Blocking behaviour is whatever the device provides:
``/dev/random`` may stall until the kernel pool is ready, ``/dev/urandom``
never does. Reads are not retried; a stream that ends early is fatal.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from randbytes.config import SourceKind
from randbytes.entropy.base import ByteSource
from randbytes.entropy.registry import register_byte_source
from randbytes.exceptions import EntropyUnavailableError

logger = logging.getLogger("randbytes")


class DeviceByteSource(ByteSource):
    """Reads bytes from an entropy device file.

    Args:
        path: Device (or any readable file) to draw bytes from.

    Raises:
        EntropyUnavailableError: If *path* cannot be opened.
    """

    _name: str = "device"
    default_path: str = ""

    def __init__(self, path: str | None = None) -> None:
        self._path = path or self.default_path
        try:
            self._stream: BinaryIO | None = open(self._path, "rb", buffering=0)  # noqa: SIM115
        except OSError as exc:
            raise EntropyUnavailableError(f"cannot open {self._path}: {exc}") from exc
        logger.debug("Opened entropy device %s", self._path)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_available(self) -> bool:
        """``True`` while the device handle is open."""
        return self._stream is not None

    @property
    def path(self) -> str:
        """Path of the device file."""
        return self._path

    def fill(self, buffer: bytearray) -> None:
        """Read exactly ``len(buffer)`` bytes from the device into *buffer*.

        Short reads are continued until the buffer is full.

        Raises:
            EntropyUnavailableError: If the source is closed, the read fails,
                or the stream ends before the buffer is full.
        """
        if self._stream is None:
            raise EntropyUnavailableError(f"{self._path} is closed")
        view = memoryview(buffer)
        filled = 0
        try:
            while filled < len(buffer):
                count = self._stream.readinto(view[filled:])
                if not count:
                    raise EntropyUnavailableError(
                        f"{self._path}: end of stream after {filled} of {len(buffer)} bytes"
                    )
                filled += count
        except OSError as exc:
            raise EntropyUnavailableError(f"cannot read {self._path}: {exc}") from exc
        finally:
            view.release()

    def close(self) -> None:
        """Close the device handle. Safe to call more than once."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None


@register_byte_source(SourceKind.DEV_RANDOM)
class DevRandomByteSource(DeviceByteSource):
    """Blocking kernel entropy device."""

    _name = "dev_random"
    default_path = "/dev/random"


@register_byte_source(SourceKind.DEV_URANDOM)
class DevUrandomByteSource(DeviceByteSource):
    """Non-blocking kernel entropy device."""

    _name = "dev_urandom"
    default_path = "/dev/urandom"
