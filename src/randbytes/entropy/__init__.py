"""Byte source subsystem for randbytes.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from randbytes.entropy import ByteSource, ByteSourceRegistry
    from randbytes.entropy import SecureByteSource, Pcg32ByteSource
"""

from randbytes.entropy.base import ByteSource
from randbytes.entropy.device import DeviceByteSource, DevRandomByteSource, DevUrandomByteSource
from randbytes.entropy.isaac import IsaacByteSource
from randbytes.entropy.pcg32 import Pcg32ByteSource
from randbytes.entropy.registry import ByteSourceRegistry, register_byte_source
from randbytes.entropy.system import SecureByteSource

__all__ = [
    "ByteSource",
    "ByteSourceRegistry",
    "DevRandomByteSource",
    "DevUrandomByteSource",
    "DeviceByteSource",
    "IsaacByteSource",
    "Pcg32ByteSource",
    "SecureByteSource",
    "register_byte_source",
]
