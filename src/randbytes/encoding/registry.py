"""Registry for codec implementations.

Uses a decorator pattern for registration, mapping each OutputFormat to the
codec class that produces it. Codecs are stateless, so one shared instance
per format is kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from randbytes.config import OutputFormat

if TYPE_CHECKING:
    from collections.abc import Callable

    from randbytes.encoding.base import Codec, EncodedOutput


class CodecRegistry:
    """Registry mapping OutputFormat values to Codec classes.

    Built-in codecs register via the ``@CodecRegistry.register()``
    decorator. The ``build()`` class method returns the codec for a format.
    """

    _registry: ClassVar[dict[OutputFormat, type[Codec]]] = {}
    _instances: ClassVar[dict[OutputFormat, Codec]] = {}

    @classmethod
    def register(cls, fmt: OutputFormat) -> Callable[[type[Codec]], type[Codec]]:
        """Decorator that registers a Codec class for *fmt*.

        Args:
            fmt: Output format produced by the codec.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *fmt* already has a codec.
        """

        def decorator(klass: type[Codec]) -> type[Codec]:
            if fmt in cls._registry:
                raise ValueError(f"Codec for '{fmt.value}' is already registered")
            cls._registry[fmt] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, fmt: OutputFormat) -> type[Codec]:
        """Return the codec class registered for *fmt*.

        Raises:
            KeyError: If *fmt* has no codec.
        """
        if fmt not in cls._registry:
            available = ", ".join(sorted(f.value for f in cls._registry))
            raise KeyError(f"Unknown output format: {fmt!r}. Available: {available}")
        return cls._registry[fmt]

    @classmethod
    def build(cls, fmt: OutputFormat) -> Codec:
        """Return the shared codec instance for *fmt*."""
        fmt = OutputFormat(fmt)
        if fmt not in cls._instances:
            cls._instances[fmt] = cls.get(fmt)()
        return cls._instances[fmt]

    @classmethod
    def list_registered(cls) -> list[OutputFormat]:
        """Return all registered formats."""
        return list(cls._registry)


register_codec = CodecRegistry.register


def encode(buffer: bytes, fmt: OutputFormat) -> EncodedOutput:
    """Encode *buffer* in the given output format.

    Args:
        buffer: Raw bytes to encode.
        fmt: Target output format.

    Returns:
        The encoded output.
    """
    return CodecRegistry.build(fmt).encode(buffer)
