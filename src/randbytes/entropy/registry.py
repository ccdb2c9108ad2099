"""Registry mapping each SourceKind to its byte source class.

Source modules register their class at import time with the
``@register_byte_source`` decorator. The set of selectable sources is the
closed :class:`~randbytes.config.SourceKind` enum, so a kind without a class
is a packaging error rather than a user error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from randbytes.config import SourceKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from randbytes.entropy.base import ByteSource


class ByteSourceRegistry:
    """Class-level map of SourceKind to ByteSource subclass."""

    _registry: ClassVar[dict[SourceKind, type[ByteSource]]] = {}

    @classmethod
    def register(cls, kind: SourceKind) -> Callable[[type[ByteSource]], type[ByteSource]]:
        """Decorator that registers a source class for *kind*.

        Raises:
            ValueError: If *kind* already has a source class.
        """

        def decorator(source_cls: type[ByteSource]) -> type[ByteSource]:
            if kind in cls._registry:
                raise ValueError(f"Byte source for '{kind.value}' is already registered")
            cls._registry[kind] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, kind: SourceKind | str) -> type[ByteSource]:
        """Return the source class for *kind*.

        Args:
            kind: A SourceKind or its string value.

        Raises:
            KeyError: If *kind* is not a SourceKind or has no source class.
        """
        try:
            kind = SourceKind(kind)
        except ValueError:
            raise KeyError(f"Unknown byte source: {kind!r}") from None
        if kind not in cls._registry:
            raise KeyError(f"No byte source registered for {kind.value!r}")
        return cls._registry[kind]

    @classmethod
    def list_registered(cls) -> list[SourceKind]:
        """Return the registered kinds in SourceKind declaration order."""
        return [kind for kind in SourceKind if kind in cls._registry]


register_byte_source = ByteSourceRegistry.register
