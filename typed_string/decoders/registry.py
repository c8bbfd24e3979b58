# Path: typed_string/decoders/registry.py
"""
Decoder Registry

Name -> Decoder lookup used by the brace template syntax
("route/{integer}/end") and the YAML pattern library.
"""

from typing import Any, Iterator, Optional

from ..core.logger import get_input_logger
from .base import Decoder, as_decoder
from .builtin import iter_builtins
from .schema import SCHEMA_DECODERS


class UnknownDecoderError(KeyError):
    """Raised when a template names a decoder that is not registered."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(name)
        self.name = name
        self.available = available

    def __str__(self) -> str:
        return (
            f"Unknown decoder '{self.name}'. "
            f"Available: {', '.join(self.available)}"
        )


class DecoderRegistry:
    """
    Registry of named decoders.

    A fresh registry starts with the built-in decoders (integer, number,
    text, non_empty and their aliases) plus the schema decoders (bool,
    date, uuid, ...). Registries are independent of each other.

    Example:
        registry = DecoderRegistry()
        registry.register('hex', lambda raw: int(raw, 16))
        registry.get('hex').decode('ff')  # 255
    """

    def __init__(self, include_builtins: bool = True):
        self.logger = get_input_logger('decoder_registry')
        self._decoders: dict[str, Decoder] = {}

        if include_builtins:
            for name, decoder in iter_builtins():
                self._decoders[name] = decoder
            self._decoders.update(SCHEMA_DECODERS)

    def register(
        self,
        name: str,
        decoder: Any,
        replace: bool = False
    ) -> Decoder:
        """
        Register a decoder under a name.

        Args:
            name: Placeholder name used in templates
            decoder: Decoder or callable
            replace: Allow overwriting an existing registration

        Returns:
            The registered Decoder

        Raises:
            ValueError: If the name is invalid or already taken
        """
        if not name or not name.isidentifier():
            raise ValueError(f"Decoder name must be an identifier: {name!r}")
        if name in self._decoders and not replace:
            raise ValueError(f"Decoder already registered: {name}")

        registered = as_decoder(decoder, name=name)
        self._decoders[name] = registered
        self.logger.debug(f"Registered decoder '{name}'")
        return registered

    def get(self, name: str) -> Decoder:
        """
        Look up a decoder by name.

        Raises:
            UnknownDecoderError: If no decoder has that name
        """
        decoder = self._decoders.get(name)
        if decoder is None:
            raise UnknownDecoderError(name, self.names())
        return decoder

    def find(self, name: str) -> Optional[Decoder]:
        """Look up a decoder by name, returning None when missing."""
        return self._decoders.get(name)

    def names(self) -> list[str]:
        """Registered names, sorted."""
        return sorted(self._decoders)

    def __contains__(self, name: str) -> bool:
        return name in self._decoders

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._decoders)


_default_registry: Optional[DecoderRegistry] = None


def get_default_registry() -> DecoderRegistry:
    """Process-wide registry used when no registry is passed explicitly."""
    global _default_registry
    if _default_registry is None:
        _default_registry = DecoderRegistry()
    return _default_registry


__all__ = [
    'UnknownDecoderError',
    'DecoderRegistry',
    'get_default_registry',
]
