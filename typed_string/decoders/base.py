# Path: typed_string/decoders/base.py
"""
Decoder Contract

A decoder turns the raw substring captured for a placeholder into a
typed value. Decoders are supplied by the caller; the matcher only
relies on this contract:

    decode(raw) -> value              on success
    decode(raw) raises ValueError     on failure (DecodeFailure, pydantic
                                      ValidationError and plain ValueError
                                      all qualify), or TypeError

Anything else a decoder raises is treated as a bug in the decoder and
is not swallowed by the matcher.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional


DECODE_EXCEPTIONS = (ValueError, TypeError)


class DecodeFailure(ValueError):
    """
    Structured decode failure raised by decoders.

    Attributes:
        reason: Short human-readable reason
        details: Optional structured detail (e.g., pydantic error list)
    """

    def __init__(self, reason: str, details: Any = None):
        super().__init__(reason)
        self.reason = reason
        self.details = details

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'reason': self.reason,
            'details': self.details,
        }


@dataclass(frozen=True)
class Decoder:
    """
    Named decoding capability.

    Attributes:
        name: Name shown in templates and diagnostics (e.g., 'integer')
        func: Callable taking the raw string and returning the value

    Example:
        hex_int = Decoder('hex', lambda raw: int(raw, 16))
        hex_int.decode('ff')  # 255
    """
    name: str
    func: Callable[[str], Any]

    def decode(self, raw: str) -> Any:
        """Decode raw placeholder text, raising on failure."""
        return self.func(raw)

    def __call__(self, raw: str) -> Any:
        return self.func(raw)

    def __str__(self) -> str:
        return self.name


def as_decoder(obj: Any, name: Optional[str] = None) -> Decoder:
    """
    Normalise a decoder-like object into a Decoder.

    Args:
        obj: A Decoder, or any callable taking one string argument
        name: Override for the decoder name

    Returns:
        Decoder instance

    Raises:
        TypeError: If obj is not callable
    """
    if isinstance(obj, Decoder):
        if name is None or name == obj.name:
            return obj
        return Decoder(name, obj.func)

    if not callable(obj):
        raise TypeError(
            f"Decoder must be callable, got {type(obj).__name__}: {obj!r}"
        )

    if name is None:
        name = getattr(obj, '__name__', None) or type(obj).__name__
    return Decoder(name, obj)


def describe_cause(cause: BaseException) -> str:
    """One-line description of a decode failure cause."""
    if isinstance(cause, DecodeFailure):
        return cause.reason
    message = str(cause).strip()
    if not message:
        return type(cause).__name__
    return message.splitlines()[0]


__all__ = [
    'DECODE_EXCEPTIONS',
    'DecodeFailure',
    'Decoder',
    'as_decoder',
    'describe_cause',
]
