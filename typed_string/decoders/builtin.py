# Path: typed_string/decoders/builtin.py
"""
Built-in Decoders

Small, dependency-free decoders for the placeholder types that show up
in most templates. Each raises DecodeFailure with a short reason.
"""

import math
import re
from typing import Iterable, Union

from .base import Decoder, DecodeFailure


INTEGER_RE = re.compile(r'[+-]?[0-9]+')


def _decode_integer(raw: str) -> int:
    if not INTEGER_RE.fullmatch(raw):
        raise DecodeFailure(f"not an integer: {raw!r}")
    try:
        return int(raw)
    except ValueError:
        raise DecodeFailure(f"integer too long: {len(raw)} digits") from None


def _decode_number(raw: str) -> float:
    # float() tolerates surrounding whitespace; placeholders do not
    if raw != raw.strip() or not raw:
        raise DecodeFailure(f"not a number: {raw!r}")
    try:
        value = float(raw)
    except ValueError:
        raise DecodeFailure(f"not a number: {raw!r}") from None
    if not math.isfinite(value):
        raise DecodeFailure(f"not a finite number: {raw!r}")
    return value


def _decode_text(raw: str) -> str:
    return raw


def _decode_non_empty(raw: str) -> str:
    if not raw:
        raise DecodeFailure("empty value")
    return raw


integer = Decoder('integer', _decode_integer)
number = Decoder('number', _decode_number)
text = Decoder('text', _decode_text)
non_empty = Decoder('non_empty', _decode_non_empty)


def one_of(*choices: str, name: str = 'one_of') -> Decoder:
    """
    Decoder accepting only the given strings.

    Example:
        method = one_of('GET', 'POST')
        method.decode('GET')   # 'GET'
        method.decode('PUT')   # raises DecodeFailure
    """
    if not choices:
        raise ValueError("one_of() needs at least one choice")
    allowed = tuple(choices)

    def _decode_choice(raw: str) -> str:
        if raw not in allowed:
            raise DecodeFailure(
                f"expected one of {', '.join(allowed)}; got {raw!r}",
                details={'choices': list(allowed)},
            )
        return raw

    return Decoder(name, _decode_choice)


def regex(pattern: Union[str, re.Pattern], name: str = 'regex') -> Decoder:
    """
    Decoder accepting strings that fully match a regular expression.

    The decoded value is the raw string; the expression only gates it.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def _decode_regex(raw: str) -> str:
        if compiled.fullmatch(raw) is None:
            raise DecodeFailure(
                f"{raw!r} does not match /{compiled.pattern}/"
            )
        return raw

    return Decoder(name, _decode_regex)


BUILTIN_DECODERS: dict[str, Decoder] = {
    'integer': integer,
    'number': number,
    'text': text,
    'non_empty': non_empty,
}

BUILTIN_ALIASES: dict[str, str] = {
    'int': 'integer',
    'float': 'number',
    'str': 'text',
}


def iter_builtins() -> Iterable[tuple[str, Decoder]]:
    """Yield (name, decoder) for built-ins and their aliases."""
    yield from BUILTIN_DECODERS.items()
    for alias, target in BUILTIN_ALIASES.items():
        yield alias, BUILTIN_DECODERS[target]


__all__ = [
    'integer',
    'number',
    'text',
    'non_empty',
    'one_of',
    'regex',
    'BUILTIN_DECODERS',
    'BUILTIN_ALIASES',
    'iter_builtins',
]
