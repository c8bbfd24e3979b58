# Path: typed_string/process/pattern/template_syntax.py
"""
Template Syntax

String form of a pattern: literal text with {name} placeholders.

    "route/{integer}/end"   ->  (['route/', '/end'], ['integer'])
    "{{id}}={integer}"      ->  (['{id}=', ''], ['integer'])

{{ and }} are escaped braces. Placeholder names must be identifiers.
Splitting only deals with brace syntax; structural problems such as two
adjacent placeholders are left to the compiler.
"""

from ...constants import (
    ESCAPED_CLOSE,
    ESCAPED_OPEN,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
)
from ...core.logger import get_input_logger
from ..models.errors import TemplateSyntaxError


logger = get_input_logger('template_syntax')


def split_template(template: str) -> tuple[list[str], list[str]]:
    """
    Split a brace template into literals and placeholder names.

    Args:
        template: Template text

    Returns:
        (literals, names) with len(literals) == len(names) + 1

    Raises:
        TemplateSyntaxError: On unclosed, unopened or invalid placeholders
    """
    if not isinstance(template, str):
        raise TypeError(f"Template must be a string, got {type(template).__name__}")

    literals: list[str] = []
    names: list[str] = []
    current: list[str] = []
    i = 0
    length = len(template)

    while i < length:
        if template.startswith(ESCAPED_OPEN, i):
            current.append(PLACEHOLDER_OPEN)
            i += 2
            continue
        if template.startswith(ESCAPED_CLOSE, i):
            current.append(PLACEHOLDER_CLOSE)
            i += 2
            continue

        char = template[i]

        if char == PLACEHOLDER_CLOSE:
            raise TemplateSyntaxError(template, i, "unmatched '}'")

        if char == PLACEHOLDER_OPEN:
            close = template.find(PLACEHOLDER_CLOSE, i + 1)
            if close == -1:
                raise TemplateSyntaxError(template, i, "unclosed '{'")
            name = template[i + 1:close].strip()
            if not name:
                raise TemplateSyntaxError(template, i, "empty placeholder")
            if not name.isidentifier():
                raise TemplateSyntaxError(
                    template, i, f"invalid placeholder name {name!r}"
                )
            literals.append(''.join(current))
            names.append(name)
            current = []
            i = close + 1
            continue

        current.append(char)
        i += 1

    literals.append(''.join(current))
    logger.debug(
        f"Split template {template!r} into {len(literals)} literals, "
        f"{len(names)} placeholders"
    )
    return literals, names


__all__ = ['split_template']
