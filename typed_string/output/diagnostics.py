# Path: typed_string/output/diagnostics.py
"""
Diagnostics

Turns classified errors into user-facing text. Everything needed is on
the error object; the input is only used to draw the caret line.

    Expected "a" at position 0
      z9b
      ^

    2 placeholder(s) failed to decode
      x-y
      ^ ^
      #0 at 0 'x' (integer): not an integer: 'x'
      #1 at 2 'y' (integer): not an integer: 'y'
"""

from typing import Optional

from ..constants import DIAGNOSTIC_SNIPPET_LIMIT, FATAL_MATCH_ERROR_KINDS
from ..core.logger import get_output_logger
from ..process.models.errors import (
    AggregatedDecodeErrors,
    TemplateSyntaxError,
    TrailingContent,
    TypedStringError,
)

INDENT = '  '

logger = get_output_logger('diagnostics')


def shorten(text: str, limit: int = DIAGNOSTIC_SNIPPET_LIMIT) -> str:
    """Quote text, eliding the middle of long values."""
    if len(text) <= limit:
        return repr(text)
    head = limit // 2
    tail = limit - head - 3
    return repr(text[:head] + '...' + text[-tail:])


def caret_line(length: int, spans: list[tuple[int, int]]) -> str:
    """
    Marker line with ^ under each (start, end) span.

    Empty spans get a single caret at their start.
    """
    marks = [' '] * (length + 1)
    for start, end in spans:
        start = max(0, min(start, length))
        end = max(start + 1, min(end, length))
        for i in range(start, end):
            marks[i] = '^'
    return ''.join(marks).rstrip()


def render_diagnostic(error: TypedStringError, input: Optional[str] = None) -> str:
    """
    Render an error as multi-line text.

    Args:
        error: Any classified typed_string error
        input: The matched input (enables the caret line)

    Returns:
        Diagnostic text without trailing newline
    """
    lines = [error.message]

    if isinstance(error, TemplateSyntaxError):
        lines.append(INDENT + error.template)
        lines.append(INDENT + caret_line(len(error.template), [(error.position, error.position)]))

    elif isinstance(error, AggregatedDecodeErrors):
        if input is not None:
            spans = [
                (e.position, e.position + len(e.raw))
                for e in error.errors
                if e.position is not None
            ]
            lines.append(INDENT + input)
            lines.append(INDENT + caret_line(len(input), spans))
        for decode_error in error.errors:
            where = f" at {decode_error.position}" if decode_error.position is not None else ''
            decoder = f" ({decode_error.decoder_name})" if decode_error.decoder_name else ''
            lines.append(
                f"{INDENT}#{decode_error.index}{where} {shorten(decode_error.raw)}"
                f"{decoder}: {decode_error.reason}"
            )

    elif error.kind in FATAL_MATCH_ERROR_KINDS:
        if input is not None:
            if isinstance(error, TrailingContent):
                span = (error.position, len(input))
            else:
                span = (error.position, error.position)
            lines.append(INDENT + input)
            lines.append(INDENT + caret_line(len(input), [span]))

    logger.debug(f"Rendered {error.kind.value} diagnostic")
    return '\n'.join(lines)


__all__ = [
    'render_diagnostic',
    'caret_line',
    'shorten',
]
