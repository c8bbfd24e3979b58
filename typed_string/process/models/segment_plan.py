# Path: typed_string/process/models/segment_plan.py
"""
Segment Plan Models

Compiled, immutable representation of a pattern.

A pattern with N placeholders has N + 1 literals. Segment i bundles
literal i (leading), decoder i and literal i + 1 (trailing). The plan
owns its literal strings and references the decoders, which the caller
keeps alive.
"""

from dataclasses import dataclass
from typing import Any

from ...constants import OutputMode
from ...decoders.base import Decoder


@dataclass(frozen=True)
class Segment:
    """
    One placeholder with its bounding literals.

    Attributes:
        leading_literal: Text required exactly at the cursor
        decoder: Decoder for the captured text
        trailing_literal: Delimiter ending the captured text
        index: Position of the placeholder in the pattern
        is_last: True for the final segment, whose trailing literal is
            the pattern's final literal
    """
    leading_literal: str
    decoder: Decoder
    trailing_literal: str
    index: int
    is_last: bool = False

    @property
    def runs_to_end(self) -> bool:
        """Captured text extends to end of input."""
        return self.is_last and self.trailing_literal == ''


@dataclass(frozen=True)
class SegmentPlan:
    """
    Immutable compiled pattern, reusable across match calls.

    Attributes:
        segments: Segments in pattern order
        final_literal: Literal that must close the input
        output_mode: What a successful match returns

    Example:
        plan = compile_pattern(['route/', '/end'], [integer]).unwrap()
        plan.template          # 'route/{integer}/end'
        plan.placeholder_count # 1
    """
    segments: tuple[Segment, ...]
    final_literal: str
    output_mode: OutputMode = OutputMode.VALUES

    @property
    def placeholder_count(self) -> int:
        return len(self.segments)

    @property
    def literals(self) -> tuple[str, ...]:
        """All N + 1 literals in pattern order."""
        return tuple(s.leading_literal for s in self.segments) + (self.final_literal,)

    @property
    def decoders(self) -> tuple[Decoder, ...]:
        return tuple(s.decoder for s in self.segments)

    @property
    def template(self) -> str:
        """Brace-syntax rendering of the pattern."""
        parts = []
        for segment in self.segments:
            parts.append(_escape(segment.leading_literal))
            parts.append('{' + segment.decoder.name + '}')
        parts.append(_escape(self.final_literal))
        return ''.join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            'template': self.template,
            'output_mode': self.output_mode.value,
            'literals': list(self.literals),
            'decoders': [d.name for d in self.decoders],
        }

    def __str__(self) -> str:
        return self.template


def _escape(literal: str) -> str:
    return literal.replace('{', '{{').replace('}', '}}')


__all__ = [
    'Segment',
    'SegmentPlan',
]
