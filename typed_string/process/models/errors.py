# Path: typed_string/process/models/errors.py
"""
Error Taxonomy

Classified errors for pattern compilation and matching.

Tiers:
- Compile-time (first violation wins, no partial plan):
    PlaceholderCountMismatch, IncompleteSegment, AmbiguousPattern,
    TemplateSyntaxError
- Match-time fatal (scan stops immediately):
    ExpectedLiteral, DelimiterNotFound, TrailingContent
- Match-time aggregated (collected, reported once the literal skeleton
  matched):
    DecodeError records bundled in AggregatedDecodeErrors

Every error carries the structured context (position, literal, segment
index, raw substring, cause) needed to build a diagnostic without
re-scanning the input.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ...constants import ErrorKind, MissingPart
from ...decoders.base import describe_cause


# ==============================================================================
# BASE CLASSES
# ==============================================================================

class TypedStringError(Exception):
    """Base class for all classified typed_string errors."""

    kind: ErrorKind
    is_fatal: bool = True

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def _fields(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = {
            'kind': self.kind.value,
            'message': self.message,
            'fatal': self.is_fatal,
        }
        data.update(self._fields())
        return data

    def __repr__(self) -> str:
        fields = ', '.join(f"{k}={v!r}" for k, v in self._fields().items())
        return f"{type(self).__name__}({fields})"


class PatternCompileError(TypedStringError):
    """Pattern is structurally invalid; no plan can be built."""


class MatchError(TypedStringError):
    """Input does not match a compiled pattern."""


# ==============================================================================
# COMPILE-TIME ERRORS
# ==============================================================================

class PlaceholderCountMismatch(PatternCompileError):
    """Literal count is not placeholder count + 1."""

    kind = ErrorKind.PLACEHOLDER_COUNT_MISMATCH

    def __init__(self, literal_count: int, decoder_count: int):
        self.literal_count = literal_count
        self.decoder_count = decoder_count
        super().__init__(
            f"Template placeholders mismatch: got {decoder_count} decoders "
            f"for {literal_count} literals (expected {decoder_count + 1})"
        )

    def _fields(self) -> dict[str, Any]:
        return {
            'literal_count': self.literal_count,
            'decoder_count': self.decoder_count,
        }


class IncompleteSegment(PatternCompileError):
    """A segment's leading and/or trailing literal is absent."""

    kind = ErrorKind.INCOMPLETE_SEGMENT

    def __init__(self, index: int, missing: MissingPart):
        self.index = index
        self.missing = MissingPart(missing)
        super().__init__(
            f"Segment {index} is missing its {self.missing.value} literal"
            if self.missing is not MissingPart.BOTH
            else f"Segment {index} is missing both literals"
        )

    def _fields(self) -> dict[str, Any]:
        return {'index': self.index, 'missing': self.missing.value}


class AmbiguousPattern(PatternCompileError):
    """An internal literal is empty, so the placeholder split is undecidable."""

    kind = ErrorKind.AMBIGUOUS_PATTERN

    def __init__(self, index: int):
        self.index = index
        super().__init__(
            f"Ambiguous template: empty internal literal at index {index} "
            f"leaves placeholders {index - 1} and {index} without a delimiter"
        )

    def _fields(self) -> dict[str, Any]:
        return {'index': self.index}


class TemplateSyntaxError(PatternCompileError):
    """Brace template text could not be split into literals and names."""

    kind = ErrorKind.TEMPLATE_SYNTAX

    def __init__(self, template: str, position: int, reason: str):
        self.template = template
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid template at position {position}: {reason}")

    def _fields(self) -> dict[str, Any]:
        return {
            'template': self.template,
            'position': self.position,
            'reason': self.reason,
        }


# ==============================================================================
# MATCH-TIME FATAL ERRORS
# ==============================================================================

class ExpectedLiteral(MatchError):
    """A literal was not found exactly at the cursor."""

    kind = ErrorKind.EXPECTED_LITERAL

    def __init__(self, literal: str, position: int, final: bool = False):
        self.literal = literal
        self.position = position
        self.final = final
        which = 'final ' if final else ''
        super().__init__(f'Expected {which}"{literal}" at position {position}')

    def _fields(self) -> dict[str, Any]:
        return {
            'literal': self.literal,
            'position': self.position,
            'final': self.final,
        }


class DelimiterNotFound(MatchError):
    """A placeholder's trailing literal does not occur after the cursor."""

    kind = ErrorKind.DELIMITER_NOT_FOUND

    def __init__(self, literal: str, position: int):
        self.literal = literal
        self.position = position
        super().__init__(
            f'Could not find "{literal}" at or after position {position}'
        )

    def _fields(self) -> dict[str, Any]:
        return {'literal': self.literal, 'position': self.position}


class TrailingContent(MatchError):
    """The pattern matched a prefix but input continues past it."""

    kind = ErrorKind.TRAILING_CONTENT

    def __init__(self, position: int, remainder: str):
        self.position = position
        self.remainder = remainder
        super().__init__(
            f"Unexpected trailing content {remainder!r} at position {position}"
        )

    def _fields(self) -> dict[str, Any]:
        return {'position': self.position, 'remainder': self.remainder}


# ==============================================================================
# MATCH-TIME AGGREGATED ERRORS
# ==============================================================================

@dataclass(frozen=True)
class DecodeError:
    """
    One placeholder whose decoder rejected the captured text.

    Attributes:
        index: Segment index of the placeholder
        raw: The substring handed to the decoder
        cause: Exception raised by the decoder
        decoder_name: Name of the decoder
        position: Offset of raw within the input
    """
    index: int
    raw: str
    cause: BaseException
    decoder_name: Optional[str] = None
    position: Optional[int] = None

    kind = ErrorKind.DECODE_ERROR

    @property
    def reason(self) -> str:
        """One-line reason from the decoder."""
        return describe_cause(self.cause)

    @property
    def message(self) -> str:
        return f"Failed to decode placeholder #{self.index}: {self.reason}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        details = getattr(self.cause, 'details', None)
        return {
            'kind': self.kind.value,
            'index': self.index,
            'raw': self.raw,
            'position': self.position,
            'decoder': self.decoder_name,
            'reason': self.reason,
            'details': details,
        }

    def __str__(self) -> str:
        return self.message


class AggregatedDecodeErrors(MatchError):
    """Every literal matched but one or more placeholders failed to decode."""

    kind = ErrorKind.DECODE_ERRORS
    is_fatal = False

    def __init__(self, errors: list[DecodeError]):
        self.errors = tuple(errors)
        super().__init__(f"{len(self.errors)} placeholder(s) failed to decode")

    @property
    def indices(self) -> tuple[int, ...]:
        """Segment indices that failed, in order."""
        return tuple(e.index for e in self.errors)

    def _fields(self) -> dict[str, Any]:
        return {'errors': [e.to_dict() for e in self.errors]}

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)


__all__ = [
    'TypedStringError',
    'PatternCompileError',
    'MatchError',
    'PlaceholderCountMismatch',
    'IncompleteSegment',
    'AmbiguousPattern',
    'TemplateSyntaxError',
    'ExpectedLiteral',
    'DelimiterNotFound',
    'TrailingContent',
    'DecodeError',
    'AggregatedDecodeErrors',
]
