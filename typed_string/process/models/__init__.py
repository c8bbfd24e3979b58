# Path: typed_string/process/models/__init__.py
"""
Process Models

Data models shared by the compiler and the matcher engine:
- errors: classified error taxonomy
- segment_plan: Segment and SegmentPlan (compiled pattern)
- results: CompileResult and MatchResult
"""

from .errors import (
    TypedStringError,
    PatternCompileError,
    MatchError,
    PlaceholderCountMismatch,
    IncompleteSegment,
    AmbiguousPattern,
    TemplateSyntaxError,
    ExpectedLiteral,
    DelimiterNotFound,
    TrailingContent,
    DecodeError,
    AggregatedDecodeErrors,
)

from .segment_plan import (
    Segment,
    SegmentPlan,
)

from .results import (
    CompileResult,
    MatchResult,
)

__all__ = [
    # Errors
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
    # Plan
    'Segment',
    'SegmentPlan',
    # Results
    'CompileResult',
    'MatchResult',
]
