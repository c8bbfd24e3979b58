# Path: typed_string/__init__.py
"""
typed_string - Typed Template-String Matcher

Match strings against patterns made of fixed literals and typed
placeholders, decoding each placeholder and reporting precise
diagnostics when the input does not fit.

Core Components:
    - compile_pattern: validate literals/decoders, build a SegmentPlan
    - match: single-pass scan of one input against a plan
    - TypedStringMatcher: plan + engine in one reusable object
    - decoders: built-in, pydantic-backed and registry of named decoders

Example:
    from typed_string import from_template

    route = from_template('route/{integer}/end')
    route('route/42/end')                # (42,)

    result = route.match('route/x/end')
    result.error.errors[0].raw           # 'x'
"""

from .constants import OutputMode, MissingPart, ErrorKind, MatchStatus, NO_VALUE
from .decoders import (
    DecodeFailure,
    Decoder,
    DecoderRegistry,
    UnknownDecoderError,
    as_decoder,
    integer,
    number,
    text,
    non_empty,
    one_of,
    regex,
    schema_decoder,
)
from .process.models import (
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
    Segment,
    SegmentPlan,
    CompileResult,
    MatchResult,
)
from .process.pattern import compile_pattern, split_template
from .process.matcher import match
from .matcher import TypedStringMatcher, typed_string, from_template

__version__ = '1.0.0'

__all__ = [
    # Constants
    'OutputMode',
    'MissingPart',
    'ErrorKind',
    'MatchStatus',
    'NO_VALUE',
    # Decoders
    'DecodeFailure',
    'Decoder',
    'DecoderRegistry',
    'UnknownDecoderError',
    'as_decoder',
    'integer',
    'number',
    'text',
    'non_empty',
    'one_of',
    'regex',
    'schema_decoder',
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
    # Plan and results
    'Segment',
    'SegmentPlan',
    'CompileResult',
    'MatchResult',
    # Operations
    'compile_pattern',
    'split_template',
    'match',
    'TypedStringMatcher',
    'typed_string',
    'from_template',
]
