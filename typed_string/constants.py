# Path: typed_string/constants.py
"""
System-Wide Constants for typed_string

Central repository for constant values used across the matcher.

Constants are organized by category:
- Output Modes
- Segment Parts
- Error Kinds
- Match Status
- Matching
- Sentinels
- Template Syntax
- CLI Display
"""

from enum import Enum
from typing import Final, Optional


# ==============================================================================
# OUTPUT MODES
# ==============================================================================

class OutputMode(str, Enum):
    """
    What a successful match returns.

    VALUES: tuple of decoded placeholder values, in segment order
    VALIDATE: the original input string, unchanged
    """
    VALUES = 'values'
    VALIDATE = 'validate'


# ==============================================================================
# SEGMENT PARTS
# ==============================================================================

class MissingPart(str, Enum):
    """Which literal of a segment is absent at compile time."""
    LEADING = 'leading'
    TRAILING = 'trailing'
    BOTH = 'both'


# ==============================================================================
# ERROR KINDS
# ==============================================================================

class ErrorKind(str, Enum):
    """
    Stable identifiers for every classified error.

    Compile-time kinds abort pattern construction. Match-time fatal
    kinds abort the current match call. DECODE_ERRORS is raised only
    after the whole literal skeleton matched.
    """
    # Compile-time
    PLACEHOLDER_COUNT_MISMATCH = 'placeholder_count_mismatch'
    INCOMPLETE_SEGMENT = 'incomplete_segment'
    AMBIGUOUS_PATTERN = 'ambiguous_pattern'
    TEMPLATE_SYNTAX = 'template_syntax'

    # Match-time fatal
    EXPECTED_LITERAL = 'expected_literal'
    DELIMITER_NOT_FOUND = 'delimiter_not_found'
    TRAILING_CONTENT = 'trailing_content'

    # Match-time aggregated
    DECODE_ERROR = 'decode_error'
    DECODE_ERRORS = 'decode_errors'


COMPILE_ERROR_KINDS: Final[frozenset] = frozenset({
    ErrorKind.PLACEHOLDER_COUNT_MISMATCH,
    ErrorKind.INCOMPLETE_SEGMENT,
    ErrorKind.AMBIGUOUS_PATTERN,
    ErrorKind.TEMPLATE_SYNTAX,
})

FATAL_MATCH_ERROR_KINDS: Final[frozenset] = frozenset({
    ErrorKind.EXPECTED_LITERAL,
    ErrorKind.DELIMITER_NOT_FOUND,
    ErrorKind.TRAILING_CONTENT,
})


# ==============================================================================
# MATCH STATUS
# ==============================================================================

class MatchStatus(str, Enum):
    """Outcome of a single match call."""
    MATCHED = 'matched'
    FATAL = 'fatal'
    DECODE_FAILED = 'decode_failed'


# ==============================================================================
# MATCHING
# ==============================================================================

# Character-class boundaries tried when an end-anchored capture is rejected
TRAILING_BOUNDARY_CANDIDATES: Final[int] = 4


# ==============================================================================
# SENTINELS
# ==============================================================================

class _NoValue:
    """Marker for a placeholder slot whose decoder failed."""

    _instance: Optional['_NoValue'] = None

    def __new__(cls) -> '_NoValue':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'NO_VALUE'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_NoValue, ())


NO_VALUE: Final = _NoValue()


# ==============================================================================
# TEMPLATE SYNTAX
# ==============================================================================

PLACEHOLDER_OPEN: Final[str] = '{'
PLACEHOLDER_CLOSE: Final[str] = '}'
ESCAPED_OPEN: Final[str] = '{{'
ESCAPED_CLOSE: Final[str] = '}}'


# ==============================================================================
# CLI DISPLAY
# ==============================================================================

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_INFO: Final[str] = '[INFO]'

EXIT_MATCHED: Final[int] = 0
EXIT_NOT_MATCHED: Final[int] = 1
EXIT_USAGE: Final[int] = 2

# Longest remainder / raw slice echoed verbatim in diagnostics
DIAGNOSTIC_SNIPPET_LIMIT: Final[int] = 40


__all__ = [
    'OutputMode',
    'MissingPart',
    'ErrorKind',
    'COMPILE_ERROR_KINDS',
    'FATAL_MATCH_ERROR_KINDS',
    'MatchStatus',
    'TRAILING_BOUNDARY_CANDIDATES',
    'NO_VALUE',
    'PLACEHOLDER_OPEN',
    'PLACEHOLDER_CLOSE',
    'ESCAPED_OPEN',
    'ESCAPED_CLOSE',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_INFO',
    'EXIT_MATCHED',
    'EXIT_NOT_MATCHED',
    'EXIT_USAGE',
    'DIAGNOSTIC_SNIPPET_LIMIT',
]
