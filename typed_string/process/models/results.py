# Path: typed_string/process/models/results.py
"""
Result Models

Plain result objects returned by compile and match: a success value
XOR a classified error. Neither call raises for pattern or input
problems; unwrap() is there for callers that prefer exceptions.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ...constants import (
    COMPILE_ERROR_KINDS,
    FATAL_MATCH_ERROR_KINDS,
    ErrorKind,
    MatchStatus,
)
from .errors import MatchError, PatternCompileError
from .segment_plan import SegmentPlan


@dataclass(frozen=True)
class CompileResult:
    """
    Outcome of compiling a pattern.

    Attributes:
        plan: The compiled plan (None on failure)
        error: The first structural violation (None on success)
    """
    plan: Optional[SegmentPlan] = None
    error: Optional[PatternCompileError] = None

    @classmethod
    def success(cls, plan: SegmentPlan) -> 'CompileResult':
        return cls(plan=plan)

    @classmethod
    def failure(cls, error: PatternCompileError) -> 'CompileResult':
        if error.kind not in COMPILE_ERROR_KINDS:
            raise TypeError(f"Not a compile error: {error.kind.value}")
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> SegmentPlan:
        """
        Return the plan or raise the compile error.

        Raises:
            PatternCompileError: If compilation failed
        """
        if self.error is not None:
            raise self.error
        return self.plan


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of matching one input against a plan.

    Attributes:
        status: MATCHED, FATAL or DECODE_FAILED
        value: Decoded values tuple or the validated input (on success)
        error: Classified error (on failure)

    Example:
        result = match(plan, 'route/3/end')
        if result.ok:
            (route_id,) = result.value
        else:
            print(result.error.message)
    """
    status: MatchStatus
    value: Any = None
    error: Optional[MatchError] = None

    @classmethod
    def matched(cls, value: Any) -> 'MatchResult':
        return cls(status=MatchStatus.MATCHED, value=value)

    @classmethod
    def failed(cls, error: MatchError) -> 'MatchResult':
        if error.kind in FATAL_MATCH_ERROR_KINDS:
            status = MatchStatus.FATAL
        elif error.kind is ErrorKind.DECODE_ERRORS:
            status = MatchStatus.DECODE_FAILED
        else:
            raise TypeError(f"Not a match error: {error.kind.value}")
        return cls(status=status, error=error)

    @property
    def ok(self) -> bool:
        return self.status == MatchStatus.MATCHED

    @property
    def is_fatal(self) -> bool:
        return self.status == MatchStatus.FATAL

    def unwrap(self) -> Any:
        """
        Return the value or raise the match error.

        Raises:
            MatchError: If the match failed
        """
        if self.error is not None:
            raise self.error
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        value = self.value
        if isinstance(value, tuple):
            value = list(value)
        return {
            'status': self.status.value,
            'value': value,
            'error': self.error.to_dict() if self.error is not None else None,
        }

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CompileResult',
    'MatchResult',
]
