# Path: typed_string/matcher.py
"""
Typed String Matcher

Convenience layer over the compiler and the engine: a matcher object
that keeps its compiled plan and exposes result-returning and raising
entry points.

Example:
    from typed_string import typed_string, integer

    route = typed_string(['route/', '/end'], integer)
    route('route/42/end')          # (42,)
    route.is_match('route/x/end')  # False

    route = from_template('route/{integer}/end')
    route.match('route/42').error  # DelimiterNotFound
"""

from typing import Any, Optional, Sequence

from .constants import OutputMode
from .decoders.registry import DecoderRegistry, get_default_registry
from .process.matcher.engine import match as run_match
from .process.models.results import MatchResult
from .process.models.segment_plan import SegmentPlan
from .process.pattern.compiler import compile_pattern
from .process.pattern.template_syntax import split_template


class TypedStringMatcher:
    """
    Compiled pattern bound to the matcher engine.

    Instances are immutable and safe to share between threads.

    Attributes:
        plan: The compiled SegmentPlan
        name: Optional display name (e.g., pattern library entry)
    """

    def __init__(self, plan: SegmentPlan, name: Optional[str] = None):
        if not isinstance(plan, SegmentPlan):
            raise TypeError(f"Expected SegmentPlan, got {type(plan).__name__}")
        self._plan = plan
        self._name = name

    @property
    def plan(self) -> SegmentPlan:
        return self._plan

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def template(self) -> str:
        return self._plan.template

    @property
    def output_mode(self) -> OutputMode:
        return self._plan.output_mode

    def match(self, input: str) -> MatchResult:
        """Match input, returning a MatchResult (never raises for bad input)."""
        return run_match(self._plan, input)

    def parse(self, input: str) -> Any:
        """
        Match input and return the value.

        Returns:
            Tuple of decoded values, or the input in VALIDATE mode

        Raises:
            MatchError: Classified match failure
        """
        return run_match(self._plan, input).unwrap()

    __call__ = parse

    def is_match(self, input: str) -> bool:
        """True when input matches and every placeholder decodes."""
        return run_match(self._plan, input).ok

    def with_output_mode(self, output_mode: OutputMode) -> 'TypedStringMatcher':
        """Same pattern, different output mode."""
        plan = SegmentPlan(
            segments=self._plan.segments,
            final_literal=self._plan.final_literal,
            output_mode=OutputMode(output_mode),
        )
        return TypedStringMatcher(plan, self._name)

    def __repr__(self) -> str:
        label = f"{self._name}: " if self._name else ''
        return (
            f"TypedStringMatcher({label}{self._plan.template!r}, "
            f"mode={self._plan.output_mode.value})"
        )


def typed_string(
    literals: Sequence[Optional[str]],
    *decoders: Any,
    output_mode: OutputMode = OutputMode.VALUES,
    name: Optional[str] = None
) -> TypedStringMatcher:
    """
    Compile literals and decoders into a matcher.

    Args:
        literals: N + 1 literal fragments
        *decoders: N decoders
        output_mode: VALUES or VALIDATE
        name: Optional display name

    Returns:
        TypedStringMatcher

    Raises:
        PatternCompileError: If the pattern is invalid
    """
    plan = compile_pattern(literals, decoders, output_mode).unwrap()
    return TypedStringMatcher(plan, name)


def from_template(
    template: str,
    registry: Optional[DecoderRegistry] = None,
    output_mode: OutputMode = OutputMode.VALUES,
    name: Optional[str] = None
) -> TypedStringMatcher:
    """
    Build a matcher from brace template syntax.

    Args:
        template: e.g. "route/{integer}/end"
        registry: Decoder lookup (defaults to the process-wide registry)
        output_mode: VALUES or VALIDATE
        name: Optional display name

    Raises:
        TemplateSyntaxError: Malformed braces
        UnknownDecoderError: Placeholder names an unregistered decoder
        PatternCompileError: Structurally invalid pattern
    """
    if registry is None:
        registry = get_default_registry()
    literals, names = split_template(template)
    decoders = [registry.get(decoder_name) for decoder_name in names]
    return typed_string(literals, *decoders, output_mode=output_mode, name=name)


__all__ = [
    'TypedStringMatcher',
    'typed_string',
    'from_template',
]
