# Path: typed_string/process/pattern/compiler.py
"""
Pattern Compiler

Validates a literal/decoder pattern and builds an immutable SegmentPlan.

Checks, in order (first violation wins):
1. Arity: len(literals) == len(decoders) + 1
2. Segment completeness: every segment has a leading and a trailing
   literal (None marks an absent literal)
3. Ambiguity: no internal literal is empty

The first and final literals may be empty: they anchor to the start and
end of input, which is always decidable. An empty internal literal
leaves the scanner nothing to search for when ending the previous
placeholder, so it is rejected here rather than at match time.

Compilation is pure and never looks at input strings.
"""

from typing import Any, Optional, Sequence

from ...constants import MissingPart, OutputMode
from ...core.logger import get_process_logger
from ...decoders.base import Decoder, as_decoder
from ..models.errors import (
    AmbiguousPattern,
    IncompleteSegment,
    PatternCompileError,
    PlaceholderCountMismatch,
)
from ..models.results import CompileResult
from ..models.segment_plan import Segment, SegmentPlan


logger = get_process_logger('pattern.compiler')


def _missing_part(leading: Optional[str], trailing: Optional[str]) -> MissingPart:
    if leading is None and trailing is None:
        return MissingPart.BOTH
    if leading is None:
        return MissingPart.LEADING
    return MissingPart.TRAILING


def _check_literal_types(literals: Sequence[Optional[str]]) -> None:
    for i, literal in enumerate(literals):
        if literal is not None and not isinstance(literal, str):
            raise TypeError(
                f"Literal {i} must be a string or None, "
                f"got {type(literal).__name__}"
            )


def _check_completeness(literals: Sequence[Optional[str]], decoder_count: int) -> None:
    """
    Every segment needs both bounding literals.

    Raises:
        IncompleteSegment: For the first segment with an absent literal
    """
    if decoder_count == 0 and literals[0] is None:
        raise IncompleteSegment(0, MissingPart.TRAILING)

    for i in range(decoder_count):
        leading = literals[i]
        trailing = literals[i + 1]
        if leading is None or trailing is None:
            raise IncompleteSegment(i, _missing_part(leading, trailing))


def _check_ambiguity(literals: Sequence[str]) -> None:
    """
    Internal literals must be non-empty.

    Raises:
        AmbiguousPattern: For the first empty internal literal
    """
    for i in range(1, len(literals) - 1):
        if literals[i] == '':
            raise AmbiguousPattern(i)


def _build_segments(
    literals: Sequence[str],
    decoders: Sequence[Decoder]
) -> tuple[Segment, ...]:
    last = len(decoders) - 1
    return tuple(
        Segment(
            leading_literal=literals[i],
            decoder=decoder,
            trailing_literal=literals[i + 1],
            index=i,
            is_last=(i == last),
        )
        for i, decoder in enumerate(decoders)
    )


def compile_pattern(
    literals: Sequence[Optional[str]],
    decoders: Sequence[Any],
    output_mode: OutputMode = OutputMode.VALUES
) -> CompileResult:
    """
    Compile a pattern into a reusable SegmentPlan.

    Args:
        literals: N + 1 literal fragments (None marks an absent literal)
        decoders: N decoders (Decoder instances or callables)
        output_mode: VALUES to return decoded values, VALIDATE to return
            the input string unchanged

    Returns:
        CompileResult holding the plan or the first compile error

    Raises:
        TypeError: If a literal is not a string/None or a decoder is
            not callable (programming errors, not pattern errors)

    Example:
        result = compile_pattern(['route/', '/end'], [integer])
        plan = result.unwrap()
    """
    literals = list(literals)
    decoders = list(decoders)
    output_mode = OutputMode(output_mode)

    if len(literals) != len(decoders) + 1:
        error = PlaceholderCountMismatch(len(literals), len(decoders))
        logger.debug(f"Compile failed: {error.message}")
        return CompileResult.failure(error)

    _check_literal_types(literals)
    normalised = [as_decoder(d) for d in decoders]

    try:
        _check_completeness(literals, len(normalised))
        _check_ambiguity(literals)
    except PatternCompileError as error:
        logger.debug(f"Compile failed: {error.message}")
        return CompileResult.failure(error)

    plan = SegmentPlan(
        segments=_build_segments(literals, normalised),
        final_literal=literals[-1],
        output_mode=output_mode,
    )
    logger.debug(
        f"Compiled pattern {plan.template!r} "
        f"({plan.placeholder_count} placeholders, {output_mode.value} mode)"
    )
    return CompileResult.success(plan)


__all__ = ['compile_pattern']
