# Path: typed_string/process/matcher/engine.py
"""
Matcher Engine

Runs a compiled SegmentPlan against an input string in a single
left-to-right pass.

Per segment:
1. The leading literal must start exactly at the cursor (fatal
   ExpectedLiteral otherwise).
2. The captured text runs up to the first occurrence of the trailing
   literal at or after the cursor (fatal DelimiterNotFound if absent),
   or to end of input when the final literal is empty.
3. The decoder runs on the captured text. Failures are recorded and the
   scan continues.

Then the final literal must match at the cursor and consume the rest of
the input (fatal TrailingContent otherwise). Decode failures are only
reported once the whole literal skeleton has matched, all of them at
once, as AggregatedDecodeErrors.

Segment boundaries, once found, are never revisited. The one extra step
concerns an end-anchored last placeholder (empty final literal) whose
capture is rejected while no earlier placeholder has failed: the engine
looks at the first few character-class changes in the capture (digit to
letter, digit to punctuation, ...), at most TRAILING_BOUNDARY_CANDIDATES
of them, and tries those prefixes, longest first. A prefix that decodes
means the input carries extra content after the value, reported as
TrailingContent at that boundary. This costs one linear pass over the
capture plus a fixed number of decoder calls.

Match state lives in local variables, so a plan can be shared freely
between threads.
"""

from typing import Any, Optional

from ...constants import NO_VALUE, TRAILING_BOUNDARY_CANDIDATES, OutputMode
from ...core.logger import get_process_logger
from ...decoders.base import DECODE_EXCEPTIONS, Decoder
from ..models.errors import (
    AggregatedDecodeErrors,
    DecodeError,
    DelimiterNotFound,
    ExpectedLiteral,
    TrailingContent,
)
from ..models.results import MatchResult
from ..models.segment_plan import SegmentPlan


logger = get_process_logger('matcher.engine')


def match(plan: SegmentPlan, input: str) -> MatchResult:
    """
    Match an input string against a compiled plan.

    Args:
        plan: Compiled SegmentPlan
        input: Candidate string

    Returns:
        MatchResult: decoded values (VALUES mode) or the input itself
        (VALIDATE mode) on success; a classified error otherwise

    Raises:
        TypeError: If input is not a string

    Example:
        plan = compile_pattern(['route/', '/end'], [integer]).unwrap()
        match(plan, 'route/3/end').value   # (3,)
        match(plan, 'route/3/x').error     # DelimiterNotFound
    """
    if not isinstance(input, str):
        raise TypeError(f"Input must be a string, got {type(input).__name__}")

    position = 0
    values: list[Any] = []
    decode_errors: list[DecodeError] = []

    for segment in plan.segments:
        leading = segment.leading_literal
        if not input.startswith(leading, position):
            return _fatal(ExpectedLiteral(leading, position))
        position += len(leading)

        if segment.runs_to_end:
            delimiter_position = len(input)
        else:
            delimiter_position = input.find(segment.trailing_literal, position)
            if delimiter_position == -1:
                return _fatal(DelimiterNotFound(segment.trailing_literal, position))

        raw = input[position:delimiter_position]
        try:
            values.append(segment.decoder.decode(raw))
        except DECODE_EXCEPTIONS as cause:
            if segment.runs_to_end and not decode_errors:
                boundary = _trailing_boundary(segment.decoder, raw)
                if boundary is not None:
                    end = position + boundary
                    return _fatal(TrailingContent(end, input[end:]))
            values.append(NO_VALUE)
            decode_errors.append(DecodeError(
                index=segment.index,
                raw=raw,
                cause=cause,
                decoder_name=segment.decoder.name,
                position=position,
            ))

        position = delimiter_position

    final_literal = plan.final_literal
    if not input.startswith(final_literal, position):
        return _fatal(ExpectedLiteral(final_literal, position, final=True))
    position += len(final_literal)

    if position != len(input):
        return _fatal(TrailingContent(position, input[position:]))

    if decode_errors:
        logger.debug(
            f"{len(decode_errors)} of {plan.placeholder_count} placeholders "
            f"failed to decode for {plan.template!r}"
        )
        return MatchResult.failed(AggregatedDecodeErrors(decode_errors))

    if plan.output_mode is OutputMode.VALIDATE:
        return MatchResult.matched(input)
    return MatchResult.matched(tuple(values))


def _char_class(char: str) -> str:
    if char.isdigit():
        return 'digit'
    if char.isalpha():
        return 'alpha'
    if char.isspace():
        return 'space'
    return 'punct'


def _class_boundaries(raw: str, limit: int) -> list[int]:
    """Offsets of the first `limit` character-class changes in raw."""
    boundaries: list[int] = []
    previous = None
    for offset, char in enumerate(raw):
        current = _char_class(char)
        if previous is not None and current != previous:
            boundaries.append(offset)
            if len(boundaries) == limit:
                break
        previous = current
    return boundaries


def _trailing_boundary(decoder: Decoder, raw: str) -> Optional[int]:
    """
    Offset in raw where a decodable value ends, if any.

    Used for an end-anchored placeholder whose full capture was rejected.
    Only character-class boundaries are tried, longest prefix first, so
    the decoder runs at most TRAILING_BOUNDARY_CANDIDATES more times.
    """
    for end in reversed(_class_boundaries(raw, TRAILING_BOUNDARY_CANDIDATES)):
        try:
            decoder.decode(raw[:end])
        except DECODE_EXCEPTIONS:
            continue
        return end
    return None


def _fatal(error) -> MatchResult:
    logger.debug(f"Match failed: {error.message}")
    return MatchResult.failed(error)


__all__ = ['match']
