# Path: typed_string/tests/unit/test_engine.py
"""
Unit Tests for the Matcher Engine

Tests the single-pass scan:
- Literal prefix checks (fatal)
- Delimiter search (first occurrence, fatal when absent)
- Total consumption of the input
- Aggregation of decode failures
- Output modes
"""

import threading

import pytest

from typed_string.constants import TRAILING_BOUNDARY_CANDIDATES, MatchStatus, OutputMode
from typed_string.decoders import DecodeFailure, Decoder, integer, number, text
from typed_string.process.matcher import match
from typed_string.process.models import (
    AggregatedDecodeErrors,
    CompileResult,
    DelimiterNotFound,
    ExpectedLiteral,
    MatchError,
    MatchResult,
    PlaceholderCountMismatch,
    TrailingContent,
)
from typed_string.process.pattern import compile_pattern


def plan_for(literals, decoders, output_mode=OutputMode.VALUES):
    return compile_pattern(literals, decoders, output_mode).unwrap()


class RecordingDecoder:
    """Decoder double that remembers every raw string it saw."""

    def __init__(self, inner=integer):
        self.inner = inner
        self.calls = []

    def __call__(self, raw):
        self.calls.append(raw)
        return self.inner.decode(raw)


class TestTrivialPattern:
    """Zero placeholders: match iff input equals the literal."""

    def test_exact_input_matches(self):
        plan = plan_for(['hello'], [])

        result = match(plan, 'hello')

        assert result.ok
        assert result.value == ()

    def test_prefix_of_literal_fails(self):
        result = match(plan_for(['hello'], []), 'hell')

        assert isinstance(result.error, ExpectedLiteral)
        assert result.error.position == 0
        assert result.error.final

    def test_literal_followed_by_more_fails(self):
        result = match(plan_for(['hello'], []), 'hello!')

        assert isinstance(result.error, TrailingContent)
        assert result.error.position == 5
        assert result.error.remainder == '!'

    def test_empty_pattern_matches_only_empty_input(self):
        plan = plan_for([''], [])

        assert match(plan, '').ok
        assert isinstance(match(plan, 'x').error, TrailingContent)

    def test_validate_mode_returns_input(self):
        plan = plan_for(['hello'], [], OutputMode.VALIDATE)

        assert match(plan, 'hello').value == 'hello'


class TestSuccessfulMatches:
    """Inputs that fit the pattern."""

    def test_values_in_segment_order(self):
        plan = plan_for(['v', '.', '.', ''], [integer, integer, integer])

        result = match(plan, 'v1.22.333')

        assert result.status == MatchStatus.MATCHED
        assert result.value == (1, 22, 333)

    def test_validate_mode_returns_original_string(self):
        plan = plan_for(['route/', '/end'], [number], OutputMode.VALIDATE)

        result = match(plan, 'route/3/end')

        assert result.ok
        assert result.value == 'route/3/end'

    def test_leading_placeholder(self):
        plan = plan_for(['', 'px'], [integer])

        assert match(plan, '12px').value == (12,)

    def test_trailing_placeholder_runs_to_end(self):
        plan = plan_for(['id=', ''], [text])

        assert match(plan, 'id=a/b=c').value == ('a/b=c',)

    def test_empty_placeholder_value(self):
        plan = plan_for(['[', ']'], [text])

        assert match(plan, '[]').value == ('',)

    def test_unicode_input(self):
        plan = plan_for(['pokémon/', '/'], [text])

        assert match(plan, 'pokémon/pikachu/').value == ('pikachu',)


class TestDelimiterSearch:
    """The captured text ends at the first delimiter occurrence."""

    def test_integer_before_end(self):
        plan = plan_for(['', 'end'], [integer])

        assert match(plan, '12end').value == (12,)

    def test_first_occurrence_is_used(self):
        decoder = RecordingDecoder(integer)
        plan = plan_for(['', 'end'], [decoder])

        result = match(plan, '1e2end')

        assert decoder.calls == ['1e2']
        assert isinstance(result.error, AggregatedDecodeErrors)
        assert result.error.errors[0].raw == '1e2'

    def test_first_occurrence_with_accepting_decoder(self):
        plan = plan_for(['', 'end'], [number])

        assert match(plan, '1e2end').value == (100.0,)

    def test_no_backtracking_past_first_delimiter(self):
        """The first '/' ends the placeholder even if a later split would fit."""
        plan = plan_for(['', '/', ''], [text, integer])

        result = match(plan, 'a/b/3')

        assert isinstance(result.error, AggregatedDecodeErrors)
        assert result.error.errors[0].raw == 'b/3'

    def test_delimiter_not_found(self):
        plan = plan_for(['route/', '/end'], [integer])

        result = match(plan, 'route/42')

        assert isinstance(result.error, DelimiterNotFound)
        assert result.error.literal == '/end'
        assert result.error.position == 6

    def test_delimiter_search_starts_after_leading_literal(self):
        """A delimiter occurring inside the leading literal is not used."""
        plan = plan_for(['a-', '-'], [text])

        assert match(plan, 'a-b-').value == ('b',)


class TestFatalFailures:
    """Literal and delimiter failures stop the scan immediately."""

    def test_expected_literal_at_start(self):
        decoder = RecordingDecoder(integer)
        plan = plan_for(['a', 'b'], [decoder])

        result = match(plan, 'z9b')

        assert isinstance(result.error, ExpectedLiteral)
        assert result.error.literal == 'a'
        assert result.error.position == 0
        assert not result.error.final
        assert decoder.calls == []
        assert result.status == MatchStatus.FATAL

    def test_missing_last_delimiter(self):
        """Later leading literals are the delimiter just found, so the
        failure surfaces as the missing trailing literal."""
        plan = plan_for(['<', '>', '>'], [integer, integer])

        result = match(plan, '<1>')

        assert isinstance(result.error, DelimiterNotFound)
        assert result.error.literal == '>'
        assert result.error.position == 3

    def test_missing_opening_literal(self):
        plan = plan_for(['(', ')'], [text])

        result = match(plan, 'x)')

        assert isinstance(result.error, ExpectedLiteral)
        assert result.error.literal == '('
        assert result.error.position == 0

    def test_fatal_error_discards_collected_decode_errors(self):
        plan = plan_for(['', '-', '!'], [integer, integer])

        result = match(plan, 'x-1')

        assert isinstance(result.error, DelimiterNotFound)
        assert result.error.literal == '!'

    def test_trailing_content_after_final_literal(self):
        plan = plan_for(['a', 'b'], [integer])

        result = match(plan, 'a1bb')

        assert isinstance(result.error, TrailingContent)
        assert result.error.position == 3
        assert result.error.remainder == 'b'

    def test_trailing_content_after_end_anchored_value(self):
        plan = plan_for(['route/', ''], [number])

        result = match(plan, 'route/3/end')

        assert isinstance(result.error, TrailingContent)
        assert result.error.position == 7
        assert result.error.remainder == '/end'

    def test_trailing_content_with_integer_decoder(self):
        plan = plan_for(['route/', ''], [integer])

        result = match(plan, 'route/12x')

        assert isinstance(result.error, TrailingContent)
        assert result.error.position == 8
        assert result.error.remainder == 'x'

    def test_earlier_decode_error_keeps_end_anchored_failure(self):
        """With a failure already collected the last capture is not split."""
        last = RecordingDecoder()
        plan = plan_for(['', '-', ''], [integer, last])

        result = match(plan, 'x-5y')

        assert result.status == MatchStatus.DECODE_FAILED
        assert isinstance(result.error, AggregatedDecodeErrors)
        assert result.error.indices == (0, 1)
        assert [e.raw for e in result.error.errors] == ['x', '5y']
        assert last.calls == ['5y']

    def test_uniform_rejected_capture_decoded_once(self):
        decoder = RecordingDecoder()
        plan = plan_for(['n=', ''], [decoder])

        result = match(plan, 'n=' + 'x' * 5000)

        assert isinstance(result.error, AggregatedDecodeErrors)
        assert len(decoder.calls) == 1

    def test_boundary_attempts_are_bounded(self):
        decoder = RecordingDecoder()
        plan = plan_for(['n=', ''], [decoder])

        result = match(plan, 'n=' + 'a1' * 2000)

        assert isinstance(result.error, AggregatedDecodeErrors)
        assert len(decoder.calls) == 1 + TRAILING_BOUNDARY_CANDIDATES
        assert decoder.calls[1:] == ['a1a1', 'a1a', 'a1', 'a']

    def test_overlong_integer_is_decode_error(self):
        plan = plan_for(['n=', ''], [integer])

        result = match(plan, 'n=' + '1' * 40000 + 'x')

        assert isinstance(result.error, AggregatedDecodeErrors)
        assert result.error.errors[0].position == 2
        assert len(result.error.errors[0].raw) == 40001


class TestAggregatedDecodeErrors:
    """Decode failures are collected across the whole scan."""

    def test_both_placeholders_reported(self):
        plan = plan_for(['', '-', ''], [integer, integer])

        result = match(plan, 'x-y')

        assert result.status == MatchStatus.DECODE_FAILED
        error = result.error
        assert isinstance(error, AggregatedDecodeErrors)
        assert len(error.errors) == 2
        assert [e.index for e in error.errors] == [0, 1]
        assert [e.raw for e in error.errors] == ['x', 'y']
        assert [e.position for e in error.errors] == [0, 2]
        assert not error.is_fatal

    def test_only_failing_placeholders_reported(self):
        plan = plan_for(['', '-', '-', ''], [integer, integer, integer])

        result = match(plan, '1-x-3')

        assert result.error.indices == (1,)

    def test_decoders_after_a_failure_still_run(self):
        second = RecordingDecoder(integer)
        plan = plan_for(['', '/', ''], [integer, second])

        match(plan, 'x/5')

        assert second.calls == ['5']

    def test_cause_is_preserved(self):
        def strict(raw):
            raise DecodeFailure('always fails', details={'raw': raw})

        plan = plan_for(['<', '>'], [strict])

        result = match(plan, '<v>')

        decode_error = result.error.errors[0]
        assert isinstance(decode_error.cause, DecodeFailure)
        assert decode_error.reason == 'always fails'
        assert decode_error.decoder_name == 'strict'

    def test_plain_value_error_is_captured(self):
        plan = plan_for(['#', ''], [Decoder('hex', lambda raw: int(raw, 16))])

        result = match(plan, '#zz')

        assert isinstance(result.error, AggregatedDecodeErrors)
        assert isinstance(result.error.errors[0].cause, ValueError)

    def test_unexpected_decoder_exception_propagates(self):
        def broken(raw):
            raise RuntimeError('bug in decoder')

        plan = plan_for(['<', '>'], [broken])

        with pytest.raises(RuntimeError):
            match(plan, '<v>')

    def test_unwrap_raises_aggregated_error(self):
        plan = plan_for(['', '-', ''], [integer, integer])

        with pytest.raises(MatchError) as exc_info:
            match(plan, 'x-y').unwrap()

        assert isinstance(exc_info.value, AggregatedDecodeErrors)


class TestEngineContract:
    """General properties of match()."""

    def test_non_string_input_is_type_error(self):
        plan = plan_for(['a'], [])

        with pytest.raises(TypeError):
            match(plan, b'a')

    def test_plan_reusable_after_failure(self):
        plan = plan_for(['route/', '/end'], [integer])

        assert not match(plan, 'nope').ok
        assert match(plan, 'route/7/end').value == (7,)

    def test_every_input_yields_one_outcome(self):
        plan = plan_for(['a', ',', 'b'], [integer, integer])
        inputs = ['', 'a', 'ab', 'a1,2b', 'a1,2', 'a,b', 'a1,2bb', 'ba1,2b', 'a,,b']

        for candidate in inputs:
            result = match(plan, candidate)
            assert result.ok != (result.error is not None)
            assert result.status in (
                MatchStatus.MATCHED, MatchStatus.FATAL, MatchStatus.DECODE_FAILED
            )

    def test_concurrent_matches_share_plan(self):
        plan = plan_for(['', ':', ''], [integer, integer])
        failures = []

        def worker(offset):
            for i in range(200):
                value = match(plan, f'{offset}:{i}').value
                if value != (offset, i):
                    failures.append((offset, i, value))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert failures == []

    def test_to_dict(self):
        plan = plan_for(['', '-', ''], [integer, integer])

        data = match(plan, '1-x').to_dict()

        assert data['status'] == 'decode_failed'
        assert data['error']['kind'] == 'decode_errors'
        assert data['error']['errors'][0]['raw'] == 'x'
        assert data['error']['errors'][0]['index'] == 1

    def test_match_result_rejects_compile_errors(self):
        with pytest.raises(TypeError):
            MatchResult.failed(PlaceholderCountMismatch(1, 1))

    def test_compile_result_rejects_match_errors(self):
        with pytest.raises(TypeError):
            CompileResult.failure(ExpectedLiteral('a', 0))
