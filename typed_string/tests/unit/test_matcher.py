# Path: typed_string/tests/unit/test_matcher.py
"""
Unit Tests for TypedStringMatcher

Tests the facade over compiler and engine:
- typed_string() and from_template() construction
- parse / match / is_match entry points
- Output mode switching
"""

import pytest

from typed_string import (
    AggregatedDecodeErrors,
    AmbiguousPattern,
    DecoderRegistry,
    DelimiterNotFound,
    MatchError,
    OutputMode,
    PlaceholderCountMismatch,
    TemplateSyntaxError,
    TypedStringMatcher,
    UnknownDecoderError,
    from_template,
    integer,
    number,
    typed_string,
)


class TestTypedString:
    """Literal list + decoders construction."""

    def test_parse_returns_values(self):
        route = typed_string(['route/', '/end'], number)

        assert route.parse('route/3/end') == (3.0,)
        assert route('route/3/end') == (3.0,)

    def test_invalid_pattern_raises_at_definition(self):
        with pytest.raises(PlaceholderCountMismatch):
            typed_string(['route/', '/end'])

    def test_ambiguous_pattern_raises(self):
        with pytest.raises(AmbiguousPattern):
            typed_string(['', '', ''], integer, integer)

    def test_parse_raises_match_error(self):
        route = typed_string(['route/', '/end'], integer)

        with pytest.raises(DelimiterNotFound):
            route.parse('route/3')

    def test_match_never_raises_for_bad_input(self):
        route = typed_string(['route/', '/end'], integer)

        result = route.match('route/x/end')

        assert not result.ok
        assert isinstance(result.error, AggregatedDecodeErrors)

    def test_is_match(self):
        route = typed_string(['route/', '/end'], integer)

        assert route.is_match('route/1/end')
        assert not route.is_match('route/1.5/end')

    def test_validate_mode(self):
        route = typed_string(['route/', '/end'], integer, output_mode=OutputMode.VALIDATE)

        assert route('route/1/end') == 'route/1/end'
        assert route.output_mode is OutputMode.VALIDATE

    def test_requires_plan(self):
        with pytest.raises(TypeError):
            TypedStringMatcher('route/{integer}')


class TestFromTemplate:
    """Brace template construction."""

    def test_builtin_names(self):
        version = from_template('v{integer}.{integer}.{integer}')

        assert version('v1.2.3') == (1, 2, 3)

    def test_schema_decoder_names(self):
        flag = from_template('{text}={bool}')

        assert flag('dark_mode=true') == ('dark_mode', True)

    def test_custom_registry(self):
        registry = DecoderRegistry()
        registry.register('hex', lambda raw: int(raw, 16))

        color = from_template('#{hex}', registry=registry)

        assert color('#ff') == (255,)

    def test_unknown_decoder(self):
        with pytest.raises(UnknownDecoderError):
            from_template('{nope}', registry=DecoderRegistry())

    def test_empty_registry_is_used(self):
        """An empty registry is still honoured, not replaced by the default."""
        with pytest.raises(UnknownDecoderError):
            from_template('{integer}', registry=DecoderRegistry(include_builtins=False))

    def test_syntax_error(self):
        with pytest.raises(TemplateSyntaxError):
            from_template('route/{integer')

    def test_adjacent_placeholders_rejected(self):
        with pytest.raises(AmbiguousPattern):
            from_template('{integer}{integer}')

    def test_template_round_trips(self):
        route = from_template('route/{integer}/end', name='route')

        assert route.template == 'route/{integer}/end'
        assert route.name == 'route'
        assert 'route' in repr(route)


class TestOutputModeSwitch:
    """with_output_mode() returns a new matcher."""

    def test_switch_to_validate(self):
        route = from_template('route/{integer}/end')

        validating = route.with_output_mode('validate')

        assert validating('route/4/end') == 'route/4/end'
        assert route('route/4/end') == (4,)

    def test_errors_unchanged_by_mode(self):
        route = from_template('route/{integer}/end', output_mode=OutputMode.VALIDATE)

        with pytest.raises(MatchError):
            route('route/x/end')
