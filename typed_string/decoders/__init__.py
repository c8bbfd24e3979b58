# Path: typed_string/decoders/__init__.py
"""
Placeholder Decoders

Decoders convert the raw substring captured for a placeholder into a
typed value:
- base: Decoder contract, DecodeFailure, as_decoder()
- builtin: integer, number, text, non_empty, one_of(), regex()
- schema: pydantic-backed decoders (schema_decoder(), bool, date, uuid)
- registry: name lookup for template syntax and pattern library
"""

from .base import (
    DECODE_EXCEPTIONS,
    DecodeFailure,
    Decoder,
    as_decoder,
    describe_cause,
)

from .builtin import (
    integer,
    number,
    text,
    non_empty,
    one_of,
    regex,
)

from .schema import (
    SchemaDecoder,
    schema_decoder,
    INTEGER_SCHEMA,
    NUMBER_SCHEMA,
    BOOLEAN_SCHEMA,
    DATE_SCHEMA,
    UUID_SCHEMA,
)

from .registry import (
    UnknownDecoderError,
    DecoderRegistry,
    get_default_registry,
)

__all__ = [
    # Contract
    'DECODE_EXCEPTIONS',
    'DecodeFailure',
    'Decoder',
    'as_decoder',
    'describe_cause',
    # Built-ins
    'integer',
    'number',
    'text',
    'non_empty',
    'one_of',
    'regex',
    # Schema
    'SchemaDecoder',
    'schema_decoder',
    'INTEGER_SCHEMA',
    'NUMBER_SCHEMA',
    'BOOLEAN_SCHEMA',
    'DATE_SCHEMA',
    'UUID_SCHEMA',
    # Registry
    'UnknownDecoderError',
    'DecoderRegistry',
    'get_default_registry',
]
