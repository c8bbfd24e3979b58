# Path: typed_string/decoders/schema.py
"""
Schema Decoders

Decoders driven by a pydantic schema: any type pydantic can validate
from a string (int, float, bool, date, UUID, Enum, constrained and
Annotated types, models with a string validator, ...) becomes a
placeholder decoder.

Design:
- Pydantic v2 TypeAdapter does the parsing (lax mode, so "42" -> 42)
- ValidationError is re-raised as DecodeFailure carrying the pydantic
  error list as details
- Adapters are built once per decoder, not per call
"""

import datetime
import uuid
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from .base import Decoder, DecodeFailure


class SchemaDecoder(Decoder):
    """Decoder backed by a pydantic TypeAdapter."""

    def __init__(self, schema: Any, name: Optional[str] = None):
        adapter = TypeAdapter(schema)

        def _decode_schema(raw: str) -> Any:
            try:
                return adapter.validate_python(raw)
            except ValidationError as e:
                errors = e.errors(include_url=False)
                reason = errors[0]['msg'] if errors else str(e)
                raise DecodeFailure(reason, details=_jsonable(errors)) from e

        if name is None:
            name = getattr(schema, '__name__', None) or repr(schema)
        super().__init__(name, _decode_schema)
        object.__setattr__(self, 'schema', schema)


def _jsonable(errors: list[dict]) -> list[dict]:
    """Keep only the serialisable parts of pydantic error dicts."""
    return [
        {
            'type': err.get('type'),
            'loc': list(err.get('loc', ())),
            'msg': err.get('msg'),
            'input': err.get('input') if isinstance(err.get('input'), str) else None,
        }
        for err in errors
    ]


def schema_decoder(schema: Any, name: Optional[str] = None) -> SchemaDecoder:
    """
    Build a decoder from a pydantic-compatible type.

    Args:
        schema: Type or Annotated type understood by pydantic
        name: Decoder name for templates and diagnostics

    Returns:
        SchemaDecoder

    Example:
        from typing import Annotated
        from pydantic import Field

        port = schema_decoder(Annotated[int, Field(ge=1, le=65535)], 'port')
        port.decode('8080')   # 8080
        port.decode('70000')  # raises DecodeFailure
    """
    return SchemaDecoder(schema, name)


INTEGER_SCHEMA = schema_decoder(int, 'int_schema')
NUMBER_SCHEMA = schema_decoder(float, 'number_schema')
BOOLEAN_SCHEMA = schema_decoder(bool, 'bool')
DATE_SCHEMA = schema_decoder(datetime.date, 'date')
UUID_SCHEMA = schema_decoder(uuid.UUID, 'uuid')

SCHEMA_DECODERS: dict[str, Decoder] = {
    'bool': BOOLEAN_SCHEMA,
    'date': DATE_SCHEMA,
    'uuid': UUID_SCHEMA,
    'int_schema': INTEGER_SCHEMA,
    'number_schema': NUMBER_SCHEMA,
}


__all__ = [
    'SchemaDecoder',
    'schema_decoder',
    'INTEGER_SCHEMA',
    'NUMBER_SCHEMA',
    'BOOLEAN_SCHEMA',
    'DATE_SCHEMA',
    'UUID_SCHEMA',
    'SCHEMA_DECODERS',
]
