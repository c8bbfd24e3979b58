# Path: typed_string/library/pattern_definition.py
"""
Pattern Definition Model

Pydantic models for named patterns loaded from YAML files.

A library file looks like:

    patterns:
      - name: route
        template: "route/{integer}/end"
        output: values
        description: Numeric route id
        examples:
          - route/42/end
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..constants import OutputMode


class PatternDefinition(BaseModel):
    """
    One named pattern.

    Attributes:
        name: Unique identifier within the library
        template: Brace-syntax template
        output: values or validate
        description: Free text shown by --list
        examples: Inputs that must match (checked by verify_examples)
    """
    name: str = Field(..., min_length=1, description="Unique pattern name")
    template: str = Field(..., description="Brace template, e.g. 'v{integer}'")
    output: OutputMode = Field(
        default=OutputMode.VALUES,
        description="values returns decoded placeholders, validate returns the input",
    )
    description: Optional[str] = None
    examples: list[str] = Field(default_factory=list)

    @field_validator('name')
    @classmethod
    def name_is_identifier(cls, value: str) -> str:
        """Names are used on the command line; keep them simple."""
        candidate = value.replace('-', '_').replace('.', '_')
        if not candidate.isidentifier():
            raise ValueError(f"pattern name must be an identifier: {value!r}")
        return value


class PatternFile(BaseModel):
    """Top-level structure of a pattern library YAML file."""
    patterns: list[PatternDefinition] = Field(default_factory=list)


__all__ = [
    'PatternDefinition',
    'PatternFile',
]
