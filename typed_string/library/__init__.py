# Path: typed_string/library/__init__.py
"""
Pattern Library

Named patterns kept in YAML files, validated with pydantic and compiled
on demand.
"""

from .pattern_definition import PatternDefinition, PatternFile
from .pattern_loader import PatternLoader, DEFAULT_LIBRARY_PATH

__all__ = [
    'PatternDefinition',
    'PatternFile',
    'PatternLoader',
    'DEFAULT_LIBRARY_PATH',
]
