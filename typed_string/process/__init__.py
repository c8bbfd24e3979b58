# Path: typed_string/process/__init__.py
"""
typed_string Process Layer

The matcher core:
    - pattern: Pattern compiler (definition-time validation)
    - matcher: Matcher engine (per-input scan)
    - models: Segment plans, results and the error taxonomy
"""

from .pattern import compile_pattern
from .matcher import match

__all__ = [
    'compile_pattern',
    'match',
]
