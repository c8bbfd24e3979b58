# Path: typed_string/process/matcher/__init__.py
"""
Matcher Engine

Single-pass scanner that runs a compiled SegmentPlan against input
strings, confirming literals, locating delimiters and decoding
placeholders.

Example:
    from typed_string.process.matcher import match

    result = match(plan, 'route/42/end')
    result.value  # (42,)
"""

from .engine import match

__all__ = ['match']
