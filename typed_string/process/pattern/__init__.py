# Path: typed_string/process/pattern/__init__.py
"""
Pattern Compiler

Turns pattern descriptions into immutable SegmentPlans:
- compiler: literal/decoder sequences -> SegmentPlan
- template_syntax: "route/{integer}/end" -> literals + decoder names
"""

from .compiler import compile_pattern
from .template_syntax import split_template

__all__ = [
    'compile_pattern',
    'split_template',
]
