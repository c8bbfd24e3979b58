# Path: typed_string/output/formatters/__init__.py
"""
Report Formatters

Each formatter renders a MatchReport into a specific output format.
"""

from .base_formatter import BaseFormatter, FormatterRegistry
from .json_formatter import JsonFormatter
from .text_formatter import TextFormatter

FormatterRegistry.register(TextFormatter)
FormatterRegistry.register(JsonFormatter)

__all__ = [
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
