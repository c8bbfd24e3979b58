# Path: typed_string/output/__init__.py
"""
typed_string Output Layer

User-facing rendering of match outcomes:
    - diagnostics: caret-annotated error text
    - report_models: MatchReport containers
    - formatters: text and JSON renderers
"""

from .diagnostics import caret_line, render_diagnostic, shorten
from .report_models import MatchReport, MatchReportEntry
from .formatters import (
    BaseFormatter,
    FormatterRegistry,
    JsonFormatter,
    TextFormatter,
)

__all__ = [
    'render_diagnostic',
    'caret_line',
    'shorten',
    'MatchReport',
    'MatchReportEntry',
    'BaseFormatter',
    'FormatterRegistry',
    'JsonFormatter',
    'TextFormatter',
]
