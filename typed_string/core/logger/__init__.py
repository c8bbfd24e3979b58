# Path: typed_string/core/logger/__init__.py
"""
typed_string Logger Package

IPO-aware logging for the template matcher.

Provides separate log streams for:
- INPUT layer (template syntax, pattern library, CLI)
- PROCESS layer (compiler, matcher engine)
- OUTPUT layer (diagnostics, formatters)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
