# Path: typed_string/output/formatters/base_formatter.py
"""
Base Formatter and Formatter Registry

A formatter renders match outcomes in one output format, either a single
(input, MatchResult) pair or a whole MatchReport.

To add a new format:
1. Subclass BaseFormatter
2. Implement format_result() and format_report()
3. Register via FormatterRegistry.register()
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Type

from ...process.models.results import MatchResult
from ..report_models import MatchReport

_UNSAFE_FILENAME_CHARS = re.compile(r'[^A-Za-z0-9_.-]+')


class BaseFormatter(ABC):
    """Abstract base for match outcome formatters."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short name for this format (e.g., 'json', 'text')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.json', '.txt')."""

    @abstractmethod
    def format_result(self, input: str, result: MatchResult) -> str:
        """Render one input and its match outcome."""

    @abstractmethod
    def format_report(self, report: MatchReport) -> str:
        """Render every entry of a report, with a summary."""

    def write_report(self, report: MatchReport, output_dir: Path) -> Path:
        """
        Write a rendered report into output_dir.

        The file is named after the pattern (or 'matches' for inline
        templates), e.g. route_matches.json.

        Returns:
            Path to the written file
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        filepath = output_dir / self._build_filename(report)
        filepath.write_text(self.format_report(report), encoding='utf-8')
        return filepath

    def _build_filename(self, report: MatchReport) -> str:
        if report.pattern_name:
            stem = _UNSAFE_FILENAME_CHARS.sub('_', report.pattern_name) + '_matches'
        else:
            stem = 'matches'
        return f"{stem}{self.file_extension}"


class FormatterRegistry:
    """Formatter classes keyed by format name."""

    _formatters: Dict[str, Type[BaseFormatter]] = {}

    @classmethod
    def register(cls, formatter_class: Type[BaseFormatter]) -> None:
        cls._formatters[formatter_class().format_name] = formatter_class

    @classmethod
    def get(cls, format_name: str) -> Optional[BaseFormatter]:
        """New formatter instance for format_name, or None if unknown."""
        formatter_class = cls._formatters.get(format_name)
        return formatter_class() if formatter_class else None

    @classmethod
    def get_available(cls) -> list[str]:
        return sorted(cls._formatters)


__all__ = ['BaseFormatter', 'FormatterRegistry']
