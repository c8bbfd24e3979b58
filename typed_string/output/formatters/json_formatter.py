# Path: typed_string/output/formatters/json_formatter.py
"""
JSON Formatter

Renders match outcomes as JSON for other tools. Decoded values that are
not JSON types (dates, UUIDs, ...) are written as strings.
"""

import json
from typing import Any

from ...process.models.results import MatchResult
from ..report_models import MatchReport
from .base_formatter import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Renders match outcomes as JSON."""

    indent = 2

    @property
    def format_name(self) -> str:
        return 'json'

    @property
    def file_extension(self) -> str:
        return '.json'

    def format_result(self, input: str, result: MatchResult) -> str:
        return self._dumps(self._result_dict(input, result))

    def format_report(self, report: MatchReport) -> str:
        return self._dumps({
            'pattern': report.pattern_name,
            'template': report.template,
            'output_mode': report.output_mode,
            'matched': report.matched_count,
            'total': len(report.entries),
            'results': [
                self._result_dict(entry.input, entry.result)
                for entry in report.entries
            ],
        })

    def _result_dict(self, input: str, result: MatchResult) -> dict[str, Any]:
        data = {'input': input}
        data.update(result.to_dict())
        return data

    def _dumps(self, data: dict[str, Any]) -> str:
        return json.dumps(data, indent=self.indent, default=str, ensure_ascii=False)


__all__ = ['JsonFormatter']
