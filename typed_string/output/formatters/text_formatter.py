# Path: typed_string/output/formatters/text_formatter.py
"""
Text Formatter

Renders match outcomes as plain text for the console: one status line
per input, followed by the indented diagnostic for failures.

    Pattern: route/{integer}/end
    [OK] 'route/3/end' -> (3)
    [FAIL] 'route/x/end'
        1 placeholder(s) failed to decode
          route/x/end
                ^
          #0 at 6 'x' (integer): not an integer: 'x'
    1/2 inputs matched
"""

from typing import Any

from ...constants import STATUS_FAIL, STATUS_OK
from ...process.models.results import MatchResult
from ..diagnostics import render_diagnostic
from ..report_models import MatchReport
from .base_formatter import BaseFormatter

INDENT = '    '


class TextFormatter(BaseFormatter):
    """Renders match outcomes as plain text."""

    @property
    def format_name(self) -> str:
        return 'text'

    @property
    def file_extension(self) -> str:
        return '.txt'

    def format_result(self, input: str, result: MatchResult) -> str:
        if result.ok:
            return f"{STATUS_OK} {input!r} -> {self._format_value(result.value)}"

        lines = [f"{STATUS_FAIL} {input!r}"]
        diagnostic = render_diagnostic(result.error, input)
        lines.extend(INDENT + line for line in diagnostic.splitlines())
        return '\n'.join(lines)

    def format_report(self, report: MatchReport) -> str:
        lines = [f"Pattern: {report.pattern_name or report.template}"]
        if report.pattern_name:
            lines.append(f"Template: {report.template}")

        lines.extend(
            self.format_result(entry.input, entry.result)
            for entry in report.entries
        )
        lines.append(f"{report.matched_count}/{len(report.entries)} inputs matched")
        return '\n'.join(lines)

    def _format_value(self, value: Any) -> str:
        # Tuples print without the trailing comma of a 1-tuple repr
        if isinstance(value, tuple):
            return '(' + ', '.join(repr(v) for v in value) + ')'
        return repr(value)


__all__ = ['TextFormatter']
