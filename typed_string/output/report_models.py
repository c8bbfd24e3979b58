# Path: typed_string/output/report_models.py
"""
Report Models

What the formatters render: one entry per matched input.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..process.models.results import MatchResult


@dataclass
class MatchReportEntry:
    """
    One input and its match outcome.

    Attributes:
        input: The candidate string
        result: Outcome of matching it
    """
    input: str
    result: MatchResult


@dataclass
class MatchReport:
    """
    Outcomes of matching several inputs against one pattern.

    Attributes:
        template: Brace rendering of the pattern
        pattern_name: Library name, if the pattern came from the library
        output_mode: values or validate
        entries: Per-input outcomes, in input order
    """
    template: str
    pattern_name: Optional[str] = None
    output_mode: str = 'values'
    entries: list[MatchReportEntry] = field(default_factory=list)

    def add(self, input: str, result: MatchResult) -> None:
        self.entries.append(MatchReportEntry(input=input, result=result))

    @property
    def matched_count(self) -> int:
        return sum(1 for e in self.entries if e.result.ok)

    @property
    def all_matched(self) -> bool:
        return self.matched_count == len(self.entries)


__all__ = ['MatchReportEntry', 'MatchReport']
