"""The ordered history of reports replayed during detection."""

from __future__ import annotations

from typing import Any, Iterable, Optional


class ReportHistory:
    """Hands out reports one at a time in their original order."""

    def __init__(self, reports: Iterable[Any], max_term_id: int) -> None:
        self._reports = list(reports)
        self.max_term_id = max_term_id
        self._position = 0
        self.current_report: Optional[Any] = None
        self._visited_duplicates: list[Any] = []

    def __len__(self) -> int:
        return len(self._reports)

    def has_report(self) -> bool:
        """Whether reports remain to be handed out."""
        return self._position < len(self._reports)

    def next_report(self) -> Any:
        """Return the next report, remembering it if it is a duplicate."""
        if not self.has_report():
            raise IndexError("no reports left in the history")
        report = self._reports[self._position]
        self._position += 1
        self.current_report = report
        if report.is_duplicate:
            self._visited_duplicates.append(report)
        return report

    def visited_duplicates(self) -> list[Any]:
        """Return the duplicates handed out so far, in order."""
        return list(self._visited_duplicates)