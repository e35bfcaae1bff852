"""Simulation of bug reporting that retrieves candidate masters for each report."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, Sequence, TextIO

from bugdedup.results import DetectorExtension


class DuplicateDetector:
    """Replays a report history, asking a ranking algorithm for each query.

    The first ``count_to_skip`` duplicates (and the reports before them) only
    populate the repository; after that every duplicate, or every report when
    ``detecting_all_reports`` is set, is queried before being added.
    ``topping_factory`` builds the ranking algorithm from the buckets; it must
    provide ``get_top(query)`` and ``train_model()``.
    """

    _comment = ""

    def __init__(
        self,
        log_file: Optional[TextIO],
        top_number: int,
        history: Any,
        buckets: Any,
        count_to_skip: int,
        extensions: Sequence[DetectorExtension],
        detecting_all_reports: bool,
        topping_factory: Callable[[Any], Any],
    ) -> None:
        self.log_file = log_file
        self.top_number = top_number
        self.history = history
        self.buckets = buckets
        self.count_to_skip = count_to_skip
        self.extensions = list(extensions)
        self.detecting_all_reports = detecting_all_reports
        self.topping_factory = topping_factory
        self.topping_algorithm: Any = None
        if self.log_file is not None:
            self.log_file.write(f"INFO: #reports = {len(history)}\n")

    def _log_detector_summary(self, log_file: TextIO) -> None:
        log_file.write("Duplicate Detector\n")

    def init(self) -> None:
        """Build the ranking algorithm and log the detector summary."""
        self.topping_algorithm = self.topping_factory(self.buckets)
        if self.log_file is None:
            raise ValueError("a log file is required")
        self._log_detector_summary(self.log_file)

    def skip(self) -> None:
        """Add reports without querying until enough duplicates are known."""
        if self.count_to_skip <= 0:
            return
        while self.history.has_report():
            self.post_handle_report(self.history.next_report())
            if self.buckets.duplicates_count() >= self.count_to_skip:
                return

    def detect(self) -> None:
        """Run the simulation over the whole history."""
        if self.topping_algorithm is None:
            raise RuntimeError("init() must be called before detect()")
        for extension in self.extensions:
            extension.set_comment(self._comment)
        self.skip()
        if self.log_file is not None:
            message = (
                f"INFO: skipped reports [({self.count_to_skip})duplicate/"
                f"({self.buckets.report_count()})all]\n"
            )
            self.log_file.write(message)
            sys.stdout.write(message)

        queried = 0
        while self.history.has_report():
            report = self.history.next_report()
            if self.detecting_all_reports or report.is_duplicate:
                self.handle_new_bug_report(report)
                queried += 1
            self.post_handle_report(report)

        if queried == 0:
            self.topping_algorithm.train_model()

    def handle_new_bug_report(self, query: Any) -> None:
        """Retrieve candidates for ``query`` and notify every extension."""
        if query.is_duplicate and query.id <= query.duplicate_id:
            raise ValueError(
                f"duplicate report {query.id} must come after its master "
                f"{query.duplicate_id}"
            )
        for extension in self.extensions:
            extension.start_processing(query)
        top = list(self.topping_algorithm.get_top(query))
        self.post_detection(query, top)
        for extension in self.extensions:
            extension.handle_result(top)

    def post_detection(self, query_report: Any, top: Sequence[Any]) -> None:
        """Mark ``query_report`` detected if its master is in the top list."""
        if any(
            master.id == query_report.duplicate_id
            for master in top[: self.top_number]
        ):
            query_report.detected = True

    def post_handle_report(self, report: Any) -> None:
        """Add a report to the repository once it has been handled."""
        self.buckets.add_report(report)

    def dispose(self) -> None:
        """Dispose every extension."""
        for extension in self.extensions:
            extension.dispose()