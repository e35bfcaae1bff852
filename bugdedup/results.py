"""Per-duplicate detection results and the extensions that observe a detector."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence, TextIO


@dataclass(frozen=True)
class DetectionResult:
    """The outcome of retrieving candidates for one query report.

    ``index_where_master_detected`` is the position of the true master in the
    candidate list, or ``None`` when the master was not among the candidates.
    """

    number_of_duplicates: int
    duplicate_report_id: int
    master_report_id: int
    index_where_master_detected: Optional[int]
    time_cost: int

    @property
    def detected(self) -> bool:
        """Whether the master appeared among the candidates."""
        return self.index_where_master_detected is not None


class DetectorExtension(ABC):
    """Observer notified while a detector processes query reports."""

    @abstractmethod
    def start_processing(self, report: Any) -> None:
        """Called before candidates are retrieved for ``report``."""

    def set_comment(self, comment: str) -> None:
        """Receive the detector's comment; ignored by default."""

    @abstractmethod
    def handle_result(self, candidates: Sequence[Any]) -> None:
        """Called with the ranked candidate masters for the current report."""

    def dispose(self) -> None:
        """Release resources once detection has finished; nothing by default."""


class OnlineResultCollector(DetectorExtension):
    """Collects a :class:`DetectionResult` for every processed report.

    A dot is printed to standard output for every twentieth report, with the
    running count after each line of eighty dots.
    """

    _DOT_EVERY = 20
    _DOTS_PER_LINE = 80

    def __init__(self, top_list_size: int, output: Optional[TextIO] = None) -> None:
        self.top_list_size = top_list_size
        self.output = sys.stdout if output is None else output
        self._results: list[DetectionResult] = []
        self._processed = 0
        self._start_time = 0
        self._current: Any = None
        self._column = 0

    def start_processing(self, report: Any) -> None:
        self._current = report
        self._start_time = int(time.time())
        self._processed += 1

    def _show_progress(self) -> None:
        if self._processed % self._DOT_EVERY != 0:
            return
        sys.stdout.write(".")
        self._column += 1
        if self._column >= self._DOTS_PER_LINE:
            self._column = 0
            sys.stdout.write(f"{self._processed:7d}\n")
        sys.stdout.flush()

    def handle_result(self, candidates: Sequence[Any]) -> None:
        if self._current is None:
            raise RuntimeError("handle_result called before start_processing")
        elapsed = int(time.time()) - self._start_time
        master_id = self._current.duplicate_id
        self._show_progress()
        index = next(
            (i for i, candidate in enumerate(candidates) if candidate.id == master_id),
            None,
        )
        self._results.append(
            DetectionResult(
                self._processed,
                self._current.id,
                master_id,
                index,
                elapsed,
            )
        )

    def results(self) -> list[DetectionResult]:
        """Return the results collected so far, in processing order."""
        return list(self._results)

    def number_of_duplicates(self) -> int:
        """Return how many results have been collected."""
        return len(self._results)


class RecallAndTimeIntervalAnalysis(DetectorExtension):
    """Records, for each detected duplicate, the rank and the age of its bucket."""

    def __init__(self, top_list_size: int, output: TextIO) -> None:
        if output is None:
            raise ValueError("The argument output cannot be None")
        self.top_list_size = top_list_size
        self.output = output
        self._current: Any = None

    def start_processing(self, report: Any) -> None:
        self._current = report if report.is_duplicate else None

    def handle_result(self, candidates: Sequence[Any]) -> None:
        if self._current is None:
            return
        master_id = self._current.duplicate_id
        for index, candidate in enumerate(candidates[: self.top_list_size]):
            if candidate.id == master_id:
                interval = (
                    self._current.timestamp_in_days
                    - candidate.latest_timestamp_in_bucket
                )
                self.output.write(
                    f"{self._current.id:6d}@{index:2d} \t interval={interval:4d}\n"
                )
                return


class RecommendationRecorder(DetectorExtension):
    """Writes the recommended candidates for every query report."""

    def __init__(self, top_list_size: int, output: TextIO) -> None:
        if output is None:
            raise ValueError("The argument output cannot be None")
        self.top_list_size = top_list_size
        self.output = output
        self._current: Any = None

    def start_processing(self, report: Any) -> None:
        self._current = report
        if report.is_duplicate:
            self.output.write(
                f"Retrieving for duplicate report {report.id} "
                f"(Its master is {report.duplicate_id})\n"
            )
        else:
            self.output.write(f"Retrieving for non-duplicate report {report.id}\n")

    def handle_result(self, candidates: Sequence[Any]) -> None:
        if self._current is None:
            raise RuntimeError("handle_result called before start_processing")
        master_id = self._current.duplicate_id
        for rank, candidate in enumerate(candidates[: self.top_list_size], start=1):
            info = candidate.similarity_info
            sign = "+" if candidate.id == master_id else " "
            self.output.write(
                f"{rank:2d} - {candidate.id:6d}"
                f"(real-sim-id={info.similar_report_id:6d}) : "
                f"{info.similarity:<3.6f} {sign}\n"
            )
        self.output.write("\n")