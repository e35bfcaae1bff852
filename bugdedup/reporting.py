"""Text formatting of detection results for the result files."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence, Tuple

RecallEntry = Tuple[float, int]

_SEPARATOR = "=" * 68


def format_result_statistics(
    name: str,
    recall: Sequence[RecallEntry],
    total_duplicates: int,
    denominator: float,
    print_rank: bool,
) -> str:
    """Format one recall list, optionally labelled with rank and counts."""
    lines = [f"{name}..."]
    for rank, (value, count) in enumerate(recall, start=1):
        if print_rank:
            lines.append(
                f"TOP({rank:2d})({count:5d}/{total_duplicates:5d})="
                f"{value / denominator:f}"
            )
        else:
            lines.append(f"{value:f}")
    return "\n".join(lines) + "\n"


def format_average_result_statistics(
    name: str,
    recall_lists: Sequence[Sequence[RecallEntry]],
    print_rank: bool,
) -> str:
    """Format the per-rank average of several recall lists."""
    if not recall_lists:
        raise ValueError("at least one recall list is required")
    iterations = len(recall_lists)
    lines = [f"Average {name}..."]
    for rank, column in enumerate(zip(*recall_lists), start=1):
        average = sum(value for value, _ in column) / iterations
        if print_rank:
            lines.append(f"TOP({rank:2d})={average:f}")
        else:
            lines.append(f"{average:f}")
    return "\n".join(lines) + "\n"


def format_file_header(
    dataset_path: str,
    iterations: int,
    indexing_label: str,
    started: Optional[datetime] = None,
) -> str:
    """Format the banner written at the top of a result file."""
    if started is None:
        started = datetime.now()
    return (
        f"{_SEPARATOR}\n"
        f"--Started at {started.ctime()}\n"
        f"--Dataset file = {dataset_path}\n"
        f"--Total Iterations = {iterations}\n"
        f"--Indexing Type = {indexing_label}\n"
        f"{_SEPARATOR}\n\n\n"
    )


def average_map(map_values: Sequence[float], iterations: int) -> float:
    """Average the mean average precision over all iterations."""
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    return sum(map_values, 0.0) / iterations