"""Indexing types and the policies that keep a report index up to date."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Optional, Sequence

FULL_INDEXING_SUMMARY_WEIGHT = 2.0


class IndexingType(IntEnum):
    """Which part of a report is used to index it."""

    NO_INDEXING = 0
    SUMMARY_INDEXING = 1
    DESCRIPTION_INDEXING = 2
    FULL_INDEXING = 3

    @classmethod
    def parse(cls, value: int) -> "IndexingType":
        """Return the indexing type with the numeric ``value``."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"un-handled indexing type {value}") from None

    def label(self) -> str:
        """Return the printable name of this indexing type."""
        return self.name


def indexing_type_mapping() -> str:
    """Describe the numeric values accepted for indexing types."""
    return ", ".join(f"{int(kind)}:{kind.name}" for kind in IndexingType)


@dataclass(frozen=True)
class PreciseTerm:
    """A term id with a real-valued weight."""

    tid: int
    term_frequency: float


def normalize_terms(terms: Iterable[Any]) -> list[PreciseTerm]:
    """Scale the term frequencies so that the weight vector has unit length."""
    terms = list(terms)
    length = math.sqrt(sum(term.term_frequency ** 2 for term in terms))
    return [PreciseTerm(term.tid, term.term_frequency / length) for term in terms]


def weigh_terms(
    summary_terms: Sequence[Any],
    description_terms: Sequence[Any],
    summary_weight: float,
) -> list[PreciseTerm]:
    """Merge two tid-sorted term lists, weighting summary frequencies.

    A term present in both lists gets the weighted summary frequency plus the
    description frequency.
    """
    weights: dict[int, float] = {}
    for term in summary_terms:
        weights[term.tid] = term.term_frequency * summary_weight
    for term in description_terms:
        weights[term.tid] = weights.get(term.tid, 0) + term.term_frequency
    return [PreciseTerm(tid, weights[tid]) for tid in sorted(weights)]


class IndexingPolicy(ABC):
    """Decides how reports enter an index and how candidates come out of it."""

    def __init__(self, index: Optional[Any]) -> None:
        self.index = index

    @property
    @abstractmethod
    def indexing_type(self) -> IndexingType:
        """The indexing type this policy applies."""

    @abstractmethod
    def get_report_candidates(self, query_report: Any, candidate_collector: Any) -> IndexingType:
        """Collect candidate reports for ``query_report``; return the type used."""

    @abstractmethod
    def update_index(self, report: Any) -> None:
        """Add ``report`` to the index."""

    def add_report(self, terms: Iterable[Any], report: Any) -> None:
        """Add ``report`` to the index under its length-normalised ``terms``."""
        if self.index is None:
            raise RuntimeError("this policy has no index")
        self.index.add_report(normalize_terms(terms), report)


class CommonIndexingPolicy(IndexingPolicy):
    """Indexes the summary, the description or both parts of each report."""

    def __init__(self, index: Any, indexing_type: IndexingType) -> None:
        indexing_type = IndexingType.parse(indexing_type)
        if indexing_type is IndexingType.NO_INDEXING:
            raise ValueError("CommonIndexingPolicy requires an indexing type")
        super().__init__(index)
        self._type = indexing_type

    @property
    def indexing_type(self) -> IndexingType:
        return self._type

    def get_report_candidates(self, query_report: Any, candidate_collector: Any) -> IndexingType:
        self.index.get_reports(query_report, candidate_collector)
        return self._type

    def update_index(self, report: Any) -> None:
        if self._type is IndexingType.SUMMARY_INDEXING:
            self.add_report(report.summary_unigrams.terms, report)
        elif self._type is IndexingType.DESCRIPTION_INDEXING:
            self.add_report(report.description_unigrams.terms, report)
        else:
            weighed = weigh_terms(
                report.summary_unigrams.terms,
                report.description_unigrams.terms,
                FULL_INDEXING_SUMMARY_WEIGHT,
            )
            if not weighed:
                raise ValueError(f"report {report.id} has no terms to index")
            self.add_report(weighed, report)


class NoIndexingPolicy(IndexingPolicy):
    """A policy that keeps no index and yields no candidates."""

    def __init__(self) -> None:
        super().__init__(None)

    @property
    def indexing_type(self) -> IndexingType:
        return IndexingType.NO_INDEXING

    def get_report_candidates(self, query_report: Any, candidate_collector: Any) -> IndexingType:
        return IndexingType.NO_INDEXING

    def update_index(self, report: Any) -> None:
        return None