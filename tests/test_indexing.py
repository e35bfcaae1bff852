import math
from types import SimpleNamespace

import pytest

from bugdedup.indexing import (
    CommonIndexingPolicy,
    IndexingType,
    NoIndexingPolicy,
    PreciseTerm,
    indexing_type_mapping,
    normalize_terms,
    weigh_terms,
)


def term(tid, tf):
    return SimpleNamespace(tid=tid, term_frequency=tf)


def report(summary, description, report_id=1):
    return SimpleNamespace(
        id=report_id,
        summary_unigrams=SimpleNamespace(terms=summary),
        description_unigrams=SimpleNamespace(terms=description),
    )


class FakeIndex:
    def __init__(self):
        self.added = []
        self.queries = []

    def add_report(self, terms, bug_report):
        self.added.append((terms, bug_report))

    def get_reports(self, query, collector):
        self.queries.append(query)
        collector.append("candidate")


@pytest.mark.parametrize("kind", list(IndexingType))
def test_parse_round_trip(kind):
    assert IndexingType.parse(int(kind)) is kind


@pytest.mark.parametrize("value", [-1, 4, 100])
def test_parse_rejects_unknown(value):
    with pytest.raises(ValueError, match="un-handled indexing type"):
        IndexingType.parse(value)


def test_labels():
    assert IndexingType.FULL_INDEXING.label() == "FULL_INDEXING"
    assert IndexingType.NO_INDEXING.label() == "NO_INDEXING"


def test_mapping():
    assert indexing_type_mapping() == (
        "0:NO_INDEXING, 1:SUMMARY_INDEXING, 2:DESCRIPTION_INDEXING, 3:FULL_INDEXING"
    )


def test_normalize_terms_unit_length_and_ratio():
    result = normalize_terms([term(1, 3), term(5, 4), term(9, 2)])
    assert [t.tid for t in result] == [1, 5, 9]
    assert math.isclose(sum(t.term_frequency ** 2 for t in result), 1.0)
    assert math.isclose(result[0].term_frequency / result[2].term_frequency, 3 / 2)


def test_normalize_empty():
    assert normalize_terms([]) == []


def test_weigh_terms_merges_sorted():
    summary = [term(1, 1), term(3, 2)]
    description = [term(2, 5), term(3, 1)]
    result = weigh_terms(summary, description, 2.0)
    assert [t.tid for t in result] == [1, 2, 3]
    assert result[0] == PreciseTerm(1, 2.0)
    assert result[1] == PreciseTerm(2, 5)
    assert result[2] == PreciseTerm(3, 5.0)


def test_weigh_terms_unit_weight_is_sum():
    summary = [term(4, 3)]
    description = [term(4, 7)]
    assert weigh_terms(summary, description, 1.0)[0].term_frequency == 3 + 7


def test_common_policy_rejects_no_indexing():
    with pytest.raises(ValueError):
        CommonIndexingPolicy(FakeIndex(), IndexingType.NO_INDEXING)


def test_summary_indexing_uses_summary_terms():
    index = FakeIndex()
    policy = CommonIndexingPolicy(index, IndexingType.SUMMARY_INDEXING)
    bug = report([term(1, 1)], [term(2, 1)])
    policy.update_index(bug)
    terms, added = index.added[0]
    assert added is bug
    assert [t.tid for t in terms] == [1]
    assert math.isclose(terms[0].term_frequency, 1.0)


def test_description_indexing_uses_description_terms():
    index = FakeIndex()
    policy = CommonIndexingPolicy(index, IndexingType.DESCRIPTION_INDEXING)
    policy.update_index(report([term(1, 1)], [term(2, 3), term(6, 3)]))
    terms, _ = index.added[0]
    assert [t.tid for t in terms] == [2, 6]


def test_full_indexing_combines_sections():
    index = FakeIndex()
    policy = CommonIndexingPolicy(index, IndexingType.FULL_INDEXING)
    policy.update_index(report([term(1, 1)], [term(2, 2)]))
    terms, _ = index.added[0]
    assert [t.tid for t in terms] == [1, 2]
    assert math.isclose(terms[0].term_frequency, terms[1].term_frequency)


def test_full_indexing_empty_report_raises():
    policy = CommonIndexingPolicy(FakeIndex(), IndexingType.FULL_INDEXING)
    with pytest.raises(ValueError):
        policy.update_index(report([], []))


def test_common_candidates_delegate_to_index():
    index = FakeIndex()
    policy = CommonIndexingPolicy(index, IndexingType.SUMMARY_INDEXING)
    collector = []
    query = report([], [])
    assert policy.get_report_candidates(query, collector) is IndexingType.SUMMARY_INDEXING
    assert collector == ["candidate"]
    assert index.queries == [query]
    assert policy.indexing_type is IndexingType.SUMMARY_INDEXING


def test_no_indexing_policy():
    policy = NoIndexingPolicy()
    collector = []
    assert policy.get_report_candidates(report([], []), collector) is IndexingType.NO_INDEXING
    assert collector == []
    assert policy.update_index(report([term(1, 1)], [])) is None
    assert policy.index is None
    assert policy.indexing_type is IndexingType.NO_INDEXING
    with pytest.raises(RuntimeError):
        policy.add_report([term(1, 1)], report([], []))