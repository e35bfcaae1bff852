# bugdedup

`bugdedup` is a small library for experiments in duplicate bug report
retrieval. It replays a chronological history of bug reports: each report
is added to a repository you supply, and each incoming duplicate (or every
report, if you ask) is used as a query whose ranked list of candidate
masters is checked against the known master. Extensions observe every
query and record where the master appeared.

The package uses only the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `bugdedup.config_file` | `ConfigFile`, `ConfigKeyError`, `parse_bool`: `key = value` files with comments, multi-line values and an end-of-file sentry. |
| `bugdedup.history` | `ReportHistory`: hands out reports one at a time, in order. |
| `bugdedup.detector` | `DuplicateDetector`: drives the replay of a history. |
| `bugdedup.results` | `DetectionResult`, `DetectorExtension`, `OnlineResultCollector`, `RecallAndTimeIntervalAnalysis`, `RecommendationRecorder`. |
| `bugdedup.reporting` | `format_result_statistics`, `format_average_result_statistics`, `format_file_header`, `average_map`. |
| `bugdedup.indexing` | `IndexingType`, `indexing_type_mapping`, `PreciseTerm`, `normalize_terms`, `weigh_terms`, `IndexingPolicy`, `CommonIndexingPolicy`, `NoIndexingPolicy`. |
| `bugdedup.detector_types` | `DetectorType`, `detector_type_mapping`. |

## Configuration files

```python
from bugdedup.config_file import ConfigFile, ConfigKeyError, parse_bool

config = ConfigFile.from_file("settings.inp")   # sentry defaults to "EndConfigFile"

atoms = config.read("atoms", int)               # raises ConfigKeyError if absent
length = config.get("length", 10.0)             # converted to the default's type
name = config.get("name", kind=str)

config.add("iterations", 5)
config.remove("iterations")
print("atoms" in config)

parse_bool("no")    # False (FALSE, F, NO, N, 0, NONE in any case)
parse_bool("yes")   # True
```

A value may continue on the following lines until a blank line, a line
holding another key, the sentry, or the end of input. Text after the
comment marker (`#` by default) is ignored. `ConfigFile()` builds an empty
configuration with no sentry; `load(stream)` reads from any text stream and
`dump(stream)` writes `key = value` lines in key order.

## Running a detection

`DuplicateDetector` works with duck-typed objects:

- reports have `id`, `duplicate_id`, `is_duplicate` and a writable
  `detected` attribute;
- the buckets object has `add_report(report)`, `report_count()` and
  `duplicates_count()`;
- `topping_factory(buckets)` returns a ranking algorithm with
  `get_top(query)` (returning ranked masters, each with an `id`) and
  `train_model()`.

```python
import io
from dataclasses import dataclass

from bugdedup.detector import DuplicateDetector
from bugdedup.history import ReportHistory
from bugdedup.results import OnlineResultCollector


@dataclass
class Report:
    id: int
    duplicate_id: int = -1
    detected: bool = False

    @property
    def is_duplicate(self):
        return self.duplicate_id >= 0


class Buckets:
    def __init__(self):
        self.reports = []

    def add_report(self, report):
        self.reports.append(report)

    def report_count(self):
        return len(self.reports)

    def duplicates_count(self):
        return sum(report.is_duplicate for report in self.reports)


class NewestFirst:
    def __init__(self, buckets):
        self.buckets = buckets

    def get_top(self, query):
        return [r for r in reversed(self.buckets.reports) if not r.is_duplicate]

    def train_model(self):
        pass


history = ReportHistory([Report(1), Report(2), Report(3, 1), Report(4, 2)], 0)
collector = OnlineResultCollector(20)
detector = DuplicateDetector(
    io.StringIO(), 20, history, Buckets(), 0, [collector], False, NewestFirst
)
detector.init()
detector.detect()
detector.dispose()

for result in collector.results():
    print(result.duplicate_report_id, result.index_where_master_detected)
# 3 1
# 4 0
```

The first `count_to_skip` duplicates, and the reports before them, only
fill the repository. A duplicate must have a larger id than its master,
otherwise `ValueError` is raised. If no report is queried at all,
`train_model()` is called on the ranking algorithm instead.

## Extensions

Subclass `DetectorExtension` and implement `start_processing(report)` and
`handle_result(candidates)`; `set_comment` and `dispose` do nothing by
default.

- `OnlineResultCollector(top_list_size, output=None)` stores one
  `DetectionResult` per query (`index_where_master_detected` is `None` when
  the master was not among the candidates; `detected` tells the same). It
  prints a dot to standard output every twentieth query.
- `RecommendationRecorder(top_list_size, output)` writes each query and its
  top candidates to `output`, marking the true master with `+`. Candidates
  need a `similarity_info` with `similar_report_id` and `similarity`.
- `RecallAndTimeIntervalAnalysis(top_list_size, output)` writes, for each
  duplicate whose master is in the top list, the rank and the difference
  between the report's `timestamp_in_days` and the master's
  `latest_timestamp_in_bucket`.

## Formatting results

```python
from bugdedup.reporting import (
    average_map,
    format_average_result_statistics,
    format_file_header,
    format_result_statistics,
)

recall = [(0.5, 1), (1.0, 2)]           # (value, count) per rank
print(format_result_statistics("Recall", recall, 2, 1, True))
print(format_average_result_statistics("Recall", [recall, recall], True))
print(format_file_header("dataset.txt", 2, "FULL_INDEXING"))
print("Average MAP = %f" % average_map([0.4, 0.6], 2))
```

## Indexing policies and type names

```python
from bugdedup.indexing import IndexingType, indexing_type_mapping, normalize_terms
from bugdedup.detector_types import DetectorType, detector_type_mapping

IndexingType.parse(3).label()   # "FULL_INDEXING"
DetectorType.parse(3).label()   # "RANK_NET"
print(indexing_type_mapping())  # 0:NO_INDEXING, 1:SUMMARY_INDEXING, ...
print(detector_type_mapping())
```

Unknown numbers, and `DetectorType.NONE`, raise `ValueError`.

`CommonIndexingPolicy(index, indexing_type)` adds each report to an index
object you supply (with `add_report(terms, report)` and
`get_reports(query, collector)`) under length-normalised term weights taken
from the report's `summary_unigrams.terms`, `description_unigrams.terms`,
or both merged with the summary weighted twice. `NoIndexingPolicy` keeps no
index and returns no candidates.

## What the package does not do

There is no command-line program, no reader for report datasets, no
repository of buckets with IDF statistics, no inverted index, no ranking
algorithm and no similarity feature calculators. `DuplicateDetector` and
the indexing policies take those as objects you provide.

## Tests

Install the `test` extra and run `pytest`.