from dataclasses import FrozenInstanceError

import pytest

from models import PaperRecord
from pipeline import (
    assign_ids,
    classify_journals,
    enrich_record,
    enrich_records,
    extract_citation_fields,
    summarize,
)

CITATIONS = [
    "Smith, J. (2020). On widgets. Journal X, 1(2), 3-10.",
    "Uzzi, B., Mukherjee, S., Stringer, M., & Jones, B. (2013). Atypical combinations and scientific impact. Science, 342(6157), 468-472.",
    "Brewer, M. B. (1991). The social self: On being the same and different at the same time. Personality and Social Psychology Bulletin, 17(5), 475-482.",
    "Zhao, E. Y., Fisher, G., Lounsbury, M., & Miller, D. (2017). Optimal distinctiveness: Broadening the interface. Strategic Management Journal, 38(1), 93-113.",
    "Malformed citation with no year and no parenthesis",
]


def _records(topic: str = "novelty_reception") -> list[PaperRecord]:
    return [PaperRecord(citation=c, abstract="abs", topic=topic) for c in CITATIONS]


def test_enrich_records_end_to_end() -> None:
    enriched = enrich_records(_records())

    assert [r.id for r in enriched] == [1, 2, 3, 4, 5]

    smith = enriched[0]
    assert smith.first_author_year == "Smith 2020"
    assert smith.title == "On widgets"
    assert smith.journal == "others"
    assert smith.field is None
    assert smith.method == "empirical"

    uzzi = enriched[1]
    assert uzzi.year == 2013
    assert uzzi.decade == "2010s"
    assert uzzi.journal == "Science"
    assert uzzi.field == "multidisciplinary_science"

    brewer = enriched[2]
    assert brewer.journal == "PSPB"
    assert brewer.field == "psychology"
    assert brewer.decade == "1990s"

    zhao = enriched[3]
    assert zhao.journal == "SMJ"
    assert zhao.title == "Optimal distinctiveness: Broadening the interface"
    assert zhao.method == "review"


def test_malformed_citation_degrades_without_blocking_batch() -> None:
    enriched = enrich_records(_records())
    broken = enriched[-1]

    assert broken.year is None
    assert broken.decade is None
    assert broken.title is None
    assert broken.authors == CITATIONS[-1]
    assert broken.first_author_year == "Malformed"
    assert broken.journal == "others"
    assert broken.method == "empirical"
    assert broken.id == 5


def test_passthrough_fields_untouched() -> None:
    record = PaperRecord(citation=CITATIONS[1], abstract="text", topic="network_gender", extra={"doi": "10.1/x"})
    enriched = enrich_record(record)

    assert enriched.citation == CITATIONS[1]
    assert enriched.abstract == "text"
    assert enriched.topic == "network_gender"
    assert enriched.extra == {"doi": "10.1/x"}
    assert enriched.id is None


def test_stages_return_new_records_and_leave_input_alone() -> None:
    records = _records()
    staged = extract_citation_fields(records)

    assert staged is not records
    assert all(r.year is None and r.journal is None for r in records)
    assert staged[0].year == 2020
    assert staged[0].journal is None

    with_journal = classify_journals(staged)
    assert staged[0].journal is None
    assert with_journal[1].journal == "Science"


def test_records_are_frozen() -> None:
    record = _records()[0]
    with pytest.raises(FrozenInstanceError):
        record.year = 2000  # type: ignore[misc]


def test_ids_are_stable_across_reruns() -> None:
    first = enrich_records(_records())
    second = enrich_records(_records())

    assert [r.id for r in first] == list(range(1, len(CITATIONS) + 1))
    assert first == second


def test_assign_ids_follows_current_order() -> None:
    records = list(reversed(_records()))
    numbered = assign_ids(records)
    assert [r.id for r in numbered] == [1, 2, 3, 4, 5]
    assert numbered[0].citation == CITATIONS[-1]


def test_enrich_records_empty_batch() -> None:
    assert enrich_records([]) == []


def test_enrich_records_accepts_any_iterable() -> None:
    enriched = enrich_records(iter(_records()))
    assert len(enriched) == len(CITATIONS)


def test_summarize_counts_non_empty_values() -> None:
    summary = summarize(enrich_records(_records()))

    assert summary["decade"]["2010s"] == 2
    assert summary["journal"]["others"] == 2
    assert summary["method"]["review"] == 1
    assert summary["topic"]["novelty_reception"] == 5
    assert None not in summary["field"]
