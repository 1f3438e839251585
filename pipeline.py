"""Enrichment pipeline: the batch flows through pure stages, one pass, left to right.

Each stage takes a list of records and returns a new list of new records;
nothing is mutated in place, and no stage looks at any record but its own.

    extract_citation_fields -> classify_journals -> classify_fields
        -> classify_methods -> assign_ids
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import replace
from typing import Callable, Iterable

from citation_parser import parse_citation
from field_classifier import classify_field
from journal_classifier import OTHERS, classify_journal
from method_classifier import classify_method
from models import PaperRecord

LOGGER = logging.getLogger(__name__)

Stage = Callable[[list[PaperRecord]], list[PaperRecord]]


def _with_citation_fields(record: PaperRecord) -> PaperRecord:
    fields = parse_citation(record.citation)
    if fields.year is None or fields.title is None:
        LOGGER.debug(
            "Degraded citation (year=%s, title=%s): %s",
            fields.year,
            fields.title,
            record.citation,
        )
    return replace(record, **fields._asdict())


def extract_citation_fields(records: list[PaperRecord]) -> list[PaperRecord]:
    return [_with_citation_fields(r) for r in records]


def classify_journals(records: list[PaperRecord]) -> list[PaperRecord]:
    return [replace(r, journal=classify_journal(r.citation)) for r in records]


def classify_fields(records: list[PaperRecord]) -> list[PaperRecord]:
    return [replace(r, field=classify_field(r.journal)) for r in records]


def classify_methods(records: list[PaperRecord]) -> list[PaperRecord]:
    return [replace(r, method=classify_method(r.journal, r.title)) for r in records]


def assign_ids(records: list[PaperRecord]) -> list[PaperRecord]:
    """Number records 1..N in their current order."""
    return [replace(r, id=i) for i, r in enumerate(records, 1)]


CLASSIFICATION_STAGES: tuple[Stage, ...] = (
    extract_citation_fields,
    classify_journals,
    classify_fields,
    classify_methods,
)


def enrich_record(record: PaperRecord) -> PaperRecord:
    """Run every derivation stage on a single record (no id is assigned)."""
    batch = [record]
    for stage in CLASSIFICATION_STAGES:
        batch = stage(batch)
    return batch[0]


def enrich_records(records: Iterable[PaperRecord]) -> list[PaperRecord]:
    """Run the full pipeline over a batch and assign ids last."""
    batch = list(records)
    for stage in CLASSIFICATION_STAGES:
        batch = stage(batch)
    batch = assign_ids(batch)

    summary = summarize(batch)
    LOGGER.info(
        "Enriched %s records: missing_year=%s unclassified_journal=%s no_field=%s",
        len(batch),
        sum(1 for r in batch if r.year is None),
        summary["journal"].get(OTHERS, 0),
        sum(1 for r in batch if r.field is None),
    )
    LOGGER.info("Method counts: %s", dict(summary["method"]))
    return batch


def summarize(records: Iterable[PaperRecord]) -> dict[str, Counter]:
    """Count records per decade, journal, field, method and topic."""
    summary: dict[str, Counter] = {
        "decade": Counter(),
        "journal": Counter(),
        "field": Counter(),
        "method": Counter(),
        "topic": Counter(),
    }
    for record in records:
        for key, counter in summary.items():
            value = getattr(record, key)
            if value is not None and value != "":
                counter[value] += 1
    return summary
