"""Shared typed models for the citation pipeline."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class PaperRecord:
    """One literature-table row, raw inputs plus the fields derived from them.

    Derived fields stay ``None`` until the pipeline stage that owns them has
    run; stages return new records via ``dataclasses.replace``.
    """

    citation: str
    abstract: str = ""
    topic: str = ""
    extra: dict[str, Any] = dataclasses.field(default_factory=dict)
    # Citation Field Extractor
    year: int | None = None
    decade: str | None = None
    authors: str = ""
    first_author: str = ""
    first_author_year: str = ""
    title: str | None = None
    # Classifiers
    journal: str | None = None
    field: str | None = None
    method: str | None = None
    id: int | None = None
