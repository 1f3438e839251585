"""Field extraction from APA-style citation strings (no network, no LLM).

Expected shape: ``Authors (Year). Title. Journal, volume(issue), pages.``
Every helper is total: a malformed citation degrades to ``None`` or ``""``
instead of raising, so one bad row never blocks the rest of the batch.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_YEAR_PATTERN = re.compile(r"(?:20|19)\d\d")
# A year right after an opening parenthesis is the publication year in APA.
_PARENTHESISED_YEAR_PATTERN = re.compile(r"\(\s*((?:20|19)\d\d)")
_LEADING_TOKEN_PATTERN = re.compile(r"^\S*\s")


class CitationFields(NamedTuple):
    """Everything the extractor derives from one citation string."""
    year: int | None
    decade: str | None
    authors: str
    first_author: str
    first_author_year: str
    title: str | None


def extract_year(citation: str) -> int | None:
    """Return the publication year, or None when no 19dd/20dd run exists.

    A parenthesised year wins over earlier bare digits (volume, pages,
    report numbers); otherwise the first match left-to-right is used.
    """
    anchored = _PARENTHESISED_YEAR_PATTERN.search(citation)
    if anchored:
        return int(anchored.group(1))

    match = _YEAR_PATTERN.search(citation)
    return int(match.group(0)) if match else None


def decade_label(year: int | None) -> str | None:
    """2015 -> '2010s'; None stays None."""
    if year is None:
        return None
    return f"{year // 10 * 10}s"


def extract_authors(citation: str) -> str:
    """Return the author block that precedes the parenthesised year.

    Without any parenthesis the whole citation comes back unchanged.
    """
    head = citation.split(")", 1)[0]
    return head.split("(", 1)[0]


def extract_first_author(authors: str) -> str:
    tokens = authors.split()
    if not tokens:
        return ""
    return tokens[0].replace(",", "")


def format_first_author_year(first_author: str, year: int | None) -> str:
    """Join the non-empty parts with one space: 'Smith 2020', 'Smith', '2020' or ''."""
    parts = [first_author, str(year) if year is not None else ""]
    return " ".join(part for part in parts if part)


def extract_title(citation: str) -> str | None:
    """Return the title sentence following the parenthesised year.

    Drops the first token after the closing parenthesis (normally the '.'
    closing the year block) and stops at the next period. Surrounding
    whitespace is stripped from the result. Citations without a closing
    parenthesis have no recoverable title.
    """
    if ")" not in citation:
        return None

    rest = citation.split(")", 1)[1]
    rest = _LEADING_TOKEN_PATTERN.sub("", rest, count=1)
    return rest.split(".", 1)[0].strip()


def parse_citation(citation: str) -> CitationFields:
    """Derive all citation fields in one pass."""
    year = extract_year(citation)
    authors = extract_authors(citation)
    first_author = extract_first_author(authors)
    return CitationFields(
        year=year,
        decade=decade_label(year),
        authors=authors,
        first_author=first_author,
        first_author_year=format_first_author_year(first_author, year),
        title=extract_title(citation),
    )
