"""Methodology label (review / theory / empirical) per paper."""

from __future__ import annotations

from typing import Callable

REVIEW = "review"
THEORY = "theory"
EMPIRICAL = "empirical"

REVIEW_JOURNALS: frozenset[str] = frozenset({"Annual review", "Annals"})
THEORY_JOURNAL = "AMR"
# Case-sensitive title marker for review articles published in empirical outlets.
REVIEW_TITLE_MARKER = "distinctiveness"

MethodPredicate = Callable[[str | None, str | None], bool]

# (predicate(journal, title), label): first match wins, EMPIRICAL otherwise.
METHOD_RULES: tuple[tuple[MethodPredicate, str], ...] = (
    (lambda journal, title: journal in REVIEW_JOURNALS or REVIEW_TITLE_MARKER in (title or ""), REVIEW),
    (lambda journal, title: journal == THEORY_JOURNAL, THEORY),
)


def classify_method(journal: str | None, title: str | None) -> str:
    """Return 'review', 'theory' or 'empirical'; never None."""
    for predicate, label in METHOD_RULES:
        if predicate(journal, title):
            return label
    return EMPIRICAL
