"""Research-field lookup keyed by journal short-code."""

from __future__ import annotations

# (field, short-codes): a partition: every code belongs to at most one group.
FIELD_GROUPS: tuple[tuple[str, frozenset[str]], ...] = (
    ("management", frozenset({
        "AMJ",
        "AMR",
        "Discoveries",
        "Learning",
        "ASQ",
        "Management sci",
        "JoM",
        "Org Sci",
        "SMJ",
        "Research policy",
    })),
    ("sociology", frozenset({
        "ASR",
        "AJS",
        "Soc forces",
        "Soc Net",
        "Social science research",
        "Rationality",
        "Social psyc quarterly",
    })),
    ("multidisciplinary_science", frozenset({"Nature", "Science", "PNAS"})),
    ("entrepreneurship", frozenset({"ETP", "JBV", "Journal of small business management"})),
    ("psychology", frozenset({
        "JESP",
        "Psyc review",
        "Psyc science",
        "JPSP",
        "JAP",
        "PSPB",
        "Consumer research",
    })),
    ("reviews", frozenset({"Annual review", "Annals"})),
    ("economics", frozenset({"Journal of political economy"})),
)


def classify_field(journal: str | None) -> str | None:
    """Return the field for a journal short-code.

    'others', 'book chapter' and unknown codes map to None, not to 'others'.
    """
    if journal is None:
        return None
    for field, codes in FIELD_GROUPS:
        if journal in codes:
            return field
    return None
