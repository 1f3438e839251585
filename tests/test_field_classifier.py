import pytest

from field_classifier import FIELD_GROUPS, classify_field


@pytest.mark.parametrize(("journal", "field"), [
    ("AMJ", "management"),
    ("SMJ", "management"),
    ("Research policy", "management"),
    ("ASR", "sociology"),
    ("Soc Net", "sociology"),
    ("Nature", "multidisciplinary_science"),
    ("PNAS", "multidisciplinary_science"),
    ("JBV", "entrepreneurship"),
    ("Journal of small business management", "entrepreneurship"),
    ("JPSP", "psychology"),
    ("Consumer research", "psychology"),
    ("Annual review", "reviews"),
    ("Annals", "reviews"),
    ("Journal of political economy", "economics"),
])
def test_classify_field_known_codes(journal: str, field: str) -> None:
    assert classify_field(journal) == field


@pytest.mark.parametrize("journal", ["others", "book chapter", "Unknown Journal", "", None])
def test_classify_field_unmatched_is_absent(journal: str | None) -> None:
    assert classify_field(journal) is None


def test_field_groups_are_a_partition() -> None:
    seen: set[str] = set()
    for _, codes in FIELD_GROUPS:
        assert not (seen & codes)
        seen |= codes
    assert len(FIELD_GROUPS) == 7
