"""Journal short-code classification from raw citation text.

The rule table is evaluated top to bottom and the first matching pattern
wins. Several journal names contain other names (``Management Science`` vs
``Science``) and some phrases (``social networks``, ``annual review``) turn
up inside article titles of unrelated journals, so the ORDER OF
``JOURNAL_RULES`` IS PART OF ITS CONTRACT: moving a rule changes output.
"""

from __future__ import annotations

import logging
import re

LOGGER = logging.getLogger(__name__)

OTHERS = "others"
BOOK_CHAPTER = "book chapter"


def _rule(pattern: str, code: str) -> tuple[re.Pattern[str], str]:
    return re.compile(pattern, re.IGNORECASE), code


# (pattern, short-code): first match wins.
JOURNAL_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    # Academy of Management family: distinct suffixes, no overlap.
    _rule(r"Academy of Management Discoveries", "Discoveries"),
    _rule(r"Academy of Management Annals", "Annals"),
    _rule(r"Academy of Management Learning", "Learning"),
    _rule(r"Academy of Management Journal", "AMJ"),
    _rule(r"Academy of Management Review", "AMR"),
    # "... Science" journals before the bare Science rule.
    _rule(r"Administrative Science Quarterly", "ASQ"),
    _rule(r"Management Science", "Management sci"),
    _rule(r"Organi[sz]ation Science", "Org Sci"),
    _rule(r"Psychological Science", "Psyc science"),
    _rule(r"Social Science Research", "Social science research"),
    _rule(r"Strategic Management Journal", "SMJ"),
    # Sociology.
    _rule(r"American Sociological Review", "ASR"),
    _rule(r"American Journal of Sociology", "AJS"),
    _rule(r"Social Forces", "Soc forces"),
    _rule(r"Rationality and Society", "Rationality"),
    _rule(r"Social Psychology Quarterly", "Social psyc quarterly"),
    # Psychology: the Bulletin before the Journal, both contain the same phrase.
    _rule(r"Personality and Social Psychology Bulletin", "PSPB"),
    _rule(r"Journal of Personality and Social Psychology", "JPSP"),
    _rule(r"Journal of Experimental Social Psychology", "JESP"),
    _rule(r"Journal of Applied Psychology", "JAP"),
    _rule(r"Psychological Review", "Psyc review"),
    _rule(r"Journal of Consumer Research", "Consumer research"),
    # Entrepreneurship.
    _rule(r"Entrepreneurship Theory and Practice", "ETP"),
    _rule(r"Journal of Business Venturing", "JBV"),
    _rule(r"Journal of Small Business Management", "Journal of small business management"),
    # Economics and innovation.
    _rule(r"Journal of Political Economy", "Journal of political economy"),
    _rule(r"Research Policy", "Research policy"),
    # Multidisciplinary. Nature/Science only when the journal slot starts with them
    # (". Science, 330(6004)"), so "Cognitive Science" and titles do not match.
    _rule(r"Proceedings of the National Academy of Sciences", "PNAS"),
    _rule(r"\bPNAS\b", "PNAS"),
    _rule(r"(?:^|\.\s+)Nature\s*,\s*\d", "Nature"),
    _rule(r"(?:^|\.\s+)Science\s*,\s*\d", "Science"),
    # Generic names last: both phrases also appear inside article titles.
    _rule(r"(?:^|\.\s+)Journal of Management\s*,", "JoM"),
    _rule(r"Annual Review", "Annual review"),
    _rule(r"(?:^|\.\s+)Social Networks\s*,\s*\d", "Soc Net"),
    _rule(r"(?:^|\.\s+)Social Networks\.?\s*$", "Soc Net"),
)

# Case-sensitive substrings marking an edited volume; checked after JOURNAL_RULES and always win.
BOOK_CHAPTER_MARKERS: tuple[str, ...] = (
    "Routledge",
    "University Press",
    "(Eds.)",
    "(Ed.)",
    "Handbook",
    "Jossey-Bass",
    "Sage Publications",
    "Edward Elgar",
)


def match_journal_rule(citation: str) -> str:
    """Return the short-code of the first matching rule, or 'others'."""
    for pattern, code in JOURNAL_RULES:
        if pattern.search(citation):
            return code
    return OTHERS


def is_book_chapter(citation: str) -> bool:
    return any(marker in citation for marker in BOOK_CHAPTER_MARKERS)


def classify_journal(citation: str) -> str:
    """Map a citation to its journal short-code.

    Primary pass over JOURNAL_RULES, then the book-chapter override, which
    takes precedence over whatever the primary pass found.
    """
    code = match_journal_rule(citation)
    if is_book_chapter(citation):
        if code != OTHERS:
            LOGGER.debug("Book-chapter marker overrides journal=%s for: %s", code, citation)
        return BOOK_CHAPTER
    return code
