"""Term extraction and whole-word matching (core domain)."""

from __future__ import annotations

import re
from typing import AbstractSet, Optional

from core.models import Announcement

# Runs of word characters and hyphens, anchored on word characters at both
# ends so stray leading/trailing hyphens never become part of a term.
_TERM_RE = re.compile(r"\w+(?:-+\w+)*")


def tokenize(text: Optional[str]) -> frozenset[str]:
    """Return the distinct lowercase terms found in ``text``.

    Hyphenated compounds stay whole (``system-wide``), any other punctuation
    separates terms (``v2.0`` gives ``v2`` and ``0``). No stemming and no
    stop-word removal.
    """

    if not text or not text.strip():
        return frozenset()
    return frozenset(match.group(0).lower() for match in _TERM_RE.finditer(text))


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char == "_"


def contains_whole_word(text: str, term: str) -> bool:
    """Check whether ``term`` occurs in ``text`` bounded by non-word characters.

    Both arguments are expected lowercase. Equivalent to ``\\b<term>\\b``: the
    neighbours of an occurrence must be string edges or characters other than
    letters, digits and underscore (a hyphen counts as a boundary).
    """

    if not term:
        return False
    start = text.find(term)
    while start != -1:
        end = start + len(term)
        before_ok = start == 0 or not _is_word_char(text[start - 1])
        after_ok = end == len(text) or not _is_word_char(text[end])
        if before_ok and after_ok:
            return True
        start = text.find(term, start + 1)
    return False


def matches(subject_terms: AbstractSet[str], candidate: Announcement) -> bool:
    """Return True if any subject term appears as a whole word in the candidate."""

    if not subject_terms:
        return False
    candidate_text = candidate.text.lower()
    return any(contains_whole_word(candidate_text, term) for term in subject_terms)
