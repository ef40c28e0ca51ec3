"""Similar announcement lookup (core domain).

The engine is a pure function of the subject, an already fetched corpus
snapshot and the requested count. It performs no I/O and keeps no state, so
concurrent callers never share anything.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from core.errors import InvalidArgumentError
from core.models import Announcement, AnnouncementSummary
from core.terms import matches, tokenize

LOGGER = logging.getLogger(__name__)


def candidates(corpus: Iterable[Announcement], subject: Announcement) -> Iterator[Announcement]:
    """Yield every announcement except the subject, oldest first.

    The subject is excluded by id so distinct records with identical fields
    are still candidates. ``sorted`` is stable: announcements sharing an
    ``added_date`` keep the snapshot order (storage returns id ascending).
    """

    others = [announcement for announcement in corpus if announcement.id != subject.id]
    return iter(sorted(others, key=lambda announcement: announcement.added_date))


def check_count(count: int) -> None:
    """Raise InvalidArgumentError unless count is a non-negative integer."""

    # bool is an int subclass but never a meaningful count
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidArgumentError(f"count must be >= 0, got {count}")


def find_similar(
    subject: Announcement,
    corpus: Iterable[Announcement],
    count: int,
) -> List[AnnouncementSummary]:
    """Return up to ``count`` announcements sharing a whole word with the subject.

    Matching logic:
    - Terms come from the subject's title and description.
    - Candidates are scanned oldest first; the first ``count`` matches win.
    - Scanning stops as soon as the result is full.
    """

    check_count(count)
    if count == 0:
        return []

    subject_terms = tokenize(subject.text)
    if not subject_terms:
        return []

    similar: List[AnnouncementSummary] = []
    for candidate in candidates(corpus, subject):
        if not matches(subject_terms, candidate):
            continue
        similar.append(AnnouncementSummary.from_announcement(candidate))
        if len(similar) >= count:
            break

    LOGGER.debug(
        "Similarity for #%s: %s term(s), %s/%s match(es)",
        subject.id,
        len(subject_terms),
        len(similar),
        count,
    )
    return similar
