"""Announcement service (core domain).

This module is storage-agnostic. It only relies on the storage port, so the
CLI and the terminal panel share the same rules for validation, pagination,
not-found handling and similarity lookups.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Sequence

from core.config import ServiceConfig
from core.errors import AnnouncementNotFoundError, InvalidArgumentError
from core.models import Announcement, AnnouncementDetails, AnnouncementDraft, validate_draft
from core.ports import AnnouncementStoragePort
from core.similarity import check_count, find_similar

LOGGER = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnnouncementService:
    """Orchestrates validation, persistence and similarity lookups."""

    def __init__(
        self,
        storage: AnnouncementStoragePort,
        config: Optional[ServiceConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._storage = storage
        self._config = config or ServiceConfig()
        self._clock = clock or _utc_now

    @property
    def config(self) -> ServiceConfig:
        return self._config

    def create(self, draft: AnnouncementDraft) -> int:
        """Validate and store a new announcement, returning its id."""

        clean = validate_draft(draft)
        announcement_id = self._storage.create(clean, self._clock())
        LOGGER.info("Announcement #%s created", announcement_id)
        return announcement_id

    def update(self, announcement_id: int, draft: AnnouncementDraft) -> None:
        """Replace title and description; the added date never changes."""

        clean = validate_draft(draft)
        if not self._storage.update(announcement_id, clean):
            raise AnnouncementNotFoundError(announcement_id)
        LOGGER.info("Announcement #%s updated", announcement_id)

    def delete(self, announcement_id: int) -> None:
        if not self._storage.delete(announcement_id):
            raise AnnouncementNotFoundError(announcement_id)
        LOGGER.info("Announcement #%s deleted", announcement_id)

    def list_announcements(self, page: Optional[int] = None, page_size: Optional[int] = None) -> List[Announcement]:
        """Return all announcements, or a single 1-based page of them."""

        if page is None and page_size is None:
            return self._storage.get_all()

        page = 1 if page is None else page
        page_size = self._config.default_page_size if page_size is None else page_size
        if page < 1:
            raise InvalidArgumentError(f"page must be >= 1, got {page}")
        if page_size < 1:
            raise InvalidArgumentError(f"page_size must be >= 1, got {page_size}")
        return self._storage.get_all_paged(page, page_size)

    def get(self, announcement_id: int) -> Announcement:
        announcement = self._storage.get_by_id(announcement_id)
        if announcement is None:
            raise AnnouncementNotFoundError(announcement_id)
        return announcement

    def get_details(self, announcement_id: int, similar_count: Optional[int] = None) -> AnnouncementDetails:
        """Return one announcement with up to ``similar_count`` similar ones.

        The count is checked before the corpus is fetched so a bad request
        never costs a full table scan.
        """

        count = self._config.default_similar_count if similar_count is None else similar_count
        check_count(count)
        if count > self._config.max_similar_count:
            raise InvalidArgumentError(
                f"similar count must be <= {self._config.max_similar_count}, got {count}"
            )

        subject = self.get(announcement_id)
        corpus = self._storage.get_all() if count else []
        similar = find_similar(subject, corpus, count)
        return AnnouncementDetails(
            id=subject.id,
            title=subject.title,
            description=subject.description,
            added_date=subject.added_date,
            similar=tuple(similar),
        )

    def import_drafts(
        self,
        drafts: Iterable[AnnouncementDraft],
        added_dates: Optional[Sequence[Optional[datetime]]] = None,
    ) -> List[int]:
        """Create announcements in bulk, optionally keeping their original dates.

        Every draft is validated before anything is written, and the rows are
        stored in a single ``create_many`` call, so either all of them land or
        none do.
        """

        clean = [validate_draft(draft) for draft in drafts]
        if added_dates is not None and len(added_dates) != len(clean):
            raise InvalidArgumentError("added_dates must match the number of drafts")

        rows = []
        for index, draft in enumerate(clean):
            added_date = added_dates[index] if added_dates is not None else None
            rows.append((draft, added_date or self._clock()))
        created = self._storage.create_many(rows)
        LOGGER.info("Imported %s announcements", len(created))
        return created
