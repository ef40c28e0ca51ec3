"""Ports (interfaces) used by the core service.

Ports define the minimal contracts for storage adapters so that the core can
be reused with different backends.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Protocol, Sequence, Tuple

from core.models import Announcement, AnnouncementDraft


class AnnouncementStoragePort(Protocol):
    """Storage operations required by the announcement service.

    Absence is reported with ``None``/``False``; the service decides how to
    surface it.
    """

    def get_by_id(self, announcement_id: int) -> Optional[Announcement]:
        ...

    def get_all(self) -> List[Announcement]:
        ...

    def get_all_paged(self, page: int, page_size: int) -> List[Announcement]:
        ...

    def create(self, draft: AnnouncementDraft, added_date: datetime) -> int:
        ...

    def create_many(self, rows: Sequence[Tuple[AnnouncementDraft, datetime]]) -> List[int]:
        """Insert all rows atomically and return their ids in order."""
        ...

    def update(self, announcement_id: int, draft: AnnouncementDraft) -> bool:
        ...

    def delete(self, announcement_id: int) -> bool:
        ...
