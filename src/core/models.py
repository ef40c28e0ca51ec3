"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any storage or UI specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from core.errors import AnnouncementValidationError

TITLE_MIN_CHARS = 3
TITLE_MAX_CHARS = 100
DESCRIPTION_MIN_CHARS = 3
DESCRIPTION_MAX_CHARS = 512


@dataclass(frozen=True)
class Announcement:
    """A stored announcement. Identity is the integer id."""

    id: int
    title: str
    description: str
    added_date: datetime

    @property
    def text(self) -> str:
        """Combined title and description used for term extraction and matching."""

        return f"{self.title} {self.description}"


@dataclass(frozen=True)
class AnnouncementSummary:
    """Short projection used in listings and similarity results."""

    id: int
    title: str
    added_date: datetime

    @classmethod
    def from_announcement(cls, announcement: Announcement) -> "AnnouncementSummary":
        return cls(
            id=announcement.id,
            title=announcement.title,
            added_date=announcement.added_date,
        )


@dataclass(frozen=True)
class AnnouncementDetails:
    """Full announcement plus the announcements found similar to it."""

    id: int
    title: str
    description: str
    added_date: datetime
    similar: tuple[AnnouncementSummary, ...] = ()


@dataclass(frozen=True)
class AnnouncementDraft:
    """User supplied fields for create and update operations."""

    title: str
    description: str

    def normalized(self) -> "AnnouncementDraft":
        return AnnouncementDraft(
            title=(self.title or "").strip(),
            description=(self.description or "").strip(),
        )


def _check_length(value: str, label: str, min_chars: int, max_chars: int) -> str | None:
    if not value:
        return f"{label} is required"
    if len(value) < min_chars:
        return f"{label} must be at least {min_chars} characters"
    if len(value) > max_chars:
        return f"{label} must be at most {max_chars} characters"
    return None


def validate_draft(draft: AnnouncementDraft) -> AnnouncementDraft:
    """Return the stripped draft or raise AnnouncementValidationError."""

    normalized = draft.normalized()
    errors: dict[str, str] = {}
    title_error = _check_length(normalized.title, "title", TITLE_MIN_CHARS, TITLE_MAX_CHARS)
    if title_error:
        errors["title"] = title_error
    description_error = _check_length(
        normalized.description, "description", DESCRIPTION_MIN_CHARS, DESCRIPTION_MAX_CHARS
    )
    if description_error:
        errors["description"] = description_error
    if errors:
        raise AnnouncementValidationError(errors)
    return normalized
