"""Domain errors raised by the core service layer."""

from __future__ import annotations

from typing import Optional


class AnnouncementError(Exception):
    """Base class for announcement domain errors."""


class InvalidArgumentError(AnnouncementError, ValueError):
    """Raised for out-of-range counts or pagination arguments."""


class AnnouncementValidationError(AnnouncementError, ValueError):
    """Raised when a draft violates the title/description limits."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {message}" for field, message in sorted(self.errors.items()))
        super().__init__(f"Invalid announcement ({details})")


class AnnouncementNotFoundError(AnnouncementError, LookupError):
    """Raised when an announcement id does not exist in storage."""

    def __init__(self, announcement_id: int, message: Optional[str] = None) -> None:
        self.announcement_id = announcement_id
        super().__init__(message or f"Announcement with id {announcement_id} was not found")
