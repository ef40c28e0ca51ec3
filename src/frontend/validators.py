"""Validation helpers for panel forms."""

from __future__ import annotations

from dataclasses import dataclass

from core.errors import AnnouncementValidationError
from core.models import AnnouncementDraft, validate_draft


@dataclass
class DraftCheck:
    draft: AnnouncementDraft | None
    error: str | None = None


@dataclass
class CountCheck:
    value: int | None
    error: str | None = None


def check_draft_fields(title: str, description: str) -> DraftCheck:
    try:
        draft = validate_draft(AnnouncementDraft(title=title, description=description))
    except AnnouncementValidationError as exc:
        messages = [exc.errors[field] for field in ("title", "description") if field in exc.errors]
        return DraftCheck(None, "; ".join(messages))
    return DraftCheck(draft)


def parse_similar_count(raw_value: str, default: int, maximum: int) -> CountCheck:
    raw_value = raw_value.strip()
    if not raw_value:
        return CountCheck(default)
    if not raw_value.isdecimal():
        return CountCheck(None, "similar count must be a non-negative number")
    value = int(raw_value)
    if value > maximum:
        return CountCheck(None, f"similar count must be at most {maximum}")
    return CountCheck(value)
