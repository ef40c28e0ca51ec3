"""Seed file reader used by the ``seed`` command.

A seed file is a JSON list of objects with ``title``, ``description`` and an
optional ISO-8601 ``added_date``.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from core.models import AnnouncementDraft


def _parse_added_date(raw: object, index: int) -> Optional[datetime]:
    if raw in (None, ""):
        return None
    if not isinstance(raw, str):
        raise ValueError(f"entry {index}: added_date must be a string")
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError as exc:
        raise ValueError(f"entry {index}: invalid added_date {raw!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _text_field(entry: dict, field: str, index: int) -> str:
    raw = entry.get(field)
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise ValueError(f"entry {index}: {field} must be a string")
    return raw


def parse_seed_entries(entries: object) -> Tuple[List[AnnouncementDraft], List[Optional[datetime]]]:
    """Split raw seed entries into drafts and their optional added dates."""

    if not isinstance(entries, list):
        raise ValueError("seed file root must be a list")

    drafts: List[AnnouncementDraft] = []
    dates: List[Optional[datetime]] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"entry {index}: must be an object")
        drafts.append(
            AnnouncementDraft(
                title=_text_field(entry, "title", index),
                description=_text_field(entry, "description", index),
            )
        )
        dates.append(_parse_added_date(entry.get("added_date"), index))
    return drafts, dates


def read_seed_file(path: str) -> Tuple[List[AnnouncementDraft], List[Optional[datetime]]]:
    with open(path, "r", encoding="utf-8") as handle:
        return parse_seed_entries(json.load(handle))
