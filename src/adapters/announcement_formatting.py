"""Shared output formatting helpers.

Keeping formatting here prevents drift between the CLI and the panel and
keeps output consistent regardless of where an announcement is shown.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Iterable, Union

from core.models import Announcement, AnnouncementDetails, AnnouncementSummary

Listable = Union[Announcement, AnnouncementSummary]


def format_date(value: datetime) -> str:
    """Return a compact UTC timestamp for display."""

    return value.strftime("%Y-%m-%d %H:%M")


def clip_text(value: str, limit: int) -> str:
    if limit <= 0 or len(value) <= limit:
        return value
    if limit <= 3:
        return value[:limit]
    return value[: limit - 3] + "..."


def format_summary_line(item: Listable) -> str:
    return f"#{item.id}  {format_date(item.added_date)}  {item.title}"


def _summary_payload(item: Listable) -> dict[str, Any]:
    return {
        "id": item.id,
        "title": item.title,
        "addedDate": item.added_date.isoformat(),
    }


def details_payload(details: AnnouncementDetails) -> dict[str, Any]:
    """Return the JSON-ready detail view with its embedded similar list."""

    return {
        "id": details.id,
        "title": details.title,
        "description": details.description,
        "addedDate": details.added_date.isoformat(),
        "similarAnnouncements": [_summary_payload(item) for item in details.similar],
    }


def _format_details_text(details: AnnouncementDetails, snippet_chars: int) -> str:
    divider = "──────────────"
    lines = [
        f"#{details.id}  {details.title}",
        f"Added: {format_date(details.added_date)}",
        divider,
        clip_text(details.description, snippet_chars),
        divider,
        "Similar announcements:",
    ]
    if details.similar:
        lines.extend(f"  {format_summary_line(item)}" for item in details.similar)
    else:
        lines.append("  none")
    return "\n".join(lines)


def format_details(details: AnnouncementDetails, mode: str, snippet_chars: int = 0) -> str:
    """Return the detail view formatted for the requested mode."""

    if mode == "text":
        return _format_details_text(details, snippet_chars)
    if mode == "json":
        return json.dumps(details_payload(details), indent=2, ensure_ascii=False)
    raise ValueError(f"Unsupported output format: {mode}")


def format_listing(items: Iterable[Listable], mode: str) -> str:
    """Return a listing of announcements formatted for the requested mode."""

    if mode == "text":
        lines = [format_summary_line(item) for item in items]
        return "\n".join(lines) if lines else "No announcements."
    if mode == "json":
        return json.dumps([_summary_payload(item) for item in items], indent=2, ensure_ascii=False)
    raise ValueError(f"Unsupported output format: {mode}")
