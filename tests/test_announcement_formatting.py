from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from adapters.announcement_formatting import (
    clip_text,
    format_details,
    format_listing,
    format_summary_line,
)
from core.models import AnnouncementDetails, AnnouncementSummary

ADDED = datetime(2024, 1, 2, 11, 0, tzinfo=timezone.utc)


def _details(similar: tuple[AnnouncementSummary, ...] = ()) -> AnnouncementDetails:
    return AnnouncementDetails(
        id=2,
        title="Similar Announcement",
        description="Description for Announcement similar",
        added_date=ADDED,
        similar=similar,
    )


def test_format_summary_line() -> None:
    line = format_summary_line(AnnouncementSummary(id=7, title="Team lunch", added_date=ADDED))

    assert line == "#7  2024-01-02 11:00  Team lunch"


def test_format_details_text_without_similar() -> None:
    output = format_details(_details(), "text")

    assert "#2  Similar Announcement" in output
    assert "Similar announcements:" in output
    assert output.rstrip().endswith("none")


def test_format_details_json_embeds_similar_list() -> None:
    similar = (AnnouncementSummary(id=3, title="Similar Announcement 1", added_date=ADDED),)

    payload = json.loads(format_details(_details(similar), "json"))

    assert payload["id"] == 2
    assert payload["addedDate"] == "2024-01-02T11:00:00+00:00"
    assert payload["similarAnnouncements"] == [
        {"id": 3, "title": "Similar Announcement 1", "addedDate": "2024-01-02T11:00:00+00:00"}
    ]


def test_format_details_text_clips_description() -> None:
    output = format_details(_details(), "text", snippet_chars=10)

    assert "Descrip..." in output


def test_format_listing_modes() -> None:
    items = [AnnouncementSummary(id=1, title="First", added_date=ADDED)]

    assert "First" in format_listing(items, "text")
    assert format_listing([], "text") == "No announcements."
    assert json.loads(format_listing(items, "json"))[0]["id"] == 1


def test_unsupported_format_raises() -> None:
    with pytest.raises(ValueError):
        format_details(_details(), "html")
    with pytest.raises(ValueError):
        format_listing([], "yaml")


def test_clip_text() -> None:
    assert clip_text("short", 10) == "short"
    assert clip_text("a long sentence", 8) == "a lon..."
    assert clip_text("unlimited", 0) == "unlimited"
