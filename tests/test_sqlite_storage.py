from __future__ import annotations

import sqlite3
from datetime import datetime, timedelta, timezone

import pytest

from adapters.sqlite_storage import SQLiteStorage
from core.models import AnnouncementDraft
from core.service import AnnouncementService

START = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)


def _storage(tmp_path) -> SQLiteStorage:
    storage = SQLiteStorage(str(tmp_path / "bulletin.db"))
    storage.init_db()
    return storage


def test_init_db_is_idempotent(tmp_path) -> None:
    storage = _storage(tmp_path)
    storage.init_db()

    assert storage.get_all() == []


def test_create_and_get_by_id(tmp_path) -> None:
    storage = _storage(tmp_path)

    announcement_id = storage.create(AnnouncementDraft("Office move", "New address"), START)
    stored = storage.get_by_id(announcement_id)

    assert stored is not None
    assert stored.id == announcement_id
    assert stored.title == "Office move"
    assert stored.description == "New address"
    assert stored.added_date == START
    assert storage.get_by_id(announcement_id + 1) is None


def test_naive_dates_are_stored_as_utc(tmp_path) -> None:
    storage = _storage(tmp_path)

    announcement_id = storage.create(AnnouncementDraft("Naive", "Date"), datetime(2024, 5, 1, 8, 30))

    stored = storage.get_by_id(announcement_id)
    assert stored is not None
    assert stored.added_date == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)


def test_get_all_is_ordered_by_id_and_paged(tmp_path) -> None:
    storage = _storage(tmp_path)
    for index in range(5):
        # newest first on purpose: listing order is by id, not by date
        storage.create(AnnouncementDraft(f"Item {index}", "Body"), START - timedelta(days=index))

    assert [item.id for item in storage.get_all()] == [1, 2, 3, 4, 5]
    assert [item.id for item in storage.get_all_paged(1, 2)] == [1, 2]
    assert [item.id for item in storage.get_all_paged(3, 2)] == [5]
    assert storage.get_all_paged(4, 2) == []


def test_update_and_delete_report_missing_rows(tmp_path) -> None:
    storage = _storage(tmp_path)
    announcement_id = storage.create(AnnouncementDraft("Before", "Body"), START)

    assert storage.update(announcement_id, AnnouncementDraft("After", "New body"))
    assert not storage.update(999, AnnouncementDraft("After", "New body"))

    stored = storage.get_by_id(announcement_id)
    assert stored is not None
    assert stored.title == "After"
    assert stored.added_date == START

    assert storage.delete(announcement_id)
    assert not storage.delete(announcement_id)
    assert storage.get_by_id(announcement_id) is None


def test_create_many_returns_ids_in_order(tmp_path) -> None:
    storage = _storage(tmp_path)

    created = storage.create_many(
        [
            (AnnouncementDraft("First", "Body"), START),
            (AnnouncementDraft("Second", "Body"), START + timedelta(days=1)),
        ]
    )

    assert created == [1, 2]
    assert [item.title for item in storage.get_all()] == ["First", "Second"]


def test_create_many_rolls_back_the_whole_batch(tmp_path) -> None:
    storage = _storage(tmp_path)

    with pytest.raises(sqlite3.IntegrityError):
        storage.create_many(
            [
                (AnnouncementDraft("First", "Body"), START),
                # NOT NULL title fails on the second insert
                (AnnouncementDraft(None, "Body"), START),
            ]
        )

    assert storage.get_all() == []


def test_service_similarity_over_sqlite(tmp_path) -> None:
    storage = _storage(tmp_path)
    service = AnnouncementService(storage)
    service.import_drafts(
        [
            AnnouncementDraft("Network maintenance", "Routers restart tonight"),
            AnnouncementDraft("Holiday party", "Snacks and music"),
            AnnouncementDraft("Maintenance follow-up", "All routers are back"),
            AnnouncementDraft("Parking", "Garage level two closed"),
        ],
        [START, START + timedelta(days=1), START + timedelta(days=2), START + timedelta(days=3)],
    )

    details = service.get_details(1, similar_count=3)

    assert [item.id for item in details.similar] == [3]
    assert details.similar[0].title == "Maintenance follow-up"
