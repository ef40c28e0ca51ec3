"""SQLite storage adapter.

Implements the core AnnouncementStoragePort using a simple SQLite database.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from core.models import Announcement, AnnouncementDraft


def _to_db_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def _from_db_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _row_to_announcement(row: sqlite3.Row) -> Announcement:
    return Announcement(
        id=int(row["id"]),
        title=row["title"],
        description=row["description"],
        added_date=_from_db_timestamp(row["added_date"]),
    )


class SQLiteStorage:
    """Thin SQLite wrapper that satisfies the AnnouncementStoragePort contract.

    Every method opens its own connection and commits on exit, so each
    operation is one transaction. Reads return rows in id order; the
    similarity engine relies on that as its tie-break for equal dates.
    """

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def init_db(self) -> None:
        """Create tables if they do not exist.

        Tables:
        - announcement: one row per announcement
        """

        with self._connect() as conn:
            # Fields:
            # - id: auto-increment primary key, identity of an announcement
            # - title: up to 100 chars, validated by the service
            # - description: up to 512 chars, validated by the service
            # - added_date: ISO-8601 UTC timestamp set once on create
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS announcement (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL,
                    added_date TIMESTAMP NOT NULL
                )
                """
            )
            conn.execute(
                "CREATE INDEX IF NOT EXISTS ix_announcement_added_date ON announcement (added_date)"
            )

    def get_by_id(self, announcement_id: int) -> Optional[Announcement]:
        """Return the announcement with the given id, if any."""

        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, title, description, added_date FROM announcement WHERE id = ?",
                (announcement_id,),
            ).fetchone()
        return _row_to_announcement(row) if row else None

    def get_all(self) -> List[Announcement]:
        """Return every announcement ordered by id."""

        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, title, description, added_date FROM announcement ORDER BY id"
            ).fetchall()
        return [_row_to_announcement(row) for row in rows]

    def get_all_paged(self, page: int, page_size: int) -> List[Announcement]:
        """Return one 1-based page of announcements ordered by id."""

        offset = (page - 1) * page_size
        with self._connect() as conn:
            rows = conn.execute(
                """
                SELECT id, title, description, added_date
                FROM announcement
                ORDER BY id
                LIMIT ? OFFSET ?
                """,
                (page_size, offset),
            ).fetchall()
        return [_row_to_announcement(row) for row in rows]

    def create(self, draft: AnnouncementDraft, added_date: datetime) -> int:
        """Insert an announcement and return its new id."""

        with self._connect() as conn:
            cur = conn.execute(
                """
                INSERT INTO announcement (title, description, added_date)
                VALUES (?, ?, ?)
                """,
                (draft.title, draft.description, _to_db_timestamp(added_date)),
            )
            return int(cur.lastrowid)

    def create_many(self, rows: Sequence[Tuple[AnnouncementDraft, datetime]]) -> List[int]:
        """Insert several announcements in one transaction.

        A failure on any row rolls back the whole batch.
        """

        created: List[int] = []
        with self._connect() as conn:
            for draft, added_date in rows:
                cur = conn.execute(
                    """
                    INSERT INTO announcement (title, description, added_date)
                    VALUES (?, ?, ?)
                    """,
                    (draft.title, draft.description, _to_db_timestamp(added_date)),
                )
                created.append(int(cur.lastrowid))
        return created

    def update(self, announcement_id: int, draft: AnnouncementDraft) -> bool:
        """Update title and description; return False if the id is unknown."""

        with self._connect() as conn:
            cur = conn.execute(
                "UPDATE announcement SET title = ?, description = ? WHERE id = ?",
                (draft.title, draft.description, announcement_id),
            )
            return cur.rowcount > 0

    def delete(self, announcement_id: int) -> bool:
        """Delete an announcement; return False if the id is unknown."""

        with self._connect() as conn:
            cur = conn.execute(
                "DELETE FROM announcement WHERE id = ?",
                (announcement_id,),
            )
            return cur.rowcount > 0
