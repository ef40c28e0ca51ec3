"""Shared constants for the Textual UI."""

from __future__ import annotations

BULLETIN_AMBER = "#F2A93B"
TABLE_TITLE_CHARS = 48
