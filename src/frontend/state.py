"""State container for the panel selection and status line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PanelState:
    selected_id: int | None = None
    similar_count: int = 3
    error: str | None = None
