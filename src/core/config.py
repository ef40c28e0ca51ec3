"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceConfig:
    """Defaults and limits for the announcement service."""

    default_similar_count: int = 3
    default_page_size: int = 20
    max_similar_count: int = 50

