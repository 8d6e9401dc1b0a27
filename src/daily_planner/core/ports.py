# src/daily_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store depends on Protocols instead of concrete implementations.
This keeps collaborators swappable and makes testing easier.
"""

import uuid
from typing import Protocol


class IdFactory(Protocol):
    """
    Source of opaque identifiers for tasks and schedule entries.

    Only uniqueness within one session is required; any collision-resistant
    generator will do.
    """

    def __call__(self) -> str: ...


def uuid4_ids() -> str:
    """Default IdFactory: random UUID4 strings."""
    return str(uuid.uuid4())
