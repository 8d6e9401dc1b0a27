# src/daily_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the id source and planner defaults into a PlannerStore,
- returns the AppState shared by commands and connectors.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import IdFactory, uuid4_ids
from ..core.state import AppState
from ..planner.planner_models import Priority
from ..planner.planner_store import PlannerStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, id_factory: IdFactory = uuid4_ids) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    default_priority = Priority.parse(
        str(getattr(settings, "default_priority", "medium")), default=Priority.MEDIUM
    )
    default_time = str(getattr(settings, "default_time", "09:00"))

    store = PlannerStore(
        id_factory=id_factory,
        default_priority=default_priority,
        default_time=default_time,
    )
    logger.debug(
        "PlannerStore ready default_priority=%s default_time=%s",
        default_priority.value,
        default_time,
    )
    return AppState(settings=settings, store=store)
