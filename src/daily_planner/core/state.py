# src/daily_planner/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..planner.planner_store import PlannerStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in with the same attributes).
    settings: object
    store: PlannerStore
