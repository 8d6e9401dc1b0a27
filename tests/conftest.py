# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from daily_planner.cli.bootstrap import create_initial_state
from daily_planner.core.state import AppState
from daily_planner.planner.planner_store import PlannerStore

from .fakes import SequentialIds


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="Test Planner",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_to_file=False,
        default_priority="medium",
        default_time="09:00",
    )


@pytest.fixture()
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture()
def store(ids: SequentialIds) -> PlannerStore:
    return PlannerStore(id_factory=ids)


@pytest.fixture()
def state(settings: SimpleNamespace, ids: SequentialIds) -> AppState:
    """AppState wired through the real bootstrap with deterministic ids."""
    return create_initial_state(settings=settings, id_factory=ids)
