# src/daily_planner/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Malformed values fall back to defaults instead of failing startup.

Environment variables (prefix DAILY_PLANNER_):
- APP_NAME          display name (default: Daily Planner)
- LOG_LEVEL         console logging level (default: INFO)
- DATA_DIR          local directory for the log file (default: .local/daily_planner)
- LOG_TO_FILE       write <DATA_DIR>/planner.log (default: true)
- DEFAULT_PRIORITY  initial priority of the new-task draft (default: medium)
- DEFAULT_TIME      initial time of the new-slot draft, HH:MM (default: 09:00)
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .planner.planner_models import Priority

ENV_PREFIX = "DAILY_PLANNER"

TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_time(name: str, default: str) -> str:
    raw = (os.getenv(name) or "").strip()
    return raw if TIME_RE.match(raw) else default


def is_clock_time(value: str) -> bool:
    """True for a zero-padded 24h HH:MM string."""
    return bool(TIME_RE.match(value))


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path
    log_to_file: bool

    # ---- Planner defaults ----
    default_priority: Priority
    default_time: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            app_name=_env(_k("APP_NAME"), "Daily Planner").strip() or "Daily Planner",
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/daily_planner")),
            log_to_file=_env_bool(_k("LOG_TO_FILE"), True),
            default_priority=Priority.parse(os.getenv(_k("DEFAULT_PRIORITY")), default=Priority.MEDIUM),
            default_time=_env_time(_k("DEFAULT_TIME"), "09:00"),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once (reading .env without overriding the real environment)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
