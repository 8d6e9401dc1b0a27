# planner/planner_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Priority(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, raw: str | None, default: Priority | None = None) -> Priority:
        """
        Lenient parser for user/env input ("High", " low ").

        Falls back to `default` when given; otherwise raises ValueError.
        """
        value = (raw or "").strip().lower()
        try:
            return cls(value)
        except ValueError:
            if default is not None:
                return default
            raise


class PriorityFilter(StrEnum):
    """Task list filter: a single priority or everything."""

    ALL = "all"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def matches(self, priority: Priority) -> bool:
        return self is PriorityFilter.ALL or self.value == priority.value


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    priority: Priority
    completed: bool = False


@dataclass(frozen=True, slots=True)
class ScheduleEntry:
    """
    A task placed at a time of day.

    `task_title` and `priority` are copied from the task when the entry is
    created and are never updated afterwards (not even when the task is
    deleted). Entries refer to tasks by title, not by id.
    """

    id: str
    time: str  # HH:MM, 24h, zero padded
    task_title: str
    priority: Priority


@dataclass(slots=True)
class TaskDraft:
    title: str = ""
    priority: Priority = Priority.MEDIUM


@dataclass(slots=True)
class SlotDraft:
    time: str = "09:00"
    task_title: str = ""
