# planner/planner_views.py

from __future__ import annotations

from collections.abc import Iterable

from .planner_models import Priority, PriorityFilter, ScheduleEntry, Task
from .planner_store import PlannerStore

PRIORITY_LABELS: dict[Priority, str] = {
    Priority.HIGH: "High Priority",
    Priority.MEDIUM: "Medium Priority",
    Priority.LOW: "Low Priority",
}

NO_TASKS_TEXT = "No tasks found"
NO_SCHEDULE_TEXT = "No scheduled tasks yet"
PICKER_PLACEHOLDER = "Select a task"


def priority_label(priority: Priority) -> str:
    return PRIORITY_LABELS[Priority(priority)]


def filter_label(value: PriorityFilter) -> str:
    return PriorityFilter(value).value.capitalize()


def render_tasks(tasks: Iterable[Task]) -> str:
    lines: list[str] = []
    for i, t in enumerate(tasks, start=1):
        mark = "x" if t.completed else " "
        lines.append(f"{i}. [{mark}] {t.title} ({priority_label(t.priority)})")
    return "\n".join(lines) if lines else NO_TASKS_TEXT


def render_schedule(entries: Iterable[ScheduleEntry]) -> str:
    lines = [
        f"{i}. {e.time}  {e.task_title} ({priority_label(e.priority)})"
        for i, e in enumerate(entries, start=1)
    ]
    return "\n".join(lines) if lines else NO_SCHEDULE_TEXT


def render_task_options(titles: Iterable[str]) -> str:
    lines = [PICKER_PLACEHOLDER + ":"]
    lines.extend(f"  {i}. {title}" for i, title in enumerate(titles, start=1))
    return "\n".join(lines)


def render_planner(store: PlannerStore) -> str:
    """Both panels, re-read from the store's derived views."""
    return (
        f"Tasks (filter: {filter_label(store.priority_filter)})\n"
        f"{render_tasks(store.filtered_tasks())}\n"
        "\n"
        "Daily Schedule\n"
        f"{render_schedule(store.sorted_schedule())}"
    )
