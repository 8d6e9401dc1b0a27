# tests/test_planner_views.py

from __future__ import annotations

from daily_planner.planner.planner_models import Priority, PriorityFilter, ScheduleEntry, Task
from daily_planner.planner.planner_store import PlannerStore
from daily_planner.planner.planner_views import (
    filter_label,
    priority_label,
    render_planner,
    render_schedule,
    render_task_options,
    render_tasks,
)


def test_labels() -> None:
    assert priority_label(Priority.HIGH) == "High Priority"
    assert priority_label("low") == "Low Priority"
    assert filter_label(PriorityFilter.ALL) == "All"
    assert filter_label(PriorityFilter.MEDIUM) == "Medium"


def test_render_tasks_marks_completed() -> None:
    tasks = [
        Task(id="1", title="Write report", priority=Priority.HIGH),
        Task(id="2", title="Buy milk", priority=Priority.LOW, completed=True),
    ]
    assert render_tasks(tasks) == (
        "1. [ ] Write report (High Priority)\n2. [x] Buy milk (Low Priority)"
    )


def test_empty_views_have_placeholders() -> None:
    assert render_tasks([]) == "No tasks found"
    assert render_schedule([]) == "No scheduled tasks yet"
    assert render_task_options([]) == "Select a task:"


def test_render_schedule_line_format() -> None:
    entries = [ScheduleEntry(id="s1", time="07:05", task_title="Run", priority=Priority.MEDIUM)]
    assert render_schedule(entries) == "1. 07:05  Run (Medium Priority)"


def test_render_planner_reads_derived_views(store: PlannerStore) -> None:
    store.create_task("Write report", Priority.HIGH)
    store.create_task("Buy milk", Priority.LOW)
    store.create_schedule_entry("16:00", "Buy milk")
    store.create_schedule_entry("08:00", "Write report")
    store.set_priority_filter("high")

    assert render_planner(store) == (
        "Tasks (filter: High)\n"
        "1. [ ] Write report (High Priority)\n"
        "\n"
        "Daily Schedule\n"
        "1. 08:00  Write report (High Priority)\n"
        "2. 16:00  Buy milk (Low Priority)"
    )
