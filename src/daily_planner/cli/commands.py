# src/daily_planner/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar, cast

from ..config import is_clock_time
from ..core.state import AppState
from ..planner.planner_models import Priority, PriorityFilter
from ..planner.planner_views import (
    filter_label,
    priority_label,
    render_planner,
    render_schedule,
    render_task_options,
    render_tasks,
)

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, str], str]
CommandHandler3 = Callable[[AppState, str, CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command rest of line".

        The handler receives the raw text after "/command " so titles keep
        their inner whitespace. Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        name, _, arg = line[1:].partition(" ")
        name = name.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, arg, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, arg)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


class _HasId(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=_HasId)


def _resolve(items: Sequence[T], ref: str) -> T | None:
    """
    Find an item by 1-based position in a displayed view, or by id prefix.

    An id prefix must be unambiguous.
    """
    ref = ref.strip()
    if not ref:
        return None
    if ref.isdecimal():
        idx = int(ref) - 1
        return items[idx] if 0 <= idx < len(items) else None
    found = [it for it in items if it.id.startswith(ref)]
    return found[0] if len(found) == 1 else None


def _with_planner(state: AppState, headline: str) -> str:
    return f"{headline}\n\n{render_planner(state.store)}"


def cmd_help(state: AppState, arg: str) -> str:
    return registry.build_help()


def cmd_status(state: AppState, arg: str) -> str:
    store = state.store
    task_draft = store.task_draft
    slot_draft = store.slot_draft
    done = sum(1 for t in store.tasks if t.completed)
    picked = slot_draft.task_title or "(none)"
    return (
        "Status:\n"
        f"  Filter: {filter_label(store.priority_filter)}\n"
        f"  New task priority: {priority_label(task_draft.priority)}\n"
        f"  New slot: {slot_draft.time} / task: {picked}\n"
        f"  Tasks: {len(store.tasks)} ({done} done), scheduled slots: {len(store.schedule)}"
    )


def cmd_priority(state: AppState, arg: str) -> str:
    """
    /priority         -> show the priority used for new tasks
    /priority <p>     -> set it (high|medium|low); it stays until changed
    """
    if not arg.strip():
        return f"New tasks get: {priority_label(state.store.task_draft.priority)}."
    try:
        priority = Priority.parse(arg)
    except ValueError:
        return "Usage: /priority high|medium|low."
    state.store.set_task_draft(priority=priority)
    return f"New tasks get: {priority_label(priority)}."


def cmd_add(state: AppState, arg: str) -> str:
    store = state.store
    store.set_task_draft(title=arg)
    task = store.submit_task_draft()
    if task is None:
        return "Nothing added: task title is empty. Usage: /add <title>."
    logger.debug("Task added id=%s priority=%s", task.id, task.priority.value)
    return _with_planner(state, f'Added task "{task.title}" ({priority_label(task.priority)}).')


def cmd_tasks(state: AppState, arg: str) -> str:
    store = state.store
    header = f"Tasks (filter: {filter_label(store.priority_filter)})"
    return f"{header}\n{render_tasks(store.filtered_tasks())}"


def cmd_done(state: AppState, arg: str) -> str:
    store = state.store
    task = _resolve(store.filtered_tasks(), arg)
    if task is None:
        return f"No task {arg.strip()!r} in the current list. Usage: /done <number|id>."
    store.toggle_task_completion(task.id)
    updated = store.get_task(task.id)
    verb = "done" if updated is not None and updated.completed else "not done"
    logger.debug("Task toggled id=%s completed=%s", task.id, verb == "done")
    return _with_planner(state, f'Marked "{task.title}" as {verb}.')


def cmd_rm(
    state: AppState,
    arg: str,
    emit: CommandEmitter | None = None,
) -> str:
    store = state.store
    task = _resolve(store.filtered_tasks(), arg)
    if task is None:
        return f"No task {arg.strip()!r} in the current list. Usage: /rm <number|id>."
    store.delete_task(task.id)
    logger.debug("Task deleted id=%s", task.id)

    # Slots keep their copy of the title; tell the user they are still there.
    left = sum(1 for e in store.schedule if e.task_title == task.title)
    if left and emit is not None:
        emit(f'Note: {left} scheduled slot(s) still show "{task.title}". Use /unslot to remove them.')
    return _with_planner(state, f'Removed task "{task.title}".')


def cmd_filter(state: AppState, arg: str) -> str:
    """
    /filter           -> show current filter
    /filter <f>       -> all|high|medium|low
    """
    if not arg.strip():
        return f"Filter: {filter_label(state.store.priority_filter)}."
    try:
        value = PriorityFilter(arg.strip().lower())
    except ValueError:
        return "Usage: /filter all|high|medium|low."
    state.store.set_priority_filter(value)
    return cmd_tasks(state, "")


def cmd_time(state: AppState, arg: str) -> str:
    value = arg.strip()
    if not value:
        return f"New slots go at {state.store.slot_draft.time}."
    if not is_clock_time(value):
        return "Usage: /time HH:MM (24h, e.g. 09:00 or 14:30)."
    state.store.set_slot_draft(time=value)
    return f"New slots go at {value}."


def cmd_pick(state: AppState, arg: str) -> str:
    """
    /pick             -> list tasks that can be scheduled
    /pick <n>         -> choose by position in that list
    /pick <title>     -> choose by exact title
    """
    store = state.store
    options = store.task_title_options()
    ref = arg.strip()
    if not ref:
        return render_task_options(options)

    # An exact title wins over a position, so "1999" can be picked by title.
    if arg in options:
        title = arg
    elif ref.isdecimal():
        idx = int(ref) - 1
        if not 0 <= idx < len(options):
            return f"No task #{ref}.\n{render_task_options(options)}"
        title = options[idx]
    else:
        return f"No task titled {arg!r}.\n{render_task_options(options)}"

    store.set_slot_draft(task_title=title)
    return f'Picked "{title}". Use /slot to add it at {store.slot_draft.time}.'


def cmd_slot(state: AppState, arg: str) -> str:
    """
    /slot                 -> schedule the picked task at the chosen time
    /slot HH:MM           -> same, at HH:MM
    /slot HH:MM <title>   -> pick by exact title and schedule

    Extra spaces between the parts are ignored.
    """
    store = state.store
    parts = arg.split(maxsplit=1)
    head = parts[0] if parts else ""
    rest = parts[1] if len(parts) > 1 else ""
    if head:
        if not is_clock_time(head):
            return "Usage: /slot [HH:MM] [title]."
        store.set_slot_draft(time=head)
        if rest:
            store.set_slot_draft(task_title=rest)

    entry = store.submit_slot_draft()
    if entry is None:
        picked = store.slot_draft.task_title
        if not picked:
            return "Nothing scheduled: pick a task first (/pick)."
        return f"Nothing scheduled: no task titled {picked!r}."
    logger.debug("Slot added id=%s time=%s", entry.id, entry.time)
    return _with_planner(state, f'Scheduled "{entry.task_title}" at {entry.time}.')


def cmd_schedule(state: AppState, arg: str) -> str:
    return f"Daily Schedule\n{render_schedule(state.store.sorted_schedule())}"


def cmd_unslot(state: AppState, arg: str) -> str:
    store = state.store
    entry = _resolve(store.sorted_schedule(), arg)
    if entry is None:
        return f"No slot {arg.strip()!r} in the schedule. Usage: /unslot <number|id>."
    store.delete_schedule_entry(entry.id)
    logger.debug("Slot deleted id=%s", entry.id)
    return _with_planner(state, f'Removed {entry.time} "{entry.task_title}" from the schedule.')


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show filter, drafts and totals.")
registry.register("priority", cmd_priority, help_text="Priority for new tasks: /priority high|medium|low.")
registry.register("add", cmd_add, help_text="Add a task: /add <title>.")
registry.register("tasks", cmd_tasks, help_text="Show tasks (current filter).", aliases=["ls"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <number|id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <number|id>.")
registry.register("filter", cmd_filter, help_text="Filter tasks: /filter all|high|medium|low.")
registry.register("time", cmd_time, help_text="Time for new slots: /time HH:MM.")
registry.register("pick", cmd_pick, help_text="Pick the task for a new slot: /pick [number|title].")
registry.register("slot", cmd_slot, help_text="Schedule the picked task: /slot [HH:MM] [title].")
registry.register("schedule", cmd_schedule, help_text="Show the day's schedule by time.")
registry.register("unslot", cmd_unslot, help_text="Remove a slot: /unslot <number|id>.")
