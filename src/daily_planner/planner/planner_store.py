# planner/planner_store.py

from __future__ import annotations

from dataclasses import replace

from ..core.ports import IdFactory, uuid4_ids
from .planner_models import Priority, PriorityFilter, ScheduleEntry, SlotDraft, Task, TaskDraft

# How many times a colliding IdFactory is retried before giving up.
_MAX_ID_ATTEMPTS = 16


class PlannerStore:
    """
    In-memory planner state: tasks, schedule entries, filter and drafts.

    Rules worth knowing:
    - every operation is a single state transition; failed preconditions
      (blank title, unknown id, unmatched title) are silent no-ops
    - schedule entries link to tasks by *title*: the first task with that
      title supplies the priority, and deleting a task never touches entries
    - derived views (filtered_tasks / sorted_schedule) are recomputed on read

    Nothing here logs or does I/O; callers compare state before/after if they
    want to report a no-op.
    """

    def __init__(
        self,
        *,
        id_factory: IdFactory = uuid4_ids,
        default_priority: Priority = Priority.MEDIUM,
        default_time: str = "09:00",
    ) -> None:
        self._id_factory = id_factory
        self._issued_ids: set[str] = set()

        self._tasks: list[Task] = []
        self._schedule: list[ScheduleEntry] = []

        self._filter = PriorityFilter.ALL
        self._task_draft = TaskDraft(priority=Priority(default_priority))
        self._slot_draft = SlotDraft(time=default_time)

    # ---- low-level helpers ----

    def _new_id(self) -> str:
        for _ in range(_MAX_ID_ATTEMPTS):
            candidate = str(self._id_factory())
            if candidate and candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate
        raise RuntimeError(
            f"IdFactory returned an already issued id {_MAX_ID_ATTEMPTS} times in a row"
        )

    def _task_index(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    # ---- read access ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        """All tasks in insertion order (ignores the filter)."""
        return tuple(self._tasks)

    @property
    def schedule(self) -> tuple[ScheduleEntry, ...]:
        """All schedule entries in insertion order."""
        return tuple(self._schedule)

    @property
    def priority_filter(self) -> PriorityFilter:
        return self._filter

    @property
    def task_draft(self) -> TaskDraft:
        return replace(self._task_draft)

    @property
    def slot_draft(self) -> SlotDraft:
        return replace(self._slot_draft)

    def get_task(self, task_id: str) -> Task | None:
        idx = self._task_index(task_id)
        return self._tasks[idx] if idx is not None else None

    def get_schedule_entry(self, entry_id: str) -> ScheduleEntry | None:
        for entry in self._schedule:
            if entry.id == entry_id:
                return entry
        return None

    def find_task_by_title(self, title: str) -> Task | None:
        """First task (in insertion order) whose title equals `title` exactly."""
        for task in self._tasks:
            if task.title == title:
                return task
        return None

    def task_title_options(self) -> list[str]:
        """Titles offered when picking a task for a slot (all tasks, unfiltered)."""
        return [t.title for t in self._tasks]

    # ---- derived views ----

    def filtered_tasks(self) -> list[Task]:
        return [t for t in self._tasks if self._filter.matches(t.priority)]

    def sorted_schedule(self) -> list[ScheduleEntry]:
        # sorted() is stable: equal times keep insertion order.
        return sorted(self._schedule, key=lambda e: e.time)

    # ---- drafts ----

    def set_task_draft(self, *, title: str | None = None, priority: Priority | str | None = None) -> None:
        if title is not None:
            self._task_draft.title = title
        if priority is not None:
            self._task_draft.priority = Priority(priority)

    def set_slot_draft(self, *, time: str | None = None, task_title: str | None = None) -> None:
        if time is not None:
            self._slot_draft.time = time
        if task_title is not None:
            self._slot_draft.task_title = task_title

    def submit_task_draft(self) -> Task | None:
        return self.create_task(self._task_draft.title, self._task_draft.priority)

    def submit_slot_draft(self) -> ScheduleEntry | None:
        return self.create_schedule_entry(self._slot_draft.time, self._slot_draft.task_title)

    # ---- mutations ----

    def create_task(self, title: str, priority: Priority | str) -> Task | None:
        """
        Append a new task.

        Blank titles (after strip) are ignored. The stored title is the
        original, untrimmed text. On success the draft title is cleared and
        the draft priority is kept.
        """
        priority = Priority(priority)
        if not title or not title.strip():
            return None

        task = Task(id=self._new_id(), title=title, priority=priority, completed=False)
        self._tasks.append(task)
        self._task_draft.title = ""
        return task

    def delete_task(self, task_id: str) -> None:
        # Schedule entries keep their title/priority snapshot.
        idx = self._task_index(task_id)
        if idx is not None:
            del self._tasks[idx]

    def toggle_task_completion(self, task_id: str) -> None:
        idx = self._task_index(task_id)
        if idx is None:
            return
        task = self._tasks[idx]
        self._tasks[idx] = replace(task, completed=not task.completed)

    def create_schedule_entry(self, time: str, task_title: str) -> ScheduleEntry | None:
        """
        Place the task titled `task_title` at `time`.

        The title must match an existing task exactly (case and whitespace
        sensitive); with duplicates, the first task in insertion order wins.
        On success the draft task title is cleared and the draft time is kept.
        """
        if not task_title:
            return None
        task = self.find_task_by_title(task_title)
        if task is None:
            return None

        entry = ScheduleEntry(
            id=self._new_id(),
            time=time,
            task_title=task.title,
            priority=task.priority,
        )
        self._schedule.append(entry)
        self._slot_draft.task_title = ""
        return entry

    def delete_schedule_entry(self, entry_id: str) -> None:
        self._schedule = [e for e in self._schedule if e.id != entry_id]

    def set_priority_filter(self, value: PriorityFilter | str) -> None:
        self._filter = PriorityFilter(value)
