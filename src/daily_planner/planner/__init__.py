"""
Planner subsystem.

Components:
- planner_models.py: data structures (Task, ScheduleEntry, Priority, drafts)
- planner_store.py: in-memory store with mutations and derived views
- planner_views.py: plain-text rendering of the derived views
"""
