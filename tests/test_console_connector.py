# tests/test_console_connector.py

from __future__ import annotations

import logging

import pytest

from daily_planner.cli import commands
from daily_planner.connectors import console_connector
from daily_planner.connectors.console_connector import PROMPT, run_console_loop

from .fakes import ScriptedConsole


def test_console_runs_commands_until_exit(state) -> None:
    console = ScriptedConsole(["/add Write report", "", "/slot 09:30 Write report", "/exit", "/add never"])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert [t.title for t in state.store.tasks] == ["Write report"]
    assert [e.time for e in state.store.schedule] == ["09:30"]
    assert console.prompts == [PROMPT] * 4
    assert "Use /help for commands" in console.text
    assert 'Scheduled "Write report" at 09:30.' in console.text


def test_console_renders_empty_planner_on_start(state) -> None:
    console = ScriptedConsole([])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert "No tasks found" in console.text
    assert "No scheduled tasks yet" in console.text


def test_console_hints_on_plain_text(state) -> None:
    console = ScriptedConsole(["buy milk"])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert state.store.tasks == ()
    assert "/add <title>" in console.text


def test_console_stops_on_keyboard_interrupt(state) -> None:
    console = ScriptedConsole([KeyboardInterrupt(), "/add late"])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert state.store.tasks == ()


def test_console_survives_crashing_handler(
    state, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    def boom(state, arg):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "boom", boom)
    console = ScriptedConsole(["/boom", "/add after"])

    with caplog.at_level(logging.ERROR):
        run_console_loop(state, read_line=console.read_line, write=console.write)

    assert "Internal error while handling a command." in console.text
    assert [t.title for t in state.store.tasks] == ["after"]
    assert any("Command handler crashed" in r.getMessage() for r in caplog.records)


def test_console_does_not_repaint_input_with_custom_io(state, monkeypatch: pytest.MonkeyPatch) -> None:
    repainted: list[str] = []
    monkeypatch.setattr(console_connector, "_rewrite_prev_line", repainted.append)
    console = ScriptedConsole(["/add A", "/tasks"])

    run_console_loop(state, read_line=console.read_line, write=console.write)

    assert repainted == []
    assert not any("\033[" in line for line in console.out)
