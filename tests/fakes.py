# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class SequentialIds:
    """
    Deterministic IdFactory for unit tests: "t1", "t2", ...

    Captures how many ids were requested for assertions.
    """

    def __init__(self, prefix: str = "t") -> None:
        self.prefix = prefix
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return f"{self.prefix}{self.calls}"


class ScriptedIds:
    """IdFactory that replays a fixed list of ids (last one repeats forever)."""

    def __init__(self, ids: Iterable[str]) -> None:
        self._ids = list(ids)
        self.calls = 0

    def __call__(self) -> str:
        i = min(self.calls, len(self._ids) - 1)
        self.calls += 1
        return self._ids[i]


class ScriptedConsole:
    """
    Fake stdin/stdout pair for run_console_loop.

    - `lines` are returned by read_line one by one; EOFError afterwards
      (or the given exception instance, if a line is an exception)
    - everything written is captured in `out`
    """

    def __init__(self, lines: Iterable[str | BaseException]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.out: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        item = self._lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def write(self, text: str) -> None:
        self.out.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.out)
