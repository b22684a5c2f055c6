"""Scripted console for tests and demos.

Feeds a fixed sequence of operator replies and records every line the
session writes, so whole order flows can be asserted without a terminal.
"""

from collections.abc import Iterable

from stockroom.console.port import Console


class ScriptedConsole(Console):
    """Console that replays canned input and captures output."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.pending: list[str] = list(lines)
        self.consumed: list[str] = []
        self.output: list[str] = []

    def feed(self, *lines: str) -> None:
        """Queue more operator replies."""
        self.pending.extend(lines)

    def read_line(self) -> str | None:
        if not self.pending:
            return None
        line = self.pending.pop(0)
        self.consumed.append(line)
        return line

    def write(self, text: str) -> None:
        # Multi-line messages are stored one line per entry
        self.output.extend(text.split("\n"))

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)
