"""Console port (abstract interface).

The order session talks to the operator only through this contract, so a
real terminal and a scripted test harness are interchangeable.
"""

from abc import ABC, abstractmethod


class Console(ABC):
    """Line-oriented operator console."""

    @abstractmethod
    def read_line(self) -> str | None:
        """Return the next line without its newline, or None once input is exhausted."""
        ...

    @abstractmethod
    def write(self, text: str) -> None:
        """Show one line of text to the operator."""
        ...
