"""Operator console factory.

Provides get_console() / set_console() to swap implementations:
- StdioConsole for the interactive terminal (default)
- ScriptedConsole for tests and scripted demos
"""

from stockroom.console.fake_adapter import ScriptedConsole
from stockroom.console.port import Console
from stockroom.console.stdio_adapter import StdioConsole

__all__ = ["Console", "ScriptedConsole", "StdioConsole", "get_console", "reset_console", "set_console"]

_current_console: Console | None = None


def get_console() -> Console:
    """Return the current console. Defaults to StdioConsole."""
    global _current_console
    if _current_console is None:
        _current_console = StdioConsole()
    return _current_console


def set_console(console: Console) -> None:
    """Override the active console (useful for tests)."""
    global _current_console
    _current_console = console


def reset_console() -> None:
    """Reset to default console."""
    global _current_console
    _current_console = None
