"""Console adapter bound to the process's stdin and stdout."""

import sys
from typing import TextIO

from stockroom.console.port import Console


class StdioConsole(Console):
    """Reads operator input from a text stream and writes replies to another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def read_line(self) -> str | None:
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()
