from __future__ import annotations

from collections import deque
from typing import Iterable

from .keys import Key, keys_from_text
from .models import DeviceIOError


class ScriptedTerminal:
    """In-memory terminal fed from a key script.

    Keeps a virtual screen with the same line semantics as
    :class:`quizzard.terminal.CursesTerminal`, without a row limit. Reading
    past the end of the script raises :class:`DeviceIOError`.
    """

    def __init__(self, keys: Iterable[Key | str] = (), rows: int = 24, cols: int = 80) -> None:
        self.keys: deque[Key] = deque()
        self.feed(keys)
        self.rows = rows
        self.cols = cols
        self.lines: list[str] = [""]
        self.row = 0
        self.col = 0
        self.reads = 0

    def feed(self, keys: Iterable[Key | str]) -> None:
        for key in keys:
            if isinstance(key, str):
                self.keys.extend(keys_from_text(key))
            else:
                self.keys.append(key)

    @property
    def cursor(self) -> tuple[int, int]:
        return self.row, self.col

    def screen(self) -> list[str]:
        out = [line.rstrip() for line in self.lines]
        while out and not out[-1]:
            out.pop()
        return out

    def current_line(self) -> str:
        return self.lines[self.row]

    # Terminal protocol --------------------------------------------------
    def read_key(self) -> Key:
        if not self.keys:
            raise DeviceIOError("key script exhausted")
        self.reads += 1
        return self.keys.popleft()

    def write_raw(self, text: str, attr: int = 0) -> None:
        line = self.lines[self.row].ljust(self.col)
        self.lines[self.row] = line[: self.col] + text + line[self.col + len(text) :]
        self.col += len(text)

    def write_line(self, text: str = "", attr: int = 0) -> None:
        self.write_raw(text, attr)
        self.row += 1
        self.col = 0
        if self.row == len(self.lines):
            self.lines.append("")

    def move_cursor(self, delta: int) -> None:
        self.col = max(0, min(self.cols - 1, self.col + delta))

    def clear_line(self) -> None:
        self.lines[self.row] = ""
        self.col = 0

    def clear_last_lines(self, n: int) -> None:
        top = max(0, self.row - n)
        for row in range(top, self.row):
            self.lines[row] = ""
        self.row = top
        self.col = 0

    def clear_chars(self, n: int) -> None:
        start = max(0, self.col - n)
        line = self.lines[self.row].ljust(self.col)
        self.lines[self.row] = line[:start] + " " * (self.col - start) + line[self.col :]
        self.col = start

    def size(self) -> tuple[int, int]:
        return self.rows, self.cols
