"""Input device adapter: the terminal operations prompts are written against."""

from __future__ import annotations

import curses
import functools
import os
from typing import Callable, Protocol, TypeVar

from .keys import Key, decode
from .models import DeviceIOError

R = TypeVar("R")


class Terminal(Protocol):
    def read_key(self) -> Key: ...

    def write_line(self, text: str = "", attr: int = 0) -> None: ...

    def write_raw(self, text: str, attr: int = 0) -> None: ...

    def move_cursor(self, delta: int) -> None: ...

    def clear_line(self) -> None: ...

    def clear_last_lines(self, n: int) -> None: ...

    def clear_chars(self, n: int) -> None: ...

    def size(self) -> tuple[int, int]: ...


def clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def _device(fn: Callable[..., R]) -> Callable[..., R]:
    @functools.wraps(fn)
    def wrapper(*args: object, **kwargs: object) -> R:
        try:
            return fn(*args, **kwargs)
        except curses.error as exc:
            raise DeviceIOError(f"{fn.__name__}: {exc}") from exc

    return wrapper


class CursesTerminal:
    """Line-oriented terminal on top of a scrolling curses window.

    Output flows top to bottom like a plain console: writing past the last row
    scrolls the window up, and rows scrolled off the top are gone. An input
    line wider than the window wraps onto the next row; cursor moves follow
    the wrap but ``clear_line`` only clears the row holding the cursor.
    """

    def __init__(self, window: curses.window) -> None:
        self.window = window
        self.window.scrollok(True)
        self.window.idlok(True)
        self.window.keypad(True)

    @_device
    def read_key(self) -> Key:
        self.window.refresh()
        return decode(self.window.get_wch())

    @_device
    def write_raw(self, text: str, attr: int = 0) -> None:
        if text:
            self.window.addstr(text, attr)
        self.window.refresh()

    @_device
    def write_line(self, text: str = "", attr: int = 0) -> None:
        if text:
            self.window.addstr(text, attr)
        self.window.addstr("\n")
        self.window.refresh()

    @_device
    def move_cursor(self, delta: int) -> None:
        # Text longer than the window wraps, so offsets run across rows.
        y, x = self.window.getyx()
        h, w = self.window.getmaxyx()
        pos = clamp(y * w + x + delta, 0, h * w - 1)
        self.window.move(*divmod(pos, w))

    @_device
    def clear_line(self) -> None:
        y, _ = self.window.getyx()
        self.window.move(y, 0)
        self.window.clrtoeol()

    @_device
    def clear_last_lines(self, n: int) -> None:
        y, _ = self.window.getyx()
        top = max(0, y - n)
        for row in range(top, y):
            self.window.move(row, 0)
            self.window.clrtoeol()
        self.window.move(top, 0)

    @_device
    def clear_chars(self, n: int) -> None:
        y, x = self.window.getyx()
        start = max(0, x - n)
        self.window.move(y, start)
        self.window.addstr(" " * (x - start))
        self.window.move(y, start)

    @_device
    def size(self) -> tuple[int, int]:
        rows, cols = self.window.getmaxyx()
        return rows, cols


def run(main: Callable[[CursesTerminal], R]) -> R:
    """Set up curses, run ``main`` with a terminal, and restore the screen.

    Most terminals show curses on the alternate screen, so the settled answer
    lines vanish when ``main`` returns. Print the returned values afterwards to
    keep them on the primary screen; a ``LogStore`` with ``log_dir`` keeps a
    file transcript.
    """
    os.environ.setdefault("ESCDELAY", "25")

    def _inner(stdscr: curses.window) -> R:
        curses.curs_set(1)
        return main(CursesTerminal(stdscr))

    return curses.wrapper(_inner)
