from __future__ import annotations

import curses
from dataclasses import dataclass
from typing import Literal

KeyKind = Literal["char", "backspace", "enter", "up", "down", "left", "right", "other"]

KEY_ENTER = {10, 13, curses.KEY_ENTER}
KEY_BACK = {curses.KEY_BACKSPACE, 127, 8}

_ARROWS: dict[int, KeyKind] = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
}


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    char: str = ""

    @classmethod
    def of(cls, char: str) -> "Key":
        return cls("char", char)

    def is_char(self, char: str | None = None) -> bool:
        if self.kind != "char":
            return False
        return char is None or self.char == char


ENTER = Key("enter")
BACKSPACE = Key("backspace")
UP = Key("up")
DOWN = Key("down")
LEFT = Key("left")
RIGHT = Key("right")
OTHER = Key("other")
SPACE = Key.of(" ")


def is_enter(key: object) -> bool:
    return isinstance(key, int) and key in KEY_ENTER or key in ("\n", "\r")


def is_backspace(key: object) -> bool:
    return isinstance(key, int) and key in KEY_BACK or key in ("\x7f", "\b")


def decode(raw: object) -> Key:
    """Map a value returned by ``window.get_wch()`` to a :class:`Key`."""
    if is_enter(raw):
        return ENTER
    if is_backspace(raw):
        return BACKSPACE
    if isinstance(raw, int):
        return Key(_ARROWS[raw]) if raw in _ARROWS else OTHER
    if isinstance(raw, str) and len(raw) == 1:
        return Key.of(raw)
    return OTHER


def keys_from_text(text: str) -> list[Key]:
    return [Key.of(ch) for ch in text]
