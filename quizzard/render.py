from __future__ import annotations

from typing import Sequence

from .terminal import Terminal
from .theme import Theme

Segment = tuple[str, int]


def write_segments(term: Terminal, segments: Sequence[Segment], *, newline: bool = True) -> None:
    for text, attr in segments:
        term.write_raw(text, attr)
    if newline:
        term.write_line()


def question(theme: Theme, title: str, actions: Sequence[tuple[str, str]]) -> list[Segment]:
    out: list[Segment] = [
        (theme.question_mark, theme.attrs.prompt),
        (" ", 0),
        (title, theme.attrs.heading),
        (" (", 0),
    ]
    for n, (key, action) in enumerate(actions):
        if n:
            out.append((", ", 0))
        out.append((f"<{key}>", theme.attrs.key))
        out.append((f" to {action}", 0))
    out.append((")", 0))
    return out


def answered(theme: Theme, title: str, answer: str) -> list[Segment]:
    return [
        (theme.question_mark, theme.attrs.prompt),
        (" ", 0),
        (title, theme.attrs.heading),
        (" ", 0),
        (answer, theme.attrs.answer),
    ]


def error(theme: Theme, message: str) -> list[Segment]:
    return [(theme.error_mark, theme.attrs.error), (" ", 0), (message, theme.attrs.error)]


def input_line(theme: Theme, text: str) -> list[Segment]:
    return [(theme.arrow * 2, theme.attrs.key), (" ", 0), (text, 0)]


def select_row(theme: Theme, label: str, *, focused: bool) -> list[Segment]:
    if focused:
        return [(theme.arrow, theme.attrs.focus), (" ", 0), (label, theme.attrs.focus)]
    return [("  ", 0), (label, 0)]


def multiselect_row(theme: Theme, label: str, *, focused: bool, selected: bool) -> list[Segment]:
    dot = theme.filled_dot if selected else theme.outline_dot
    if focused:
        return [
            (theme.arrow, theme.attrs.focus),
            (" ", 0),
            (dot, theme.attrs.focus),
            (" ", 0),
            (label, theme.attrs.focus),
        ]
    return [("  ", 0), (dot, 0), (" ", 0), (label, 0)]
