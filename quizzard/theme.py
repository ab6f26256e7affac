from __future__ import annotations

import curses
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ThemeAttrs:
    prompt: int = 0
    heading: int = 0
    key: int = 0
    answer: int = 0
    error: int = 0
    focus: int = 0


@dataclass(frozen=True)
class Theme:
    question_mark: str = "?"
    arrow: str = "❯"
    filled_dot: str = "◉"
    outline_dot: str = "◯"
    error_mark: str = "X"
    skipped: str = "Skipped"
    attrs: ThemeAttrs = field(default_factory=ThemeAttrs)

    @classmethod
    def plain(cls) -> "Theme":
        return cls()

    @classmethod
    def ascii(cls) -> "Theme":
        return cls(arrow=">", filled_dot="*", outline_dot="o")

    @classmethod
    def init(cls) -> "Theme":
        """Theme for a live curses screen; call after ``initscr``."""
        theme = cls()
        if not curses.has_colors():
            return replace(
                theme,
                attrs=ThemeAttrs(
                    heading=curses.A_BOLD,
                    answer=curses.A_DIM,
                    error=curses.A_BOLD,
                    focus=curses.A_REVERSE,
                ),
            )

        curses.start_color()
        curses.use_default_colors()

        curses.init_pair(1, curses.COLOR_GREEN, -1)  # question mark
        curses.init_pair(2, curses.COLOR_RED, -1)    # keys, errors, cursor row

        return replace(
            theme,
            attrs=ThemeAttrs(
                prompt=curses.color_pair(1),
                heading=curses.A_BOLD,
                key=curses.color_pair(2),
                answer=curses.A_DIM,
                error=curses.color_pair(2),
                focus=curses.color_pair(2) | curses.A_BOLD,
            ),
        )
