from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from . import render
from .keys import Key
from .logstore import LogStore, log_answered, log_asked, log_skipped
from .models import ConfigError, OptionList
from .navigator import NavigatorState, apply_nav_key, window_size
from .state import PromptState
from .terminal import Terminal
from .theme import Theme

T = TypeVar("T")


def draw_select(term: Terminal, theme: Theme, options: OptionList, nav: NavigatorState) -> int:
    """Write the visible page of options; return how many rows were written."""
    rows, _ = term.size()
    drawn = 0
    for index in nav.visible(window_size(rows)):
        render.write_segments(
            term,
            render.select_row(theme, options.option_at(index).label, focused=index == nav.cursor),
        )
        drawn += 1
    return drawn


@dataclass
class Select(Generic[T]):
    """Pick one option with the arrow keys or its 1-9 shortcut.

    ``ask`` confirms with Enter. ``ask_opt`` confirms with Space and lets
    Enter skip the question, returning ``None``.
    """

    title: str
    options: OptionList[T]
    initial: T | None = None
    theme: Theme = field(default_factory=Theme.plain)
    log: LogStore | None = None

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not isinstance(self.options, OptionList):
            errors.append("Options must be an OptionList.")
        elif self.initial is not None and self.initial not in self.options.values:
            errors.append(f"Initial value {self.initial!r} is not one of the options.")
        return errors

    def ask(self, term: Terminal) -> T:
        return self._run(term, optional=False)

    def ask_opt(self, term: Terminal) -> T | None:
        return self._run(term, optional=True)

    def _is_pick(self, key: Key, optional: bool) -> bool:
        if optional:
            return key.is_char(" ")
        return key.kind == "enter"

    def _run(self, term: Terminal, *, optional: bool) -> T | None:
        errors = self.validate()
        if errors:
            raise ConfigError(" ".join(errors))

        start = 0 if self.initial is None else self.options.index(self.initial)
        nav = NavigatorState(len(self.options), cursor=start)
        state = PromptState()
        actions = [("space", "select"), ("enter", "skip")] if optional else [("enter", "select")]

        render.write_segments(term, render.question(self.theme, self.title, actions))
        log_asked(self.log, self.title)
        drawn = draw_select(term, self.theme, self.options, nav)

        while True:
            key = term.read_key()
            state.on_key()
            if self._is_pick(key, optional):
                option = self.options.option_at(nav.cursor)
                term.clear_last_lines(drawn + 1)
                state.finalize()
                render.write_segments(term, render.answered(self.theme, self.title, option.label))
                log_answered(self.log, self.title, option.label)
                return option.value
            if optional and key.kind == "enter":
                term.clear_last_lines(drawn + 1)
                state.finalize()
                render.write_segments(term, render.answered(self.theme, self.title, self.theme.skipped))
                log_skipped(self.log, self.title, self.theme.skipped)
                return None
            if apply_nav_key(nav, key):
                term.clear_last_lines(drawn)
                drawn = draw_select(term, self.theme, self.options, nav)
