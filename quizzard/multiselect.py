from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

from . import render
from .logstore import LogStore, log_answered, log_asked, log_rejected, log_skipped
from .models import ConfigError, OptionList
from .navigator import NavigatorState, SelectionSet, apply_nav_key, window_size
from .state import PromptState
from .terminal import Terminal
from .theme import Theme

T = TypeVar("T")


def draw_multiselect(
    term: Terminal,
    theme: Theme,
    options: OptionList,
    nav: NavigatorState,
    selection: SelectionSet,
) -> int:
    rows, _ = term.size()
    drawn = 0
    for index in nav.visible(window_size(rows)):
        render.write_segments(
            term,
            render.multiselect_row(
                theme,
                options.option_at(index).label,
                focused=index == nav.cursor,
                selected=index in selection,
            ),
        )
        drawn += 1
    return drawn


@dataclass
class MultiSelect(Generic[T]):
    """Pick between ``min`` and ``max`` options; Space toggles, Enter proceeds.

    Answers come back in the order they were selected.
    """

    title: str
    options: OptionList[T]
    initial: Sequence[T] = ()
    min: int = 0
    max: int | None = None
    theme: Theme = field(default_factory=Theme.plain)
    log: LogStore | None = None

    @property
    def upper(self) -> int:
        return len(self.options) if self.max is None else self.max

    def validate(self) -> list[str]:
        if not isinstance(self.options, OptionList):
            return ["Options must be an OptionList."]
        errors: list[str] = []
        if self.min < 0:
            errors.append("Minimum selection count cannot be negative.")
        if self.max is not None and self.max < self.min:
            errors.append(f"Maximum {self.max} is below minimum {self.min}.")
        if self.min > len(self.options):
            errors.append(f"Minimum {self.min} exceeds the {len(self.options)} available options.")
        values = self.options.values
        missing = [v for v in self.initial if v not in values]
        if missing:
            errors.append(f"Initial values {missing!r} are not options.")
        elif len({self.options.index(v) for v in self.initial}) != len(self.initial):
            errors.append("Initial values contain duplicates.")
        return errors

    def cardinality_error(self, count: int) -> str:
        if count < self.min:
            return f"Must select at least {self.min}"
        if count > self.upper:
            return f"Must select {self.upper} or less"
        return ""

    def ask(self, term: Terminal) -> list[T]:
        errors = self.validate()
        if errors:
            raise ConfigError(" ".join(errors))

        nav = NavigatorState(len(self.options))
        selection = SelectionSet([self.options.index(v) for v in self.initial])
        state = PromptState()

        render.write_segments(
            term,
            render.question(self.theme, self.title, [("space", "select"), ("enter", "proceed")]),
        )
        log_asked(self.log, self.title)
        drawn = draw_multiselect(term, self.theme, self.options, nav, selection)

        while True:
            key = term.read_key()
            state.on_key()
            if key.is_char(" "):
                selection.toggle(nav.cursor)
                term.clear_last_lines(drawn)
                drawn = draw_multiselect(term, self.theme, self.options, nav, selection)
                continue
            if key.kind == "enter":
                message = self.cardinality_error(len(selection))
                if message:
                    term.clear_last_lines(drawn + state.error_lines)
                    state.reject(message)
                    render.write_segments(term, render.error(self.theme, message))
                    log_rejected(self.log, self.title, message)
                    drawn = draw_multiselect(term, self.theme, self.options, nav, selection)
                    continue
                term.clear_last_lines(drawn + state.error_lines + 1)
                state.finalize()
                chosen = [self.options.option_at(i) for i in selection.indices]
                if chosen:
                    answer = ", ".join(opt.label for opt in chosen)
                    log_answered(self.log, self.title, answer)
                else:
                    answer = self.theme.skipped
                    log_skipped(self.log, self.title, answer)
                render.write_segments(term, render.answered(self.theme, self.title, answer))
                return [opt.value for opt in chosen]
            if apply_nav_key(nav, key):
                term.clear_last_lines(drawn)
                drawn = draw_multiselect(term, self.theme, self.options, nav, selection)
