from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, TypeVar

from . import render
from .buffer import EditBuffer
from .keys import Key
from .logstore import LogStore, log_answered, log_asked, log_rejected
from .models import ConfigError, ValidationError
from .state import PromptState
from .terminal import Terminal
from .theme import Theme

T = TypeVar("T")

Validator = Callable[[str], T]


def apply_edit_key(buf: EditBuffer, key: Key, charset: frozenset[str] | None = None) -> bool:
    """Apply an editing key to ``buf``; return whether the buffer changed."""
    if key.kind == "char":
        if not key.char.isprintable():
            return False
        if charset is not None and key.char not in charset:
            return False
        return buf.insert(key.char)
    if key.kind == "backspace":
        return buf.backspace()
    if key.kind == "left":
        return buf.left()
    if key.kind == "right":
        return buf.right()
    return False


@dataclass
class Input(Generic[T]):
    """Single-line editor returning the validated value.

    Without a validator the raw text is returned and Enter always succeeds.
    A validator rejects input by raising :class:`ValidationError`; the message
    is printed under the question and editing continues with the same text.
    """

    title: str
    default: str = ""
    charset: Iterable[str] | None = None
    validator: Validator | None = None
    theme: Theme = field(default_factory=Theme.plain)
    log: LogStore | None = None

    def __post_init__(self) -> None:
        # Read once: callers may pass a generator or itertools.chain.
        if self.charset is not None:
            self.charset = frozenset(self.charset)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.charset is not None:
            bad = [c for c in self.charset if not isinstance(c, str) or len(c) != 1]
            if bad:
                errors.append(f"Charset entries must be single characters, got {bad!r}.")
        if "\n" in self.default:
            errors.append("Default value must fit on one line.")
        return errors

    def ask(self, term: Terminal) -> T:
        errors = self.validate()
        if errors:
            raise ConfigError(" ".join(errors))
        charset = frozenset(self.charset) if self.charset is not None else None
        validator: Validator = self.validator or _identity

        render.write_segments(term, render.question(self.theme, self.title, [("enter", "proceed")]))
        log_asked(self.log, self.title)

        buf = EditBuffer.from_text(self.default)
        state = PromptState()
        self._paint(term, buf)
        while True:
            key = term.read_key()
            state.on_key()
            if key.kind == "enter":
                try:
                    value = validator(buf.text)
                except ValidationError as exc:
                    term.clear_line()
                    if state.error_lines:
                        term.clear_last_lines(state.error_lines)
                    state.reject(exc.message)
                    render.write_segments(term, render.error(self.theme, exc.message))
                    log_rejected(self.log, self.title, exc.message)
                    self._paint(term, buf)
                    continue
                term.clear_line()
                term.clear_last_lines(1 + state.error_lines)
                state.finalize()
                render.write_segments(term, render.answered(self.theme, self.title, buf.text))
                log_answered(self.log, self.title, buf.text)
                return value
            if apply_edit_key(buf, key, charset):
                term.clear_line()
                self._paint(term, buf)

    def _paint(self, term: Terminal, buf: EditBuffer) -> None:
        render.write_segments(term, render.input_line(self.theme, buf.text), newline=False)
        delta = buf.cursor - len(buf)
        if delta:
            term.move_cursor(delta)


@dataclass
class Text(Input[str]):
    """Free text input; never rejects."""

    def validate(self) -> list[str]:
        errors = super().validate()
        if self.validator is not None:
            errors.append("Text takes no validator; use Input instead.")
        return errors


def _identity(raw: str) -> str:
    return raw
