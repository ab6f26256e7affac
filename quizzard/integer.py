from __future__ import annotations

import re
import string
from dataclasses import dataclass, field

from .logstore import LogStore
from .models import ConfigError, ValidationError
from .terminal import Terminal
from .text import Input
from .theme import Theme

INT_RE = re.compile(r"[+-]?[0-9]+")


def _bounds(bits: int, signed: bool) -> tuple[int, int]:
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


INT_KINDS: dict[str, tuple[int, int]] = {
    "i8": _bounds(8, True),
    "i16": _bounds(16, True),
    "i32": _bounds(32, True),
    "i64": _bounds(64, True),
    "i128": _bounds(128, True),
    "isize": _bounds(64, True),
    "u8": _bounds(8, False),
    "u16": _bounds(16, False),
    "u32": _bounds(32, False),
    "u64": _bounds(64, False),
    "u128": _bounds(128, False),
    "usize": _bounds(64, False),
}


def too_big(hi: int) -> ValidationError:
    return ValidationError(f"Too big! Must be below or equal to {hi}")


def too_small(lo: int) -> ValidationError:
    return ValidationError(f"Too small! Must be above or equal to {lo}")


def parse_int(raw: str, kind: str, *, nonzero: bool = False, limits: tuple[int, int] | None = None) -> int:
    """Parse ``raw`` as an integer of ``kind``, raising ``ValidationError`` with the failure class.

    Overflow messages quote ``limits`` when given, otherwise the bounds of ``kind``.
    """
    lo, hi = INT_KINDS[kind]
    shown_lo, shown_hi = limits or (lo, hi)
    if not raw:
        raise ValidationError("You must enter a value")
    if not INT_RE.fullmatch(raw) or (raw.startswith("-") and lo == 0):
        raise ValidationError("An invalid character is present")
    try:
        value = int(raw, 10)
    except ValueError as exc:
        raise ValidationError("Unable to convert input to number") from exc
    if value > hi:
        raise too_big(shown_hi)
    if value < lo:
        raise too_small(shown_lo)
    if nonzero and value == 0:
        raise ValidationError("Number can't be zero")
    return value


@dataclass
class Integer:
    """Integer input limited to ``[min, max]``.

    ``kind`` names the machine integer the answer must fit in; ``min`` and
    ``max`` default to its bounds. Only digits can be typed, plus ``-`` when
    negative answers are allowed.
    """

    title: str
    kind: str = "i64"
    min: int | None = None
    max: int | None = None
    nonzero: bool = False
    default: str = ""
    theme: Theme = field(default_factory=Theme.plain)
    log: LogStore | None = None

    @property
    def bounds(self) -> tuple[int, int]:
        lo, hi = INT_KINDS[self.kind]
        return (lo if self.min is None else self.min, hi if self.max is None else self.max)

    def validate(self) -> list[str]:
        if self.kind not in INT_KINDS:
            return [f"Unknown integer kind {self.kind!r}; expected one of {', '.join(INT_KINDS)}."]
        errors: list[str] = []
        kind_lo, kind_hi = INT_KINDS[self.kind]
        lo, hi = self.bounds
        if lo > hi:
            errors.append(f"Minimum {lo} is greater than maximum {hi}.")
        if not kind_lo <= lo <= kind_hi:
            errors.append(f"Minimum {lo} does not fit in {self.kind}.")
        if not kind_lo <= hi <= kind_hi:
            errors.append(f"Maximum {hi} does not fit in {self.kind}.")
        return errors

    def charset(self) -> list[str]:
        chars = list(string.digits)
        if self.bounds[0] < 0:
            chars.append("-")
        return chars

    def validator(self, raw: str) -> int:
        lo, hi = self.bounds
        value = parse_int(raw, self.kind, nonzero=self.nonzero, limits=(lo, hi))
        if value < lo:
            raise too_small(lo)
        if value > hi:
            raise too_big(hi)
        return value

    def editor(self) -> Input[int]:
        return Input(
            title=self.title,
            default=self.default,
            charset=self.charset(),
            validator=self.validator,
            theme=self.theme,
            log=self.log,
        )

    def ask(self, term: Terminal) -> int:
        errors = self.validate()
        if errors:
            raise ConfigError(" ".join(errors))
        return self.editor().ask(term)
