from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, Mapping, TypeVar

T = TypeVar("T")


class QuizzardError(Exception):
    """Base class for every error raised by quizzard."""


class DeviceIOError(QuizzardError, OSError):
    """The terminal failed to read or write. Always fatal for the current prompt."""


class LogicError(QuizzardError):
    """A contract between an option source and a navigator was broken."""


class ConfigError(QuizzardError, ValueError):
    """A prompt was configured with values it cannot honour."""


class ValidationError(QuizzardError):
    """Raised by validators to reject the current input.

    The message is shown under the question and the prompt keeps editing.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Option(Generic[T]):
    index: int
    value: T
    label: str


def default_label(value: object) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


class OptionList(Generic[T]):
    """Fixed, ordered, non-empty set of choices.

    Indices are dense and follow declaration order. Build one per choice type,
    once, with :meth:`of` or :meth:`from_enum`; navigators only read it.
    """

    def __init__(self, options: Iterable[Option[T]]) -> None:
        self._options: tuple[Option[T], ...] = tuple(options)
        if not self._options:
            raise ConfigError("An option list needs at least one option.")
        for pos, opt in enumerate(self._options):
            if opt.index != pos:
                raise ConfigError(f"Option {opt.label!r} has index {opt.index}, expected {pos}.")

    @classmethod
    def of(cls, values: Iterable[T], labels: Mapping[T, str] | None = None) -> "OptionList[T]":
        overrides = dict(labels or {})
        return cls(
            Option(index=i, value=v, label=overrides[v] if overrides and v in overrides else default_label(v))
            for i, v in enumerate(values)
        )

    @classmethod
    def from_enum(cls, enum_type: type[Enum], labels: Mapping[Enum, str] | None = None) -> "OptionList":
        return cls.of(list(enum_type), labels)

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self):
        return iter(self._options)

    @property
    def values(self) -> list[T]:
        return [opt.value for opt in self._options]

    def index(self, value: T) -> int:
        for opt in self._options:
            if opt.value == value:
                return opt.index
        raise ConfigError(f"{value!r} is not one of the options.")

    def label(self, value: T) -> str:
        return self._options[self.index(value)].label

    def from_index(self, index: int) -> T | None:
        if 0 <= index < len(self._options):
            return self._options[index].value
        return None

    def option_at(self, index: int) -> Option[T]:
        if 0 <= index < len(self._options):
            return self._options[index]
        raise LogicError("Index out of range")
