"""Interactive terminal questions: text, integers, emails, single and multiple choice."""

from .emailaddr import Email
from .integer import Integer
from .keys import Key
from .logstore import LogStore, PromptEvent
from .models import (
    ConfigError,
    DeviceIOError,
    LogicError,
    Option,
    OptionList,
    QuizzardError,
    ValidationError,
)
from .multiselect import MultiSelect
from .scripted import ScriptedTerminal
from .singleselect import Select
from .terminal import CursesTerminal, Terminal, run
from .text import Input, Text
from .theme import Theme

__all__ = [
    "ConfigError",
    "CursesTerminal",
    "DeviceIOError",
    "Email",
    "Input",
    "Integer",
    "Key",
    "LogStore",
    "LogicError",
    "MultiSelect",
    "Option",
    "OptionList",
    "PromptEvent",
    "QuizzardError",
    "ScriptedTerminal",
    "Select",
    "Terminal",
    "Text",
    "Theme",
    "ValidationError",
    "run",
]
