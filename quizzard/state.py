from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .models import LogicError

PromptPhase = Literal["editing", "showing_error", "finalized"]


@dataclass
class PromptState:
    """Phase shared by editors and navigators.

    ``error`` holds the message currently printed under the question. It stays
    on screen after the phase returns to editing, until it is replaced or the
    prompt finalizes.
    """

    phase: PromptPhase = "editing"
    error: str = ""

    @property
    def error_lines(self) -> int:
        return 1 if self.error else 0

    @property
    def finalized(self) -> bool:
        return self.phase == "finalized"

    def on_key(self) -> None:
        if self.phase == "finalized":
            raise LogicError("Prompt already finalized")
        if self.phase == "showing_error":
            self.phase = "editing"

    def reject(self, message: str) -> None:
        if self.phase == "finalized":
            raise LogicError("Prompt already finalized")
        self.phase = "showing_error"
        self.error = message

    def finalize(self) -> None:
        self.phase = "finalized"
        self.error = ""
