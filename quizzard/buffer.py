from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class EditBuffer:
    chars: list[str] = field(default_factory=list)
    cursor: int = 0

    @classmethod
    def from_text(cls, text: str) -> "EditBuffer":
        return cls(chars=list(text), cursor=len(text))

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def insert(self, char: str) -> bool:
        self.chars.insert(self.cursor, char)
        self.cursor += 1
        return True

    def backspace(self) -> bool:
        if self.cursor == 0:
            return False
        self.cursor -= 1
        del self.chars[self.cursor]
        return True

    def left(self) -> bool:
        if self.cursor == 0:
            return False
        self.cursor -= 1
        return True

    def right(self) -> bool:
        if self.cursor >= len(self.chars):
            return False
        self.cursor += 1
        return True
