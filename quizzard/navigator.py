from __future__ import annotations

from dataclasses import dataclass, field

from .keys import Key


def window_size(rows: int) -> int:
    # Two rows stay reserved for the question and the line under the block.
    return max(1, rows - 2)


@dataclass
class NavigatorState:
    count: int
    cursor: int = 0

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError("navigator needs at least one option")
        self.cursor = max(0, min(self.cursor, self.count - 1))

    def next(self) -> bool:
        self.cursor = (self.cursor + 1) % self.count
        return True

    def prev(self) -> bool:
        self.cursor = (self.cursor - 1) % self.count
        return True

    def jump(self, digit: str) -> bool:
        if len(digit) != 1 or digit not in "123456789":
            return False
        index = int(digit) - 1
        if index >= self.count:
            return False
        self.cursor = index
        return True

    def page(self, window: int) -> int:
        return self.cursor // window

    def visible(self, window: int) -> range:
        start = self.page(window) * window
        return range(start, min(self.count, start + window))


def apply_nav_key(nav: NavigatorState, key: Key) -> bool:
    """Apply a cursor key; return whether the cursor moved."""
    if key.kind == "up":
        return nav.prev()
    if key.kind == "down":
        return nav.next()
    if key.kind == "char":
        return nav.jump(key.char)
    return False


@dataclass
class SelectionSet:
    indices: list[int] = field(default_factory=list)

    def __contains__(self, index: object) -> bool:
        return index in self.indices

    def __len__(self) -> int:
        return len(self.indices)

    def toggle(self, index: int) -> bool:
        """Add ``index`` at the end, or remove it; return whether it is now selected."""
        if index in self.indices:
            self.indices.remove(index)
            return False
        self.indices.append(index)
        return True
