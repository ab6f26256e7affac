from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

EventKind = Literal["asked", "rejected", "answered", "skipped"]

LEVELS: dict[str, str] = {
    "asked": "debug",
    "rejected": "warn",
    "answered": "info",
    "skipped": "info",
}


@dataclass(frozen=True)
class PromptEvent:
    ts: float
    kind: EventKind
    prompt: str
    detail: str = ""

    @property
    def level(self) -> str:
        return LEVELS[self.kind]

    def format_line(self) -> str:
        stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(self.ts))
        line = f"{stamp} {self.level:<5} {self.kind} {self.prompt!r}"
        return f"{line}: {self.detail}" if self.detail else line


class LogStore:
    """Transcript of prompt events.

    Events are kept in memory, newest last. Given ``log_dir``, each event is
    also appended to ``prompts-<timestamp>.log``; if that directory cannot be
    written the file goes to ``~/.cache/quizzard/logs`` and ``fallback_reason``
    says why.
    """

    def __init__(self, max_entries: int = 5000, log_dir: Path | None = None) -> None:
        self.entries: deque[PromptEvent] = deque(maxlen=max_entries)
        self.log_dir: Path | None = None
        self.log_path: Path | None = None
        self.fallback_reason = ""
        if log_dir is not None:
            self.log_dir, self.fallback_reason = _writable_dir(log_dir)
            self.log_path = self.log_dir / time.strftime("prompts-%Y%m%d-%H%M%S.log")

    def record(self, kind: EventKind, prompt: str, detail: str = "", ts: float | None = None) -> PromptEvent:
        event = PromptEvent(ts=time.time() if ts is None else ts, kind=kind, prompt=prompt, detail=detail)
        self.entries.append(event)
        if self.log_path is not None:
            with self.log_path.open("a", encoding="utf-8") as fh:
                fh.write(event.format_line() + "\n")
        return event


def _writable_dir(preferred: Path) -> tuple[Path, str]:
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        marker = preferred / ".quizzard-write-test"
        marker.write_text("", encoding="utf-8")
        marker.unlink()
        return preferred, ""
    except OSError as exc:
        reason = f"{preferred} is not writable ({exc})"
    fallback = Path.home() / ".cache" / "quizzard" / "logs"
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback, reason


def log_asked(log: LogStore | None, title: str) -> None:
    if log is not None:
        log.record("asked", title)


def log_rejected(log: LogStore | None, title: str, message: str) -> None:
    if log is not None:
        log.record("rejected", title, message)


def log_answered(log: LogStore | None, title: str, answer: str) -> None:
    if log is not None:
        log.record("answered", title, answer)


def log_skipped(log: LogStore | None, title: str, settled: str) -> None:
    if log is not None:
        log.record("skipped", title, settled)
