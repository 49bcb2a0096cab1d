"""core/dev_log.py — Debug-gated diagnostic log.

A ring buffer of timestamped (by frame number) diagnostic lines, echoed
to a text stream as they are recorded.  The whole thing is switched by a
single ``enabled`` flag — when it is off, ``record()`` does nothing.

Usage:
    log = DevLog(enabled=True)
    log.record("spawn", "bullet", frame=state.frame)

Each entry is a dict:
    {"frame": int, "cat": str, "msg": str}

Categories in use: ``app``, ``render``, ``input``, ``spawn``.
"""

from __future__ import annotations
import sys
from dataclasses import dataclass, field
from typing import TextIO


@dataclass
class DevLog:
    """Ring-buffer of diagnostic lines, printed as ``[CAT] msg``."""

    enabled: bool = False
    stream: TextIO | None = None      # None → sys.stdout at record time
    max_entries: int = 500
    entries: list[dict] = field(default_factory=list)

    def record(self, cat: str, msg: str, *, frame: int = 0) -> None:
        if not self.enabled:
            return
        self.entries.append({"frame": frame, "cat": cat, "msg": msg})
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]
        print(f"[{cat.upper()}] {msg}", file=self.stream or sys.stdout)

    def clear(self):
        self.entries.clear()

    def recent(self, n: int = 50) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        """Return last *n* entries in a category."""
        return [e for e in self.entries if e["cat"] == cat][-n:]
