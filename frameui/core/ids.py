# frameui/core/ids.py
"""
Widget identifiers.

Immediate-mode widgets are not retained, so the only way to recognise "the
same widget" across frames is the order in which ids are reserved: the n-th
widget drawn in a frame receives the n-th id. Callers must reserve exactly one
id per logical widget per frame, at a stable point of their draw sequence.
"""

from __future__ import annotations
from dataclasses import dataclass
import threading


@dataclass(frozen=True)
class WidgetId:
    """Opaque widget identifier. Only equality and hashing are meaningful."""
    value: int

    def __repr__(self) -> str:
        return f"WidgetId({self.value})"


class WidgetIdAllocator:
    """Monotonic id source. Thread-safe."""

    def __init__(self, start: int = 1):
        self._start = start
        self._next = start
        self._lock = threading.Lock()

    def reserve(self) -> WidgetId:
        with self._lock:
            wid = self._next
            self._next += 1
        return WidgetId(wid)

    def reset(self):
        with self._lock:
            self._next = self._start

    @property
    def reserved_count(self) -> int:
        """Number of ids handed out since the last reset."""
        return self._next - self._start
