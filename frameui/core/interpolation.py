# frameui/core/interpolation.py
"""
Interpolations - map animation time to eased progress.

An interpolation receives the raw progress ratio
    r = (now - start) / duration
which is NOT clamped (r < 0 before the start, r > 1 after the end) and
returns the eased progress, within [0, 1] for in-range inputs.

Times are floats in seconds. Python floats are doubles, so subtracting two
epoch timestamps keeps sub-millisecond precision; do not narrow `now` or
`start` to float32 before the subtraction.

Combinators wrap another interpolation:

    EaseOut().reverse()                 # 1 -> 0
    Linear().repeat()                   # saw-tooth
    Linear().alternate_repeat()         # triangle wave
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import math

from frameui.core.math2d import clamp


class Interpolation(ABC):
    """Base class for every time -> progress mapping."""

    @abstractmethod
    def ease(self, ratio: float) -> float:
        """Eased progress for an unclamped progress ratio."""

    def calculate(self, now: float, start: float, duration: float) -> float:
        """Eased progress of an animation started at `start` lasting `duration` seconds."""
        return self.ease(progress_ratio(now, start, duration))

    def reverse(self) -> Reversed:
        return Reversed(self)

    def repeat(self) -> Repeated:
        return Repeated(self)

    def alternate_repeat(self) -> AlternateRepeated:
        return AlternateRepeated(self)


def progress_ratio(now: float, start: float, duration: float) -> float:
    """
    Raw progress of an animation.

    A non-positive duration is an animation that completes instantly.
    """
    elapsed = float(now) - float(start)
    if duration <= 0:
        return 1.0 if elapsed >= 0.0 else 0.0
    return elapsed / float(duration)


# =============================================================================
# Easings
# =============================================================================

class Linear(Interpolation):
    """Constant speed."""

    def ease(self, ratio: float) -> float:
        return clamp(ratio, 0.0, 1.0)

    def __repr__(self) -> str:
        return "Linear()"


class EaseOut(Interpolation):
    """
    Exponential deceleration: 1 - exp(-r * factor).

    The curve is asymptotic, at r = 1 with the default factor it is already
    within 5e-5 of the target.
    """

    def __init__(self, factor: float = 10.0):
        self.factor = factor

    def ease(self, ratio: float) -> float:
        if not ratio >= 0.0:
            return 0.0
        return 1.0 - math.exp(-ratio * self.factor)

    def __repr__(self) -> str:
        return f"EaseOut(factor={self.factor})"


# =============================================================================
# Combinators
# =============================================================================

class Reversed(Interpolation):
    """Plays the inner interpolation backwards."""

    def __init__(self, inner: Interpolation):
        self.inner = inner

    def ease(self, ratio: float) -> float:
        return self.inner.ease(1.0 - ratio)

    def __repr__(self) -> str:
        return f"Reversed({self.inner!r})"


class Repeated(Interpolation):
    """Restarts the inner interpolation every period."""

    def __init__(self, inner: Interpolation):
        self.inner = inner

    def ease(self, ratio: float) -> float:
        # Python's modulo is already in [0, 1) for negative ratios
        return self.inner.ease(ratio % 1.0)

    def __repr__(self) -> str:
        return f"Repeated({self.inner!r})"


class AlternateRepeated(Interpolation):
    """Plays the inner interpolation forwards, then backwards, forever."""

    def __init__(self, inner: Interpolation):
        self.inner = inner

    def ease(self, ratio: float) -> float:
        folded = ratio % 2.0
        if folded > 1.0:
            folded = 2.0 - folded
        return self.inner.ease(folded)

    def __repr__(self) -> str:
        return f"AlternateRepeated({self.inner!r})"
