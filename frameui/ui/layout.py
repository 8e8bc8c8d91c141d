"""
Alignment

Where a smaller viewport sits inside the viewport it was derived from.
Pure configuration, used by DrawContext.rescale() and the aspect-ratio
helpers.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Enums
# =============================================================================

class HorizontalAlignment(Enum):
    CENTER = auto()
    LEFT = auto()
    RIGHT = auto()

    def offset(self, scale: float) -> float:
        """NDC translation that puts a box of relative width `scale` against this edge."""
        if self is HorizontalAlignment.LEFT:
            return scale - 1.0
        if self is HorizontalAlignment.RIGHT:
            return 1.0 - scale
        return 0.0


class VerticalAlignment(Enum):
    CENTER = auto()
    TOP = auto()
    BOTTOM = auto()

    def offset(self, scale: float) -> float:
        """NDC translation that puts a box of relative height `scale` against this edge."""
        if self is VerticalAlignment.BOTTOM:
            return scale - 1.0
        if self is VerticalAlignment.TOP:
            return 1.0 - scale
        return 0.0


# =============================================================================
# Alignment
# =============================================================================

@dataclass(frozen=True)
class Alignment:
    horizontal: HorizontalAlignment = HorizontalAlignment.CENTER
    vertical: VerticalAlignment = VerticalAlignment.CENTER

    @staticmethod
    def center() -> Alignment:
        return Alignment(HorizontalAlignment.CENTER, VerticalAlignment.CENTER)

    @staticmethod
    def top() -> Alignment:
        return Alignment(HorizontalAlignment.CENTER, VerticalAlignment.TOP)

    @staticmethod
    def bottom() -> Alignment:
        return Alignment(HorizontalAlignment.CENTER, VerticalAlignment.BOTTOM)

    @staticmethod
    def left() -> Alignment:
        return Alignment(HorizontalAlignment.LEFT, VerticalAlignment.CENTER)

    @staticmethod
    def right() -> Alignment:
        return Alignment(HorizontalAlignment.RIGHT, VerticalAlignment.CENTER)

    @staticmethod
    def top_left() -> Alignment:
        return Alignment(HorizontalAlignment.LEFT, VerticalAlignment.TOP)

    @staticmethod
    def top_right() -> Alignment:
        return Alignment(HorizontalAlignment.RIGHT, VerticalAlignment.TOP)

    @staticmethod
    def bottom_left() -> Alignment:
        return Alignment(HorizontalAlignment.LEFT, VerticalAlignment.BOTTOM)

    @staticmethod
    def bottom_right() -> Alignment:
        return Alignment(HorizontalAlignment.RIGHT, VerticalAlignment.BOTTOM)
