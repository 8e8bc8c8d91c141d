# frameui/core/__init__.py
"""
Core value types: affine math, interpolations, widget ids, configuration.
"""

from .math2d import AffineTransform, clamp, lerp
from .interpolation import (
    Interpolation,
    Linear,
    EaseOut,
    Reversed,
    Repeated,
    AlternateRepeated,
    progress_ratio,
)
from .ids import WidgetId, WidgetIdAllocator
from .config import UiConfig, DEFAULT_CONFIG

__all__ = [
    "AffineTransform", "clamp", "lerp",
    "Interpolation", "Linear", "EaseOut",
    "Reversed", "Repeated", "AlternateRepeated", "progress_ratio",
    "WidgetId", "WidgetIdAllocator",
    "UiConfig", "DEFAULT_CONFIG",
]
