# frameui/core/config.py
"""
UI configuration.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class UiConfig:
    # Restart widget ids at 1 on every begin_frame(). When False the counter
    # keeps growing for the lifetime of the session.
    reset_widget_ids_each_frame: bool = True

    # Distance (root NDC units) a cursor may sit outside a widget's edges and
    # still count as hovering it.
    hover_epsilon: float = 0.0

    def __post_init__(self):
        if self.hover_epsilon < 0:
            raise ValueError(f"hover_epsilon must be >= 0, got {self.hover_epsilon}")


DEFAULT_CONFIG = UiConfig()
