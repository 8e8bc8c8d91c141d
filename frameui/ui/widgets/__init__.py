"""
Widgets

Drawing helpers built on DrawContext. Each module is a set of plain
functions taking the context first; interactive ones return an Interaction.
"""

from frameui.ui.widgets import (
    image,
    image_button,
    image9,
    image9_button,
    label,
    progress_bar,
    circular_progress_bar,
)

__all__ = [
    "image",
    "image_button",
    "image9",
    "image9_button",
    "label",
    "progress_bar",
    "circular_progress_bar",
]
