"""
Progress Bar Widget

Two images: the bar when empty, and the bar when full drawn over it up to
the current progress. The "full" image may also be just the difference
between the two.
"""

from __future__ import annotations
from typing import Any

from frameui.ui.draw import DrawContext
from frameui.ui.layout import Alignment, HorizontalAlignment
from frameui.ui.widgets import image


def draw(ctx: DrawContext, empty: Any, full: Any, progress: float,
         direction: HorizontalAlignment, alignment: Alignment):
    """Keep the aspect ratio of the empty image. `full` is stretched to match."""
    ctx = ctx.animation_stop()
    with ctx.draw() as backend:
        ratio = backend.get_image_width_per_height(empty)
    stretch(ctx.enforce_aspect_ratio_downscale(ratio, alignment), empty, full,
            progress, direction)


def stretch(ctx: DrawContext, empty: Any, full: Any, progress: float,
            direction: HorizontalAlignment):
    """
    Fill the whole area.

    `direction` is the side the bar fills from (LEFT fills left to right).
    """
    assert 0.0 <= progress <= 1.0, f"progress must be within [0, 1], got {progress}"

    image.stretch(ctx, empty)

    filled = ctx.horizontal_rescale(progress, direction)
    if direction is HorizontalAlignment.RIGHT:
        u0, u1 = 1.0 - progress, 1.0
    elif direction is HorizontalAlignment.CENTER:
        u0, u1 = 0.5 - progress * 0.5, 0.5 + progress * 0.5
    else:
        u0, u1 = 0.0, progress

    with ctx.draw() as backend:
        backend.draw_image_uv(full, filled.matrix(), (u0, 1.0), (u1, 1.0),
                              (u1, 0.0), (u0, 0.0))
