"""
Image Widget

Non-interactive images. See image_button for clickable ones.
"""

from __future__ import annotations
from typing import Any

from frameui.ui.draw import DrawContext
from frameui.ui.interaction import mark_hovered
from frameui.ui.layout import Alignment


def draw(ctx: DrawContext, image: Any, alignment: Alignment):
    """Shrink the area to the image's aspect ratio, then draw it."""
    ctx = ctx.animation_stop()
    with ctx.draw() as backend:
        ratio = backend.get_image_width_per_height(image)
    stretch(ctx.enforce_aspect_ratio_downscale(ratio, alignment), image)


def stretch(ctx: DrawContext, image: Any):
    """Draw the image over the whole area, ignoring its aspect ratio."""
    mark_hovered(ctx)
    with ctx.draw() as backend:
        backend.draw_image(image, ctx.matrix())


def cover(ctx: DrawContext, image: Any, alignment: Alignment):
    """Grow the area to the image's aspect ratio until it covers it, then draw."""
    ctx = ctx.animation_stop()
    with ctx.draw() as backend:
        ratio = backend.get_image_width_per_height(image)
    stretch(ctx.enforce_aspect_ratio_upscale(ratio, alignment), image)
