"""
Circular Progress Bar Widget

A circle that fills clockwise from the top. Same two-image scheme as
progress_bar; the center of the circle is the center of the image.
"""

from __future__ import annotations
from typing import Any
import math

from frameui.core.math2d import AffineTransform
from frameui.ui.draw import DrawContext
from frameui.ui.layout import Alignment
from frameui.ui.widgets import image

_CENTER_UV = (0.5, 0.5)


def draw(ctx: DrawContext, empty: Any, full: Any, progress: float, alignment: Alignment):
    """Keep the aspect ratio of the empty image."""
    ctx = ctx.animation_stop()
    with ctx.draw() as backend:
        ratio = backend.get_image_width_per_height(empty)
    stretch(ctx.enforce_aspect_ratio_downscale(ratio, alignment), empty, full, progress)


def stretch(ctx: DrawContext, empty: Any, full: Any, progress: float):
    """
    Fill the whole area.

    The full image is drawn as 8 triangles, two per quarter. Each one opens
    like a fan around the center as progress passes its eighth.
    """
    assert 0.0 <= progress <= 1.0, f"progress must be within [0, 1], got {progress}"

    image.stretch(ctx, empty)
    matrix = ctx.matrix()

    with ctx.draw() as backend:
        # First eighth of each quarter: from the quarter's edge midpoint to its corner
        for quarter in range(4):
            local = _local_percent(progress, 0.25 * quarter)
            if local is None:
                continue

            tri = (AffineTransform.rotate(quarter * -math.pi * 0.5)
                   @ AffineTransform.scale_wh(0.5 * local, 0.5)
                   @ AffineTransform.translate(1.0, 1.0))

            uv1, uv3 = [
                ((0.5, 1.0), (0.5 + 0.5 * local, 1.0)),
                ((1.0, 0.5), (1.0, 0.5 - 0.5 * local)),
                ((0.5, 0.0), (0.5 - 0.5 * local, 0.0)),
                ((0.0, 0.5), (0.0, 0.5 + 0.5 * local)),
            ][quarter]

            backend.draw_triangle(full, matrix @ tri, (uv1, _CENTER_UV, uv3))

        # Second eighth: from the corner to the next edge midpoint
        for quarter in range(4):
            local = _local_percent(progress, 0.125 + 0.25 * quarter)
            if local is None:
                continue

            tri = (AffineTransform.rotate((quarter + 1) * -math.pi * 0.5)
                   @ AffineTransform.skew_x(-math.pi / 4.0)
                   @ AffineTransform.scale_wh(0.5 * local, 0.5)
                   @ AffineTransform.translate(1.0, 1.0))

            uv1, uv3 = [
                ((1.0, 1.0), (1.0, 1.0 - 0.5 * local)),
                ((1.0, 0.0), (1.0 - 0.5 * local, 0.0)),
                ((0.0, 0.0), (0.0, 0.5 * local)),
                ((0.0, 1.0), (0.5 * local, 1.0)),
            ][quarter]

            backend.draw_triangle(full, matrix @ tri, (uv1, _CENTER_UV, uv3))


def _local_percent(progress: float, start: float):
    """How far progress went through the eighth starting at `start`, or None if not reached."""
    local = (progress - start) / 0.125
    if local <= 0.0:
        return None
    return min(local, 1.0)
