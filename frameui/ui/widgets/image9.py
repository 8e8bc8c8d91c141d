"""
Nine-Slice Image Widget

The image is cut into 9 parts: four corners, four borders and the middle.
`top_percent`, `right_percent`, `bottom_percent` and `left_percent` give the
size of the border parts as fractions of the image.

The whole area is filled. Corners keep their aspect ratio, top/bottom
borders stretch horizontally, left/right borders stretch vertically and the
middle stretches both ways.

`left_border_percent` is the fraction of the area's width taken by the left
border; the other borders follow from the image's proportions.
"""

from __future__ import annotations
from typing import Any

from frameui.ui.draw import DrawContext
from frameui.ui.interaction import mark_hovered
from frameui.ui.layout import Alignment


def draw(ctx: DrawContext, left_border_percent: float, image: Any,
         top_percent: float, right_percent: float, bottom_percent: float,
         left_percent: float):
    assert top_percent + bottom_percent <= 1.0, "top and bottom slices overlap"
    assert left_percent + right_percent <= 1.0, "left and right slices overlap"
    assert min(top_percent, right_percent, bottom_percent, left_percent) > 0.0, \
        "slice sizes must be positive"

    with ctx.draw() as backend:
        image_wph = backend.get_image_width_per_height(image)
    wph = ctx.width_per_height()

    top_border = left_border_percent * top_percent / left_percent * wph / image_wph
    right_border = top_border * right_percent / top_percent / wph * image_wph
    bottom_border = right_border * bottom_percent / right_percent * wph / image_wph

    mid_w = 1.0 - left_border_percent - right_border
    mid_h = 1.0 - top_border - bottom_border

    u0, u1 = left_percent, 1.0 - right_percent
    v0, v1 = bottom_percent, 1.0 - top_percent

    # (area width, area height, alignment, uv top-left, top-right, bottom-right, bottom-left)
    parts = [
        (left_border_percent, top_border, Alignment.top_left(),
         (0.0, 1.0), (u0, 1.0), (u0, v1), (0.0, v1)),
        (right_border, top_border, Alignment.top_right(),
         (u1, 1.0), (1.0, 1.0), (1.0, v1), (u1, v1)),
        (right_border, bottom_border, Alignment.bottom_right(),
         (u1, v0), (1.0, v0), (1.0, 0.0), (u1, 0.0)),
        (left_border_percent, bottom_border, Alignment.bottom_left(),
         (0.0, v0), (u0, v0), (u0, 0.0), (0.0, 0.0)),
        (mid_w, top_border, Alignment.top(),
         (u0, 1.0), (u1, 1.0), (u1, v1), (u0, v1)),
        (left_border_percent, mid_h, Alignment.left(),
         (0.0, v1), (u0, v1), (u0, v0), (0.0, v0)),
        (mid_w, bottom_border, Alignment.bottom(),
         (u0, v0), (u1, v0), (u1, 0.0), (u0, 0.0)),
        (right_border, mid_h, Alignment.right(),
         (u1, v1), (1.0, v1), (1.0, v0), (u1, v0)),
        (mid_w, mid_h, Alignment.center(),
         (u0, v1), (u1, v1), (u1, v0), (u0, v0)),
    ]

    with ctx.draw() as backend:
        for w, h, alignment, tl, tr, br, bl in parts:
            part = ctx.rescale(w, h, alignment)
            backend.draw_image_uv(image, part.matrix(), tl, tr, br, bl)

    mark_hovered(ctx)
