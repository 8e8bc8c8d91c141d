"""
Label Widget

A single line of text.

Glyphs are first laid out in EM space (1.0 = one EM, baseline at y=0, top
of the line at y=1), then the line is recentred on the [-1, 1] square and
fitted to the context. `flow` is usually what you want: all labels of the
same height then share the same font size, even if long ones overflow.
"""

from __future__ import annotations
from typing import Any, Callable, List, Optional, Tuple

from frameui.core.math2d import AffineTransform
from frameui.ui.backend import GlyphInfos
from frameui.ui.draw import DrawContext
from frameui.ui.interaction import mark_hovered
from frameui.ui.layout import Alignment, HorizontalAlignment


def flow(ctx: DrawContext, font: Any, text: str, alignment: HorizontalAlignment):
    """Text as tall as the context, as wide as needed. May overflow horizontally."""
    ctx = ctx.animation_stop()

    def fit(text_wph: float) -> AffineTransform:
        area = ctx.horizontal_rescale(text_wph / ctx.width_per_height(), alignment)
        mark_hovered(area)
        return area.matrix()

    _draw_line(ctx, font, text, fit)


def contain(ctx: DrawContext, font: Any, text: str, alignment: Alignment):
    """Largest text that fits entirely inside the context."""
    ctx = ctx.animation_stop()

    def fit(text_wph: float) -> AffineTransform:
        area = ctx.enforce_aspect_ratio_downscale(text_wph, alignment)
        mark_hovered(area)
        return area.matrix()

    _draw_line(ctx, font, text, fit)


def cover(ctx: DrawContext, font: Any, text: str, alignment: Alignment):
    """Smallest text that covers the whole context."""
    ctx = ctx.animation_stop()

    def fit(text_wph: float) -> AffineTransform:
        area = ctx.enforce_aspect_ratio_upscale(text_wph, alignment)
        mark_hovered(area)
        return area.matrix()

    _draw_line(ctx, font, text, fit)


def layout_glyphs(backend: Any, font: Any, text: str) -> Tuple[List[Tuple[str, AffineTransform]], float]:
    """
    Position every glyph in EM space.

    Returns the (glyph, matrix) pairs and the width of the line in EMs.
    Each matrix maps the [-1, 1] square onto the glyph's box.
    """
    glyphs: List[Tuple[str, AffineTransform]] = []
    previous: Optional[Tuple[str, GlyphInfos]] = None
    x = 0.0

    for glyph in text:
        infos = backend.glyph_infos(font, glyph)
        if previous is not None:
            x += backend.kerning(font, previous[0], glyph)
        previous = (glyph, infos)

        matrix = (AffineTransform.translate(x + infos.x_offset, infos.y_offset - infos.height)
                  @ AffineTransform.scale_wh(infos.width, infos.height)
                  @ AffineTransform.translate(0.5, 0.5)
                  @ AffineTransform.scale(0.5))
        glyphs.append((glyph, matrix))
        x += infos.x_advance

    # The line ends where the last glyph's box ends, not at its advance
    if previous is not None:
        last = previous[1]
        x += last.x_offset + last.width - last.x_advance

    return glyphs, x


def _draw_line(ctx: DrawContext, font: Any, text: str,
               fit: Callable[[float], AffineTransform]):
    with ctx.draw() as backend:
        glyphs, width = layout_glyphs(backend, font, text)
        if width <= 0.0:
            return

        # EM space -> [-1, 1]: the line spans [0, width] x [0, 1]
        recenter = (AffineTransform.scale_wh(2.0 / width, 2.0)
                    @ AffineTransform.translate(-width / 2.0, -0.5))
        final = fit(width) @ recenter

        for glyph, matrix in glyphs:
            backend.draw_glyph(font, glyph, final @ matrix)
