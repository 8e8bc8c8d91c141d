"""
Image Button Widget

An image that can be clicked, with a different image for each of the
normal, hovered and active states.
"""

from __future__ import annotations
from typing import Any, Optional

from frameui.ui.draw import DrawContext
from frameui.ui.interaction import Interaction, WidgetState, interact
from frameui.ui.layout import Alignment
from frameui.ui.session import UiState


def draw(ctx: DrawContext, normal_image: Any, hovered_image: Any, active_image: Any,
         alignment: Alignment, ui_state: Optional[UiState] = None) -> Interaction:
    """Same as image.draw(), but clickable."""
    ctx = ctx.animation_stop()
    with ctx.draw() as backend:
        ratio = backend.get_image_width_per_height(normal_image)
    return stretch(ctx.enforce_aspect_ratio_downscale(ratio, alignment),
                   normal_image, hovered_image, active_image, ui_state)


def stretch(ctx: DrawContext, normal_image: Any, hovered_image: Any, active_image: Any,
            ui_state: Optional[UiState] = None) -> Interaction:
    """Same as image.stretch(), but clickable."""
    result = interact(ctx, ui_state)

    image = {
        WidgetState.NORMAL: normal_image,
        WidgetState.HOVERED: hovered_image,
        WidgetState.ACTIVE: active_image,
    }[result.state]

    with ctx.draw() as backend:
        backend.draw_image(image, ctx.matrix())

    return result.interaction
