"""
Nine-Slice Button Widget

Same as image9, but clickable, with one image per state.
"""

from __future__ import annotations
from typing import Any, Optional

from frameui.ui.draw import DrawContext
from frameui.ui.interaction import Interaction, WidgetState, interact
from frameui.ui.session import UiState
from frameui.ui.widgets import image9


def draw(ctx: DrawContext, left_border_percent: float,
         normal_image: Any, hovered_image: Any, active_image: Any,
         top_percent: float, right_percent: float, bottom_percent: float,
         left_percent: float, ui_state: Optional[UiState] = None) -> Interaction:
    result = interact(ctx, ui_state)

    image = {
        WidgetState.NORMAL: normal_image,
        WidgetState.HOVERED: hovered_image,
        WidgetState.ACTIVE: active_image,
    }[result.state]

    image9.draw(ctx, left_border_percent, image, top_percent, right_percent,
                bottom_percent, left_percent)

    return result.interaction
