"""
Widget Interaction

Stateless click handling for immediate-mode widgets.

Nothing is stored per widget. Each frame a widget reserves an id, and its
state is resolved from:
- whether the cursor is over it this frame
- the press/release edges of this frame
- UiState.active_widget, kept by the caller between frames

    result = interact(ctx)
    image = {WidgetState.NORMAL: normal, ...}[result.state]
    if result.interaction.clicked:
        ...
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING
import logging

from frameui.core.ids import WidgetId

if TYPE_CHECKING:
    from frameui.ui.draw import DrawContext
    from frameui.ui.session import UiState

logger = logging.getLogger(__name__)


class Interaction(Enum):
    """Whether the cursor clicked the widget this frame."""
    NONE = auto()
    CLICKED = auto()

    @property
    def clicked(self) -> bool:
        return self is Interaction.CLICKED


class WidgetState(Enum):
    """Which visual a widget should draw this frame."""
    NORMAL = auto()
    HOVERED = auto()
    ACTIVE = auto()


@dataclass(frozen=True)
class InteractionResult:
    widget_id: WidgetId
    state: WidgetState
    interaction: Interaction

    @property
    def clicked(self) -> bool:
        return self.interaction.clicked


def resolve_interaction(ctx: DrawContext, widget_id: WidgetId,
                        ui_state: UiState) -> InteractionResult:
    """
    Resolve one widget's state for this frame.

    Priority order:
    1. not hovered                      -> NORMAL
    2. hovered, already active          -> ACTIVE, CLICKED if released now
    3. hovered, pressed this frame      -> ACTIVE, becomes the active widget
    4. hovered                          -> HOVERED

    Releasing outside the widget does not clear the active widget.
    """
    if not ctx.is_cursor_hovering():
        return InteractionResult(widget_id, WidgetState.NORMAL, Interaction.NONE)

    ctx.set_cursor_hovered_widget()

    if ui_state.active_widget == widget_id:
        if ctx.cursor_was_released():
            ui_state.active_widget = None
            logger.debug(f"{widget_id!r} clicked")
            return InteractionResult(widget_id, WidgetState.ACTIVE, Interaction.CLICKED)
        return InteractionResult(widget_id, WidgetState.ACTIVE, Interaction.NONE)

    if ctx.cursor_was_pressed():
        ui_state.active_widget = widget_id
        return InteractionResult(widget_id, WidgetState.ACTIVE, Interaction.NONE)

    return InteractionResult(widget_id, WidgetState.HOVERED, Interaction.NONE)


def interact(ctx: DrawContext, ui_state: Optional[UiState] = None) -> InteractionResult:
    """Reserve this widget's id and resolve its state. Call once per widget per frame."""
    widget_id = ctx.reserve_widget_id()
    return resolve_interaction(ctx, widget_id, ui_state if ui_state is not None else ctx.ui_state)


def mark_hovered(ctx: DrawContext):
    """Set the frame's hover flag if the cursor is over a non-interactive widget."""
    if not ctx.cursor_hovered_widget() and ctx.is_cursor_hovering():
        ctx.set_cursor_hovered_widget()
