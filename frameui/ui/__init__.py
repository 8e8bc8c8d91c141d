"""
UI System

Immediate-mode layout and interaction, drawn through an abstract backend.

Components:
- layout: Alignment values
- backend: Draw backend contract (images, glyphs)
- draw: DrawContext, the per-frame viewport tree and hit testing
- session: UiSession, per-frame shared state and cross-frame UiState
- interaction: Normal/Hovered/Active/Clicked resolution
- widgets/: Drawing helpers (images, buttons, labels, progress bars)

Example usage:

    from frameui.ui import UiSession, Alignment, HorizontalAlignment
    from frameui.ui.widgets import image_button, label

    session = UiSession()

    # In render loop:
    ctx = session.begin_frame(w, h, backend, cursor, pressed, released)
    header, body = ctx.vertical_split_weights([1.0, 4.0])
    label.flow(header.uniform_margin(0.1, 0.1, 0.1, 0.1), font, "Title",
               HorizontalAlignment.CENTER)
    if image_button.draw(body, normal, hovered, active, Alignment.center()).clicked:
        on_click()
"""

from frameui.ui.layout import Alignment, HorizontalAlignment, VerticalAlignment
from frameui.ui.backend import Backend, ImageBackend, TextBackend, GlyphInfos
from frameui.ui.draw import DrawContext, SplitIterator
from frameui.ui.session import UiSession, UiState, FrameShared
from frameui.ui.interaction import (
    Interaction, WidgetState, InteractionResult,
    interact, resolve_interaction, mark_hovered,
)
from frameui.ui import widgets

__all__ = [
    # Layout
    "Alignment", "HorizontalAlignment", "VerticalAlignment",
    # Backend
    "Backend", "ImageBackend", "TextBackend", "GlyphInfos",
    # Draw
    "DrawContext", "SplitIterator",
    # Session
    "UiSession", "UiState", "FrameShared",
    # Interaction
    "Interaction", "WidgetState", "InteractionResult",
    "interact", "resolve_interaction", "mark_hovered",
    # Widgets
    "widgets",
]
