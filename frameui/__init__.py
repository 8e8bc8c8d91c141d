# frameui/__init__.py
"""
frameui - Immediate-mode UI layout and interaction core.

Core components:
- AffineTransform: 2D transforms in viewport NDC
- Interpolation: time -> progress easings for animated layouts
- UiSession / DrawContext: per-frame viewport tree, hit testing
- Interaction: stateless Normal/Hovered/Active/Clicked widgets
- Backend: the drawing contract a host implements
"""

from .core import (
    # Math
    AffineTransform,
    lerp, clamp,

    # Interpolation
    Interpolation,
    Linear,
    EaseOut,
    Reversed,
    Repeated,
    AlternateRepeated,

    # Ids / config
    WidgetId,
    WidgetIdAllocator,
    UiConfig,
)

from .ui import (
    Alignment,
    HorizontalAlignment,
    VerticalAlignment,
    Backend,
    ImageBackend,
    TextBackend,
    GlyphInfos,
    DrawContext,
    UiSession,
    UiState,
    Interaction,
    WidgetState,
    InteractionResult,
    interact,
    resolve_interaction,
    widgets,
)

__version__ = "0.1.0"

__all__ = [
    "AffineTransform", "lerp", "clamp",
    "Interpolation", "Linear", "EaseOut",
    "Reversed", "Repeated", "AlternateRepeated",
    "WidgetId", "WidgetIdAllocator", "UiConfig",
    "Alignment", "HorizontalAlignment", "VerticalAlignment",
    "Backend", "ImageBackend", "TextBackend", "GlyphInfos",
    "DrawContext", "UiSession", "UiState",
    "Interaction", "WidgetState", "InteractionResult",
    "interact", "resolve_interaction",
    "widgets",
]
