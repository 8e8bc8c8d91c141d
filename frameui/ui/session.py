"""
UI Session

Owns everything that outlives a single DrawContext:
- per-frame shared state (widget id counter, sticky hover flag, backend lock)
- cross-frame state (the active widget)

Usage:

    session = UiSession()

    # Each frame:
    ctx = session.begin_frame(width, height, backend,
                              cursor=(x, y),
                              cursor_was_pressed=pressed,
                              cursor_was_released=released)
    build_ui(ctx)
    if not session.cursor_consumed_by_ui():
        forward_click_to_world()
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Tuple
import logging
import threading
import time

from frameui.core.config import UiConfig
from frameui.core.ids import WidgetId, WidgetIdAllocator
from frameui.core.math2d import AffineTransform
from frameui.ui.draw import DrawContext

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


# =============================================================================
# Cross-frame state
# =============================================================================

@dataclass
class UiState:
    """
    State the caller keeps between frames.

    active_widget: the widget currently holding the pointer (pressed on it
    and not yet released), or None.
    """
    active_widget: Optional[WidgetId] = None


# =============================================================================
# Per-frame shared state
# =============================================================================

class FrameShared:
    """
    State shared by every DrawContext derived during one frame.

    Contexts are immutable values; this is the only mutable thing they point
    to. Id allocation and the hover flag are lock-guarded so UI branches can
    be built from several threads. The backend is handed out under a
    re-entrant lock, one borrower at a time.
    """

    def __init__(
        self,
        backend: Any,
        ui_state: UiState,
        ids: WidgetIdAllocator,
        config: UiConfig,
        clock: Clock,
    ):
        self.backend = backend
        self.ui_state = ui_state
        self.ids = ids
        self.config = config
        self.clock = clock

        self._backend_lock = threading.RLock()
        self._hover_lock = threading.Lock()
        self._cursor_hovered_widget = False

    @property
    def cursor_hovered_widget(self) -> bool:
        return self._cursor_hovered_widget

    def set_cursor_hovered_widget(self):
        with self._hover_lock:
            self._cursor_hovered_widget = True

    @contextmanager
    def borrow_backend(self) -> Iterator[Any]:
        with self._backend_lock:
            yield self.backend


# =============================================================================
# Session
# =============================================================================

class UiSession:
    """Entry point: issues one root DrawContext per frame."""

    def __init__(self, config: Optional[UiConfig] = None, clock: Clock = time.time):
        self.config = config or UiConfig()
        self.clock = clock
        self.ui_state = UiState()

        self._ids = WidgetIdAllocator()
        self._frame: Optional[FrameShared] = None
        self._frame_id = 0

    @property
    def frame_id(self) -> int:
        """Number of frames begun so far."""
        return self._frame_id

    def begin_frame(
        self,
        width: float,
        height: float,
        backend: Any,
        cursor: Optional[Tuple[float, float]] = None,
        cursor_was_pressed: bool = False,
        cursor_was_released: bool = False,
        ui_state: Optional[UiState] = None,
    ) -> DrawContext:
        """
        Start a frame and return the root context covering the whole viewport.

        `width` and `height` only matter through their ratio. The cursor, if
        any, is in viewport NDC: (-1, -1) bottom-left, (1, 1) top-right.
        The pressed/released flags are edges: true only on the frame where
        the button went down/up.
        """
        assert width > 0 and height > 0, f"viewport must have a positive size, got {width}x{height}"

        if self.config.reset_widget_ids_each_frame:
            self._ids.reset()

        self._frame_id += 1
        shared = FrameShared(
            backend=backend,
            ui_state=ui_state if ui_state is not None else self.ui_state,
            ids=self._ids,
            config=self.config,
            clock=self.clock,
        )
        self._frame = shared

        if cursor is not None:
            cursor = (float(cursor[0]), float(cursor[1]))

        logger.debug(
            f"frame {self._frame_id}: {width}x{height} cursor={cursor} "
            f"pressed={cursor_was_pressed} released={cursor_was_released}"
        )

        return DrawContext(
            shared,
            AffineTransform.identity(),
            float(width),
            float(height),
            cursor=cursor,
            cursor_was_pressed=bool(cursor_was_pressed),
            cursor_was_released=bool(cursor_was_released),
        )

    def cursor_consumed_by_ui(self) -> bool:
        """
        True if a widget of the latest frame was under the cursor.

        Read it once the frame is built. False means the cursor is over
        whatever lies beneath the UI.
        """
        if self._frame is None:
            return False
        return self._frame.cursor_hovered_widget

    def cursor_hovered_widget(self) -> bool:
        return self.cursor_consumed_by_ui()
