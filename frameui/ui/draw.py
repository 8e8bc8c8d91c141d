"""
Draw Context

A DrawContext is one node of the per-frame viewport tree.

Design:
- The root context covers the whole viewport; its local [-1, 1] square is
  the screen.
- Every layout call (margin, rescale, split, aspect-ratio) returns a NEW
  context whose transform maps its own [-1, 1] square into root space.
  Nothing is mutated in place, so a context can be reused freely.
- width/height are logical sizes, only used for aspect ratios.
- Cursor and press/release edges are the same for the whole tree.
- Widget ids, the hover flag and the backend are shared through the
  frame's FrameShared (see session.py).

Animation:
    ctx.animation_start(EaseOut(), start, 0.3).margin(...).animation_stop()
The transform at animation_start() is the source, every call after it moves
the target, and matrix() blends the two until animation_stop().
"""

from __future__ import annotations
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING
import logging

from frameui.core.ids import WidgetId
from frameui.core.interpolation import Interpolation
from frameui.core.math2d import AffineTransform
from frameui.ui.layout import Alignment, HorizontalAlignment, VerticalAlignment

if TYPE_CHECKING:
    from frameui.ui.session import FrameShared, UiState

logger = logging.getLogger(__name__)

Point2 = Tuple[float, float]
TimeValue = Union[float, datetime]
DurationValue = Union[float, timedelta]

# Corners of the local square, in the order the hit test walks the edges
_CORNERS = (
    (-1.0, 1.0, 1.0),    # top-left
    (1.0, 1.0, 1.0),     # top-right
    (1.0, -1.0, 1.0),    # bottom-right
    (-1.0, -1.0, 1.0),   # bottom-left
)


def _seconds(value: Union[TimeValue, DurationValue]) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, timedelta):
        return value.total_seconds()
    return float(value)


# =============================================================================
# Draw Context
# =============================================================================

class DrawContext:
    """
    Everything a widget needs to lay itself out, hit-test and draw.

    Obtain the root one from UiSession.begin_frame().
    """

    def __init__(
        self,
        shared: FrameShared,
        matrix: AffineTransform,
        width: float,
        height: float,
        animation: Optional[Tuple[AffineTransform, float]] = None,
        cursor: Optional[Point2] = None,
        cursor_was_pressed: bool = False,
        cursor_was_released: bool = False,
    ):
        self._shared = shared
        self._matrix = matrix
        self._width = width
        self._height = height

        # (source matrix, blend factor) while an animation is running
        self._animation = animation

        # Root viewport space, not local space
        self._cursor = cursor
        self._cursor_was_pressed = cursor_was_pressed
        self._cursor_was_released = cursor_was_released

    def _derive(self, matrix: AffineTransform, width: float, height: float,
                animation=...) -> DrawContext:
        return DrawContext(
            self._shared,
            matrix,
            width,
            height,
            animation=self._animation if animation is ... else animation,
            cursor=self._cursor,
            cursor_was_pressed=self._cursor_was_pressed,
            cursor_was_released=self._cursor_was_released,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def transform(self) -> AffineTransform:
        """Target transform, without any animation blending."""
        return self._matrix

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def cursor(self) -> Optional[Point2]:
        return self._cursor

    @property
    def is_animating(self) -> bool:
        return self._animation is not None

    @property
    def ui_state(self) -> UiState:
        """Cross-frame state of the session that issued this context."""
        return self._shared.ui_state

    def matrix(self) -> AffineTransform:
        """
        Effective transform: maps the fullscreen square onto this context's area.

        While animating this is a per-cell lerp between the animation's source
        and the target (not a decomposed interpolation).
        """
        if self._animation is None:
            return self._matrix
        source, factor = self._animation
        return source.lerp(self._matrix, factor)

    def width_per_height(self) -> float:
        assert self._height > 0, f"aspect ratio of a context with height {self._height}"
        return self._width / self._height

    # -------------------------------------------------------------------------
    # Frame state
    # -------------------------------------------------------------------------

    def cursor_was_pressed(self) -> bool:
        """True if the cursor went down this frame."""
        return self._cursor_was_pressed

    def cursor_was_released(self) -> bool:
        """True if the cursor went up this frame."""
        return self._cursor_was_released

    def cursor_hovered_widget(self) -> bool:
        """True once any widget of this frame reported the cursor over it."""
        return self._shared.cursor_hovered_widget

    def set_cursor_hovered_widget(self):
        self._shared.set_cursor_hovered_widget()

    def reserve_widget_id(self) -> WidgetId:
        """A new id. Call exactly once per logical widget per frame."""
        return self._shared.ids.reserve()

    @contextmanager
    def draw(self) -> Iterator[Any]:
        """
        Borrow the backend.

            with ctx.draw() as backend:
                backend.draw_image(image, ctx.matrix())
        """
        with self._shared.borrow_backend() as backend:
            yield backend

    # -------------------------------------------------------------------------
    # Hit Testing
    # -------------------------------------------------------------------------

    def is_cursor_hovering(self) -> bool:
        """
        True if the cursor is over this context's area.

        Points exactly on an edge are inside. With the default
        UiConfig.hover_epsilon of 0 this is the same answer as
        `cursor_hover_coordinates() is not None`, without inverting the
        matrix. A positive epsilon widens this test only; hover coordinates
        stay within the [-1, 1] square.
        """
        if self._cursor is None:
            return False

        matrix = self.matrix()
        corners = []
        for corner in _CORNERS:
            x, y, w = matrix.apply(corner)
            corners.append((x / w, y / w))

        px, py = self._cursor
        eps = self._shared.config.hover_epsilon

        # The point is inside iff, for each edge walked in order, the vector
        # corner->point makes an angle of at most 90 degrees with corner->next
        for i in range(4):
            cx, cy = corners[i]
            nx, ny = corners[(i + 1) % 4]
            ex, ey = nx - cx, ny - cy
            dot = (px - cx) * ex + (py - cy) * ey
            limit = -eps * (ex * ex + ey * ey) ** 0.5 if eps else 0.0
            # Written so that NaN fails the test
            if not dot >= limit:
                return False

        return True

    def cursor_hover_coordinates(self) -> Optional[Point2]:
        """
        Cursor position in this context's local space, if it is over it.

        (-1, -1) is the bottom-left corner and (1, 1) the top-right corner.
        """
        if self._cursor is None:
            return None

        inverse = self.matrix().invert()
        if inverse is None:
            logger.debug(f"singular transform, no hover coordinates: {self.matrix()!r}")
            return None

        x, y, w = inverse.apply((self._cursor[0], self._cursor[1], 1.0))
        x, y = x / w, y / w

        # Comparisons are False for NaN
        if not (-1.0 <= x <= 1.0 and -1.0 <= y <= 1.0):
            return None

        return (x, y)

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def margin(self, top: float, right: float, bottom: float, left: float) -> DrawContext:
        """
        Sub-area with a margin on each side.

        Margins are fractions of the current size (0.0 to 1.0).
        """
        return self._derive(
            self._matrix
            @ AffineTransform.translate(left - right, bottom - top)
            @ AffineTransform.scale_wh(1.0 - right - left, 1.0 - top - bottom),
            self._width * (1.0 - left - right),
            self._height * (1.0 - top - bottom),
        )

    def uniform_margin(self, top: float, right: float, bottom: float, left: float) -> DrawContext:
        """
        Same as margin(), but the fractions are of the smaller dimension.

        Equal values give margins of equal size on screen.
        """
        wph = self.width_per_height()
        wph_factor = wph if wph > 1.0 else 1.0
        hpw_factor = 1.0 / wph if wph < 1.0 else 1.0

        return self.margin(top / hpw_factor, right / wph_factor,
                           bottom / hpw_factor, left / wph_factor)

    def rescale(self, width_percent: float, height_percent: float,
                alignment: Alignment) -> DrawContext:
        """
        Sub-area of the given relative size (0.5 halves that dimension).

        The alignment places it inside the current area.
        """
        x = alignment.horizontal.offset(width_percent)
        y = alignment.vertical.offset(height_percent)

        return self._derive(
            self._matrix
            @ AffineTransform.translate(x, y)
            @ AffineTransform.scale_wh(width_percent, height_percent),
            self._width * width_percent,
            self._height * height_percent,
        )

    def vertical_rescale(self, scale: float, alignment: VerticalAlignment) -> DrawContext:
        """Same width, height multiplied by `scale`."""
        y = alignment.offset(scale)
        return self._derive(
            self._matrix
            @ AffineTransform.translate(0.0, y)
            @ AffineTransform.scale_wh(1.0, scale),
            self._width,
            self._height * scale,
        )

    def horizontal_rescale(self, scale: float, alignment: HorizontalAlignment) -> DrawContext:
        """Same height, width multiplied by `scale`."""
        x = alignment.offset(scale)
        return self._derive(
            self._matrix
            @ AffineTransform.translate(x, 0.0)
            @ AffineTransform.scale_wh(scale, 1.0),
            self._width * scale,
            self._height,
        )

    def transformed(self, matrix: AffineTransform, width: Optional[float] = None,
                    height: Optional[float] = None) -> DrawContext:
        """
        Sub-area given by an arbitrary transform of the local square.

        For rotations and skews the other layout calls do not cover. The
        logical size is kept unless given.
        """
        return self._derive(
            self._matrix @ matrix,
            self._width if width is None else width,
            self._height if height is None else height,
        )

    def enforce_aspect_ratio_downscale(self, width_per_height: float,
                                       alignment: Alignment) -> DrawContext:
        """
        Largest sub-area with the given aspect ratio that fits inside this one.

        Shrinks vertically (using the vertical alignment) or horizontally
        (using the horizontal alignment), never both.
        """
        assert width_per_height > 0, f"aspect ratio must be positive, got {width_per_height}"
        current = self.width_per_height()

        if width_per_height > current:
            return self.vertical_rescale(current / width_per_height, alignment.vertical)
        return self.horizontal_rescale(width_per_height / current, alignment.horizontal)

    def enforce_aspect_ratio_upscale(self, width_per_height: float,
                                     alignment: Alignment) -> DrawContext:
        """
        Smallest area with the given aspect ratio that covers this one.

        Grows horizontally (using the horizontal alignment) or vertically
        (using the vertical alignment), never both.
        """
        assert width_per_height > 0, f"aspect ratio must be positive, got {width_per_height}"
        current = self.width_per_height()

        if width_per_height > current:
            return self.horizontal_rescale(width_per_height / current, alignment.horizontal)
        return self.vertical_rescale(current / width_per_height, alignment.vertical)

    # -------------------------------------------------------------------------
    # Splits
    # -------------------------------------------------------------------------

    def vertical_split(self, splits: int) -> SplitIterator:
        """`splits` chunks of equal height, top to bottom."""
        return self.vertical_split_weights([1.0] * splits)

    def vertical_split_weights(self, weights: Iterable[float]) -> SplitIterator:
        """
        Chunks stacked top to bottom, each height proportional to its weight.

        A chunk of weight 2 is twice as tall as a chunk of weight 1.
        """
        return SplitIterator(self, weights, vertical=True)

    def horizontal_split(self, splits: int) -> SplitIterator:
        """`splits` chunks of equal width, left to right."""
        return self.horizontal_split_weights([1.0] * splits)

    def horizontal_split_weights(self, weights: Iterable[float]) -> SplitIterator:
        """Chunks laid out left to right, each width proportional to its weight."""
        return SplitIterator(self, weights, vertical=False)

    # -------------------------------------------------------------------------
    # Animation
    # -------------------------------------------------------------------------

    def animation_start(
        self,
        interpolation: Interpolation,
        start_time: TimeValue,
        duration: DurationValue,
        now: Optional[TimeValue] = None,
    ) -> DrawContext:
        """
        Start an animation from the current position.

        Add the transformations that lead to the destination after this
        call, then call animation_stop() before laying out anything that
        should not be animated. To animate from the destination back to the
        current position, reverse the interpolation.

        `now` defaults to the session clock.
        """
        now_s = self._shared.clock() if now is None else _seconds(now)
        factor = float(interpolation.calculate(now_s, _seconds(start_time), _seconds(duration)))
        logger.debug(f"animation_start {interpolation!r}: factor={factor:.4f}")

        return self._derive(
            self._matrix,
            self._width,
            self._height,
            animation=(self.matrix(), factor),
        )

    def animation_stop(self) -> DrawContext:
        """Freeze the blended transform. Later layout calls apply directly."""
        return self._derive(self.matrix(), self._width, self._height, animation=None)

    # -------------------------------------------------------------------------
    # Debug
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        anim = f", animation={self._animation[1]:.3f}" if self._animation else ""
        return f"DrawContext({self._width:g}x{self._height:g}, {self._matrix!r}{anim})"


# =============================================================================
# Splits
# =============================================================================

class SplitIterator:
    """
    Lazily yields the chunks of a split context, in weight order.

    Single pass: once exhausted it stays exhausted.
    """

    def __init__(self, parent: DrawContext, weights: Iterable[float], vertical: bool):
        weights: List[float] = [float(w) for w in weights]
        assert len(weights) != 0, "cannot split a context into zero chunks"

        total = sum(weights)
        assert total > 0, f"split weights must have a positive sum, got {total}"

        self._parent = parent
        self._weights = iter(weights)
        self._remaining = len(weights)
        self._total_inverse = 1.0 / total
        self._offset = 0.0
        self._vertical = vertical

    def __iter__(self) -> SplitIterator:
        return self

    def __len__(self) -> int:
        return self._remaining

    def __next__(self) -> DrawContext:
        weight = next(self._weights)
        self._remaining -= 1

        parent = self._parent
        fraction = weight * self._total_inverse
        center = (self._offset + weight * 0.5) * self._total_inverse
        self._offset += weight

        if self._vertical:
            matrix = (AffineTransform.translate(0.0, 1.0 - 2.0 * center)
                      @ AffineTransform.scale_wh(1.0, fraction))
            width, height = parent.width, parent.height * fraction
        else:
            matrix = (AffineTransform.translate(2.0 * center - 1.0, 0.0)
                      @ AffineTransform.scale_wh(fraction, 1.0))
            width, height = parent.width * fraction, parent.height

        return parent._derive(parent.transform @ matrix, width, height)
