import math

import pytest
from frameui.core.config import UiConfig
from frameui.core.math2d import AffineTransform
from frameui.ui.layout import Alignment
from frameui.ui.session import UiSession


def test_center_is_inside_full_viewport(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=(0.0, 0.0))
    assert ctx.is_cursor_hovering()
    assert ctx.cursor_hover_coordinates() == (0.0, 0.0)


def test_far_point_is_outside(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=(2.0, 2.0))
    assert not ctx.is_cursor_hovering()
    assert ctx.cursor_hover_coordinates() is None


def test_no_cursor_never_hovers(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=None)
    assert not ctx.is_cursor_hovering()
    assert ctx.cursor_hover_coordinates() is None


def test_edges_are_inside_consistently(session, backend):
    for cursor in [(1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0), (1.0, 1.0)]:
        ctx = session.begin_frame(800, 600, backend, cursor=cursor)
        results = {ctx.is_cursor_hovering() for _ in range(5)}
        assert results == {True}
        assert ctx.cursor_hover_coordinates() is not None


def test_nan_cursor_is_outside(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=(float("nan"), 0.0))
    assert not ctx.is_cursor_hovering()
    assert ctx.cursor_hover_coordinates() is None


def test_hover_in_sub_context(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=(0.5, 0.5))
    top_right = ctx.rescale(0.5, 0.5, Alignment.top_right())
    bottom_left = ctx.rescale(0.5, 0.5, Alignment.bottom_left())

    assert top_right.is_cursor_hovering()
    assert not bottom_left.is_cursor_hovering()
    assert top_right.cursor_hover_coordinates() == (pytest.approx(0.0), pytest.approx(0.0))


def test_hover_coordinates_are_local(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=(0.75, 0.0))
    right = ctx.horizontal_split(2)
    _, right_half = right
    x, y = right_half.cursor_hover_coordinates()
    assert x == pytest.approx(0.5)
    assert y == pytest.approx(0.0)


def test_hit_test_agrees_with_coordinates_under_rotation(session, backend):
    cursors = [(0.0, 0.0), (0.6, 0.6), (0.7, 0.0), (0.0, 0.75), (-0.5, 0.2), (0.9, -0.9)]
    for cursor in cursors:
        ctx = session.begin_frame(800, 800, backend, cursor=cursor)
        rotated = ctx.transformed(AffineTransform.rotate(math.pi / 4) @ AffineTransform.scale(0.5))
        assert rotated.is_cursor_hovering() == (rotated.cursor_hover_coordinates() is not None)

    # The rotated square is a diamond reaching 0.707 along the axes
    ctx = session.begin_frame(800, 800, backend, cursor=(0.7, 0.0))
    rotated = ctx.transformed(AffineTransform.rotate(math.pi / 4) @ AffineTransform.scale(0.5))
    assert rotated.is_cursor_hovering()

    ctx = session.begin_frame(800, 800, backend, cursor=(0.5, 0.5))
    rotated = ctx.transformed(AffineTransform.rotate(math.pi / 4) @ AffineTransform.scale(0.5))
    assert not rotated.is_cursor_hovering()


def test_singular_context_has_no_coordinates(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=(0.0, 0.0))
    collapsed = ctx.rescale(0.0, 0.5, Alignment.center())
    assert collapsed.cursor_hover_coordinates() is None


def test_hover_epsilon_widens_edges(backend):
    session = UiSession(UiConfig(hover_epsilon=0.05))
    ctx = session.begin_frame(800, 600, backend, cursor=(0.02, 0.0))
    left, _ = ctx.horizontal_split(2)
    assert left.is_cursor_hovering()

    ctx = session.begin_frame(800, 600, backend, cursor=(0.1, 0.0))
    left, _ = ctx.horizontal_split(2)
    assert not left.is_cursor_hovering()


def test_negative_hover_epsilon_is_rejected():
    with pytest.raises(ValueError):
        UiConfig(hover_epsilon=-0.1)


def test_epsilon_does_not_widen_hover_coordinates(backend):
    session = UiSession(UiConfig(hover_epsilon=0.05))
    ctx = session.begin_frame(800, 600, backend, cursor=(0.02, 0.0))
    left, _ = ctx.horizontal_split(2)
    assert left.is_cursor_hovering()
    assert left.cursor_hover_coordinates() is None


def test_transformed_composes_and_keeps_size(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    moved = ctx.margin(0.1, 0.1, 0.1, 0.1).transformed(AffineTransform.translate(0.5, 0.0))
    assert moved.matrix().apply_point((0.0, 0.0)) == (pytest.approx(0.4), pytest.approx(0.0))
    assert (moved.width, moved.height) == (pytest.approx(640.0), pytest.approx(480.0))
    assert ctx.transformed(AffineTransform.identity(), 10.0, 20.0).height == 20.0
