from datetime import datetime, timedelta

import pytest
from frameui.core.interpolation import EaseOut, Linear
from frameui.core.math2d import AffineTransform
from frameui.ui.layout import Alignment


def _half_size(ctx, start_time):
    return (ctx.animation_start(Linear(), start_time, 1.0)
            .rescale(0.5, 0.5, Alignment.center()))


def test_factor_zero_stays_at_source(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    anim = _half_size(ctx, start_time=100.0)
    assert anim.is_animating
    assert anim.matrix().is_close(AffineTransform.identity())
    assert anim.transform.is_close(AffineTransform.scale(0.5))


def test_factor_one_reaches_target(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    anim = _half_size(ctx, start_time=90.0)
    assert anim.matrix().is_close(AffineTransform.scale(0.5))


def test_factor_half_blends_per_component(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    anim = _half_size(ctx, start_time=99.5)
    assert anim.matrix().is_close(AffineTransform.scale(0.75))


def test_stop_freezes_blended_transform(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    stopped = _half_size(ctx, start_time=99.5).animation_stop()
    assert not stopped.is_animating
    assert stopped.transform.is_close(AffineTransform.scale(0.75))

    # Later layout applies directly on top of the frozen transform
    after = stopped.rescale(0.5, 0.5, Alignment.center())
    assert after.matrix().is_close(AffineTransform.scale(0.375))


def test_animation_source_is_effective_transform(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    inner = ctx.rescale(0.5, 0.5, Alignment.top_right())
    anim = inner.animation_start(EaseOut(), 100.0, 1.0).rescale(0.5, 0.5, Alignment.center())
    assert anim.matrix().is_close(inner.matrix())


def test_children_of_animating_context_keep_animating(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    anim = ctx.animation_start(Linear(), 99.5, 1.0)
    top, bottom = anim.vertical_split(2)
    assert top.is_animating and bottom.is_animating

    # Halfway between the full viewport and the top half
    left, bottom_edge = top.matrix().apply_point((-1.0, -1.0))
    assert left == pytest.approx(-1.0)
    assert bottom_edge == pytest.approx(-0.5)


def test_hit_testing_follows_blended_transform(session, backend):
    ctx = session.begin_frame(800, 600, backend, cursor=(0.7, 0.0))
    anim = _half_size(ctx, start_time=99.5)
    assert anim.is_cursor_hovering()
    assert not anim.animation_stop().rescale(0.5, 0.5, Alignment.center()).is_cursor_hovering()


def test_datetime_and_timedelta(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    anim = (ctx.animation_start(Linear(), datetime.fromtimestamp(99.5), timedelta(seconds=1),
                                now=datetime.fromtimestamp(100.0))
            .rescale(0.5, 0.5, Alignment.center()))
    assert anim.matrix().is_close(AffineTransform.scale(0.75))


def test_reversed_animation_plays_back(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    anim = (ctx.animation_start(Linear().reverse(), 99.75, 1.0)
            .rescale(0.5, 0.5, Alignment.center()))
    assert anim.matrix().is_close(AffineTransform.scale(0.625))


def test_zero_duration_jumps_to_target(session, backend):
    ctx = session.begin_frame(800, 600, backend)
    anim = ctx.animation_start(Linear(), 100.0, 0.0).rescale(0.5, 0.5, Alignment.center())
    assert anim.matrix().is_close(AffineTransform.scale(0.5))
