import pytest
from frameui.core.interpolation import (
    AlternateRepeated, EaseOut, Linear, Repeated, Reversed, progress_ratio,
)


def test_linear():
    f = Linear()
    assert f.ease(-0.5) == 0.0
    assert f.ease(0.0) == 0.0
    assert f.ease(0.5) == 0.5
    assert f.ease(1.0) == 1.0
    assert f.ease(1.5) == 1.0


def test_ease_out():
    f = EaseOut(10.0)
    assert f.ease(0.0) == 0.0
    assert f.ease(-1.0) == 0.0
    assert f.ease(float("nan")) == 0.0

    # Monotonic, approaching 1
    values = [f.ease(r / 10.0) for r in range(0, 51)]
    assert all(b > a for a, b in zip(values, values[1:]) if b < 1.0)
    assert values[-1] == pytest.approx(1.0)
    assert f.ease(1.0) > 0.9999


def test_repeated():
    f = Repeated(Linear())
    assert f.ease(1.25) == pytest.approx(f.ease(0.25))
    assert f.ease(-0.25) == pytest.approx(f.ease(0.75))
    assert f.ease(3.5) == pytest.approx(0.5)

    # Whole periods wrap to the start, before the origin too
    assert f.ease(-1.0) == 0.0
    assert f.ease(2.0) == 0.0


def test_alternate_repeated():
    f = AlternateRepeated(Linear())
    assert f.ease(0.25) == pytest.approx(0.25)
    assert f.ease(1.25) == pytest.approx(0.75)
    assert f.ease(2.25) == pytest.approx(0.25)
    assert f.ease(-0.25) == pytest.approx(0.25)


def test_reversed():
    f = Reversed(Linear())
    assert f.ease(0.0) == 1.0
    assert f.ease(0.25) == 0.75
    assert f.ease(1.0) == 0.0


def test_combinator_methods():
    assert isinstance(Linear().reverse(), Reversed)
    assert isinstance(Linear().repeat(), Repeated)
    assert isinstance(EaseOut().alternate_repeat(), AlternateRepeated)
    assert repr(EaseOut(2.0).reverse()) == "Reversed(EaseOut(factor=2.0))"


def test_calculate_from_times():
    f = Linear()
    assert f.calculate(now=11.0, start=10.0, duration=2.0) == 0.5
    assert f.calculate(now=9.0, start=10.0, duration=2.0) == 0.0
    assert f.calculate(now=15.0, start=10.0, duration=2.0) == 1.0


def test_far_from_epoch_keeps_precision():
    # Around 2026 in epoch seconds; a float32 would lose the millisecond
    start = 1_790_000_000.0
    assert Linear().calculate(start + 0.001, start, 0.002) == pytest.approx(0.5, abs=1e-3)


def test_zero_duration_finishes_instantly():
    assert progress_ratio(5.0, 5.0, 0.0) == 1.0
    assert progress_ratio(6.0, 5.0, 0.0) == 1.0
    assert progress_ratio(4.0, 5.0, 0.0) == 0.0
    assert Linear().calculate(5.0, 5.0, -1.0) == 1.0


if __name__ == "__main__":
    test_linear()
    test_ease_out()
    test_repeated()
    test_alternate_repeated()
    test_reversed()
    test_combinator_methods()
    test_calculate_from_times()
    test_far_from_epoch_keeps_precision()
    test_zero_duration_finishes_instantly()
