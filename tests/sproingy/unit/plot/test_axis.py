from __future__ import annotations

import pytest

from sproingy.plot.axis import Axis
from sproingy.plot.interval import Interval


def test_with_size_px_starts_centered_on_zero() -> None:
    axis = Axis.with_size_px(480)
    assert axis.viewport_px == Interval(0.0, 480)
    assert axis.scale == 48.0
    assert axis.tie_frac == 0.5
    assert axis.tie_coord == 0.0
    assert axis.grab_coord == 0.0
    assert axis.bounds() == Interval(-5.0, 10.0)


def test_default_span_is_ten_units_for_any_size() -> None:
    for size_px in (360, 100, 1920):
        assert Axis.with_size_px(size_px).bounds().span == pytest.approx(10.0)


def test_zoom_divisor_and_tie_frac_options() -> None:
    axis = Axis.with_size_px(100, zoom_divisor=4.0)
    assert axis.scale == 25.0
    assert axis.bounds() == Interval(-2.0, 4.0)

    left_tied = Axis.with_size_px(480, tie_frac=0.0)
    assert left_tied.bounds() == Interval(0.0, 10.0)


def test_px_to_frac_and_coord() -> None:
    axis = Axis.with_size_px(480)
    assert axis.px_to_frac(240) == 0.5
    assert axis.px_to_frac(-48) == pytest.approx(-0.1)
    assert axis.px_to_coord(0) == -5.0
    assert axis.px_to_coord(240) == 0.0
    assert axis.px_to_coord(480) == 5.0


def test_set_places_coord_at_frac() -> None:
    cases = (
        (0.25, 3.0, 96.0),
        (0.0, -12.5, 48.0),
        (1.0, 7.0, 2.0),
        (1.5, 0.1, 480.0),
        (-0.2, 1e4, 0.5),
    )
    for frac, coord, scale in cases:
        axis = Axis.with_size_px(480)
        axis.set(frac, coord, scale)
        assert axis.scale == scale
        assert axis.bounds().frac_to_value(frac) == pytest.approx(coord)


def test_set_keeps_tie_frac() -> None:
    axis = Axis.with_size_px(480, tie_frac=0.3)
    axis.set(0.9, 4.0, 12.0)
    assert axis.tie_frac == 0.3


def test_set_worked_example() -> None:
    axis = Axis.with_size_px(480)
    axis.set(0.25, 3.0, 96.0)
    assert axis.tie_coord == pytest.approx(4.25)
    assert axis.bounds().min == pytest.approx(1.75)
    assert axis.bounds().span == pytest.approx(5.0)


def test_negative_scale_inverts_bounds_without_raising() -> None:
    axis = Axis.with_size_px(480)
    axis.set(0.5, 0.0, -48.0)
    assert axis.bounds() == Interval(5.0, -10.0)


def test_grab_at_center_and_drag_to_left_edge() -> None:
    axis = Axis.with_size_px(480)
    axis.grab_coord = axis.px_to_coord(240)
    axis.set(axis.px_to_frac(0), axis.grab_coord, axis.scale)
    assert axis.bounds().min == 0.0
    assert axis.bounds().span == 10.0


def test_repr_names_the_state() -> None:
    text = repr(Axis.with_size_px(480))
    assert text.startswith("Axis(")
    assert "scale=48.0" in text
