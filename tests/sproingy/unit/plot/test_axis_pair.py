from __future__ import annotations

import pytest

from sproingy.api.dragger import Dragger, Zoomer
from sproingy.plot.axis_pair import AxisPair
from sproingy.plot.interval import Interval


def _state(pair: AxisPair) -> tuple[float, ...]:
    return tuple(value for axis in pair for value in (axis.tie_frac, axis.tie_coord, axis.scale))


def test_pair_satisfies_dragger_and_zoomer_protocols() -> None:
    pair = AxisPair.with_size_px(480, 360)
    assert isinstance(pair, Dragger)
    assert isinstance(pair, Zoomer)


def test_initial_bounds_for_480_by_360() -> None:
    pair = AxisPair.with_size_px(480, 360)
    assert pair.bounds() == (Interval(-5.0, 10.0), Interval(-5.0, 10.0))
    assert list(pair) == [pair.x, pair.y]


def test_hit_test_accepts_inside_and_edges() -> None:
    pair = AxisPair.with_size_px(480, 360)
    assert pair.can_handle_press((240, 180)) is True
    assert pair.can_handle_press((0, 0)) is True
    assert pair.can_handle_press((480, 360)) is True


def test_hit_test_rejects_outside_on_either_axis() -> None:
    pair = AxisPair.with_size_px(480, 360)
    assert pair.can_handle_press((500, 180)) is False
    assert pair.can_handle_press((240, -1)) is False
    assert pair.can_handle_press((-0.5, 361)) is False


def test_hit_test_has_no_side_effects() -> None:
    pair = AxisPair.with_size_px(480, 360)
    before = _state(pair)
    pair.can_handle_press((240, 180))
    pair.can_handle_press((900, 900))
    assert _state(pair) == before
    assert (pair.x.grab_coord, pair.y.grab_coord) == (0.0, 0.0)


def test_press_records_grab_coords_only() -> None:
    pair = AxisPair.with_size_px(480, 360)
    before = _state(pair)
    pair.handle_press((120, 90))
    assert pair.x.grab_coord == pytest.approx(-2.5)
    assert pair.y.grab_coord == pytest.approx(-2.5)
    assert _state(pair) == before

    pair.handle_press((120, 90))
    assert pair.x.grab_coord == pytest.approx(-2.5)


def test_drag_keeps_grabbed_point_under_pointer() -> None:
    pair = AxisPair.with_size_px(480, 360)
    start = (100.0, 50.0)
    end = (300.0, 200.0)
    grabbed = (pair.x.px_to_coord(start[0]), pair.y.px_to_coord(start[1]))

    pair.handle_press(start)
    pair.handle_drag(end)

    assert pair.x.px_to_coord(end[0]) == pytest.approx(grabbed[0])
    assert pair.y.px_to_coord(end[1]) == pytest.approx(grabbed[1])
    assert pair.x.scale == 48.0
    assert pair.y.scale == 36.0


def test_repeated_drag_to_same_position_is_idempotent() -> None:
    pair = AxisPair.with_size_px(480, 360)
    pair.handle_press((240, 180))
    pair.handle_drag((10, 20))
    once = _state(pair)
    pair.handle_drag((10, 20))
    assert _state(pair) == once


def test_release_applies_a_final_drag() -> None:
    dragged = AxisPair.with_size_px(480, 360)
    released = AxisPair.with_size_px(480, 360)
    for pair in (dragged, released):
        pair.handle_press((240, 180))
    dragged.handle_drag((0, 0))
    released.handle_release((0, 0))
    assert _state(released) == _state(dragged)


def test_press_center_drag_to_origin_pans_both_axes() -> None:
    pair = AxisPair.with_size_px(480, 360)
    pair.handle_press((240, 180))
    pair.handle_drag((0, 0))
    x_bounds, y_bounds = pair.bounds()
    assert x_bounds.min == 0.0
    assert y_bounds.min == 0.0


def test_drag_outside_viewport_keeps_panning() -> None:
    pair = AxisPair.with_size_px(480, 360)
    pair.handle_press((240, 180))
    pair.handle_drag((-480, 180))
    assert pair.x.bounds().min == pytest.approx(10.0)
    assert pair.y.bounds().min == pytest.approx(-5.0)


def test_zoom_keeps_point_under_pointer() -> None:
    pair = AxisPair.with_size_px(480, 360)
    mouse = (120.0, 90.0)
    before = (pair.x.px_to_coord(mouse[0]), pair.y.px_to_coord(mouse[1]))

    pair.handle_zoom(mouse, 2.0)

    assert pair.x.scale == 96.0
    assert pair.y.scale == 72.0
    assert pair.x.px_to_coord(mouse[0]) == pytest.approx(before[0])
    assert pair.y.px_to_coord(mouse[1]) == pytest.approx(before[1])
    assert pair.x.bounds().span == pytest.approx(5.0)


def test_resize_keeps_scale_and_tie() -> None:
    pair = AxisPair.with_size_px(480, 360)
    pair.resize_px(960, 360)
    assert pair.x.viewport_px == Interval(0.0, 960)
    assert pair.x.scale == 48.0
    assert pair.x.bounds() == Interval(-10.0, 20.0)
    assert pair.y.bounds() == Interval(-5.0, 10.0)


def test_nan_pointer_propagates_without_raising() -> None:
    pair = AxisPair.with_size_px(480, 360)
    pair.handle_press((240, 180))
    pair.handle_drag((float("nan"), 180))
    x_bounds = pair.x.bounds()
    assert x_bounds.min != x_bounds.min
