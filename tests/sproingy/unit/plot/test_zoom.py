from __future__ import annotations

import pytest

from sproingy.plot.zoom import wheel_zoom_factor


def test_one_notch_away_zooms_in_by_step() -> None:
    assert wheel_zoom_factor(-100.0, 1.1) == pytest.approx(1.1)


def test_one_notch_toward_zooms_out_by_step() -> None:
    assert wheel_zoom_factor(100.0, 1.1) == pytest.approx(1.0 / 1.1)


def test_factor_compounds_across_notches() -> None:
    assert wheel_zoom_factor(-200.0, 2.0) == pytest.approx(4.0)
    assert wheel_zoom_factor(-50.0, 4.0) == pytest.approx(2.0)


def test_zero_delta_is_identity() -> None:
    assert wheel_zoom_factor(0.0, 1.1) == 1.0
