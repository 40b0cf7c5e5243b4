"""Wheel-to-scale conversion."""

from __future__ import annotations

WHEEL_NOTCH_UNITS = 100.0


def wheel_zoom_factor(dy: float, step: float) -> float:
    """Return the scale multiplier for a wheel delta.

    One notch away from the user (``dy == -100``) zooms in by ``step``. Only the
    vertical delta zooms; horizontal wheel motion is not used.
    """
    return float(step) ** (-float(dy) / WHEEL_NOTCH_UNITS)
