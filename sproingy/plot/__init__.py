"""Axis coordinate model and pan/zoom interaction."""

from sproingy.plot.axis import DEFAULT_TIE_FRAC, DEFAULT_ZOOM_DIVISOR, Axis
from sproingy.plot.axis_pair import AxisPair
from sproingy.plot.interval import Interval
from sproingy.plot.zoom import wheel_zoom_factor

__all__ = [
    "DEFAULT_TIE_FRAC",
    "DEFAULT_ZOOM_DIVISOR",
    "Axis",
    "AxisPair",
    "Interval",
    "wheel_zoom_factor",
]
