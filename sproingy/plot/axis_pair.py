"""Horizontal and vertical axes exposed as one 2D draggable."""

from __future__ import annotations

from collections.abc import Iterator

from sproingy.plot.axis import Axis
from sproingy.plot.interval import Interval


class AxisPair:
    """Pans both axes together while the pointer drags.

    The pair keeps no gesture state of its own; the anchor for a drag lives in
    each axis' ``grab_coord``.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: Axis, y: Axis) -> None:
        self.x = x
        self.y = y

    @classmethod
    def with_size_px(cls, width_px: float, height_px: float, **axis_options: float) -> AxisPair:
        return cls(
            Axis.with_size_px(width_px, **axis_options),
            Axis.with_size_px(height_px, **axis_options),
        )

    def __iter__(self) -> Iterator[Axis]:
        yield self.x
        yield self.y

    def bounds(self) -> tuple[Interval, Interval]:
        return (self.x.bounds(), self.y.bounds())

    def resize_px(self, width_px: float, height_px: float) -> None:
        """Swap in new pixel viewports; the visible span grows or shrinks with them."""
        self.x.viewport_px = Interval(0.0, width_px)
        self.y.viewport_px = Interval(0.0, height_px)

    def can_handle_press(self, mouse_px: tuple[float, float]) -> bool:
        for axis, px in zip(self, mouse_px):
            mouse_frac = axis.px_to_frac(px)
            if mouse_frac < 0.0 or mouse_frac > 1.0:
                return False
        return True

    def handle_press(self, mouse_px: tuple[float, float]) -> None:
        for axis, px in zip(self, mouse_px):
            axis.grab_coord = axis.px_to_coord(px)

    def handle_drag(self, mouse_px: tuple[float, float]) -> None:
        for axis, px in zip(self, mouse_px):
            axis.set(axis.px_to_frac(px), axis.grab_coord, axis.scale)

    def handle_release(self, mouse_px: tuple[float, float]) -> None:
        self.handle_drag(mouse_px)

    def handle_zoom(self, mouse_px: tuple[float, float], factor: float) -> None:
        """Scale both axes by ``factor`` keeping the point under the pointer fixed."""
        for axis, px in zip(self, mouse_px):
            axis.set(axis.px_to_frac(px), axis.px_to_coord(px), axis.scale * factor)

    def __repr__(self) -> str:
        return f"AxisPair(x={self.x!r}, y={self.y!r})"
