"""Pointer interaction capability contracts."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

PixelPoint = tuple[float, float]


@runtime_checkable
class Dragger(Protocol):
    """Object that can take over one press/drag/release gesture.

    Positions are device pixels. ``can_handle_press`` is a side-effect free
    hit-test; the dispatcher calls ``handle_press`` only when it returns True.
    """

    def can_handle_press(self, mouse_px: PixelPoint) -> bool:
        """Return whether a press at this position belongs to this dragger."""

    def handle_press(self, mouse_px: PixelPoint) -> None:
        """Start a gesture at this position."""

    def handle_drag(self, mouse_px: PixelPoint) -> None:
        """Update the gesture for a new pointer position."""

    def handle_release(self, mouse_px: PixelPoint) -> None:
        """Finish the gesture at this position."""


@runtime_checkable
class Zoomer(Protocol):
    """Object that scales its view around a pointer position."""

    def can_handle_press(self, mouse_px: PixelPoint) -> bool:
        """Hit-test shared with :class:`Dragger`."""

    def handle_zoom(self, mouse_px: PixelPoint, factor: float) -> None:
        """Multiply the scale by ``factor`` about ``mouse_px``."""
