"""Window and surface contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from sproingy.api.input_events import KeyEvent, PointerEvent, WheelEvent

InputEvent = PointerEvent | KeyEvent | WheelEvent


@dataclass(frozen=True, slots=True)
class SurfaceHandle:
    """Opaque renderer-attachable surface handle."""

    surface_id: str
    backend: str
    provider: object | None = None


@dataclass(frozen=True, slots=True)
class WindowResizeEvent:
    """Normalized resize/DPI event in logical and physical units."""

    logical_width: float
    logical_height: float
    physical_width: int
    physical_height: int
    dpi_scale: float


@dataclass(frozen=True, slots=True)
class WindowCloseEvent:
    """Normalized close-request event."""

    requested: bool = True


WindowEvent = WindowResizeEvent | WindowCloseEvent


class WindowPort(Protocol):
    """Viewer-facing window/event-loop ownership contract."""

    def create_surface(self) -> SurfaceHandle:
        """Create a surface handle used by the renderer backend."""

    def poll_events(self) -> tuple[WindowEvent, ...]:
        """Poll and return normalized window events."""

    def poll_input_events(self) -> tuple[InputEvent, ...]:
        """Poll and return normalized raw input events in arrival order."""

    def pixel_ratio(self) -> float:
        """Return the device pixels per logical pixel of the surface."""

    def set_draw_handler(self, handler: Callable[[], None]) -> None:
        """Register the per-frame draw callback."""

    def request_draw(self) -> None:
        """Schedule a redraw."""

    def run_loop(self) -> None:
        """Run the OS/backend event loop."""

    def stop_loop(self) -> None:
        """Stop the OS/backend event loop when supported."""

    def close(self) -> None:
        """Close window and release backend resources."""
