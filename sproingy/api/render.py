"""Renderer contracts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from sproingy.api.window import WindowResizeEvent
from sproingy.plot.interval import Interval

if TYPE_CHECKING:
    from sproingy.rendering.dots import DotsLayer


@dataclass(frozen=True, slots=True)
class ViewSnapshot:
    """Visible data ranges and surface geometry captured once per frame."""

    x_bounds: Interval
    y_bounds: Interval
    viewport_px: tuple[int, int]
    pixel_ratio: float = 1.0


class RenderAPI(Protocol):
    """Frame renderer driven by the window frontend."""

    def render(self, view: ViewSnapshot, layers: Sequence["DotsLayer"]) -> None:
        """Draw one frame."""

    def reconfigure(self, event: WindowResizeEvent) -> None:
        """Adapt the surface to a new window size."""

    def close(self) -> None:
        """Release GPU resources."""
