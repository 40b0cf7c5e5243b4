"""Owner of the plot view state shared by interaction and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from sproingy.api.dragger import Dragger
from sproingy.api.render import ViewSnapshot
from sproingy.plot.axis import DEFAULT_TIE_FRAC, DEFAULT_ZOOM_DIVISOR
from sproingy.plot.axis_pair import AxisPair
from sproingy.plot.interval import Interval
from sproingy.rendering.dots import DotsLayer


@dataclass(slots=True)
class PlotSession:
    """Axes, drawable layers and the draggers offered each press.

    The drag dispatcher is the only writer of ``axes``; the renderer reads a
    :meth:`view_snapshot` taken once per frame.
    """

    axes: AxisPair
    viewport_px: tuple[int, int]
    layers: list[DotsLayer] = field(default_factory=list)
    draggers: list[Dragger] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        width_px: int,
        height_px: int,
        *,
        layers: list[DotsLayer] | None = None,
        zoom_divisor: float = DEFAULT_ZOOM_DIVISOR,
        tie_frac: float = DEFAULT_TIE_FRAC,
    ) -> PlotSession:
        axes = AxisPair.with_size_px(
            float(width_px),
            float(height_px),
            zoom_divisor=zoom_divisor,
            tie_frac=tie_frac,
        )
        return cls(
            axes=axes,
            viewport_px=(int(width_px), int(height_px)),
            layers=list(layers or ()),
            draggers=[axes],
        )

    def view_bounds(self) -> tuple[Interval, Interval]:
        return self.axes.bounds()

    def resize(self, width_px: int, height_px: int) -> None:
        """Track a new surface size, keeping scale and the anchored coordinates."""
        self.axes.resize_px(float(width_px), float(height_px))
        self.viewport_px = (int(width_px), int(height_px))

    def view_snapshot(self, *, pixel_ratio: float = 1.0) -> ViewSnapshot:
        x_bounds, y_bounds = self.view_bounds()
        return ViewSnapshot(
            x_bounds=x_bounds,
            y_bounds=y_bounds,
            viewport_px=self.viewport_px,
            pixel_ratio=float(pixel_ratio),
        )
