"""Per-dimension view state mapping viewport pixels to data coordinates."""

from __future__ import annotations

from sproingy.plot.interval import Interval

DEFAULT_ZOOM_DIVISOR = 10.0
DEFAULT_TIE_FRAC = 0.5


class Axis:
    """Movable, scalable data window over a fixed pixel viewport.

    The visible data range is not stored. It is derived from the anchor pair
    (``tie_frac``, ``tie_coord``) and ``scale`` in pixels per data unit, see
    :meth:`bounds`. Inputs are not validated: a non-positive scale yields a
    degenerate or inverted range.
    """

    __slots__ = ("viewport_px", "tie_frac", "tie_coord", "scale", "grab_coord")

    def __init__(
        self,
        viewport_px: Interval,
        *,
        zoom_divisor: float = DEFAULT_ZOOM_DIVISOR,
        tie_frac: float = DEFAULT_TIE_FRAC,
    ) -> None:
        self.viewport_px = viewport_px
        self.tie_frac = float(tie_frac)
        self.tie_coord = 0.0
        self.scale = viewport_px.span / zoom_divisor
        self.grab_coord = 0.0

    @classmethod
    def with_size_px(
        cls,
        size_px: float,
        *,
        zoom_divisor: float = DEFAULT_ZOOM_DIVISOR,
        tie_frac: float = DEFAULT_TIE_FRAC,
    ) -> Axis:
        return cls(Interval(0.0, size_px), zoom_divisor=zoom_divisor, tie_frac=tie_frac)

    def bounds(self) -> Interval:
        """Return the data range currently visible across the viewport."""
        span = self.viewport_px.span / self.scale
        return Interval(self.tie_coord - self.tie_frac * span, span)

    def px_to_frac(self, px: float) -> float:
        return self.viewport_px.value_to_frac(px)

    def px_to_coord(self, px: float) -> float:
        return self.bounds().frac_to_value(self.px_to_frac(px))

    def set(self, frac: float, coord: float, scale: float) -> None:
        """Re-anchor so that ``coord`` sits at viewport fraction ``frac`` at ``scale``.

        ``tie_frac`` is left unchanged; only ``tie_coord`` and ``scale`` move.
        """
        span = self.viewport_px.span / scale
        self.tie_coord = coord + (self.tie_frac - frac) * span
        self.scale = scale

    def __repr__(self) -> str:
        return (
            f"Axis(viewport_px={self.viewport_px!r}, tie_frac={self.tie_frac!r}, "
            f"tie_coord={self.tie_coord!r}, scale={self.scale!r})"
        )
