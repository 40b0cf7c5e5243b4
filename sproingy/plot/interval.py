"""One-dimensional numeric ranges used for pixel and data extents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Interval:
    """Range described by an inclusive lower bound and a signed span.

    The upper bound ``min + span`` is exclusive. A negative span is allowed and
    describes an inverted range. A zero span is degenerate: conversions divide
    by it, so callers must avoid constructing one.
    """

    min: float
    span: float

    @classmethod
    def with_min_max(cls, min: float, max: float) -> Interval:
        return cls(min, max - min)

    @property
    def max(self) -> float:
        return self.min + self.span

    def value_to_frac(self, value: float) -> float:
        """Map a value to its fractional position; 0 at ``min``, 1 at ``max``."""
        return (value - self.min) / self.span

    def frac_to_value(self, frac: float) -> float:
        """Inverse of :meth:`value_to_frac`."""
        return self.min + frac * self.span
