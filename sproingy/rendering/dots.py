"""Point data drawn as round dots."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import ArrayLike, NDArray

RGBA = tuple[float, float, float, float]


def as_coords(values: ArrayLike) -> NDArray[np.float32]:
    """Coerce ``values`` into a contiguous float32 ``(N, 2)`` array."""
    coords = np.ascontiguousarray(values, dtype=np.float32)
    if coords.size == 0:
        return np.zeros((0, 2), dtype=np.float32)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"coords must have shape (N, 2), got {coords.shape}")
    return coords


@dataclass(slots=True)
class DotsLayer:
    """Dots in data coordinates with a shared size and color.

    ``coords_modified`` is raised whenever the coordinates are replaced; the
    renderer clears it after uploading them.
    """

    coords: NDArray[np.float32] = field(default_factory=lambda: np.zeros((0, 2), dtype=np.float32))
    size_lpx: float = 15.0
    rgba: RGBA = (0.85, 0.35, 0.1, 1.0)
    coords_modified: bool = True

    def __post_init__(self) -> None:
        self.coords = as_coords(self.coords)

    def __len__(self) -> int:
        return int(self.coords.shape[0])

    def set_coords(self, values: ArrayLike) -> None:
        self.coords = as_coords(values)
        self.coords_modified = True


def demo_dots(count: int, seed: int = 0) -> NDArray[np.float32]:
    """Return a seeded noisy spiral that fits the default ~10 unit view."""
    if count <= 0:
        return np.zeros((0, 2), dtype=np.float32)
    rng = np.random.default_rng(seed)
    t = np.linspace(0.0, 4.0 * np.pi, int(count))
    radius = 0.35 * t
    noise = rng.normal(scale=0.12, size=(int(count), 2))
    coords = np.column_stack((radius * np.cos(t), radius * np.sin(t))) + noise
    return coords.astype(np.float32)
