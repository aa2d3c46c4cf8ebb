"""Play-field extent and lattice geometry."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Bounds:
    """Immutable play-field rectangle spanning ``(0, width) × (0, height)``.

    The interval is open: a point lying exactly on an edge is outside.
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Bounds dimensions must be positive.")

    def contains(self, point: tuple[float, float]) -> bool:
        """Check whether a point lies strictly inside the field."""
        x, y = point
        return 0 < x < self.width and 0 < y < self.height

    def lattice_xs(self, radius: float) -> np.ndarray:
        """Return lattice x-coordinates strictly inside the field."""
        return _lattice(self.width, radius)

    def lattice_ys(self, radius: float) -> np.ndarray:
        """Return lattice y-coordinates strictly inside the field."""
        return _lattice(self.height, radius)

    def center(self, radius: float) -> tuple[float, float]:
        """Return the lattice slot closest to the middle of the field."""
        xs = self.lattice_xs(radius)
        ys = self.lattice_ys(radius)
        if xs.size == 0 or ys.size == 0:
            raise ValueError("Bounds are too small to hold a single cell.")
        return float(xs[xs.size // 2]), float(ys[ys.size // 2])

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}


def _lattice(extent: float, radius: float) -> np.ndarray:
    if radius <= 0:
        raise ValueError("Cell radius must be positive.")
    coords = np.arange(radius, extent, 2 * radius, dtype=np.float64)
    # Float steps can land on the far edge; the open interval excludes it.
    return coords[(coords > 0) & (coords < extent)]


def is_on_lattice(value: float, radius: float) -> bool:
    """Check whether a coordinate sits on the ``r + k * 2r`` lattice."""
    steps = (value - radius) / (2 * radius)
    return round(steps) >= 0 and bool(np.isclose(steps, round(steps)))
