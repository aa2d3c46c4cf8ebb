"""Food placement and consumption."""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.bounds import is_on_lattice

if TYPE_CHECKING:
    from grid_snake.bounds import Bounds

logger = logging.getLogger(__name__)


class PlacementStrategy:
    """Chooses a lattice-aligned point strictly inside the bounds."""

    def place(self, bounds: Bounds, radius: float) -> tuple[float, float]:
        raise NotImplementedError


class RandomPlacement(PlacementStrategy):
    """Uniform choice over every valid grid slot.

    Uses a NumPy RNG so seeded sessions place food reproducibly.
    """

    def __init__(self, rng: np.random.Generator | None = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, bounds: Bounds, radius: float) -> tuple[float, float]:
        xs = bounds.lattice_xs(radius)
        ys = bounds.lattice_ys(radius)
        if xs.size == 0 or ys.size == 0:
            raise ValueError("Bounds are too small to hold a single cell.")
        x = xs[self.rng.integers(xs.size)]
        y = ys[self.rng.integers(ys.size)]
        return float(x), float(y)


class CenterPlacement(PlacementStrategy):
    """Always the grid centre; the deterministic fallback."""

    def place(self, bounds: Bounds, radius: float) -> tuple[float, float]:
        return bounds.center(radius)


class SequencePlacement(PlacementStrategy):
    """Cycles through a fixed list of points.

    Intended for tests and replays. Points are validated lazily against
    whatever bounds they are placed into.
    """

    def __init__(self, points: Iterable[tuple[float, float]]) -> None:
        self.points = [(float(x), float(y)) for x, y in points]
        if not self.points:
            raise ValueError("SequencePlacement needs at least one point.")
        self._cycle = itertools.cycle(self.points)

    def place(self, bounds: Bounds, radius: float) -> tuple[float, float]:
        point = next(self._cycle)
        if not bounds.contains(point):
            raise ValueError(f"Placement {point} lies outside the bounds.")
        if not (is_on_lattice(point[0], radius)
                and is_on_lattice(point[1], radius)):
            raise ValueError(f"Placement {point} is not lattice-aligned.")
        return point


class Food:
    """A single collectible that is repositioned, never removed."""

    def __init__(self, x: float, y: float, r: float) -> None:
        self.x = x
        self.y = y
        self.r = r

    @classmethod
    def spawn(
        cls,
        bounds: Bounds,
        radius: float,
        placement: PlacementStrategy,
    ) -> Food:
        """Create food at a position chosen by *placement*."""
        x, y = placement.place(bounds, radius)
        return cls(x, y, radius)

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def relocate(self, bounds: Bounds, placement: PlacementStrategy) -> None:
        """Move to a fresh slot. The new slot may equal the old one."""
        self.x, self.y = placement.place(bounds, self.r)
        logger.debug("Food relocated to (%.1f, %.1f).", self.x, self.y)

    def distance_to(self, point: tuple[float, float]) -> float:
        px, py = point
        return math.hypot(px - self.x, py - self.y)

    def to_dict(self) -> dict:
        return {"position": [self.x, self.y], "radius": self.r}
