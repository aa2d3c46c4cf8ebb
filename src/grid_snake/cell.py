"""Grid cells and movement directions."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, replace


class Direction(enum.Enum):
    """Cardinal movement directions with unit (dx, dy) values.

    Screen coordinates are used, so ``UP`` decreases ``y``.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction that would reverse this one."""
        return _OPPOSITES[self]

    def displacement(self, cell_diameter: float) -> tuple[float, float]:
        """Return the signed offset of one grid step."""
        dx, dy = self.value
        return dx * cell_diameter, dy * cell_diameter

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Cell:
    """One grid-aligned disc of radius ``r`` centred on ``(x, y)``."""

    x: float
    y: float
    r: float

    @property
    def diameter(self) -> float:
        return 2 * self.r

    def as_point(self) -> tuple[float, float]:
        return self.x, self.y

    def moved_by(self, direction: Direction) -> Cell:
        """Return the neighbouring cell one step in *direction*."""
        dx, dy = direction.displacement(self.diameter)
        return replace(self, x=self.x + dx, y=self.y + dy)

    def distance_to(self, point: tuple[float, float]) -> float:
        """Euclidean distance from this cell's centre to *point*."""
        px, py = point
        return math.hypot(px - self.x, py - self.y)
