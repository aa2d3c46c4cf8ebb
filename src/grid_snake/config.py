"""Session configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from grid_snake.bounds import Bounds
from grid_snake.cell import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Constants fixed for the lifetime of one session.

    Delays are in seconds of the same monotonic clock the embedder passes
    to :meth:`GameSession.tick`.
    """

    board_width: float = 800.0
    board_height: float = 600.0
    cell_radius: float = 5.0
    slow_delay: float = 0.25
    fast_delay: float = 0.05
    initial_direction: str = "right"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.cell_radius <= 0:
            raise ValueError("cell_radius must be positive.")
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError("board_width and board_height must be positive.")
        if self.slow_delay <= 0 or self.fast_delay <= 0:
            raise ValueError("slow_delay and fast_delay must be positive.")
        if self.fast_delay > self.slow_delay:
            raise ValueError("fast_delay must not exceed slow_delay.")
        Direction.from_name(self.initial_direction)

        # The start cell and the one behind it must both fit.
        min_extent = 2 * self.cell_diameter
        if self.board_width <= min_extent or self.board_height <= min_extent:
            raise ValueError(
                "Board is too small for a two-cell snake; increase the board "
                "size or reduce cell_radius."
            )

    @property
    def cell_diameter(self) -> float:
        return 2 * self.cell_radius

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.initial_direction)

    def bounds(self) -> Bounds:
        return Bounds(self.board_width, self.board_height)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SessionConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
