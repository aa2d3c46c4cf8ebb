"""Tick-driven session controller composing bounds, snake, and food logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from grid_snake.cell import Cell, Direction
from grid_snake.config import SessionConfig
from grid_snake.food import Food, PlacementStrategy, RandomPlacement
from grid_snake.models import SessionSnapshot, SessionStatus
from grid_snake.snake import Snake

logger = logging.getLogger(__name__)


class TickOutcome(enum.Enum):
    """What a single call to :meth:`GameSession.tick` did."""

    IDLE = "idle"
    MOVED = "moved"
    ATE = "ate"
    GAME_OVER = "game_over"


class GameSession:
    """Single-snake, time-gated game session.

    The session owns the bounds, snake, and food. The embedding event loop
    calls :meth:`tick` on every frame and :meth:`on_input` on every key
    event, passing the current monotonic time in seconds; the session never
    reads a clock itself.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        placement: PlacementStrategy | None = None,
        now: float = 0.0,
    ) -> None:
        cfg = config or SessionConfig()
        self.config = cfg
        self.bounds = cfg.bounds()
        self.placement = placement or RandomPlacement(
            np.random.default_rng(cfg.seed),
        )

        start_x, start_y = self.bounds.center(cfg.cell_radius)
        self.snake = Snake(Cell(start_x, start_y, cfg.cell_radius), cfg.direction)
        self.food = Food.spawn(self.bounds, cfg.cell_radius, self.placement)

        self.score = 0
        self.ticks = 0
        self.status = SessionStatus.ACTIVE
        self.reason: str | None = None
        self.delay = cfg.slow_delay
        self.last_advance = now
        self.last_input = now

    @property
    def game_over(self) -> bool:
        return self.status is SessionStatus.GAME_OVER

    @property
    def body(self) -> tuple[tuple[float, float], ...]:
        """Body cell centres, head first."""
        return tuple(cell.as_point() for cell in self.snake.body)

    @property
    def food_position(self) -> tuple[float, float]:
        return self.food.position

    def on_input(self, direction: Direction, is_repeat: bool, now: float) -> bool:
        """Handle a direction key press.

        Held keys (``is_repeat``) switch to the fast delay; a fresh press
        restores the slow one. Returns whether the direction was accepted.
        """
        if self.game_over:
            return False
        accepted = self.snake.set_direction(direction)
        self.delay = (
            self.config.fast_delay if is_repeat else self.config.slow_delay
        )
        self.last_input = now
        return accepted

    def tick(self, now: float) -> TickOutcome:
        """Advance the game if the current delay has elapsed."""
        if self.game_over:
            return TickOutcome.IDLE

        # Speed falls back to slow once the key stops repeating.
        if now - self.last_input >= self.delay:
            self.delay = self.config.slow_delay

        if now - self.last_advance < self.delay:
            return TickOutcome.IDLE

        self.last_advance = now
        self.ticks += 1
        head = self.snake.advance()

        # --- terminal checks ---
        if not self.snake.check_bounds(self.bounds):
            self._end("bounds")
            return TickOutcome.GAME_OVER
        if not self.snake.check_self_collision():
            self._end("self")
            return TickOutcome.GAME_OVER

        # --- food ---
        if self.food.distance_to(head.as_point()) < head.diameter:
            self.food.relocate(self.bounds, self.placement)
            self.score += 1
            logger.debug("Food eaten at tick %d; score %d.", self.ticks, self.score)
            return TickOutcome.ATE

        self.snake.shorten_tail()
        return TickOutcome.MOVED

    def snapshot(self) -> SessionSnapshot:
        """Return a read-only view of the session for rendering."""
        return SessionSnapshot(
            ticks=self.ticks,
            score=self.score,
            status=self.status,
            reason=self.reason,
            direction=self.snake.direction.name.lower(),
            delay=self.delay,
            body=list(self.body),
            food=self.food_position,
            board_width=self.bounds.width,
            board_height=self.bounds.height,
            cell_radius=self.config.cell_radius,
        )

    def get_state(self) -> dict:
        """Return the full, serializable session state."""
        return self.snapshot().model_dump(mode="json")

    def _end(self, reason: str) -> None:
        """Mark the session as finished."""
        self.status = SessionStatus.GAME_OVER
        self.reason = reason
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            reason, self.ticks, self.score,
        )
