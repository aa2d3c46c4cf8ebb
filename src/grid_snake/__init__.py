"""Grid Snake: tick-driven simulation engine."""

from grid_snake.bounds import Bounds
from grid_snake.cell import Cell, Direction
from grid_snake.config import SessionConfig
from grid_snake.engine import GameSession, TickOutcome
from grid_snake.food import (
    CenterPlacement,
    Food,
    PlacementStrategy,
    RandomPlacement,
    SequencePlacement,
)
from grid_snake.models import SessionSnapshot, SessionStatus
from grid_snake.snake import EmptySnakeError, Snake

__all__ = [
    "Bounds",
    "Cell",
    "CenterPlacement",
    "Direction",
    "EmptySnakeError",
    "Food",
    "GameSession",
    "PlacementStrategy",
    "RandomPlacement",
    "SequencePlacement",
    "SessionConfig",
    "SessionSnapshot",
    "SessionStatus",
    "Snake",
    "TickOutcome",
]
