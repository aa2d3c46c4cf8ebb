"""Headless driver that plays a session against a simulated clock."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from grid_snake.cell import Direction
from grid_snake.config import SessionConfig
from grid_snake.engine import GameSession, TickOutcome

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class RunResult:
    """Outcome of a headless run."""

    ticks: int
    frames: int
    score: int
    length: int
    game_over: bool
    reason: str | None
    simulated_seconds: float

    def summary(self) -> str:
        status = f"game over ({self.reason})" if self.game_over else "still alive"
        return (
            f"Run: {self.ticks} moves over {self.frames} frames "
            f"({self.simulated_seconds:.2f}s simulated) | "
            f"score {self.score}, length {self.length}, {status}"
        )


def run_headless(
    config: SessionConfig | None = None,
    *,
    max_ticks: int = 1_000,
    turn_probability: float = 0.1,
    repeat_probability: float = 0.2,
    frame_interval: float = 1 / 60,
    seed: int | None = None,
) -> tuple[GameSession, RunResult]:
    """Play one session with random inputs until game over or *max_ticks*.

    A simulated monotonic clock advances by *frame_interval* per frame, and
    each frame may inject a random key press before ticking the session.
    """
    if max_ticks < 1:
        raise ValueError("max_ticks must be at least 1.")
    if frame_interval <= 0:
        raise ValueError("frame_interval must be positive.")

    cfg = config or SessionConfig()
    rng = np.random.default_rng(seed)
    now = 0.0
    session = GameSession(cfg, now=now)

    frames = 0
    while not session.game_over and session.ticks < max_ticks:
        now += frame_interval
        frames += 1
        if rng.random() < turn_probability:
            direction = _DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))]
            session.on_input(
                direction, bool(rng.random() < repeat_probability), now,
            )
        if session.tick(now) is TickOutcome.ATE:
            logger.debug("Score %d at %.2fs.", session.score, now)

    result = RunResult(
        ticks=session.ticks,
        frames=frames,
        score=session.score,
        length=len(session.snake),
        game_over=session.game_over,
        reason=session.reason,
        simulated_seconds=now,
    )
    logger.info(result.summary())
    return session, result
