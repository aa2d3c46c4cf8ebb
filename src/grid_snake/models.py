"""Pydantic models for the read-only session snapshot."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class SessionStatus(str, enum.Enum):
    """Lifecycle states for a session."""

    ACTIVE = "active"
    GAME_OVER = "game_over"


class SessionSnapshot(BaseModel):
    """Everything a renderer needs to draw one frame."""

    ticks: int = Field(ge=0)
    score: int = Field(ge=0)
    status: SessionStatus
    reason: str | None = None
    direction: str
    delay: float = Field(gt=0)
    body: list[tuple[float, float]]
    food: tuple[float, float]
    board_width: float
    board_height: float
    cell_radius: float

    @property
    def game_over(self) -> bool:
        return self.status is SessionStatus.GAME_OVER
