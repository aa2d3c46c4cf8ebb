"""Snake representation and movement logic."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from grid_snake.cell import Cell, Direction

if TYPE_CHECKING:
    from grid_snake.bounds import Bounds

logger = logging.getLogger(__name__)


class EmptySnakeError(IndexError):
    """Raised when the body is queried with no cells left.

    This indicates a broken invariant rather than a recoverable state.
    """


class Snake:
    """A snake represented as an ordered deque of :class:`Cell` segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``direction`` is the
    heading requested for the next :meth:`advance`; ``heading`` is the
    direction the most recent advance actually took.
    """

    def __init__(self, start: Cell, direction: Direction = Direction.RIGHT) -> None:
        self.body: deque[Cell] = deque([start, start.moved_by(direction.opposite())])
        self.direction = direction
        self.heading = direction

    @property
    def head(self) -> Cell:
        """Return the head cell."""
        if not self.body:
            raise EmptySnakeError("Snake body has no cells.")
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def set_direction(self, requested: Direction) -> bool:
        """Change direction, ignoring 180° reversals.

        A request is a reversal if it opposes either the pending direction
        or the heading of the last advance, so two quick turns between
        ticks cannot fold the head back onto the neck.
        """
        if requested in (self.direction.opposite(), self.heading.opposite()):
            logger.debug(
                "Ignored reversal to %s while heading %s.",
                requested.name, self.heading.name,
            )
            return False
        self.direction = requested
        return True

    def next_head(self) -> Cell:
        """Compute the next head cell without moving."""
        return self.head.moved_by(self.direction)

    def advance(self) -> Cell:
        """Push a new head one step along the current direction.

        The tail is left in place; call :meth:`shorten_tail` unless the
        snake is growing this tick.
        """
        new_head = self.next_head()
        self.body.appendleft(new_head)
        self.heading = self.direction
        return new_head

    def shorten_tail(self) -> Cell | None:
        """Drop the oldest cell. Never removes the last remaining cell."""
        if len(self.body) <= 1:
            return None
        return self.body.pop()

    def check_bounds(self, bounds: Bounds) -> bool:
        """Check that every body cell lies inside *bounds*."""
        return all(bounds.contains(cell.as_point()) for cell in self.body)

    def check_self_collision(self) -> bool:
        """Return True when the head overlaps no other body cell.

        Only head-to-segment pairs are measured, and any overlap closer
        than one radius is a collision.
        """
        head = self.head
        point = head.as_point()
        return not any(
            cell.distance_to(point) < head.r
            for cell in list(self.body)[1:]
        )

    def occupies(self, point: tuple[float, float]) -> bool:
        """Check whether any segment overlaps *point*."""
        return any(cell.distance_to(point) < cell.r for cell in self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [[cell.x, cell.y] for cell in self.body],
            "direction": self.direction.name.lower(),
            "heading": self.heading.name.lower(),
        }
