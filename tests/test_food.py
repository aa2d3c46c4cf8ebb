"""Tests for the Food module and placement strategies."""

import numpy as np
import pytest

from grid_snake.bounds import Bounds, is_on_lattice
from grid_snake.food import (
    CenterPlacement,
    Food,
    PlacementStrategy,
    RandomPlacement,
    SequencePlacement,
)

BOUNDS = Bounds(800, 600)


class TestRandomPlacement:
    def test_points_are_on_lattice_and_inside(self):
        placement = RandomPlacement(np.random.default_rng(42))
        for _ in range(200):
            x, y = placement.place(BOUNDS, 5)
            assert BOUNDS.contains((x, y))
            assert is_on_lattice(x, 5)
            assert is_on_lattice(y, 5)

    def test_deterministic(self):
        """Same seed produces same food positions."""
        assert self._place_with_seed(42) == self._place_with_seed(42)

    def test_different_seeds(self):
        # Very unlikely to match with different seeds.
        assert self._place_with_seed(1) != self._place_with_seed(2)

    def test_too_small(self):
        placement = RandomPlacement(np.random.default_rng(0))
        with pytest.raises(ValueError, match="too small"):
            placement.place(Bounds(4, 4), 5)

    @staticmethod
    def _place_with_seed(seed: int) -> list[tuple[float, float]]:
        placement = RandomPlacement(np.random.default_rng(seed))
        return [placement.place(BOUNDS, 5) for _ in range(5)]


class TestCenterPlacement:
    def test_center(self):
        assert CenterPlacement().place(BOUNDS, 5) == (405.0, 305.0)


class TestSequencePlacement:
    def test_cycles(self):
        placement = SequencePlacement([(5, 5), (15, 25)])
        assert placement.place(BOUNDS, 5) == (5.0, 5.0)
        assert placement.place(BOUNDS, 5) == (15.0, 25.0)
        assert placement.place(BOUNDS, 5) == (5.0, 5.0)

    def test_empty(self):
        with pytest.raises(ValueError, match="at least one"):
            SequencePlacement([])

    def test_rejects_off_lattice(self):
        placement = SequencePlacement([(400, 300)])
        with pytest.raises(ValueError, match="lattice"):
            placement.place(BOUNDS, 5)

    def test_rejects_outside(self):
        placement = SequencePlacement([(805, 5)])
        with pytest.raises(ValueError, match="outside"):
            placement.place(BOUNDS, 5)


class TestPlacementBase:
    def test_abstract(self):
        with pytest.raises(NotImplementedError):
            PlacementStrategy().place(BOUNDS, 5)


class TestFood:
    def test_spawn(self):
        food = Food.spawn(BOUNDS, 5, SequencePlacement([(25, 35)]))
        assert food.position == (25.0, 35.0)
        assert food.r == 5

    def test_relocate(self):
        placement = SequencePlacement([(25, 35), (105, 205)])
        food = Food.spawn(BOUNDS, 5, placement)
        food.relocate(BOUNDS, placement)
        assert food.position == (105.0, 205.0)

    def test_relocate_may_repeat(self):
        placement = SequencePlacement([(25, 35)])
        food = Food.spawn(BOUNDS, 5, placement)
        food.relocate(BOUNDS, placement)
        assert food.position == (25.0, 35.0)

    def test_distance_to(self):
        food = Food(15, 15, 5)
        assert food.distance_to((15, 25)) == pytest.approx(10.0)
        assert food.distance_to((18, 19)) == pytest.approx(5.0)

    def test_to_dict(self):
        food = Food(15, 25, 5)
        assert food.to_dict() == {"position": [15, 25], "radius": 5}
