"""Tests for the Cell and Direction types."""

import pytest

from grid_snake.cell import Cell, Direction


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite() is Direction.DOWN
        assert Direction.DOWN.opposite() is Direction.UP
        assert Direction.LEFT.opposite() is Direction.RIGHT
        assert Direction.RIGHT.opposite() is Direction.LEFT

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_involution(self, direction):
        assert direction.opposite().opposite() is direction
        assert direction.opposite() is not direction

    def test_displacement(self):
        assert Direction.UP.displacement(10) == (0, -10)
        assert Direction.DOWN.displacement(10) == (0, 10)
        assert Direction.LEFT.displacement(10) == (-10, 0)
        assert Direction.RIGHT.displacement(10) == (10, 0)

    def test_from_name(self):
        assert Direction.from_name("right") is Direction.RIGHT
        assert Direction.from_name("Up") is Direction.UP

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_name("sideways")


class TestCell:
    def test_diameter(self):
        assert Cell(5, 5, 5).diameter == 10

    def test_moved_by(self):
        cell = Cell(405, 305, 5)
        assert cell.moved_by(Direction.RIGHT) == Cell(415, 305, 5)
        assert cell.moved_by(Direction.LEFT) == Cell(395, 305, 5)
        assert cell.moved_by(Direction.UP) == Cell(405, 295, 5)
        assert cell.moved_by(Direction.DOWN) == Cell(405, 315, 5)

    def test_moved_by_keeps_original(self):
        cell = Cell(405, 305, 5)
        cell.moved_by(Direction.UP)
        assert cell.as_point() == (405, 305)

    def test_distance_to(self):
        cell = Cell(0, 0, 5)
        assert cell.distance_to((3, 4)) == pytest.approx(5.0)
        assert cell.distance_to((0, 0)) == 0.0
