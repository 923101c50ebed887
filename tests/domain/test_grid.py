"""Tests for guard_patrol.domain.grid module."""

from __future__ import annotations

import numpy as np
import pytest

from guard_patrol.config.types import AgentState, Direction
from guard_patrol.domain.grid import Grid, parse_grid
from guard_patrol.errors import GuardPatrolError, MalformedInputError


class TestParseGrid:
    def test_example_dimensions_and_start(self, example_lines: list[str]) -> None:
        grid, start = parse_grid(example_lines)
        assert (grid.rows, grid.cols) == (10, 10)
        assert start == AgentState(position=(6, 4), direction=Direction.UP)

    def test_example_obstacle_count(self, example_lines: list[str]) -> None:
        grid, _ = parse_grid(example_lines)
        assert int(grid.obstacles.sum()) == 8
        assert grid.is_obstacle((0, 4))
        assert grid.is_obstacle((9, 6))
        assert not grid.is_obstacle((0, 0))

    def test_start_cell_is_open_floor(self, example_lines: list[str]) -> None:
        grid, start = parse_grid(example_lines)
        assert not grid.is_obstacle(start.position)

    @pytest.mark.parametrize(
        ("glyph", "direction"),
        [("^", Direction.UP), (">", Direction.RIGHT), ("v", Direction.DOWN), ("<", Direction.LEFT)],
    )
    def test_each_start_glyph(self, glyph: str, direction: Direction) -> None:
        _, start = parse_grid(["...", f".{glyph}.", "..."])
        assert start == AgentState(position=(1, 1), direction=direction)

    def test_single_cell_grid(self) -> None:
        grid, start = parse_grid([">"])
        assert (grid.rows, grid.cols) == (1, 1)
        assert start.direction is Direction.RIGHT


class TestParseGridErrors:
    def test_empty_grid(self) -> None:
        with pytest.raises(MalformedInputError, match="empty"):
            parse_grid([])

    def test_empty_row(self) -> None:
        with pytest.raises(MalformedInputError, match="empty"):
            parse_grid([""])

    def test_ragged_rows(self) -> None:
        with pytest.raises(MalformedInputError, match="row 1 has length 2, expected 3"):
            parse_grid([".^.", "..", "..."])

    def test_unknown_glyph(self) -> None:
        with pytest.raises(MalformedInputError, match=r"'x' at row 1, col 2"):
            parse_grid(["...", "..x", ".^."])

    def test_missing_start(self) -> None:
        with pytest.raises(MalformedInputError, match="no start glyph"):
            parse_grid(["...", ".#.", "..."])

    def test_duplicate_start(self) -> None:
        with pytest.raises(MalformedInputError, match="found 2"):
            parse_grid(["^..", "...", "..<"])

    def test_errors_share_base_and_value_error(self) -> None:
        with pytest.raises(GuardPatrolError):
            parse_grid([])
        with pytest.raises(ValueError):
            parse_grid([])


class TestGrid:
    def test_mask_is_read_only(self, example_lines: list[str]) -> None:
        grid, _ = parse_grid(example_lines)
        with pytest.raises(ValueError):
            grid.obstacles[0, 0] = True

    def test_constructor_copies_mask(self) -> None:
        mask = np.zeros((2, 3), dtype=bool)
        grid = Grid(obstacles=mask)
        mask[0, 0] = True
        assert not grid.is_obstacle((0, 0))

    def test_rejects_non_2d_mask(self) -> None:
        with pytest.raises(ValueError):
            Grid(obstacles=np.zeros(3, dtype=bool))
        with pytest.raises(ValueError):
            Grid(obstacles=np.zeros((0, 3), dtype=bool))

    def test_in_bounds(self) -> None:
        grid = Grid(obstacles=np.zeros((2, 3), dtype=bool))
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((1, 2))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((2, 0))
        assert not grid.in_bounds((0, 3))

    def test_out_of_bounds_is_not_obstacle(self) -> None:
        grid = Grid(obstacles=np.ones((2, 2), dtype=bool))
        assert not grid.is_obstacle((-1, 0))
        assert not grid.is_obstacle((0, 2))

    def test_obstacle_rows_is_plain_list(self) -> None:
        grid, _ = parse_grid(["#.", ".^"])
        assert grid.obstacle_rows() == [[True, False], [False, False]]
