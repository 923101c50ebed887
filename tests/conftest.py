from __future__ import annotations

import pytest

EXAMPLE_GRID = [
    "....#.....",
    ".........#",
    "..........",
    "..#.......",
    ".......#..",
    "..........",
    ".#..^.....",
    "........#.",
    "#.........",
    "......#...",
]

# Guard at (2, 1) facing up walks the square (1,1) -> (1,2) -> (2,2) -> (2,1),
# then heads left out of the grid because (2, 0) is open.
SQUARE_ESCAPE_GRID = [
    ".#..",
    "...#",
    ".^..",
    "..#.",
]

# Same square, closed at (2, 0): the guard circles forever.
SQUARE_LOOP_GRID = [
    ".#..",
    "...#",
    "#^..",
    "..#.",
]

OPEN_GRID = [
    "....",
    "....",
    ".^..",
    "....",
]


@pytest.fixture
def example_lines() -> list[str]:
    return list(EXAMPLE_GRID)


@pytest.fixture
def square_escape_lines() -> list[str]:
    return list(SQUARE_ESCAPE_GRID)


@pytest.fixture
def square_loop_lines() -> list[str]:
    return list(SQUARE_LOOP_GRID)


@pytest.fixture
def open_lines() -> list[str]:
    return list(OPEN_GRID)
