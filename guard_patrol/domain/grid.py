"""Immutable patrol grid and its text parser.

The grid stores only the obstacle mask. The start cell is reported
separately as an :class:`AgentState` and counts as open floor.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from guard_patrol.config.constants import OBSTACLE_GLYPH, START_GLYPHS, VALID_GLYPHS
from guard_patrol.config.types import AgentState, Direction, Position
from guard_patrol.errors import MalformedInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Grid:
    """Rectangular ``rows x cols`` grid with a read-only obstacle mask."""

    obstacles: np.ndarray  # bool, shape (rows, cols)

    def __post_init__(self) -> None:
        mask = np.array(self.obstacles, dtype=bool)
        if mask.ndim != 2 or 0 in mask.shape:
            raise ValueError("obstacles must be a non-empty 2-D mask")
        mask.setflags(write=False)
        object.__setattr__(self, "obstacles", mask)

    @property
    def rows(self) -> int:
        return int(self.obstacles.shape[0])

    @property
    def cols(self) -> int:
        return int(self.obstacles.shape[1])

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_obstacle(self, position: Position) -> bool:
        """True if *position* is an in-bounds obstacle cell."""
        return self.in_bounds(position) and bool(self.obstacles[position])

    def obstacle_rows(self) -> list[list[bool]]:
        """Plain nested-list copy of the mask for tight simulation loops."""
        return self.obstacles.tolist()


def parse_grid(lines: Sequence[str]) -> tuple[Grid, AgentState]:
    """Parse glyph rows into a :class:`Grid` and the guard's start state.

    Raises :exc:`MalformedInputError` for an empty grid, ragged rows,
    unknown glyphs, or anything other than exactly one start glyph.
    """
    if not lines:
        raise MalformedInputError("grid is empty")
    width = len(lines[0])
    if width == 0:
        raise MalformedInputError("row 0 is empty")
    for row_idx, line in enumerate(lines):
        if len(line) != width:
            raise MalformedInputError(
                f"row {row_idx} has length {len(line)}, expected {width}"
            )

    cells = np.array([list(line) for line in lines], dtype="<U1")

    unknown = np.argwhere(~np.isin(cells, VALID_GLYPHS))
    if len(unknown) > 0:
        row, col = (int(v) for v in unknown[0])
        raise MalformedInputError(f"unknown glyph {str(cells[row, col])!r} at row {row}, col {col}")

    starts = np.argwhere(np.isin(cells, START_GLYPHS))
    if len(starts) == 0:
        raise MalformedInputError("no start glyph found (expected one of ^ > v <)")
    if len(starts) > 1:
        found = ", ".join(f"({int(r)}, {int(c)})" for r, c in starts)
        raise MalformedInputError(f"expected exactly one start glyph, found {len(starts)}: {found}")

    start_row, start_col = (int(v) for v in starts[0])
    start = AgentState(
        position=(start_row, start_col),
        direction=Direction.from_glyph(str(cells[start_row, start_col])),
    )
    grid = Grid(obstacles=cells == OBSTACLE_GLYPH)
    logger.debug(
        "Parsed %dx%d grid with %d obstacles; guard at %s facing %s",
        grid.rows,
        grid.cols,
        int(grid.obstacles.sum()),
        start.position,
        start.direction.name,
    )
    return grid, start
