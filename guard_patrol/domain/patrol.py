"""Guard patrol simulation: forward traversal and loop detection.

Both traversals follow the same stepping rule. Look at the cell ahead:
off the grid ends the walk, an obstacle turns the guard right in place,
anything else is stepped onto. Loop detection additionally tracks packed
(position, direction) keys and stops at the first repeat.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from guard_patrol.config.constants import DIRECTION_DELTAS, NUM_DIRECTIONS, STEP_BOUND_FACTOR
from guard_patrol.config.types import AgentState, PatrolResult, Position
from guard_patrol.domain.grid import Grid
from guard_patrol.errors import NonTerminatingSimulationError

logger = logging.getLogger(__name__)


def state_key(row: int, col: int, direction: int, cols: int) -> int:
    """Pack a guard state into one integer: ``(row * cols + col) * 4 + direction``."""
    return (row * cols + col) * NUM_DIRECTIONS + direction


def max_steps(grid: Grid) -> int:
    """Upper bound on distinct guard states, plus one."""
    return grid.rows * grid.cols * STEP_BOUND_FACTOR + 1


def simulate(grid: Grid, start: AgentState) -> set[Position]:
    """Walk the guard until it leaves the grid; return every cell it stood on.

    Raises :exc:`NonTerminatingSimulationError` if the walk exceeds
    :func:`max_steps`, which can only happen when the guard is trapped in a
    loop on the unmodified grid.
    """
    rows, cols = grid.rows, grid.cols
    blocked = grid.obstacle_rows()
    row, col = start.position
    direction = start.direction
    visited: set[Position] = set()

    bound = max_steps(grid)
    for _ in range(bound):
        visited.add((row, col))
        d_row, d_col = DIRECTION_DELTAS[direction]
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < rows and 0 <= next_col < cols):
            logger.debug("Guard left the grid after visiting %d cells", len(visited))
            return visited
        if blocked[next_row][next_col]:
            direction = direction.turn_right()
        else:
            row, col = next_row, next_col
    raise NonTerminatingSimulationError(bound)


def detects_loop(grid: Grid, start: AgentState, obstacle: Position) -> bool:
    """Return True if adding one obstacle at *obstacle* traps the guard in a cycle.

    The extra obstacle is an overlay; *grid* is never modified.
    """
    if not grid.in_bounds(obstacle):
        raise ValueError(f"obstacle {obstacle} is outside the {grid.rows}x{grid.cols} grid")
    if obstacle == start.position:
        raise ValueError("obstacle must not be placed on the guard's start position")

    rows, cols = grid.rows, grid.cols
    blocked = grid.obstacle_rows()
    obs_row, obs_col = obstacle
    row, col = start.position
    direction = int(start.direction)
    seen: set[int] = set()

    while True:
        key = state_key(row, col, direction, cols)
        if key in seen:
            return True
        seen.add(key)

        d_row, d_col = DIRECTION_DELTAS[direction]
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < rows and 0 <= next_col < cols):
            return False
        if blocked[next_row][next_col] or (next_row == obs_row and next_col == obs_col):
            direction = (direction + 1) % NUM_DIRECTIONS
        else:
            row, col = next_row, next_col


def candidate_obstructions(
    grid: Grid, start: AgentState, visited: Iterable[Position] | None = None
) -> set[Position]:
    """Cells worth testing for a loop-causing obstruction.

    Only cells on the original path can change the guard's route, and the
    start cell is occupied by the guard.
    """
    path = simulate(grid, start) if visited is None else set(visited)
    path.discard(start.position)
    return path


def count_loop_obstructions(
    grid: Grid, start: AgentState, visited: Iterable[Position] | None = None
) -> int:
    """Count single-cell obstructions that make the guard patrol forever."""
    candidates = candidate_obstructions(grid, start, visited)
    logger.debug("Testing %d candidate obstructions", len(candidates))
    count = 0
    for candidate in sorted(candidates):
        if detects_loop(grid, start, candidate):
            logger.debug("Obstruction at %s causes a loop", candidate)
            count += 1
    return count


def solve(grid: Grid, start: AgentState) -> PatrolResult:
    """Run both traversals and return the two puzzle answers."""
    visited = simulate(grid, start)
    loops = count_loop_obstructions(grid, start, visited)
    return PatrolResult(visited_count=len(visited), loop_obstructions=loops)
