"""Guard patrol simulator: path coverage and loop-causing obstructions."""

from guard_patrol.config.types import AgentState, Direction, PatrolResult
from guard_patrol.domain.grid import Grid, parse_grid
from guard_patrol.domain.patrol import (
    count_loop_obstructions,
    detects_loop,
    simulate,
    solve,
)
from guard_patrol.errors import (
    GuardPatrolError,
    MalformedInputError,
    NonTerminatingSimulationError,
)

__all__ = [
    "AgentState",
    "Direction",
    "Grid",
    "GuardPatrolError",
    "MalformedInputError",
    "NonTerminatingSimulationError",
    "PatrolResult",
    "count_loop_obstructions",
    "detects_loop",
    "parse_grid",
    "simulate",
    "solve",
]
