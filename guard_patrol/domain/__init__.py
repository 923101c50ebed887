"""Domain layer: grid model, parser, and patrol simulation."""

from guard_patrol.domain.grid import Grid, parse_grid
from guard_patrol.domain.patrol import (
    candidate_obstructions,
    count_loop_obstructions,
    detects_loop,
    max_steps,
    simulate,
    solve,
    state_key,
)

__all__ = [
    "Grid",
    "candidate_obstructions",
    "count_loop_obstructions",
    "detects_loop",
    "max_steps",
    "parse_grid",
    "simulate",
    "solve",
    "state_key",
]
