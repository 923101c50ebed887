"""Configuration layer: constants and typed value objects."""

from guard_patrol.config.constants import (
    DIRECTION_DELTAS,
    EMPTY_GLYPH,
    INPUT_DIR,
    INPUT_NAME,
    INPUT_SUFFIX,
    INPUT_YEAR,
    NUM_DIRECTIONS,
    OBSTACLE_GLYPH,
    START_GLYPHS,
    STEP_BOUND_FACTOR,
    VALID_GLYPHS,
)
from guard_patrol.config.types import (
    AgentState,
    Direction,
    PatrolResult,
    Position,
    RunConfig,
)

__all__ = [
    "AgentState",
    "DIRECTION_DELTAS",
    "Direction",
    "EMPTY_GLYPH",
    "INPUT_DIR",
    "INPUT_NAME",
    "INPUT_SUFFIX",
    "INPUT_YEAR",
    "NUM_DIRECTIONS",
    "OBSTACLE_GLYPH",
    "PatrolResult",
    "Position",
    "RunConfig",
    "START_GLYPHS",
    "STEP_BOUND_FACTOR",
    "VALID_GLYPHS",
]
