"""Typed value objects and run configuration for the patrol simulator.

Directions, guard states, results, and the CLI run configuration all live
here as enums and frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from guard_patrol.config.constants import (
    INPUT_DIR,
    INPUT_NAME,
    INPUT_YEAR,
    NUM_DIRECTIONS,
    START_GLYPHS,
)

__all__ = [
    "AgentState",
    "Direction",
    "PatrolResult",
    "Position",
    "RunConfig",
]

Position = tuple[int, int]
"""(row, col), 0-indexed."""


class Direction(IntEnum):
    """Guard heading, in clockwise order."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @classmethod
    def from_glyph(cls, glyph: str) -> Direction:
        """Map a start glyph (``^ > v <``) to its direction."""
        try:
            return cls(START_GLYPHS.index(glyph))
        except ValueError as exc:
            valid = " ".join(START_GLYPHS)
            raise ValueError(f"start glyph must be one of {valid}, got {glyph!r}") from exc

    def turn_right(self) -> Direction:
        return Direction((self.value + 1) % NUM_DIRECTIONS)


@dataclass(frozen=True)
class AgentState:
    """Guard position plus heading; the unit of cycle detection."""

    position: Position
    direction: Direction


@dataclass(frozen=True)
class PatrolResult:
    """Answers for one puzzle input."""

    visited_count: int
    loop_obstructions: int

    def __post_init__(self) -> None:
        if self.visited_count < 1:
            raise ValueError("visited_count must be >= 1")
        if self.loop_obstructions < 0:
            raise ValueError("loop_obstructions must be >= 0")


@dataclass(frozen=True)
class RunConfig:
    """Where the CLI looks for its puzzle input."""

    input_dir: Path = Path(INPUT_DIR)
    year: int = INPUT_YEAR
    name: str = INPUT_NAME
    input_path: Path | None = None

    def __post_init__(self) -> None:
        if self.year < 1:
            raise ValueError("year must be >= 1")
        if not self.name:
            raise ValueError("name must not be empty")
