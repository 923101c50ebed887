"""Centralized constants for the guard patrol simulator.

Glyphs, direction deltas, and input-naming conventions shared across the
parser, the simulator, and the CLI are defined here. Consuming modules
should import from this module rather than defining their own literals.
"""

from __future__ import annotations

EMPTY_GLYPH = "."
"""Open floor the guard can walk over."""

OBSTACLE_GLYPH = "#"
"""Cell that blocks forward movement and forces a right turn."""

START_GLYPHS: tuple[str, ...] = ("^", ">", "v", "<")
"""Start-cell glyphs, indexed by direction value (up, right, down, left)."""

VALID_GLYPHS: tuple[str, ...] = (EMPTY_GLYPH, OBSTACLE_GLYPH, *START_GLYPHS)
"""Every glyph a well-formed grid may contain."""

DIRECTION_DELTAS: tuple[tuple[int, int], ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))
"""(d_row, d_col) per direction value, in clockwise order starting from up."""

NUM_DIRECTIONS = 4
"""Size of the direction cycle; turning right is ``(d + 1) % NUM_DIRECTIONS``."""

STEP_BOUND_FACTOR = NUM_DIRECTIONS
"""Forward traversal is capped at ``rows * cols * STEP_BOUND_FACTOR + 1`` steps."""

INPUT_DIR = "input"
"""Default root directory holding puzzle inputs."""

INPUT_YEAR = 2024
"""Default event year subdirectory under ``INPUT_DIR``."""

INPUT_NAME = "day_06"
"""Default puzzle input name (file stem)."""

INPUT_SUFFIX = ".txt"
"""File suffix of puzzle input files."""
