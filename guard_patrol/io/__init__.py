"""Input location and loading helpers."""

from guard_patrol.io.paths import puzzle_input_path, resolve_input_path
from guard_patrol.io.reader import read_input

__all__ = ["puzzle_input_path", "read_input", "resolve_input_path"]
