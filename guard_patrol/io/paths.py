"""Path construction helpers for puzzle inputs.

Inputs follow the ``<input_dir>/<year>/<name>.txt`` naming convention
unless the caller names a file explicitly.
"""

from __future__ import annotations

from pathlib import Path

from guard_patrol.config.constants import INPUT_SUFFIX
from guard_patrol.config.types import RunConfig


def puzzle_input_path(input_dir: Path, year: int, name: str) -> Path:
    """Return path to the named puzzle input for *year* under *input_dir*."""
    return input_dir / str(year) / f"{name}{INPUT_SUFFIX}"


def resolve_input_path(config: RunConfig) -> Path:
    """Explicit ``input_path`` wins; otherwise apply the naming convention."""
    if config.input_path is not None:
        return config.input_path
    return puzzle_input_path(config.input_dir, config.year, config.name)
