from __future__ import annotations

from pathlib import Path

from guard_patrol.config.types import RunConfig
from guard_patrol.io.paths import puzzle_input_path, resolve_input_path


def test_puzzle_input_path_follows_convention() -> None:
    assert puzzle_input_path(Path("input"), 2024, "day_06") == Path("input/2024/day_06.txt")


def test_resolve_uses_convention_by_default(tmp_path: Path) -> None:
    config = RunConfig(input_dir=tmp_path, year=2023, name="day_01")
    assert resolve_input_path(config) == tmp_path / "2023" / "day_01.txt"


def test_explicit_input_path_wins(tmp_path: Path) -> None:
    explicit = tmp_path / "custom.txt"
    config = RunConfig(input_dir=tmp_path, input_path=explicit)
    assert resolve_input_path(config) == explicit
