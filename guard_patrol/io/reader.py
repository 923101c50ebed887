"""Puzzle input loading."""

from __future__ import annotations

import logging
from pathlib import Path

from guard_patrol.errors import MalformedInputError

logger = logging.getLogger(__name__)


def read_input(path: Path) -> list[str]:
    """Read *path*, trim surrounding whitespace, and split into lines.

    Raises :exc:`OSError` (e.g. :exc:`FileNotFoundError`) if *path* cannot be
    read, and :exc:`MalformedInputError` if it is not UTF-8 text.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"{path} is not valid UTF-8 text") from exc
    lines = text.strip().splitlines()
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines
