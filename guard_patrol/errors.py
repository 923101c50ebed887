"""Exception types raised by the patrol simulator."""

from __future__ import annotations


class GuardPatrolError(Exception):
    """Base class for all patrol-simulator failures."""


class MalformedInputError(GuardPatrolError, ValueError):
    """The puzzle text does not describe a valid patrol grid."""


class NonTerminatingSimulationError(GuardPatrolError, RuntimeError):
    """Forward traversal ran past the distinct-state bound without exiting."""

    def __init__(self, steps: int) -> None:
        super().__init__(f"guard did not leave the grid within {steps} steps")
        self.steps = steps
