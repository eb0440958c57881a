"""Exception types raised by the golife core.

All errors share the ``GolifeError`` base so callers (the CLI in particular)
can stop on any simulation failure with a single ``except`` clause.
"""

from typing import Optional, Tuple


class GolifeError(Exception):
    """Base class for all golife errors."""


class InvalidDimensionError(GolifeError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class FrozenGridError(GolifeError, RuntimeError):
    """Raised when a finished generation is written to."""


class ComputationFailure(GolifeError, RuntimeError):
    """A generation could not be computed in full.

    Attributes:
        cell: Coordinate of the first failing unit of work, if known
        failures: Number of units that failed or could not be dispatched
    """

    def __init__(self, message: str, cell: Optional[Tuple[int, int]] = None, failures: int = 0):
        super().__init__(message)
        self.cell = cell
        self.failures = failures
