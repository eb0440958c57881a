"""Toroidal grid state for Conway's Game of Life.

This module implements the grid data structure every generation lives in.
Cells are stored in a numpy boolean array of shape ``(height, width)`` and
addressed as ``(x, y)`` where x is the column and y the row. All lookups wrap
around both edges, so the coordinate space is a torus and addressing never
fails.

A grid is writable only while it is being populated. Once ``freeze()`` is
called (the engine does this for every generation it produces) the grid is a
read-only snapshot.
"""

import numpy as np
from typing import Optional, Set, Tuple
import logging

from .errors import FrozenGridError, InvalidDimensionError

logger = logging.getLogger(__name__)


def check_dimension(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensionError(f"Grid {name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidDimensionError(f"Grid {name} must be positive, got {value}")
    return int(value)


class ToroidalGrid:
    """2D boolean grid whose edges wrap around.

    Attributes:
        width: Grid width in cells
        height: Grid height in cells
        state: 2D numpy boolean array indexed as state[y, x] (True=alive)
    """

    def __init__(self, width: int, height: int, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimensions.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            initial_state: Optional (height, width) boolean array, copied

        Raises:
            InvalidDimensionError: If width or height is not a positive integer
            ValueError: If initial_state shape or dtype doesn't match
        """
        self.width = check_dimension("width", width)
        self.height = check_dimension("height", height)
        self._frozen = False

        if initial_state is not None:
            if initial_state.shape != (self.height, self.width):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(self.height, self.width)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            self.state = initial_state.copy()
        else:
            self.state = np.zeros((self.height, self.width), dtype=bool)

    @classmethod
    def empty(cls, width: int, height: int) -> 'ToroidalGrid':
        """Create a grid with every cell dead."""
        return cls(width, height)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'ToroidalGrid':
        """Create grid from a 2D array, rows being y and columns x.

        Non-boolean arrays are converted with truthiness (non-zero = alive).
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got {array.ndim} dimensions")
        if array.dtype != bool:
            array = array.astype(bool)

        height, width = array.shape
        return cls(width, height, array)

    @property
    def frozen(self) -> bool:
        """True once the grid has become a read-only snapshot."""
        return self._frozen

    def freeze(self) -> 'ToroidalGrid':
        """Make the grid read-only. Idempotent; returns the grid itself."""
        if not self._frozen:
            self.state.setflags(write=False)
            self._frozen = True
        return self

    def copy(self) -> 'ToroidalGrid':
        """Create a writable deep copy of the grid."""
        return ToroidalGrid(self.width, self.height, self.state)

    def alive(self, x: int, y: int) -> bool:
        """Get cell state at coordinates, wrapping around both edges.

        Args:
            x: X coordinate (column), any integer
            y: Y coordinate (row), any integer

        Returns:
            True if cell is alive, False if dead
        """
        # Python's % already maps negatives onto [0, size)
        return bool(self.state[y % self.height, x % self.width])

    def set(self, x: int, y: int, alive: bool) -> None:
        """Set cell state at coordinates, wrapping around both edges.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)
            alive: True to set alive, False to set dead

        Raises:
            FrozenGridError: If the grid has been frozen
        """
        if self._frozen:
            raise FrozenGridError(f"Cannot set ({x}, {y}) on a frozen {self.width}x{self.height} grid")
        self.state[y % self.height, x % self.width] = bool(alive)

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.sum(self.state))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / (self.width * self.height)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def live_cells(self) -> Set[Tuple[int, int]]:
        """Get the set of (x, y) coordinates of alive cells."""
        rows, cols = np.nonzero(self.state)
        return {(int(x), int(y)) for y, x in zip(rows, cols)}

    def to_array(self) -> np.ndarray:
        """Get grid as a writable numpy array copy."""
        return self.state.copy()

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[x, y] syntax."""
        x, y = key
        return self.alive(x, y)

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid (frozen flag is ignored)."""
        if not isinstance(other, ToroidalGrid):
            return NotImplemented
        return (self.width == other.width and
                self.height == other.height and
                np.array_equal(self.state, other.state))

    def __str__(self) -> str:
        from ..render import render
        return render(self)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        alive_count = self.count_alive()
        density_pct = self.density() * 100
        frozen = ", frozen" if self._frozen else ""
        return f"ToroidalGrid({self.width}x{self.height}, alive={alive_count}, density={density_pct:.1f}%{frozen})"
