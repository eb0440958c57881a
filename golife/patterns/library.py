"""Initial patterns for the toroidal Game of Life.

Builds starting generations: the glider placed around the grid center, the
classic blinker and block, random soup, or any boolean array stamped onto the
grid. Placement wraps around the edges like every other grid access. Every
builder returns a frozen grid ready to hand to the engine.
"""

import logging
from typing import Callable, Dict, Iterable, Optional, Tuple

import numpy as np

from ..core.grid import ToroidalGrid

logger = logging.getLogger(__name__)


# Glider cells as (dx, dy) offsets from the grid center; travels toward +x, +y
GLIDER_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, -1),
    (1, 0),
    (-1, 1), (0, 1), (1, 1),
)

# Rows are y, columns are x
GLIDER_PATTERN = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)

BLINKER_PATTERN = np.array([[True, True, True]], dtype=bool)

BLOCK_PATTERN = np.array([
    [True, True],
    [True, True]
], dtype=bool)


def place_cells(grid: ToroidalGrid, cells: Iterable[Tuple[int, int]],
                origin: Tuple[int, int] = (0, 0)) -> ToroidalGrid:
    """Set the given (dx, dy) offsets from ``origin`` alive.

    Coordinates wrap around the grid edges.

    Returns:
        The same grid, for chaining
    """
    ox, oy = origin
    for dx, dy in cells:
        grid.set(ox + dx, oy + dy, True)
    return grid


def load_pattern(grid: ToroidalGrid, pattern: np.ndarray, x: int, y: int) -> ToroidalGrid:
    """Load a pattern into the grid with its top-left cell at (x, y).

    Args:
        grid: Writable grid to populate
        pattern: 2D array, rows being y and columns x; truthy cells are alive
        x: Top-left x-coordinate for placement
        y: Top-left y-coordinate for placement

    Returns:
        The same grid, for chaining
    """
    pattern = np.asarray(pattern, dtype=bool)
    if pattern.ndim != 2:
        raise ValueError(f"Pattern must be 2D, got {pattern.ndim} dimensions")

    rows, cols = np.nonzero(pattern)
    return place_cells(grid, zip(cols.tolist(), rows.tolist()), origin=(x, y))


def glider_grid(width: int, height: int) -> ToroidalGrid:
    """Create a grid holding a glider around the center.

    Grids of 4 cells or fewer in either direction are left empty since the
    glider would overlap itself.
    """
    grid = ToroidalGrid.empty(width, height)
    if width > 4 and height > 4:
        place_cells(grid, GLIDER_OFFSETS, origin=(width // 2, height // 2))
    else:
        logger.warning(f"Grid {width}x{height} too small for a glider; starting empty")
    return grid.freeze()


def blinker_grid(width: int, height: int) -> ToroidalGrid:
    """Create a grid holding a horizontal blinker centered on the grid."""
    grid = ToroidalGrid.empty(width, height)
    load_pattern(grid, BLINKER_PATTERN, width // 2 - 1, height // 2)
    return grid.freeze()


def block_grid(width: int, height: int) -> ToroidalGrid:
    """Create a grid holding a 2x2 block still life near the center."""
    grid = ToroidalGrid.empty(width, height)
    load_pattern(grid, BLOCK_PATTERN, width // 2 - 1, height // 2 - 1)
    return grid.freeze()


def random_grid(width: int, height: int, density: float = 0.3,
                seed: Optional[int] = None) -> ToroidalGrid:
    """Create a grid of random soup.

    Args:
        width: Grid width
        height: Grid height
        density: Probability of each cell being alive (0.0 to 1.0)
        seed: Seed for reproducible soup

    Raises:
        ValueError: If density is outside [0, 1]
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be between 0 and 1, got {density}")

    grid = ToroidalGrid.empty(width, height)
    rng = np.random.default_rng(seed)
    grid.state[:] = rng.random((grid.height, grid.width)) < density
    return grid.freeze()


PATTERNS: Dict[str, Callable[..., ToroidalGrid]] = {
    'glider': glider_grid,
    'blinker': blinker_grid,
    'block': block_grid,
    'random': random_grid,
    'empty': lambda width, height: ToroidalGrid.empty(width, height).freeze(),
}


def build_pattern(name: str, width: int, height: int, density: float = 0.3,
                  seed: Optional[int] = None) -> ToroidalGrid:
    """Build the named starting pattern.

    Raises:
        ValueError: If the pattern name is unknown
    """
    try:
        builder = PATTERNS[name]
    except KeyError:
        raise ValueError(f"Unknown pattern {name!r}; choose from {', '.join(sorted(PATTERNS))}") from None

    if name == 'random':
        grid = builder(width, height, density=density, seed=seed)
    else:
        grid = builder(width, height)

    logger.debug(f"Built {name} pattern: {grid!r}")
    return grid
