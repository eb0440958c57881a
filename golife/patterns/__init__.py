"""
Starting patterns for the toroidal Game of Life.
"""

from .library import (
    BLINKER_PATTERN,
    BLOCK_PATTERN,
    GLIDER_OFFSETS,
    GLIDER_PATTERN,
    PATTERNS,
    blinker_grid,
    block_grid,
    build_pattern,
    glider_grid,
    load_pattern,
    place_cells,
    random_grid,
)

__all__ = [
    'GLIDER_OFFSETS',
    'GLIDER_PATTERN',
    'BLINKER_PATTERN',
    'BLOCK_PATTERN',
    'PATTERNS',
    'build_pattern',
    'glider_grid',
    'blinker_grid',
    'block_grid',
    'random_grid',
    'load_pattern',
    'place_cells',
]
