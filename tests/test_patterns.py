"""
Starting Pattern Tests

Placement, wraparound and the pattern registry.
"""

import pytest
import numpy as np
from golife.core.errors import InvalidDimensionError
from golife.core.grid import ToroidalGrid
from golife.patterns import (
    PATTERNS,
    build_pattern,
    glider_grid,
    load_pattern,
    place_cells,
    random_grid,
)


class TestPlacement:
    """Cells and arrays stamped onto a grid."""

    def test_place_cells_relative_to_origin(self):
        grid = ToroidalGrid.empty(6, 6)
        place_cells(grid, [(0, 0), (1, -1)], origin=(2, 3))
        assert grid.live_cells() == {(2, 3), (3, 2)}

    def test_load_pattern_wraps(self):
        """A glider loaded near the bottom-right corner wraps around."""
        grid = ToroidalGrid.empty(6, 6)
        pattern = np.array([[0, 1, 0], [0, 0, 1], [1, 1, 1]])
        load_pattern(grid, pattern, 4, 4)
        assert grid.count_alive() == 5
        assert grid.live_cells() == {(5, 4), (0, 5), (4, 0), (5, 0), (0, 0)}

    def test_load_pattern_requires_2d(self):
        with pytest.raises(ValueError, match="2D"):
            load_pattern(ToroidalGrid.empty(3, 3), np.ones(3), 0, 0)

    def test_frozen_grid_rejects_patterns(self):
        grid = ToroidalGrid.empty(3, 3).freeze()
        with pytest.raises(RuntimeError):
            place_cells(grid, [(0, 0)])


class TestBuilders:
    """Every builder returns a finished, frozen grid."""

    def test_glider_around_center(self):
        grid = glider_grid(25, 25)
        assert grid.frozen
        assert grid.live_cells() == {(12, 11), (13, 12), (11, 13), (12, 13), (13, 13)}

    def test_glider_rejects_bad_dimensions(self):
        with pytest.raises(InvalidDimensionError):
            glider_grid(0, 25)

    def test_random_grid_reproducible(self):
        a = random_grid(20, 10, density=0.5, seed=17)
        b = random_grid(20, 10, density=0.5, seed=17)
        assert a == b
        assert a.frozen
        assert 0.3 < a.density() < 0.7

    @pytest.mark.parametrize("density,expected", [(0.0, 0), (1.0, 48)])
    def test_random_grid_density_extremes(self, density, expected):
        assert random_grid(8, 6, density=density, seed=1).count_alive() == expected

    @pytest.mark.parametrize("density", [-0.1, 1.5])
    def test_random_grid_density_validated(self, density):
        with pytest.raises(ValueError, match="Density"):
            random_grid(4, 4, density=density)

    @pytest.mark.parametrize("name", sorted(PATTERNS))
    def test_build_every_pattern(self, name):
        grid = build_pattern(name, 10, 8, seed=3)
        assert (grid.width, grid.height) == (10, 8)
        assert grid.frozen

    def test_build_empty(self):
        assert build_pattern('empty', 4, 4).is_empty()

    def test_unknown_pattern(self):
        with pytest.raises(ValueError, match="Unknown pattern 'gun'"):
            build_pattern('gun', 10, 10)
