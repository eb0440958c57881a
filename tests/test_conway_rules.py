"""Comprehensive tests for Conway's Game of Life rules.

Tests every (state, neighbor count) combination, neighbor counting across
the toroidal edges, and the rule table.
"""

import itertools

import pytest
import numpy as np
from golife.core.grid import ToroidalGrid
from golife.core.conway_rules import (
    BIRTH_SET,
    NEIGHBOR_OFFSETS,
    SURVIVAL_SET,
    RuleEvaluator,
    default_rules,
    next_state,
    update_cell,
)


def make_neighborhood(center_alive: bool, alive_offsets) -> ToroidalGrid:
    """5x5 grid with the center (2, 2) and the given neighbor offsets set."""
    grid = ToroidalGrid.empty(5, 5)
    grid.set(2, 2, center_alive)
    for dx, dy in alive_offsets:
        grid.set(2 + dx, 2 + dy, True)
    return grid.freeze()


class TestRuleConstants:
    """Standard B3/S23 thresholds."""

    def test_standard_sets(self):
        assert SURVIVAL_SET == {2, 3}
        assert BIRTH_SET == {3}

    def test_neighbor_offsets(self):
        """Eight offsets, center excluded, each unique."""
        assert len(NEIGHBOR_OFFSETS) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS
        assert len(set(NEIGHBOR_OFFSETS)) == 8

    def test_singleton_rules(self):
        assert isinstance(default_rules, RuleEvaluator)


class TestUpdateCell:
    """The pure (state, count) -> state rule."""

    @pytest.mark.parametrize("alive", [False, True])
    @pytest.mark.parametrize("neighbors", range(9))
    def test_rule_correctness_table(self, alive, neighbors):
        expected = neighbors == 3 or (neighbors == 2 and alive)
        assert update_cell(alive, neighbors) == expected

    def test_rule_table_complete(self):
        table = RuleEvaluator().rule_table()
        assert len(table) == 18
        born = {key for key, value in table.items() if value}
        assert born == {(False, 3), (True, 2), (True, 3)}


class TestNeighborCounting:
    """Neighbor counting goes through the grid's wrapping lookup."""

    def test_center_not_counted(self):
        grid = make_neighborhood(True, [])
        assert RuleEvaluator().count_neighbors(grid, 2, 2) == 0

    def test_all_eight_counted(self):
        grid = make_neighborhood(False, NEIGHBOR_OFFSETS)
        assert RuleEvaluator().count_neighbors(grid, 2, 2) == 8

    def test_corner_wraps_to_opposite_edges(self):
        """Cell (0, 0) sees the last row and column as neighbors."""
        grid = ToroidalGrid.empty(5, 5)
        for x, y in [(4, 4), (4, 0), (0, 4), (1, 1)]:
            grid.set(x, y, True)
        assert RuleEvaluator().count_neighbors(grid.freeze(), 0, 0) == 4

    def test_far_coordinates_wrap(self):
        grid = make_neighborhood(False, [(-1, -1), (1, 1), (0, 1)])
        rules = RuleEvaluator()
        assert rules.count_neighbors(grid, 2, 2) == 3
        assert rules.count_neighbors(grid, 2 + 5 * 7, 2 - 5 * 3) == 3

    def test_three_by_three_torus_counts_each_cell_once(self):
        """On a 3x3 torus every other cell is a neighbor exactly once."""
        grid = ToroidalGrid.from_array(np.ones((3, 3), dtype=bool))
        assert RuleEvaluator().count_neighbors(grid, 1, 1) == 8
        assert RuleEvaluator().count_neighbors(grid, 0, 0) == 8


class TestNextState:
    """next_state over real neighborhoods."""

    @pytest.mark.parametrize("alive", [False, True])
    @pytest.mark.parametrize("neighbors", range(9))
    def test_every_count_and_state(self, alive, neighbors):
        """All n in 0..8 and both states, for every choice of neighbors."""
        expected = neighbors == 3 or (neighbors == 2 and alive)
        for offsets in itertools.combinations(NEIGHBOR_OFFSETS, neighbors):
            grid = make_neighborhood(alive, offsets)
            assert next_state(grid, 2, 2) == expected, f"offsets={offsets}"

    def test_does_not_modify_grid(self):
        grid = make_neighborhood(True, [(0, 1), (1, 0)])
        before = grid.to_array()
        RuleEvaluator().next_state(grid, 2, 2)
        assert np.array_equal(grid.state, before)

    def test_works_on_unfrozen_grid(self):
        grid = ToroidalGrid.empty(5, 5)
        for x in range(1, 4):
            grid.set(x, 2, True)
        assert default_rules.next_state(grid, 2, 1) is True
        assert default_rules.next_state(grid, 1, 2) is False
