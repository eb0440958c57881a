"""
Conway's Game of Life Rules

The classic B3/S23 rule evaluated on a toroidal grid: a cell is alive in the
next generation if it has exactly 3 live neighbors, or if it is alive now and
has exactly 2. Evaluation only reads the grid, so any number of threads may
evaluate different cells of the same generation at once.
"""

from typing import Dict, FrozenSet, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import ToroidalGrid


# Standard Conway rules - fixed
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

# Moore neighborhood offsets, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    else:
        return live_neighbors in BIRTH_SET


class RuleEvaluator:
    """Computes next-generation cell states from a frozen grid."""

    def count_neighbors(self, grid: 'ToroidalGrid', x: int, y: int) -> int:
        """Count living neighbors of a cell using the Moore neighborhood.

        Neighbors are resolved through ``grid.alive`` so edges wrap.

        Args:
            grid: The grid containing the cell
            x: X coordinate of cell (column)
            y: Y coordinate of cell (row)

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dx, dy in NEIGHBOR_OFFSETS:
            if grid.alive(x + dx, y + dy):
                count += 1
        return count

    def next_state(self, grid: 'ToroidalGrid', x: int, y: int) -> bool:
        """Tell whether (x, y) is alive in the generation after ``grid``."""
        return update_cell(grid.alive(x, y), self.count_neighbors(grid, x, y))

    def rule_table(self) -> Dict[Tuple[bool, int], bool]:
        """Get the complete rule table.

        Returns:
            Dictionary mapping (current_state, neighbor_count) to next_state
        """
        return {
            (current_state, neighbors): update_cell(current_state, neighbors)
            for current_state in (False, True)
            for neighbors in range(9)
        }

    def __repr__(self) -> str:
        return f"RuleEvaluator(birth={sorted(BIRTH_SET)}, survival={sorted(SURVIVAL_SET)})"


# Singleton instance for convenience
default_rules = RuleEvaluator()


def next_state(grid: 'ToroidalGrid', x: int, y: int) -> bool:
    """Module-level shortcut for ``default_rules.next_state``."""
    return default_rules.next_state(grid, x, y)
