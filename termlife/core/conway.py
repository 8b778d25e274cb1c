"""Conway's Game of Life rules engine.

Turns the grid for generation t into the grid for generation t+1. The
neighborhood is the 8-connected Moore neighborhood clipped at the grid
edges: positions outside [0, N) are never counted, so edge cells have 5
candidate neighbors and corner cells 3. There is no toroidal wraparound.
"""

import numpy as np
from typing import Optional
from .grid import Grid
from .conway_rules import ConwayRuleParams
import logging

logger = logging.getLogger(__name__)

# Offsets of the 8 neighbors, center excluded
NEIGHBOR_OFFSETS = [
    (dr, dc)
    for dr in (-1, 0, 1)
    for dc in (-1, 0, 1)
    if not (dr == 0 and dc == 0)
]


class LifeEngine:
    """Conway's Game of Life rules engine.

    Implements the classic cellular automaton rules:
    - Live cell survives with 2-3 neighbors
    - Dead cell becomes alive with exactly 3 neighbors
    - All other cells die/become dead

    The engine holds no grid state; every method reads the grid it is
    given and never modifies it.
    """

    def __init__(self, rule_params: Optional[ConwayRuleParams] = None):
        """Initialize the rules engine.

        Args:
            rule_params: Birth/survival parameters (standard Conway rules if None)
        """
        self.rule_params = rule_params or ConwayRuleParams.standard()

    def count_neighbors(self, grid: Grid, row: int, col: int) -> int:
        """Count living neighbors of a cell using the clipped Moore neighborhood.

        Args:
            grid: The grid containing the cell
            row: Row of the cell
            col: Column of the cell

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        state = grid.state

        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc

            # Cells outside the grid do not exist (no wraparound)
            if 0 <= nr < grid.size and 0 <= nc < grid.size:
                if state[nr, nc]:
                    count += 1

        return count

    def update_cell(self, grid: Grid, row: int, col: int) -> bool:
        """Apply the rules to determine the next state of one cell.

        Returns:
            Next state of the cell (True=alive, False=dead)
        """
        alive = bool(grid.state[row, col])
        neighbors = self.count_neighbors(grid, row, col)
        return self.rule_params.update_cell(alive, neighbors)

    def next_generation(self, grid: Grid) -> Grid:
        """Apply one generation of the rules to the entire grid.

        Every cell is evaluated against the unmodified input grid and the
        results are written to a fresh grid.

        Args:
            grid: Current grid state (not modified)

        Returns:
            New grid with next generation state
        """
        new_grid = Grid(grid.size)

        for row in range(grid.size):
            for col in range(grid.size):
                new_grid.state[row, col] = self.update_cell(grid, row, col)

        return new_grid

    def neighbor_counts(self, grid: Grid) -> np.ndarray:
        """Live-neighbor count for every cell at once.

        The grid is embedded in a one-cell border of dead cells and the
        eight shifted views are summed, which matches count_neighbors
        exactly at the edges.

        Returns:
            (N, N) integer array of neighbor counts
        """
        size = grid.size
        padded = np.zeros((size + 2, size + 2), dtype=np.uint8)
        padded[1:-1, 1:-1] = grid.state

        counts = np.zeros((size, size), dtype=np.uint8)
        for dr, dc in NEIGHBOR_OFFSETS:
            counts += padded[1 + dr:1 + dr + size, 1 + dc:1 + dc + size]
        return counts

    def next_generation_vectorized(self, grid: Grid) -> Grid:
        """Same transition as next_generation, computed with numpy array ops."""
        counts = self.neighbor_counts(grid)
        survive = grid.state & np.isin(counts, list(self.rule_params.survival_set))
        birth = ~grid.state & np.isin(counts, list(self.rule_params.birth_set))
        return Grid(grid.size, survive | birth)

    def population(self, grid: Grid) -> int:
        """Number of live cells in the grid."""
        return grid.count_alive()

    def get_rule_table(self) -> dict:
        """Get the rule outcome for every (current_state, neighbor_count).

        Returns:
            Dictionary mapping (current_state, neighbor_count) to next_state
        """
        rules = {}

        for current_state in [False, True]:
            for neighbors in range(9):
                rules[(current_state, neighbors)] = self.rule_params.update_cell(current_state, neighbors)

        return rules


# Singleton instance for convenience
default_engine = LifeEngine()


def count_neighbors(grid: Grid, row: int, col: int) -> int:
    """Count live neighbors of (row, col) with the default engine."""
    return default_engine.count_neighbors(grid, row, col)


def next_generation(grid: Grid) -> Grid:
    """Compute the next generation with the default engine."""
    return default_engine.next_generation(grid)


def population(grid: Grid) -> int:
    """Count live cells in grid."""
    return default_engine.population(grid)
