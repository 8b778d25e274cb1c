"""Square grid state for Conway's Game of Life.

The grid is the only piece of simulation state. It wraps a fixed-size
N x N numpy boolean array (True=alive, False=dead) addressed by
(row, col). A grid's dimensions never change after construction; each
generation is produced as a brand new Grid rather than by editing the
previous one in place.
"""

import numpy as np
from typing import Iterator, Optional, Tuple
import logging

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 20
MAX_GRID_SIZE = 512  # Prevent excessive memory usage and unreadable frames


class Grid:
    """N x N boolean grid of cell states.

    Attributes:
        size: Number of rows (and columns) in the grid
        state: 2D numpy boolean array of shape (size, size)
    """

    def __init__(self, size: int = DEFAULT_GRID_SIZE, initial_state: Optional[np.ndarray] = None):
        """Initialize grid with given dimension.

        Args:
            size: Grid dimension N (the grid is N x N)
            initial_state: Optional initial cell states, copied into the grid

        Raises:
            ValueError: If size is invalid or initial_state shape/dtype doesn't match
        """
        if size < 1:
            raise ValueError("Grid size must be at least 1x1")

        if size > MAX_GRID_SIZE:
            raise ValueError(f"Grid size cannot exceed {MAX_GRID_SIZE}x{MAX_GRID_SIZE}")

        self.size = size

        if initial_state is not None:
            if initial_state.shape != (size, size):
                raise ValueError(f"Initial state shape {initial_state.shape} doesn't match grid size {(size, size)}")
            if initial_state.dtype != bool:
                raise ValueError("Initial state must be boolean array")
            self.state = initial_state.copy()
        else:
            self.state = np.zeros((size, size), dtype=bool)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Grid':
        """Create grid from a square array, coercing truthy values to alive.

        Raises:
            ValueError: If the array is not two-dimensional and square
        """
        array = np.asarray(array)
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise ValueError(f"Grid array must be square, got shape {array.shape}")
        return cls(array.shape[0], array.astype(bool))

    @classmethod
    def from_cells(cls, size: int, cells) -> 'Grid':
        """Create grid with the given (row, col) cells alive and all others dead.

        Raises:
            IndexError: If any coordinate lies outside the grid
        """
        grid = cls(size)
        for row, col in cells:
            grid.set(row, col, True)
        return grid

    def copy(self) -> 'Grid':
        """Create a deep copy of the grid."""
        return Grid(self.size, self.state)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) addresses a cell of this grid."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> bool:
        """Get cell state at coordinates.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.size}x{self.size} grid")
        return bool(self.state[row, col])

    def set(self, row: int, col: int, alive: bool) -> None:
        """Set cell state at coordinates.

        Only used while building a grid (seeding, pattern placement); the
        engine never writes into a grid it is reading.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.size}x{self.size} grid")
        self.state[row, col] = alive

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self.state))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / (self.size * self.size)

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self.state)

    def alive_cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate over (row, col) of alive cells in row-major order."""
        rows, cols = np.nonzero(self.state)
        for row, col in zip(rows, cols):
            yield int(row), int(col)

    def rows(self) -> Iterator[Tuple[bool, ...]]:
        """Iterate over rows as tuples of plain bools."""
        for row in self.state:
            yield tuple(bool(cell) for cell in row)

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using grid[row, col] syntax."""
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: Tuple[int, int], value: bool) -> None:
        """Set cell state using grid[row, col] = value syntax."""
        row, col = key
        self.set(row, col, value)

    def __eq__(self, other: object) -> bool:
        """Check equality with another grid."""
        if not isinstance(other, Grid):
            return False
        return self.size == other.size and np.array_equal(self.state, other.state)

    def __str__(self) -> str:
        """Plain text picture of the grid, one line per row."""
        alive_char = '█'
        dead_char = '░'
        return '\n'.join(
            ''.join(alive_char if cell else dead_char for cell in row)
            for row in self.state
        )

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        alive_count = self.count_alive()
        density_pct = self.density() * 100
        return f"Grid({self.size}x{self.size}, alive={alive_count}, density={density_pct:.1f}%)"
