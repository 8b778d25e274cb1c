"""Classic Conway pattern definitions and placement helpers.

Provides small canonical still lifes, oscillators and the glider as
boolean arrays, and places them into grids. Placement never wraps: a
pattern that would cross the grid edge is rejected, matching the
engine's no-wraparound boundary.
"""

import numpy as np
from typing import Dict, List
from ..core.grid import Grid
import logging

logger = logging.getLogger(__name__)


# Stable 2x2 still life
BLOCK = np.array([
    [True, True],
    [True, True]
], dtype=bool)

# Horizontal blinker, period 2 oscillator
BLINKER = np.array([[True, True, True]], dtype=bool)

# Period 2 oscillator
TOAD = np.array([
    [False, True, True, True],
    [True, True, True, False]
], dtype=bool)

# Period 2 oscillator made of two diagonal blocks
BEACON = np.array([
    [True, True, False, False],
    [True, True, False, False],
    [False, False, True, True],
    [False, False, True, True]
], dtype=bool)

# Glider heading down and to the right
GLIDER = np.array([
    [False, True, False],
    [False, False, True],
    [True, True, True]
], dtype=bool)

PATTERNS: Dict[str, np.ndarray] = {
    "block": BLOCK,
    "blinker": BLINKER,
    "toad": TOAD,
    "beacon": BEACON,
    "glider": GLIDER,
}


def pattern_names() -> List[str]:
    """Names accepted by get_pattern, sorted."""
    return sorted(PATTERNS)


def get_pattern(name: str) -> np.ndarray:
    """Get a copy of a named pattern.

    Raises:
        ValueError: If the name is unknown
    """
    try:
        return PATTERNS[name.lower()].copy()
    except KeyError:
        raise ValueError(f"Unknown pattern '{name}' (choose from {', '.join(pattern_names())})") from None


def place_pattern(grid: Grid, pattern: np.ndarray, row: int, col: int) -> Grid:
    """Return a copy of grid with the pattern's live cells set alive.

    Args:
        grid: Grid to start from (not modified)
        pattern: 2D boolean array
        row: Row of the pattern's top-left corner
        col: Column of the pattern's top-left corner

    Raises:
        ValueError: If the pattern does not fit inside the grid at (row, col)
    """
    pattern = np.asarray(pattern, dtype=bool)
    height, width = pattern.shape

    if row < 0 or col < 0 or row + height > grid.size or col + width > grid.size:
        raise ValueError(
            f"Pattern {height}x{width} at ({row}, {col}) does not fit in {grid.size}x{grid.size} grid"
        )

    placed = grid.copy()
    placed.state[row:row + height, col:col + width] |= pattern
    return placed


def centered_pattern_grid(name: str, size: int) -> Grid:
    """Create a size x size grid holding the named pattern in its center.

    Raises:
        ValueError: If the name is unknown or the pattern is larger than the grid
    """
    pattern = get_pattern(name)
    height, width = pattern.shape
    if height > size or width > size:
        raise ValueError(f"Pattern {name} ({height}x{width}) does not fit in {size}x{size} grid")

    row = (size - height) // 2
    col = (size - width) // 2
    logger.debug(f"Placing {name} at ({row}, {col}) in {size}x{size} grid")
    return place_pattern(Grid(size), pattern, row, col)
