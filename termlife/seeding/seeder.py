"""Generation-0 grid sources.

Two seeders are provided:

* random seeding, where every cell is independently alive with a given
  probability, drawn from an injectable numpy Generator so runs can be
  reproduced;
* seed files, plain text with one live cell per line written as two
  whitespace-separated non-negative integers ``x y`` (x is the row,
  y the column, both 0-indexed).

Seed file problems raise SeedFileError naming the source and line.
"""

import re
import numpy as np
from pathlib import Path
from typing import Iterable, Optional, Union
import logging

from ..core.grid import Grid

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

# Optional sign followed by ASCII digits only
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


class SeedFileError(ValueError):
    """A seed file could not be read or contains an invalid line."""

    def __init__(self, source: str, message: str, line_number: Optional[int] = None):
        self.source = source
        self.line_number = line_number
        self.reason = message
        location = f"{source}:{line_number}" if line_number is not None else source
        super().__init__(f"{location}: {message}")


def random_grid(size: int, density: float = 0.5,
                rng: Optional[np.random.Generator] = None) -> Grid:
    """Create a grid with each cell alive with probability density.

    Args:
        size: Grid dimension N
        density: Probability of a cell being alive (clamped to 0.0-1.0)
        rng: Random source (a fresh default_rng() if None)

    Returns:
        Randomly populated grid
    """
    density = max(0.0, min(1.0, density))
    rng = rng if rng is not None else np.random.default_rng()
    return Grid(size, rng.random((size, size)) < density)


class RandomSeeder:
    """Reproducible random seeding.

    The same seed value always produces the same sequence of grids.
    """

    def __init__(self, size: int, density: float = 0.5, seed: Optional[int] = None):
        self.size = size
        self.density = max(0.0, min(1.0, density))
        self.seed_value = seed
        self.rng = np.random.default_rng(seed)

    def seed(self) -> Grid:
        """Produce a new random generation-0 grid."""
        grid = random_grid(self.size, self.density, self.rng)
        logger.debug(f"Random seed {self.seed_value} produced {grid.count_alive()} live cells "
                     f"(density={self.density})")
        return grid


def _parse_coordinate(token: str, axis: str, size: int, source: str, line_number: int) -> int:
    if not INTEGER_TOKEN.fullmatch(token):
        raise SeedFileError(source, f"{axis} value '{token}' is not an integer", line_number)
    value = int(token)

    if value < 0:
        raise SeedFileError(source, f"{axis} value {value} is negative", line_number)
    if value >= size:
        raise SeedFileError(source, f"{axis} value {value} is outside grid of size {size}", line_number)
    return value


def parse_seed_lines(lines: Iterable[str], size: int, source: str = "<input>") -> Grid:
    """Build a grid from seed lines.

    Blank lines and lines starting with '#' are skipped. Listing the same
    cell twice is harmless.

    Args:
        lines: Text lines, each 'x y'
        size: Grid dimension N
        source: Name used in error messages

    Returns:
        Grid with listed cells alive and all others dead

    Raises:
        SeedFileError: On a line without exactly two fields, a non-integer
            or negative value, or a coordinate >= size
    """
    grid = Grid(size)

    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        parts = stripped.split()
        if len(parts) != 2:
            raise SeedFileError(source, f"expected 2 values 'x y', got {len(parts)}", line_number)

        row = _parse_coordinate(parts[0], "x", size, source, line_number)
        col = _parse_coordinate(parts[1], "y", size, source, line_number)
        grid.set(row, col, True)

    return grid


def load_seed_file(path: Union[str, Path], size: int) -> Grid:
    """Load a generation-0 grid from a seed file.

    Raises:
        SeedFileError: If the file cannot be read or a line is invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            grid = parse_seed_lines(f, size, source=str(path))
    except OSError as e:
        raise SeedFileError(str(path), f"cannot read seed file ({e.strerror or e})") from e
    except UnicodeDecodeError as e:
        raise SeedFileError(str(path), f"seed file is not valid UTF-8 text ({e.reason})") from e

    logger.info(f"Loaded {grid.count_alive()} live cells from {path}")
    return grid
