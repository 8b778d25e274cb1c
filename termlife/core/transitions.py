"""Per-cell transition categories between two consecutive generations.

This is what the renderer consumes: for each cell, whether it was born,
survived, died or stayed empty, together with the generation number and
the population of the newer grid.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List
from .grid import Grid


class CellTransition(Enum):
    """State change of one cell from the previous to the current generation."""
    BORN = "born"          # dead -> alive
    SURVIVED = "survived"  # alive -> alive
    DIED = "died"          # alive -> dead
    EMPTY = "empty"        # dead -> dead


_TRANSITIONS = {
    (False, True): CellTransition.BORN,
    (True, True): CellTransition.SURVIVED,
    (True, False): CellTransition.DIED,
    (False, False): CellTransition.EMPTY,
}


def classify_cell(was_alive: bool, is_alive: bool) -> CellTransition:
    """Map a (previous, current) cell state pair to its transition."""
    return _TRANSITIONS[(bool(was_alive), bool(is_alive))]


def transition_map(previous: Grid, current: Grid) -> List[List[CellTransition]]:
    """Classify every cell of two same-sized grids.

    Raises:
        ValueError: If the grids differ in size
    """
    if previous.size != current.size:
        raise ValueError(f"Grid sizes differ: {previous.size} vs {current.size}")

    return [
        [classify_cell(was, now) for was, now in zip(prev_row, curr_row)]
        for prev_row, curr_row in zip(previous.rows(), current.rows())
    ]


@dataclass
class FrameSummary:
    """Everything a renderer needs to draw one generation."""
    generation: int
    population: int
    transitions: List[List[CellTransition]] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.transitions)

    def count(self, kind: CellTransition) -> int:
        """Number of cells with the given transition."""
        return sum(row.count(kind) for row in self.transitions)

    @property
    def born(self) -> int:
        return self.count(CellTransition.BORN)

    @property
    def died(self) -> int:
        return self.count(CellTransition.DIED)


def summarize(previous: Grid, current: Grid, generation: int) -> FrameSummary:
    """Build the frame summary for the step previous -> current."""
    return FrameSummary(
        generation=generation,
        population=current.count_alive(),
        transitions=transition_map(previous, current),
    )
