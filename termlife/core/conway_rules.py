"""
Conway's Game of Life Birth/Survival Rules

The per-cell rule only: given whether a cell is alive and how many live
neighbors it has, decide its next state. Neighbor counting and grid
traversal live in the engine.
"""

from typing import Set, Optional


# Standard Conway rules (B3/S23)
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


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


class ConwayRuleParams:
    """Birth and survival neighbor counts used by the engine.

    Defaults to the standard Conway rules.
    """

    def __init__(self,
                 survival_set: Optional[Set[int]] = None,
                 birth_set: Optional[Set[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})

        Raises:
            ValueError: If any neighbor count lies outside 0-8
        """
        self.survival_set: Set[int] = set(survival_set) if survival_set is not None else SURVIVAL_SET.copy()
        self.birth_set: Set[int] = set(birth_set) if birth_set is not None else BIRTH_SET.copy()

        for count in self.survival_set | self.birth_set:
            if not 0 <= count <= 8:
                raise ValueError(f"Neighbor count {count} outside 0-8")

    @classmethod
    def standard(cls) -> 'ConwayRuleParams':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET.copy(), BIRTH_SET.copy())

    def update_cell(self, alive: bool, live_neighbors: int) -> bool:
        """Apply these rule parameters to a cell."""
        if alive:
            return live_neighbors in self.survival_set
        else:
            return live_neighbors in self.birth_set

    def notation(self) -> str:
        """Rule in B/S notation, e.g. 'B3/S23'."""
        birth = ''.join(str(n) for n in sorted(self.birth_set))
        survival = ''.join(str(n) for n in sorted(self.survival_set))
        return f"B{birth}/S{survival}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConwayRuleParams):
            return False
        return self.survival_set == other.survival_set and self.birth_set == other.birth_set

    def __repr__(self) -> str:
        return f"ConwayRuleParams(survival={self.survival_set}, birth={self.birth_set})"
