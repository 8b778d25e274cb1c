"""
termlife: Conway's Game of Life in the terminal

A fixed-size square grid evolved with the classic B3/S23 rules (no
wraparound at the edges) and animated with color-coded cell transitions.
"""

from .core.grid import Grid
from .core.conway import LifeEngine, count_neighbors, next_generation, population
from .core.transitions import CellTransition, FrameSummary, summarize
from .config import SimulationConfig
from .simulation import Simulation, SleepPacer, build_simulation

__version__ = "0.1.0"

__all__ = [
    'Grid',
    'LifeEngine',
    'count_neighbors',
    'next_generation',
    'population',
    'CellTransition',
    'FrameSummary',
    'summarize',
    'SimulationConfig',
    'Simulation',
    'SleepPacer',
    'build_simulation'
]
