"""Grid model, rules and the generation transition."""

from .grid import Grid, DEFAULT_GRID_SIZE, MAX_GRID_SIZE
from .conway_rules import ConwayRuleParams, SURVIVAL_SET, BIRTH_SET
from .conway import LifeEngine, default_engine, count_neighbors, next_generation, population
from .transitions import CellTransition, FrameSummary, classify_cell, transition_map, summarize

__all__ = [
    'Grid',
    'DEFAULT_GRID_SIZE',
    'MAX_GRID_SIZE',
    'ConwayRuleParams',
    'SURVIVAL_SET',
    'BIRTH_SET',
    'LifeEngine',
    'default_engine',
    'count_neighbors',
    'next_generation',
    'population',
    'CellTransition',
    'FrameSummary',
    'classify_cell',
    'transition_map',
    'summarize'
]
