"""Simulation loop.

Owns the current grid and the generation counter. Each step computes the
next grid from the current one, hands the transition to the renderer,
rebinds the current grid, and pauses. By default the loop never ends on
its own; it can optionally stop after a number of generations or once
the grid is extinct or still.
"""

import time
from typing import Callable, Optional
import logging

from .config import SimulationConfig
from .core.conway import LifeEngine, default_engine
from .core.grid import Grid
from .core.transitions import FrameSummary, summarize
from .patterns.library import centered_pattern_grid
from .render.terminal import TerminalRenderer
from .seeding.seeder import RandomSeeder, load_seed_file

logger = logging.getLogger(__name__)


class SleepPacer:
    """Blocking fixed delay between frames.

    The sleep function is injectable so tests can record pauses instead
    of waiting.
    """

    def __init__(self, interval: float, sleep: Callable[[float], None] = time.sleep):
        self.interval = interval
        self._sleep = sleep

    def pause(self) -> None:
        if self.interval > 0:
            self._sleep(self.interval)


class Simulation:
    """Drives the engine over successive generations."""

    def __init__(self,
                 initial: Grid,
                 engine: Optional[LifeEngine] = None,
                 renderer: Optional[TerminalRenderer] = None,
                 pacer: Optional[SleepPacer] = None,
                 vectorized: bool = False,
                 max_generations: Optional[int] = None,
                 stop_when_static: bool = False):
        """Initialize simulation.

        Args:
            initial: Generation-0 grid
            engine: Rules engine (default_engine if None)
            renderer: Frame renderer (frames are not drawn if None)
            pacer: Delay between frames (no delay if None)
            vectorized: Use the numpy transition instead of the cell scan
            max_generations: Stop after this many steps (None runs forever)
            stop_when_static: Stop once the grid is extinct or unchanged
        """
        self.grid = initial
        self.generation = 0
        self.engine = engine or default_engine
        self.renderer = renderer
        self.pacer = pacer
        self.vectorized = vectorized
        self.max_generations = max_generations
        self.stop_when_static = stop_when_static
        self.last_frame: Optional[FrameSummary] = None
        self.stop_reason: Optional[str] = None

    def _transition(self, grid: Grid) -> Grid:
        if self.vectorized:
            return self.engine.next_generation_vectorized(grid)
        return self.engine.next_generation(grid)

    def step(self) -> FrameSummary:
        """Advance one generation and render the transition.

        Returns:
            Summary of the frame that was produced
        """
        previous = self.grid
        current = self._transition(previous)

        # Frame is labelled with the number of steps completed before this one
        frame = summarize(previous, current, self.generation)
        if self.renderer is not None:
            self.renderer.display(frame)

        if self.stop_when_static and self.stop_reason is None:
            if current.is_empty():
                self.stop_reason = "extinct"
            elif current == previous:
                self.stop_reason = "static"

        self.grid = current
        self.generation += 1
        self.last_frame = frame

        logger.debug(f"Generation {self.generation}: population={frame.population}, "
                     f"born={frame.born}, died={frame.died}")
        return frame

    def _finished(self) -> bool:
        if self.stop_reason is not None:
            return True
        if self.max_generations is not None and self.generation >= self.max_generations:
            self.stop_reason = "generation limit"
            return True
        return False

    def run(self) -> int:
        """Step until a stop condition is met (forever if none is set).

        Returns:
            Number of generations computed
        """
        self.stop_reason = None
        logger.info(f"Starting simulation on {self.grid.size}x{self.grid.size} grid "
                    f"with population {self.grid.count_alive()}")

        while not self._finished():
            self.step()
            if self._finished():
                break
            if self.pacer is not None:
                self.pacer.pause()

        logger.info(f"Simulation stopped after {self.generation} generations ({self.stop_reason})")
        return self.generation


def initial_grid(config: SimulationConfig) -> Grid:
    """Produce generation 0 from the configured seed source.

    Raises:
        SeedFileError: If the configured seed file is missing or invalid
        ValueError: If the configured pattern is unknown or does not fit
    """
    if config.seed_file is not None:
        return load_seed_file(config.seed_file, config.grid_size)
    if config.pattern is not None:
        return centered_pattern_grid(config.pattern, config.grid_size)
    return RandomSeeder(config.grid_size, config.density, config.random_seed).seed()


def build_simulation(config: SimulationConfig,
                     renderer: Optional[TerminalRenderer] = None,
                     pacer: Optional[SleepPacer] = None,
                     engine: Optional[LifeEngine] = None) -> Simulation:
    """Create a simulation wired up from configuration.

    The renderer and pacer default to a colored stdout renderer and a
    sleeping pacer at the configured interval.
    """
    if renderer is None:
        renderer = TerminalRenderer(use_color=config.use_color)
    if pacer is None:
        pacer = SleepPacer(config.frame_interval)

    return Simulation(
        initial_grid(config),
        engine=engine,
        renderer=renderer,
        pacer=pacer,
        vectorized=config.vectorized,
        max_generations=config.max_generations,
        stop_when_static=config.stop_when_static,
    )
