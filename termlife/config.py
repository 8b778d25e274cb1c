"""Runtime configuration for a simulation run."""

from pathlib import Path
from typing import Optional, Union

from .core.grid import DEFAULT_GRID_SIZE, MAX_GRID_SIZE

DEFAULT_FRAME_INTERVAL = 0.4  # Seconds between generations
DEFAULT_DENSITY = 0.5


class SimulationConfig:
    """Configuration for a simulation run."""

    def __init__(self,
                 grid_size: int = DEFAULT_GRID_SIZE,
                 frame_interval: float = DEFAULT_FRAME_INTERVAL,
                 density: float = DEFAULT_DENSITY,
                 random_seed: Optional[int] = None,
                 seed_file: Optional[Union[str, Path]] = None,
                 pattern: Optional[str] = None,
                 max_generations: Optional[int] = None,
                 stop_when_static: bool = False,
                 vectorized: bool = False,
                 use_color: bool = True):
        """Initialize simulation configuration.

        Args:
            grid_size: Grid dimension N (1-512)
            frame_interval: Pause between generations in seconds (0.0+)
            density: Alive probability for random seeding (clamped to 0.0-1.0)
            random_seed: Seed for the random generator (None for fresh entropy)
            seed_file: Optional seed file of 'x y' lines; overrides random seeding
            pattern: Optional named pattern placed in the grid center
            max_generations: Stop after this many generations (None runs forever)
            stop_when_static: Stop once the grid is extinct or no longer changes
            vectorized: Use the numpy array transition instead of the cell scan
            use_color: Emit ANSI colors when rendering

        Raises:
            ValueError: If a value cannot be used
        """
        if not 1 <= grid_size <= MAX_GRID_SIZE:
            raise ValueError(f"Grid size must be between 1 and {MAX_GRID_SIZE}, got {grid_size}")
        if frame_interval < 0:
            raise ValueError(f"Frame interval cannot be negative, got {frame_interval}")
        if max_generations is not None and max_generations < 0:
            raise ValueError(f"Generation limit cannot be negative, got {max_generations}")
        if seed_file is not None and pattern is not None:
            raise ValueError("Use either a seed file or a pattern, not both")

        self.grid_size = grid_size
        self.frame_interval = frame_interval
        self.density = max(0.0, min(1.0, density))
        self.random_seed = random_seed
        self.seed_file = Path(seed_file) if seed_file is not None else None
        self.pattern = pattern
        self.max_generations = max_generations
        self.stop_when_static = stop_when_static
        self.vectorized = vectorized
        self.use_color = use_color

    def copy(self) -> 'SimulationConfig':
        """Create a copy of the configuration."""
        return SimulationConfig(
            grid_size=self.grid_size,
            frame_interval=self.frame_interval,
            density=self.density,
            random_seed=self.random_seed,
            seed_file=self.seed_file,
            pattern=self.pattern,
            max_generations=self.max_generations,
            stop_when_static=self.stop_when_static,
            vectorized=self.vectorized,
            use_color=self.use_color
        )

    def __repr__(self) -> str:
        return (f"SimulationConfig(grid_size={self.grid_size}, frame_interval={self.frame_interval}, "
                f"density={self.density}, random_seed={self.random_seed}, seed_file={self.seed_file}, "
                f"pattern={self.pattern}, max_generations={self.max_generations}, "
                f"stop_when_static={self.stop_when_static}, vectorized={self.vectorized}, "
                f"use_color={self.use_color})")
