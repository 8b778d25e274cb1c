#!/usr/bin/env python3
"""
Terminal Game of Life

Runs Conway's Game of Life on a fixed square grid and animates it in the
terminal. With no options: random 20x20 grid, 0.4s per generation, runs
until interrupted with Ctrl-C.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_DENSITY, DEFAULT_FRAME_INTERVAL, SimulationConfig
from .core.grid import DEFAULT_GRID_SIZE
from .patterns.library import pattern_names
from .render.terminal import TerminalRenderer
from .seeding.seeder import SeedFileError
from .simulation import SleepPacer, build_simulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termlife", description="Conway's Game of Life in the terminal")
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size N (square)")
    parser.add_argument("--interval", type=float, default=DEFAULT_FRAME_INTERVAL,
                        help="Seconds between generations")
    parser.add_argument("--density", type=float, default=DEFAULT_DENSITY,
                        help="Alive probability for random seeding")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seed-file", default=None, help="File of 'x y' lines marking live cells")
    source.add_argument("--pattern", choices=pattern_names(), default=None,
                        help="Start from a named pattern in the grid center")

    parser.add_argument("--generations", type=int, default=None,
                        help="Stop after this many generations (default: run forever)")
    parser.add_argument("--stop-when-static", action="store_true",
                        help="Stop once the grid is extinct or no longer changes")
    parser.add_argument("--vectorized", action="store_true", help="Use the numpy array transition")
    parser.add_argument("--no-color", action="store_true", help="Render without ANSI colors")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (stderr)")
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Translate parsed options into a SimulationConfig."""
    return SimulationConfig(
        grid_size=args.size,
        frame_interval=args.interval,
        density=args.density,
        random_seed=args.seed,
        seed_file=args.seed_file,
        pattern=args.pattern,
        max_generations=args.generations,
        stop_when_static=args.stop_when_static,
        vectorized=args.vectorized,
        use_color=not args.no_color
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Logs go to stderr so they don't interleave with frames on stdout
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    renderer = TerminalRenderer(sys.stdout, use_color=config.use_color)

    try:
        simulation = build_simulation(config, renderer=renderer, pacer=SleepPacer(config.frame_interval))
    except SeedFileError as e:
        logger.error(f"Invalid seed file: {e}")
        return 1
    except ValueError as e:
        parser.error(str(e))

    try:
        simulation.run()
    except KeyboardInterrupt:
        renderer.restore()
        logger.info(f"Interrupted at generation {simulation.generation}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
