"""Generation-0 grid sources."""

from .seeder import SeedFileError, RandomSeeder, random_grid, parse_seed_lines, load_seed_file

__all__ = ['SeedFileError', 'RandomSeeder', 'random_grid', 'parse_seed_lines', 'load_seed_file']
