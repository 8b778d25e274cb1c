"""Canonical Conway patterns."""

from .library import PATTERNS, get_pattern, pattern_names, place_pattern, centered_pattern_grid

__all__ = ['PATTERNS', 'get_pattern', 'pattern_names', 'place_pattern', 'centered_pattern_grid']
