"""Display options and solver configuration."""

from __future__ import annotations
from pydantic import BaseModel


class PuzzleOptions(BaseModel):
    """Renderer toggles carried alongside the puzzle input."""
    show_intersections: bool = True
    show_solution1: bool = False    # Closest crossing to the origin
    show_solution2: bool = False    # Crossing with fewest combined steps


class SolveConfig(BaseModel):
    """Controls which solution rules run."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules


class ServiceSettings(BaseModel):
    """Limits for the solving service."""
    cache_size: int = 128            # Reports memoised per (input, config)
    max_input_length: int = 200_000  # Characters accepted per puzzle input
