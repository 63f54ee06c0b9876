"""Puzzle context: accumulates state during a single solve."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .wire import Wire
from .intersection import Intersection, Solution
from .parameters import SolveConfig


class PuzzleContext(BaseModel):
    """
    Holds all state during a single solve pass.

    The analyzer adds intersections.
    Rules add solutions.
    The solver orchestrates the flow.
    """
    # Input
    wires: list[Wire]
    config: SolveConfig = Field(default_factory=SolveConfig)

    # Analysis results (populated by the analyzer)
    intersections: list[Intersection] = []

    # Output (populated by rules)
    solutions: list[Solution] = []

    def add_solution(self, solution: Solution) -> None:
        self.solutions.append(solution)
