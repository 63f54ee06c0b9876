"""Solution rule interface.

A rule turns the crossings found for a puzzle into one reported answer,
e.g. the distance to the closest crossing.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from crossedwires.models.context import PuzzleContext
from crossedwires.models.intersection import Solution


class SolutionRule(ABC):
    """One puzzle answer, derived from the analyzed crossings."""

    # Reports list solutions in ascending priority.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Stable key used by SolveConfig and the API, e.g. 'part1.closest'."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    def applies(self, context: PuzzleContext) -> bool:
        return True

    @abstractmethod
    def solve(self, context: PuzzleContext) -> Solution:
        """
        Pick this rule's crossing from `context.intersections`.

        With no crossings the rule still returns a Solution, with no
        intersection and no answer.
        """
        ...
