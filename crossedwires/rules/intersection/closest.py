"""Part one: the crossing nearest the central port."""

from __future__ import annotations

from crossedwires.rules.base import SolutionRule
from crossedwires.models import ORIGIN, PuzzleContext, Solution
from crossedwires.core.puzzle import closest_of


class ClosestIntersectionRule(SolutionRule):
    """Manhattan distance from the origin to the nearest crossing."""

    priority = 10

    def get_id(self) -> str:
        return "part1.closest"

    def get_name(self) -> str:
        return "Closest Intersection"

    def solve(self, context: PuzzleContext) -> Solution:
        best = closest_of(context.intersections)
        return Solution(
            rule_id=self.get_id(),
            name=self.get_name(),
            intersection=best,
            answer=best.point.distance_to(ORIGIN) if best else None,
        )
