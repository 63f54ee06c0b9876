"""Part two: the crossing both signals reach soonest."""

from __future__ import annotations

from crossedwires.rules.base import SolutionRule
from crossedwires.models import PuzzleContext, Solution
from crossedwires.core.puzzle import fastest_of


class FastestIntersectionRule(SolutionRule):
    """Fewest combined steps along both wires to a crossing."""

    priority = 20

    def get_id(self) -> str:
        return "part2.fastest"

    def get_name(self) -> str:
        return "Fastest Intersection"

    def solve(self, context: PuzzleContext) -> Solution:
        best = fastest_of(context.intersections)
        return Solution(
            rule_id=self.get_id(),
            name=self.get_name(),
            intersection=best,
            answer=best.combined_step if best else None,
        )
