"""Main puzzle solver: orchestrates parsing, analysis and rule execution."""

from __future__ import annotations
import logging

from crossedwires.models import PuzzleContext, PuzzleReport, SolveConfig
from crossedwires.core.analyzer import IntersectionAnalyzer
from crossedwires.core.puzzle import Puzzle
from crossedwires.core.registry import SolutionRegistry

logger = logging.getLogger(__name__)


class PuzzleSolver:
    """
    Stateless puzzle solver.

    Takes raw puzzle text, finds the crossings, executes applicable
    rules, and returns a complete PuzzleReport.
    """

    def __init__(self, registry: SolutionRegistry) -> None:
        self.registry = registry
        self.analyzer = IntersectionAnalyzer()

    def solve(self, text: str | None, config: SolveConfig | None = None) -> PuzzleReport:
        if config is None:
            config = SolveConfig()

        puzzle = Puzzle(text)
        context = PuzzleContext(wires=puzzle.wires, config=config)

        # Analysis phase: find every crossing
        self.analyzer.analyze(context)

        # Solution phase: run applicable rules
        rules = self.registry.get_applicable_rules(context)
        for rule in rules:
            context.add_solution(rule.solve(context))
        logger.debug(
            "Solved %d wires: %d crossings, rules %s",
            len(context.wires), len(context.intersections), [r.get_id() for r in rules],
        )

        return PuzzleReport(
            wires=context.wires,
            endstep=puzzle.endstep,
            width=puzzle.width,
            height=puzzle.height,
            intersections=context.intersections,
            solutions=context.solutions,
        )
