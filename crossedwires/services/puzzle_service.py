"""High-level puzzle service: facade for the API layer."""

from __future__ import annotations
import logging
from functools import lru_cache

from crossedwires.models import (
    Intersection, Point, PuzzleReport, ServiceSettings, SolveConfig,
)
from crossedwires.core.solver import PuzzleSolver
from crossedwires.core.registry import SolutionRegistry, create_default_registry

logger = logging.getLogger(__name__)


class InputTooLarge(ValueError):
    """Puzzle input exceeds ServiceSettings.max_input_length."""


class PuzzleService:
    """Validates input, delegates to the solver, memoises reports."""

    def __init__(
        self,
        registry: SolutionRegistry | None = None,
        settings: ServiceSettings | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.settings = settings or ServiceSettings()
        self.solver = PuzzleSolver(self.registry)
        self._solve_cached = lru_cache(maxsize=self.settings.cache_size)(self._solve_uncached)

    def solve(self, text: str | None, config: SolveConfig | None = None) -> PuzzleReport:
        text = text or ""
        if len(text) > self.settings.max_input_length:
            raise InputTooLarge(
                f"puzzle input is {len(text)} characters, "
                f"limit is {self.settings.max_input_length}"
            )
        if config is None:
            config = SolveConfig()
        return self._solve_cached(text, config.model_dump_json())

    def _solve_uncached(self, text: str, config_json: str) -> PuzzleReport:
        logger.info("Solving puzzle input (%d characters)", len(text))
        config = SolveConfig.model_validate_json(config_json)
        return self.solver.solve(text, config)

    def frame(
        self, text: str | None, step: float,
    ) -> tuple[list[list[Point]], list[Intersection]]:
        """Each wire's trace after `step` steps and the crossings reached by then."""
        report = self.solve(text)
        traces = [w.trace(step) for w in report.wires]
        revealed = [i for i in report.intersections if i.step <= step]
        return traces, revealed

    def clear_cache(self) -> None:
        self._solve_cached.cache_clear()

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]

    def get_rule(self, rule_id: str) -> dict[str, str] | None:
        rule = self.registry.get_rule(rule_id)
        if rule is None:
            return None
        return {"id": rule.get_id(), "name": rule.get_name()}
