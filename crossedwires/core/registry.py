"""Solution rules known to the solver, keyed by id."""

from __future__ import annotations

from crossedwires.models.context import PuzzleContext
from crossedwires.rules.base import SolutionRule


class SolutionRegistry:
    """Maps rule ids to rules and picks the ones a solve should run."""

    def __init__(self) -> None:
        self._rules: dict[str, SolutionRule] = {}

    def register(self, rule: SolutionRule) -> None:
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> SolutionRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[SolutionRule]:
        return list(self._rules.values())

    def get_applicable_rules(self, context: PuzzleContext) -> list[SolutionRule]:
        """Rules allowed by the context's SolveConfig, lowest priority first."""
        enabled = context.config.enabled_rules
        disabled = context.config.disabled_rules
        selected = [
            rule for rule_id, rule in self._rules.items()
            if (not enabled or rule_id in enabled)
            and rule_id not in disabled
            and rule.applies(context)
        ]
        # sorted() is stable: equal priorities keep registration order
        return sorted(selected, key=lambda r: r.priority)


def create_default_registry() -> SolutionRegistry:
    """Registry holding the closest (part 1) and fastest (part 2) rules."""
    from crossedwires.rules.intersection.closest import ClosestIntersectionRule
    from crossedwires.rules.intersection.fastest import FastestIntersectionRule

    registry = SolutionRegistry()
    registry.register(ClosestIntersectionRule())
    registry.register(FastestIntersectionRule())
    return registry
