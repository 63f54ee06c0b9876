"""Puzzle model: two parsed wires and the answers derived from them."""

from __future__ import annotations
from typing import Callable, Iterable

from crossedwires.models import Intersection, ORIGIN, Point, Segment, Wire
from crossedwires.core.analyzer import find_intersections
from crossedwires.core.parser import build_wires, split_definitions

DEFAULT_ENDSTEP = 10
DEFAULT_EXTENT = 5


def _first_min(
    items: Iterable[Intersection], key: Callable[[Intersection], float],
) -> Intersection | None:
    # Strict < keeps the earliest of equal candidates.
    best: Intersection | None = None
    for item in items:
        if best is None or key(item) < key(best):
            best = item
    return best


def closest_of(intersections: Iterable[Intersection]) -> Intersection | None:
    """Crossing nearest the origin by Manhattan distance."""
    return _first_min(intersections, lambda i: i.point.distance_to(ORIGIN))


def fastest_of(intersections: Iterable[Intersection]) -> Intersection | None:
    """Crossing with the fewest combined steps along both wires."""
    return _first_min(intersections, lambda i: i.combined_step)


class Puzzle:
    """
    Read-only view over one puzzle input.

    Every query recomputes from the parsed wires; callers that need
    caching wrap the puzzle (see PuzzleService).
    """

    def __init__(self, text: str | None) -> None:
        self.wire_definitions = split_definitions(text)
        self.wires: list[Wire] = build_wires(self.wire_definitions)

    @property
    def all_segments(self) -> list[Segment]:
        return [s for w in self.wires for s in w.segments]

    @property
    def endpoints(self) -> list[Point]:
        return [s.end for s in self.all_segments]

    @property
    def endstep(self) -> int:
        """Longest wire length, used to pace animation."""
        endsteps = [w.end_step for w in self.wires if w.segments]
        return max(endsteps, default=0) or DEFAULT_ENDSTEP

    @property
    def width(self) -> float:
        x_vals = [abs(p.x) for p in self.endpoints]
        return (max(x_vals, default=0) or DEFAULT_EXTENT) * 2

    @property
    def height(self) -> float:
        y_vals = [abs(p.y) for p in self.endpoints]
        return (max(y_vals, default=0) or DEFAULT_EXTENT) * 2

    def intersections(self) -> list[Intersection]:
        if len(self.wires) < 2:
            return []
        return find_intersections(self.wires[0], self.wires[1])

    def closest_intersection(self) -> Intersection | None:
        return closest_of(self.intersections())

    def fastest_intersection(self) -> Intersection | None:
        return fastest_of(self.intersections())
