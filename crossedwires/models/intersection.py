"""Intersection and solution output models."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict

from .geometry import Point
from .wire import Wire


class Intersection(BaseModel):
    """A point where a segment of wire 0 crosses a segment of wire 1."""
    model_config = ConfigDict(frozen=True)

    point: Point
    step: float            # max of the two wires' steps to reach the point
    combined_step: float   # sum of the two wires' steps
    segment_indices: tuple[int, int] = (0, 0)


class Solution(BaseModel):
    """The answer produced by one solution rule."""
    rule_id: str
    name: str
    intersection: Intersection | None = None
    answer: int | float | None = None

    @property
    def found(self) -> bool:
        return self.intersection is not None

    def display(self) -> str:
        if self.answer is None:
            return "none"
        rounded = round(self.answer)
        # Float division can leave a grid answer one ulp off its integer.
        if math.isclose(self.answer, rounded, rel_tol=1e-12, abs_tol=1e-9):
            return str(rounded)
        return repr(self.answer)


class ReportStats(BaseModel):
    """Summary counts for a solved puzzle."""
    wires: int = 0
    segments: int = 0
    intersections: int = 0

    @classmethod
    def from_parts(cls, wires: list[Wire], intersections: list[Intersection]) -> ReportStats:
        return cls(
            wires=len(wires),
            segments=sum(len(w.segments) for w in wires),
            intersections=len(intersections),
        )


class PuzzleReport(BaseModel):
    """Everything a renderer needs to draw and annotate a puzzle."""
    wires: list[Wire]
    endstep: int
    width: float
    height: float
    intersections: list[Intersection]
    solutions: list[Solution] = []
    stats: ReportStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = ReportStats.from_parts(self.wires, self.intersections)

    def get_solution(self, rule_id: str) -> Solution | None:
        for s in self.solutions:
            if s.rule_id == rule_id:
                return s
        return None
