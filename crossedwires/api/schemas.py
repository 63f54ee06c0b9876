"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from crossedwires.models import (
    Intersection, Point, PuzzleOptions, PuzzleReport, SolveConfig,
)


class SolveRequest(BaseModel):
    """Request body for the /solve endpoint."""
    input: str = ""
    options: PuzzleOptions = PuzzleOptions()
    config: SolveConfig = SolveConfig()


class SolveResponse(BaseModel):
    """Response from the /solve endpoint."""
    report: PuzzleReport
    solution1: str | None = None   # Shown when options.show_solution1
    solution2: str | None = None   # Shown when options.show_solution2
    rule_count: int


class FrameRequest(BaseModel):
    """Request body for the /frame endpoint."""
    input: str = ""
    step: float = Field(default=0, ge=0)


class FrameResponse(BaseModel):
    """Wires drawn up to a step, plus the crossings already reached."""
    step: float
    endstep: int
    traces: list[list[Point]]
    intersections: list[Intersection]


class SampleResponse(BaseModel):
    input: str


class RuleInfo(BaseModel):
    id: str
    name: str
