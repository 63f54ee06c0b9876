"""Wire models: a connected path of segments starting at the origin."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .geometry import ORIGIN, Point, Segment


class Wire(BaseModel):
    """An ordered path of axis-aligned segments."""
    model_config = ConfigDict(frozen=True)

    index: int
    segments: list[Segment] = []

    @property
    def end_step(self) -> int:
        """Total path length, 0 for an empty wire."""
        return self.segments[-1].step_end if self.segments else 0

    def trace(self, step: float) -> list[Point]:
        """
        Polyline from the origin covering the first `step` steps.

        The last point lies partway along the segment in progress.
        """
        points = [ORIGIN]
        for segment in self.segments:
            if segment.step_end > step:
                points.append(segment.point_at_step(step))
                break
            points.append(segment.end)
        return points
