"""Geometric primitives on the wire grid."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict


class Facing(str, Enum):
    """Direction of a move. The grid's y axis grows downward."""
    RIGHT = "R"
    LEFT = "L"
    UP = "U"
    DOWN = "D"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Facing.RIGHT: (1, 0),
    Facing.LEFT: (-1, 0),
    Facing.UP: (0, -1),
    Facing.DOWN: (0, 1),
}


class Point(BaseModel):
    """Grid point. Intersections may land on real-valued coordinates."""
    model_config = ConfigDict(frozen=True)

    x: int | float
    y: int | float

    def distance_to(self, other: Point) -> float:
        """Manhattan distance."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def lerp(self, other: Point, t: float) -> Point:
        return Point(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def offset(self, facing: Facing, dist: float) -> Point:
        dx, dy = facing.delta
        return Point(x=self.x + dx * dist, y=self.y + dy * dist)


ORIGIN = Point(x=0, y=0)


def equals(a: Point, b: Point) -> bool:
    return a == b


def distance(a: Point, b: Point) -> float:
    return a.distance_to(b)


class Segment(BaseModel):
    """
    One straight run of a wire.

    step_start/step_end are the cumulative path lengths at the two
    endpoints; step_end - step_start always equals the segment length.
    """
    model_config = ConfigDict(frozen=True)

    facing: Facing
    start: Point
    end: Point
    step_start: int
    step_end: int

    @property
    def length(self) -> int:
        return self.step_end - self.step_start

    @property
    def is_degenerate(self) -> bool:
        return self.start == self.end

    def point_at_step(self, step: float) -> Point:
        """Position reached after `step` cumulative steps, clamped to the segment."""
        walked = min(max(step - self.step_start, 0), self.length)
        return self.start.offset(self.facing, walked)

    def intersection(self, other: Segment) -> Point | None:
        return segment_intersection(self, other)


def segment_intersection(a: Segment, b: Segment) -> Point | None:
    """
    Exact crossing point of two segments, or None.

    Parallel segments never intersect, including collinear ones that
    overlap along their length. Touching at an endpoint counts.
    """
    if a.is_degenerate or b.is_degenerate:
        return None

    x1, y1 = a.start.x, a.start.y
    x2, y2 = a.end.x, a.end.y
    x3, y3 = b.start.x, b.start.y
    x4, y4 = b.end.x, b.end.y

    denominator = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denominator == 0:
        return None

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denominator
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denominator

    if ua < 0 or ua > 1 or ub < 0 or ub > 1:
        return None

    return a.start.lerp(a.end, ua)
