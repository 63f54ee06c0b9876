"""Crossing analysis: pairwise scan of two wires' segments."""

from __future__ import annotations
import logging

from crossedwires.models import Intersection, ORIGIN, PuzzleContext, Wire

logger = logging.getLogger(__name__)


def find_intersections(wire_a: Wire, wire_b: Wire) -> list[Intersection]:
    """
    Every point where a segment of wire_a crosses a segment of wire_b.

    Emitted in scan order: wire_a segments outer, wire_b segments inner.
    Both wires leave from the origin, so a hit there is not a crossing.
    """
    intersections: list[Intersection] = []

    for i, s1 in enumerate(wire_a.segments):
        for j, s2 in enumerate(wire_b.segments):
            hit = s1.intersection(s2)
            if hit is None or hit == ORIGIN:
                continue

            step1 = s1.step_start + s1.start.distance_to(hit)
            step2 = s2.step_start + s2.start.distance_to(hit)
            intersections.append(Intersection(
                point=hit,
                step=max(step1, step2),
                combined_step=step1 + step2,
                segment_indices=(i, j),
            ))

    logger.debug(
        "Scanned %d x %d segments, %d crossings",
        len(wire_a.segments), len(wire_b.segments), len(intersections),
    )
    return intersections


class IntersectionAnalyzer:
    """Finds the crossings between wire 0 and wire 1."""

    def analyze(self, context: PuzzleContext) -> None:
        """Run the scan and populate the context."""
        if len(context.wires) < 2:
            context.intersections = []
            return
        context.intersections = find_intersections(context.wires[0], context.wires[1])
