"""Path builder: turns move lists into segments and wires."""

from __future__ import annotations
import logging
import re

from crossedwires.models import Facing, ORIGIN, Segment, Wire

logger = logging.getLogger(__name__)

_distance_re = re.compile(r"\s*\+?(\d+)")


def parse_path(definition: str | None) -> list[Segment]:
    """
    Parse a comma-separated move list such as ``"R8,U5,L5,D3"``.

    Moves without a valid direction letter or a leading non-negative
    integer distance are skipped rather than rejected. Characters after
    the distance are ignored, so ``"R5x"`` reads as R5.
    """
    segments: list[Segment] = []
    if not definition:
        return segments

    cursor = ORIGIN
    steps = 0

    for raw in definition.split(","):
        move = raw.strip()
        if not move:
            continue

        m = _distance_re.match(move[1:])
        if m is None:
            logger.debug("Skipping move %r: no numeric distance", move)
            continue
        try:
            facing = Facing(move[0])
        except ValueError:
            logger.debug("Skipping move %r: unknown direction", move)
            continue

        dist = int(m.group(1))
        end = cursor.offset(facing, dist)
        segments.append(Segment(
            facing=facing,
            start=cursor,
            end=end,
            step_start=steps,
            step_end=steps + dist,
        ))
        cursor = end
        steps += dist

    return segments


def split_definitions(text: str | None) -> list[str]:
    """One wire definition per line of the stripped input."""
    if not text or not text.strip():
        return []
    return text.strip().splitlines()


def build_wires(definitions: list[str]) -> list[Wire]:
    return [Wire(index=i, segments=parse_path(d)) for i, d in enumerate(definitions)]


def parse_wires(text: str | None) -> list[Wire]:
    """Parse one wire per input line. Blank input yields no wires."""
    return build_wires(split_definitions(text))
