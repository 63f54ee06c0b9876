from .geometry import Point, Facing, Segment, ORIGIN, segment_intersection
from .wire import Wire
from .intersection import Intersection, Solution, ReportStats, PuzzleReport
from .parameters import PuzzleOptions, SolveConfig, ServiceSettings
from .context import PuzzleContext
from .sample import SAMPLE_INPUT

__all__ = [
    "Point", "Facing", "Segment", "ORIGIN", "segment_intersection",
    "Wire",
    "Intersection", "Solution", "ReportStats", "PuzzleReport",
    "PuzzleOptions", "SolveConfig", "ServiceSettings",
    "PuzzleContext",
    "SAMPLE_INPUT",
]
