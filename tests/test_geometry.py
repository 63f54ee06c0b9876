from crossedwires.models import Facing, ORIGIN, Point, Segment, segment_intersection
from crossedwires.models.geometry import distance, equals


def seg(facing, x1, y1, x2, y2, step_start=0):
    start = Point(x=x1, y=y1)
    end = Point(x=x2, y=y2)
    return Segment(
        facing=facing,
        start=start,
        end=end,
        step_start=step_start,
        step_end=step_start + int(start.distance_to(end)),
    )


def test_point_equality_is_exact():
    assert equals(Point(x=3, y=-2), Point(x=3, y=-2))
    assert not equals(Point(x=3, y=-2), Point(x=3, y=-2.5))


def test_manhattan_distance():
    assert distance(ORIGIN, Point(x=3, y=-4)) == 7
    assert Point(x=-1, y=2).distance_to(Point(x=2, y=-2)) == 7


def test_facing_deltas_grow_y_downward():
    assert Facing.RIGHT.delta == (1, 0)
    assert Facing.LEFT.delta == (-1, 0)
    assert Facing.UP.delta == (0, -1)
    assert Facing.DOWN.delta == (0, 1)


def test_perpendicular_crossing():
    a = seg(Facing.RIGHT, 0, 0, 10, 0)
    b = seg(Facing.DOWN, 5, -5, 5, 5)
    assert segment_intersection(a, b) == Point(x=5, y=0)


def test_intersection_is_symmetric():
    a = seg(Facing.LEFT, 8, -5, 3, -5)
    b = seg(Facing.DOWN, 6, -7, 6, -3)
    assert a.intersection(b) == b.intersection(a) == Point(x=6, y=-5)


def test_endpoint_touch_counts():
    a = seg(Facing.RIGHT, 0, 0, 10, 0)
    b = seg(Facing.DOWN, 10, 0, 10, 5)
    assert segment_intersection(a, b) == Point(x=10, y=0)


def test_out_of_range_is_no_intersection():
    a = seg(Facing.RIGHT, 0, 0, 10, 0)
    b = seg(Facing.DOWN, 20, -5, 20, 5)
    assert segment_intersection(a, b) is None


def test_parallel_and_collinear_overlap_never_intersect():
    a = seg(Facing.RIGHT, 0, 0, 10, 0)
    assert segment_intersection(a, seg(Facing.RIGHT, 0, 3, 10, 3)) is None
    assert segment_intersection(a, seg(Facing.RIGHT, 2, 0, 6, 0)) is None


def test_zero_length_segment_never_intersects():
    a = seg(Facing.RIGHT, 0, 0, 10, 0)
    b = seg(Facing.DOWN, 5, 0, 5, 0)
    assert b.is_degenerate
    assert segment_intersection(a, b) is None
    assert segment_intersection(b, a) is None


def test_point_at_step_is_clamped():
    s = seg(Facing.RIGHT, 2, 0, 7, 0, step_start=3)
    assert s.length == 5
    assert s.point_at_step(5) == Point(x=4, y=0)
    assert s.point_at_step(0) == Point(x=2, y=0)
    assert s.point_at_step(100) == Point(x=7, y=0)
