import math

import pytest

from planegeom import (
    Circle,
    InvalidGeometry,
    Line,
    Vec2,
    circle_2pts_rad,
    circle_circle,
    circle_line,
    circum_center,
    circum_circle,
    tangents,
)
from planegeom.line import are_parallel


def _on_circle(circle, p):
    return math.isclose(abs(p - circle.center), circle.r, abs_tol=1e-9)


def test_unit_circle_and_x_axis_meet_twice():
    unit = Circle(Vec2(0, 0), 1.0)
    points = circle_line(unit, Line.through((0, 0), (1, 0)))
    assert len(points) == 2
    assert points[0].isclose(Vec2(-1, 0))
    assert points[1].isclose(Vec2(1, 0))


def test_circle_line_tangent_and_miss():
    unit = Circle((0, 0), 1.0)
    touching = circle_line(unit, Line.through((-3, 1), (3, 1)))
    assert len(touching) == 1
    assert touching[0].isclose(Vec2(0, 1))
    assert circle_line(unit, Line.through((-3, 2), (3, 2))) == ()


def test_circle_circle_counts():
    c1 = Circle((0, 0), 1.0)
    two = circle_circle(c1, Circle((1, 0), 1.0))
    assert len(two) == 2
    for p in two:
        assert math.isclose(p.x, 0.5)
        assert math.isclose(abs(p.y), math.sqrt(3) / 2)

    one = circle_circle(c1, Circle((2, 0), 1.0))
    assert len(one) == 1
    assert one[0].isclose(Vec2(1, 0))

    assert circle_circle(c1, Circle((5, 0), 1.0)) == ()
    assert circle_circle(c1, Circle((0.1, 0), 0.2)) == ()


def test_concentric_circles():
    assert circle_circle(Circle((0, 0), 1.0), Circle((0, 0), 2.0)) == ()
    with pytest.raises(InvalidGeometry) as excinfo:
        circle_circle(Circle((0, 0), 1.0), Circle((0, 0), 1.0))
    assert excinfo.value.kind == "coincident-circles"


def test_negative_radius_rejected():
    with pytest.raises(InvalidGeometry):
        Circle((0, 0), -1.0)


def test_circle_from_two_points_and_radius():
    p1, p2 = Vec2(0, 0), Vec2(2, 0)
    circle = circle_2pts_rad(p1, p2, math.sqrt(2))
    assert circle is not None
    assert circle.center.isclose(Vec2(1, 1))
    assert _on_circle(circle, p1) and _on_circle(circle, p2)

    mirrored = circle_2pts_rad(p2, p1, math.sqrt(2))
    assert mirrored.center.isclose(Vec2(1, -1))

    assert circle_2pts_rad(p1, p2, 0.5) is None
    smallest = circle_2pts_rad(p1, p2, 1.0)
    assert smallest.center.isclose(Vec2(1, 0))

    with pytest.raises(InvalidGeometry):
        circle_2pts_rad(p1, p1, 1.0)


def test_circumcircle():
    center = circum_center((0, 0), (2, 0), (0, 2))
    assert center.isclose(Vec2(1, 1))
    circle = circum_circle((0, 0), (2, 0), (0, 2))
    assert math.isclose(circle.r, math.sqrt(2))
    with pytest.raises(InvalidGeometry) as excinfo:
        circum_center((0, 0), (1, 1), (2, 2))
    assert excinfo.value.kind == "collinear"


def test_outer_tangents_of_equal_circles():
    c1 = Circle((0, 0), 1.0)
    c2 = Circle((4, 0), 1.0)
    pairs = tangents(c1, c2)
    assert len(pairs) == 2
    found = sorted((round(p.y, 9), round(q.y, 9)) for p, q in pairs)
    assert found == [(-1.0, -1.0), (1.0, 1.0)]
    for p, q in pairs:
        assert _on_circle(c1, p) and _on_circle(c2, q)


def test_inner_tangents_cross_between_circles():
    c1 = Circle((0, 0), 1.0)
    c2 = Circle((4, 0), 1.0)
    pairs = tangents(c1, c2, inner=True)
    assert len(pairs) == 2
    for p, q in pairs:
        assert _on_circle(c1, p) and _on_circle(c2, q)
        tangent = Line.through(p, q)
        assert math.isclose(tangent.dist(c1.center), 1.0)
        assert math.isclose(tangent.dist(c2.center), 1.0)
        assert tangent.side(c1.center) * tangent.side(c2.center) < 0
    first, second = (Line.through(p, q) for p, q in pairs)
    assert not are_parallel(first, second)


def test_tangent_counts_for_touching_and_nested_circles():
    c1 = Circle((0, 0), 1.0)
    assert len(tangents(c1, Circle((2, 0), 1.0), inner=True)) == 1
    assert tangents(c1, Circle((1, 0), 1.0), inner=True) == []
    assert tangents(c1, Circle((0.2, 0), 3.0)) == []
    assert tangents(c1, Circle((0, 0), 2.0)) == []
    with pytest.raises(InvalidGeometry):
        tangents(c1, Circle((0, 0), 1.0))


def test_nearly_concentric_circles_are_not_identical():
    c1 = Circle((0, 0), 1.0)
    c2 = Circle((0, 0), 1.00001)
    assert tangents(c1, c2) == []
    assert circle_circle(c1, c2) == ()


@pytest.mark.parametrize("size", [1e-5, 1.0, 1e5])
def test_intersection_counts_do_not_depend_on_scale(size):
    c1 = Circle((0, 0), size)
    assert len(circle_circle(c1, Circle((size, 0), size))) == 2
    assert len(circle_circle(c1, Circle((2 * size, 0), size))) == 1
    assert len(circle_line(c1, Line.through((0, 0.5 * size), (size, 0.5 * size)))) == 2
    assert len(tangents(c1, Circle((4 * size, 0), size))) == 2
    assert len(tangents(c1, Circle((4 * size, 0), size), inner=True)) == 2
    circle = circle_2pts_rad((0, 0), (size, 0), size)
    assert circle is not None
    assert math.isclose(abs(circle.center), size)
