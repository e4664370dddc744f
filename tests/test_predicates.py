import random

import pytest

from planegeom import InvalidGeometry, Line, Vec2, are_parallel, in_angle, in_disk, is_perp, on_segment, orient, turn


def _random_point(rng):
    return Vec2(rng.uniform(-10, 10), rng.uniform(-10, 10))


def test_orientation_signs():
    a, b = Vec2(0, 0), Vec2(1, 0)
    assert orient(a, b, Vec2(0, 1)) == 1.0
    assert orient(a, b, Vec2(0, -1)) == -1.0
    assert orient(a, b, Vec2(5, 0)) == 0.0
    assert turn(a, b, Vec2(0, 1)) == 1
    assert turn(a, b, Vec2(0, -1)) == -1
    assert turn(a, b, Vec2(3, 1e-12)) == 0


def test_orientation_degenerate_and_antisymmetric():
    rng = random.Random(7)
    for _ in range(100):
        a, b, c = (_random_point(rng) for _ in range(3))
        assert orient(a, a, a) == 0.0
        assert orient(a, b, c) == pytest.approx(-orient(a, c, b))
        assert turn(a, b, c) == -turn(a, c, b)


def test_in_angle_accepts_either_sweep():
    a, b, c = Vec2(0, 0), Vec2(1, 0), Vec2(0, 1)
    assert in_angle(a, b, c, Vec2(1, 1))
    assert in_angle(a, c, b, Vec2(1, 1))
    assert not in_angle(a, b, c, Vec2(-1, 1))
    assert in_angle(a, b, c, Vec2(2, 0))


def test_in_angle_rejects_collinear_sector():
    with pytest.raises(InvalidGeometry) as excinfo:
        in_angle(Vec2(0, 0), Vec2(1, 0), Vec2(2, 0), Vec2(1, 1))
    assert excinfo.value.kind == "collinear"


def test_in_disk_and_on_segment():
    a, b = Vec2(0, 0), Vec2(2, 2)
    assert in_disk(a, b, Vec2(1, 1))
    assert in_disk(a, b, Vec2(2, 0))
    assert not in_disk(a, b, Vec2(3, 0))
    assert on_segment(a, b, Vec2(1, 1))
    assert on_segment(a, b, b)
    assert not on_segment(a, b, Vec2(3, 3))
    assert not on_segment(a, b, Vec2(2, 0))


def test_is_perp():
    assert is_perp(Vec2(1, 2), Vec2(-2, 1))
    assert not is_perp(Vec2(1, 2), Vec2(1, 1))


@pytest.mark.parametrize("size", [1e-6, 1e-3, 1.0, 1e4])
def test_turn_does_not_depend_on_scale(size):
    a, b, c = Vec2(0, 0), Vec2(size, 0), Vec2(0, size)
    assert turn(a, b, c) == 1
    assert turn(a, c, b) == -1
    assert turn(a, b, Vec2(2 * size, 0)) == 0
    assert not are_parallel(Line.through(a, b), Line.through(a, c))
    assert is_perp(b - a, c - a)
    assert not in_disk(a, b, Vec2(2 * size, size))
