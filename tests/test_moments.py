import pytest

from geostatics.moments import get_moment, get_moment_sign
from geostatics.point import Point
from geostatics.vector import Vector

CASES = [
    (Point(2, 3), Vector(4, 5)),
    (Point(-2, 3), Vector(4, -5)),
    (Point(2, -3), Vector(-4, 5)),
    (Point(-1, -1), Vector(-1, -1)),
    (Point(0, 2), Vector(3, 0)),
    (Point(1, 0), Vector(0, -7)),
]


def test_sign_of_first_quadrant_force():
    assert get_moment_sign(Point(2, 3), Vector(4, 5)) == (1, -1)


def test_moment_of_first_quadrant_force():
    assert get_moment(Point(2, 3), Vector(4, 5)) == pytest.approx((-12, 10))


@pytest.mark.parametrize("point, force", CASES)
def test_ccw_convention_negates_signs(point, force):
    cw = get_moment_sign(point, force)
    ccw = get_moment_sign(point, force, False)
    assert ccw == (-cw[0], -cw[1])


@pytest.mark.parametrize("point, force", CASES)
def test_reversed_force_negates_signs(point, force):
    sign = get_moment_sign(point, force)
    reversed_sign = get_moment_sign(point, force * -1)
    assert reversed_sign == (-sign[0], -sign[1])
    assert set(sign) <= {-1, 0, 1}


@pytest.mark.parametrize("point, force", CASES)
def test_moment_scales_with_force(point, force):
    base = get_moment(point, force)
    doubled = get_moment(point, force * 2.5)
    assert doubled == pytest.approx((base[0] * 2.5, base[1] * 2.5))


def test_force_at_origin_has_no_moment():
    origin = Point(0, 0, 0)
    force = Vector(3, -4, 0)
    assert get_moment_sign(origin, force) == (0, 0)
    assert get_moment(origin, force) == (0.0, 0.0)