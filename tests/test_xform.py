import pytest

from geostatics import xform
from geostatics.matrix import Matrix
from geostatics.point import Point
from geostatics.vector import Vector


def test_translation():
    matrix = xform.translation(1, 2, 3)
    assert xform.apply(matrix, Point(1, 2, 3)) == Point(2, 4, 6)


def test_scaling():
    matrix = xform.scaling(1, 2, 3)
    assert xform.apply(matrix, Point(1, 2, 3)) == Point(1, 4, 9)


def test_xy_to_plane_transformation():
    points = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), Point(0, 0, 1)]
    expected = [Point(0, 0, 0), Point(0, 1, 0), Point(0, 0, 1), Point(1, 0, 0)]
    matrix = xform.xy_to_plane(Point(0, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))
    assert xform.apply(matrix, points) == expected


def test_plane_to_xy_transformation():
    matrix = xform.plane_to_xy(Point(0, 0, 0), Vector(0, 0, 1), Vector(0, 1, 0))
    points = [Point(0, 0, 0), Point(0, 1, 0), Point(0, 1, 1), Point(0, 0, 1)]
    expected = [Point(0, 0, 0), Point(0, 1, 0), Point(1, 1, 0), Point(1, 0, 0)]
    assert xform.apply(matrix, points) == expected


def test_plane_to_plane_xy_to_plane():
    p0 = Point(0, 0, 0)
    matrix = xform.plane_to_plane(
        p0, Vector(1, 0, 0), Vector(0, 1, 0), p0, Vector(0, 1, 0), Vector(0, 0, 1)
    )
    points = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), Point(0, 0, 1)]
    expected = [Point(0, 0, 0), Point(0, 1, 0), Point(0, 0, 1), Point(1, 0, 0)]
    assert xform.apply(matrix, points) == expected


def test_plane_to_plane_plane_to_xy():
    p0 = Point(0, 0, 0)
    matrix = xform.plane_to_plane(
        p0, Vector(0, 0, 1), Vector(0, 1, 0), p0, Vector(1, 0, 0), Vector(0, 1, 0)
    )
    points = [Point(0, 0, 0), Point(0, 1, 0), Point(0, 1, 1), Point(0, 0, 1)]
    expected = [Point(0, 0, 0), Point(0, 1, 0), Point(1, 1, 0), Point(1, 0, 0)]
    assert xform.apply(matrix, points) == expected


def test_plane_to_plane_xy_to_plane_to_xy():
    p0 = Point(0, 0, 0)
    x0, y0 = Vector(1, 0, 0), Vector(0, 1, 0)
    x1, y1 = Vector(0, 1, 0), Vector(0, 0, 1)
    points = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), Point(0, 0, 1)]
    expected = [Point(0, 0, 0), Point(0, 1, 0), Point(0, 0, 1), Point(1, 0, 0)]

    forward = xform.apply(xform.plane_to_plane(p0, x0, y0, p0, x1, y1), points)
    assert forward == expected
    back = xform.apply(xform.plane_to_plane(p0, x1, y1, p0, x0, y0), forward)
    assert back == points


def test_plane_to_xy_and_back_round_trip():
    origin = Point(1, 2, 3)
    x_axis, y_axis = Vector(1, 1, 0), Vector(-1, 1, 0)
    there = xform.plane_to_xy(origin, x_axis, y_axis)
    back = xform.xy_to_plane(origin, x_axis, y_axis)
    for point in [Point(0.5, -2, 7), Point(3, 3, 3), Point(-1, 0, 4)]:
        result = xform.apply(back, xform.apply(there, point))
        assert list(result) == pytest.approx(list(point))


def test_plane_to_xy_moves_origin_to_zero():
    origin = Point(4, -5, 6)
    matrix = xform.plane_to_xy(origin, Vector(0, 1, 0), Vector(0, 0, 1))
    assert list(xform.apply(matrix, origin)) == pytest.approx([0, 0, 0])


def test_change_basis_same_frame_is_identity():
    origin = Point(0, 0, 0)
    axes = (Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))
    matrix = xform.change_basis(origin, *axes, origin, *axes)
    assert matrix == Matrix.identity(4)


def test_change_basis_moves_origin():
    axes = (Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))
    matrix = xform.change_basis(Point(1, 2, 3), *axes, Point(0, 0, 0), *axes)
    assert xform.apply(matrix, Point(1, 2, 3)) == Point(0, 0, 0)


def test_change_basis_degenerate_frame_gives_identity():
    zero = Vector(0, 0, 0)
    axes = (Vector(1, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))
    matrix = xform.change_basis(Point(1, 1, 1), zero, zero, zero, Point(0, 0, 0), *axes)
    assert matrix == Matrix.identity(4)


def test_apply_keeps_nesting():
    matrix = xform.translation(1, 0, 0)
    nested = [[Point(0, 0, 0), Point(1, 1, 1)], [Point(2, 2, 2)]]
    assert xform.apply(matrix, nested) == [
        [Point(1, 0, 0), Point(2, 1, 1)],
        [Point(3, 2, 2)],
    ]
    pair = (Point(0, 0, 0), Point(0, 0, 1))
    assert xform.apply(matrix, pair) == (Point(1, 0, 0), Point(1, 0, 1))