"""4x4 transformation matrices and applying them to points."""

import math

from . import globals as constants
from .matrix import Matrix
from .point import Point
from .vector import Vector


def _length(x, y, z):
    x, y, z = abs(x), abs(y), abs(z)
    if y >= x and y >= z:
        x, y = y, x
    elif z >= x and z >= y:
        x, z = z, x
    if x > constants.DOUBLE_MIN:
        y /= x
        z /= x
        return x * math.sqrt(1.0 + y * y + z * z)
    if x > 0.0 and math.isfinite(x):
        return x
    return 0.0


def _unitized(vector):
    """Return a unit copy of ``vector``; a zero vector is returned unchanged."""
    d = _length(vector[0], vector[1], vector[2])
    if d > 0.0:
        return Vector(vector[0] / d, vector[1] / d, vector[2] / d)
    return Vector(vector[0], vector[1], vector[2])


def translation(tx, ty, tz):
    """Return the matrix moving points by ``(tx, ty, tz)``."""
    result = Matrix.identity(4)
    result[0, 3] = tx
    result[1, 3] = ty
    result[2, 3] = tz
    return result


def scaling(sx, sy, sz):
    """Return the matrix scaling points by ``sx, sy, sz`` about the origin."""
    result = Matrix(4, 4)
    result[0, 0] = sx
    result[1, 1] = sy
    result[2, 2] = sz
    result[3, 3] = 1.0
    return result


def _eliminate(r, target, pivot):
    if r[target][pivot] != 0.0:
        d = -r[target][pivot]
        r[target] = [value + d * p for value, p in zip(r[target], r[pivot])]
        r[target][pivot] = 0.0


def _normalize_row(r, index):
    d = 1.0 / r[index][index]
    r[index] = [value * d for value in r[index]]
    r[index][index] = 1.0


def change_basis(
    origin_1, x_axis_1, y_axis_1, z_axis_1, origin_0, x_axis_0, y_axis_0, z_axis_0
):
    """Return the change of basis from frame 1 to frame 0.

    If ``a0*x0 + b0*y0 + c0*z0 = a1*x1 + b1*y1 + c1*z1`` the transform maps
    ``(a1, b1, c1)`` to ``(a0, b0, c0)``. A degenerate frame 1 gives identity.
    """
    a = x_axis_1.dot(y_axis_1)
    b = x_axis_1.dot(z_axis_1)
    c = y_axis_1.dot(z_axis_1)
    r = [
        [x_axis_1.dot(x_axis_1), a, b,
         x_axis_1.dot(x_axis_0), x_axis_1.dot(y_axis_0), x_axis_1.dot(z_axis_0)],
        [a, y_axis_1.dot(y_axis_1), c,
         y_axis_1.dot(x_axis_0), y_axis_1.dot(y_axis_0), y_axis_1.dot(z_axis_0)],
        [b, c, z_axis_1.dot(z_axis_1),
         z_axis_1.dot(x_axis_0), z_axis_1.dot(y_axis_0), z_axis_1.dot(z_axis_0)],
    ]

    i0 = 0 if r[0][0] >= r[1][1] else 1
    if r[2][2] > r[i0][i0]:
        i0 = 2
    i1 = (i0 + 1) % 3
    i2 = (i1 + 1) % 3

    if r[i0][i0] == 0.0:
        return Matrix.identity(4)
    _normalize_row(r, i0)
    _eliminate(r, i1, i0)
    _eliminate(r, i2, i0)

    if abs(r[i1][i1]) < abs(r[i2][i2]):
        i1, i2 = i2, i1
    if r[i1][i1] == 0.0:
        return Matrix.identity(4)
    _normalize_row(r, i1)
    _eliminate(r, i0, i1)
    _eliminate(r, i2, i1)

    if r[i2][i2] == 0.0:
        return Matrix.identity(4)
    _normalize_row(r, i2)
    _eliminate(r, i0, i2)
    _eliminate(r, i1, i2)

    m_xform = Matrix(4, 4)
    for row in range(3):
        for col in range(3):
            m_xform[row, col] = r[row][col + 3]
    m_xform[3, 3] = 1.0

    t0 = translation(-origin_1[0], -origin_1[1], -origin_1[2])
    t2 = translation(origin_0[0], origin_0[1], origin_0[2])
    return t2 @ m_xform @ t0


def _rows_matrix(x_axis, y_axis, z_axis):
    """Matrix whose first three rows are the axes."""
    result = Matrix(4, 4)
    for row, axis in enumerate((x_axis, y_axis, z_axis)):
        for col in range(3):
            result[row, col] = axis[col]
    result[3, 3] = 1.0
    return result


def _columns_matrix(x_axis, y_axis, z_axis):
    """Matrix whose first three columns are the axes."""
    result = Matrix(4, 4)
    for col, axis in enumerate((x_axis, y_axis, z_axis)):
        for row in range(3):
            result[row, col] = axis[row]
    result[3, 3] = 1.0
    return result


def _unit_frame(x_axis, y_axis):
    z_axis = x_axis.cross(y_axis)
    return _unitized(x_axis), _unitized(y_axis), _unitized(z_axis)


def plane_to_plane(origin_0, x_axis_0, y_axis_0, origin_1, x_axis_1, y_axis_1):
    """Return the transform mapping frame 0 onto frame 1."""
    f0 = _rows_matrix(*_unit_frame(x_axis_0, y_axis_0))
    f1 = _columns_matrix(*_unit_frame(x_axis_1, y_axis_1))
    t0 = translation(-origin_0[0], -origin_0[1], -origin_0[2])
    t1 = translation(origin_1[0], origin_1[1], origin_1[2])
    return t1 @ (f1 @ f0) @ t0


def plane_to_xy(origin, x_axis, y_axis):
    """Return the transform mapping the given frame onto the world XY frame."""
    f = _rows_matrix(*_unit_frame(x_axis, y_axis))
    t = translation(-origin[0], -origin[1], -origin[2])
    return f @ t


def xy_to_plane(origin, x_axis, y_axis):
    """Return the transform mapping the world XY frame onto the given frame."""
    f = _columns_matrix(*_unit_frame(x_axis, y_axis))
    t = translation(origin[0], origin[1], origin[2])
    return t @ f


def _apply_point(transform, point):
    p = (point[0], point[1], point[2], 1.0)
    return Point(
        *(sum(transform[i, j] * p[j] for j in range(4)) for i in range(3))
    )


def apply(transform, geometry):
    """Apply ``transform`` to a point or to a (nested) list or tuple of points.

    The result has the same nesting; tuples stay tuples, other sequences
    become lists.
    """
    if isinstance(geometry, Point):
        return _apply_point(transform, geometry)
    transformed = (apply(transform, item) for item in geometry)
    if isinstance(geometry, tuple):
        return tuple(transformed)
    return list(transformed)