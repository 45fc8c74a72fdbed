"""Offsetting polylines in the XY plane."""

from itertools import pairwise

from .point import Point
from .vector import Vector


def intersect(segment_1, segment_2, tol):
    """Return the intersection of the infinite lines through two segments.

    Each segment is a pair of points; only x and y are used and the result
    has z = 0. Raises ValueError when the lines are parallel within ``tol``.
    """
    (p1, p2), (p3, p4) = segment_1, segment_2
    a1 = p2[1] - p1[1]
    b1 = p1[0] - p2[0]
    c1 = a1 * p1[0] + b1 * p1[1]

    a2 = p4[1] - p3[1]
    b2 = p3[0] - p4[0]
    c2 = a2 * p3[0] + b2 * p3[1]

    determinant = a1 * b2 - a2 * b1
    if abs(determinant) < tol:
        raise ValueError(
            "Lines are parallel or almost parallel within the given tolerance."
        )
    return Point(
        (b2 * c1 - b1 * c2) / determinant,
        (a1 * c2 - a2 * c1) / determinant,
        0.0,
    )


def offset_segments(points, distance):
    """Return each consecutive pair of points moved sideways by ``distance``.

    A positive distance moves a segment to its left in the XY plane.
    """
    normal = Vector(0.0, 0.0, -1.0)
    segments = []
    for start, end in pairwise(points):
        direction = Vector(*end) - Vector(*start)
        perpendicular = direction.cross(normal) * distance
        segments.append((Point(*start) + perpendicular, Point(*end) + perpendicular))
    return segments


def offset_polyline(polyline, distance, tol=1e-6):
    """Return the polyline offset by ``distance``, with mitred corners.

    Raises ValueError for fewer than two points or when consecutive segments
    are parallel within ``tol``.
    """
    segments = offset_segments(polyline, distance)
    if not segments:
        raise ValueError("A polyline needs at least two points.")
    offset = [segments[0][0]]
    offset.extend(intersect(first, second, tol) for first, second in pairwise(segments))
    offset.append(segments[-1][1])
    return offset