"""Circular arcs through three points in the XY plane."""

import math

from .point import Point
from .vector import Vector


class Arc:
    """A circular arc through a start, a middle and an end point.

    The centre, radius and polar angles of the three points about the centre
    are computed on construction.
    """

    def __init__(self, start_point, mid_point, end_point):
        """Build the arc; raises ValueError for collinear or coincident points."""
        self.start_point = Point(*start_point)
        self.mid_point = Point(*mid_point)
        self.end_point = Point(*end_point)
        self._calculate_properties()

    def _calculate_properties(self):
        start, mid, end = self.start_point, self.mid_point, self.end_point
        mid_start = start.mid_point(mid)
        mid_end = mid.mid_point(end)

        start_to_mid = mid - start
        mid_to_end = end - mid

        bisector_1 = (-start_to_mid[1], start_to_mid[0])
        bisector_2 = (-mid_to_end[1], mid_to_end[0])

        det = bisector_1[0] * bisector_2[1] - bisector_1[1] * bisector_2[0]
        if abs(det) < 1e-10:
            raise ValueError(
                "Invalid arc: points are collinear or too close to each other."
            )

        between = mid_end - mid_start
        t = (between[0] * bisector_2[1] - between[1] * bisector_2[0]) / det
        self.center = mid_start + Vector(bisector_1[0], bisector_1[1], 0.0) * t
        self.radius = self.center.distance(start)

        cx, cy = self.center[0], self.center[1]
        self.start_angle = math.atan2(start[1] - cy, start[0] - cx)
        self.mid_angle = math.atan2(mid[1] - cy, mid[0] - cx)
        self.end_angle = math.atan2(end[1] - cy, end[0] - cx)

    def __repr__(self):
        return f"Arc({self.start_point!r}, {self.mid_point!r}, {self.end_point!r})"

    def divide_arc_into_points(self, divisions):
        """Return ``divisions + 1`` points evenly spaced from start to end angle.

        Fewer than one division gives an empty list.
        """
        if divisions < 1:
            return []
        increment = (self.end_angle - self.start_angle) / divisions
        cx, cy = self.center[0], self.center[1]
        points = []
        for i in range(divisions + 1):
            angle = self.start_angle + increment * i
            points.append(
                Point(cx + self.radius * math.cos(angle), cy + self.radius * math.sin(angle))
            )
        return points