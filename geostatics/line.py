"""Line segments in three-dimensional space."""

import math

from .point import Point
from .vector import Vector


class Line:
    """A line segment between two points."""

    __slots__ = ("_points",)

    def __init__(self, start=None, end=None):
        """Build a segment from ``start`` to ``end``; both default to the origin."""
        self._points = [
            Point(*start) if start is not None else Point(),
            Point(*end) if end is not None else Point(),
        ]

    @classmethod
    def from_coordinates(cls, x0, y0, z0, x1, y1, z1):
        """Build a segment from the coordinates of its two end points."""
        return cls(Point(x0, y0, z0), Point(x1, y1, z1))

    def __getitem__(self, index):
        """Return end point ``index`` (0 or 1); the point is shared, not copied."""
        return self._points[index]

    def __setitem__(self, index, point):
        self._points[index] = Point(*point)

    def __iter__(self):
        return iter(self._points)

    def __len__(self):
        return 2

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self._points == other._points

    __hash__ = None

    def __repr__(self):
        return f"Line({self._points[0]!r}, {self._points[1]!r})"

    def _deltas(self):
        start, end = self._points
        return tuple(b - a for a, b in zip(start, end))

    def length(self):
        """Return the length of the segment."""
        return math.sqrt(self.squared_length())

    def squared_length(self):
        """Return the squared length of the segment."""
        return sum(d * d for d in self._deltas())

    def to_vector(self):
        """Return the vector from the first point to the second."""
        return Vector(*self._deltas())

    def point_at(self, t):
        """Return the point at parameter ``t``: 0 is the start, 1 the end.

        Coordinates equal at both ends are returned unchanged.
        """
        s = 1.0 - t
        start, end = self._points
        return Point(*(a if a == b else s * a + t * b for a, b in zip(start, end)))

    def scale(self, factor):
        """Multiply every coordinate of both points by ``factor`` in place."""
        for point in self._points:
            point.scale(factor)

    def scaled(self, factor):
        """Return a copy with ``factor`` added to every coordinate."""
        start, end = self._points
        return Line(start.scaled(factor), end.scaled(factor))

    def translate(self, vector):
        """Move both points by ``vector`` in place."""
        for point in self._points:
            point.translate(vector)

    def translated(self, vector):
        """Return a copy moved by ``vector``."""
        start, end = self._points
        return Line(start.translated(vector), end.translated(vector))