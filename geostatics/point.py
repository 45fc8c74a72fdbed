"""Points in three-dimensional space."""

import math

from . import globals as constants
from .vector import Vector


def _is_triple(value):
    return isinstance(value, (Vector, Point))


class Point:
    """A mutable 3D point."""

    __slots__ = ("_xyz",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._xyz = [float(x), float(y), float(z)]

    def to_vector(self):
        """Return a vector with this point's coordinates."""
        return Vector(*self._xyz)

    @property
    def x(self):
        return self._xyz[0]

    @property
    def y(self):
        return self._xyz[1]

    @property
    def z(self):
        return self._xyz[2]

    def __getitem__(self, index):
        return self._xyz[index]

    def __setitem__(self, index, value):
        self._xyz[index] = float(value)

    def __iter__(self):
        return iter(self._xyz)

    # Arithmetic -----------------------------------------------------------

    def __imul__(self, factor):
        self._xyz = [value * factor for value in self._xyz]
        return self

    def __itruediv__(self, factor):
        self._xyz = [value / factor for value in self._xyz]
        return self

    def __iadd__(self, other):
        if not _is_triple(other):
            return NotImplemented
        for i in range(3):
            self._xyz[i] += other[i]
        return self

    def __isub__(self, other):
        if not _is_triple(other):
            return NotImplemented
        for i in range(3):
            self._xyz[i] -= other[i]
        return self

    def __mul__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        result = Point(*self._xyz)
        result *= factor
        return result

    def __truediv__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        result = Point(*self._xyz)
        result /= factor
        return result

    def __add__(self, vector):
        """Return the point moved by ``vector``."""
        if not isinstance(vector, Vector):
            return NotImplemented
        return Point(*(a + b for a, b in zip(self._xyz, vector)))

    def __sub__(self, vector):
        """Return the vector from ``vector``'s coordinates to this point."""
        if not _is_triple(vector):
            return NotImplemented
        return Vector(*(a - b for a, b in zip(self._xyz, vector)))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._xyz == other._xyz

    __hash__ = None

    def __str__(self):
        x, y, z = self._xyz
        return f"Point: {x:g} {y:g} {z:g}"

    def __repr__(self):
        x, y, z = self._xyz
        return f"Point({x!r}, {y!r}, {z!r})"

    # Geometry -------------------------------------------------------------

    @staticmethod
    def ccw(a, b, c):
        """Return a positive value if ``a, b, c`` turn counterclockwise in XY,
        negative if clockwise and zero if collinear."""
        return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])

    def mid_point(self, other):
        """Return the point halfway between this point and ``other``."""
        return Point(*((a + b) * 0.5 for a, b in zip(self._xyz, other)))

    def distance(self, other):
        """Return the distance to ``other`` without overflow for large values."""
        x, y, z = (abs(a - b) for a, b in zip(self._xyz, other))
        if y >= x and y >= z:
            x, y = y, x
        elif z >= x and z >= y:
            x, z = z, x

        if x > constants.DOUBLE_MIN:
            y /= x
            z /= x
            return x * math.sqrt(1.0 + y * y + z * z)
        if x > 0.0 and constants.is_finite(x):
            return x
        return 0.0

    @staticmethod
    def area(polygon):
        """Return the area of a closed polygon in XY by the shoelace formula."""
        vertices = list(polygon)
        following = vertices[1:] + vertices[:1]
        total = sum(p[0] * q[1] - q[0] * p[1] for p, q in zip(vertices, following))
        return abs(total) / 2.0

    def scale(self, factor):
        """Multiply every coordinate by ``factor`` in place."""
        self._xyz = [value * factor for value in self._xyz]

    def scaled(self, factor):
        """Return a copy with ``factor`` added to every coordinate."""
        return Point(*(value + factor for value in self._xyz))

    def translate(self, vector):
        """Move the point by ``vector`` in place."""
        for i in range(3):
            self._xyz[i] += vector[i]

    def translated(self, vector):
        """Return a copy moved by ``vector``."""
        return Point(*(a + b for a, b in zip(self._xyz, vector)))

    @staticmethod
    def centroid_quad(vertices):
        """Return the area-weighted centroid of a quad given by four points.

        Raises ValueError unless exactly four vertices are given.
        """
        vertices = list(vertices)
        if len(vertices) != 4:
            raise ValueError("Polygon must have exactly 4 vertices.")

        total_area = 0.0
        centroid_sum = Point(0.0, 0.0, 0.0)
        for i in range(4):
            p0 = vertices[i]
            p1 = vertices[(i + 1) % 4]
            p2 = vertices[(i + 2) % 4]
            triangle_area = (
                abs(
                    p0[0] * (p1[1] - p2[1])
                    + p1[0] * (p2[1] - p0[1])
                    + p2[0] * (p0[0] - p1[0])
                )
                / 2.0
            )
            total_area += triangle_area
            triangle_centroid = Point(
                (p0[0] + p1[0] + p2[0]) / 3.0,
                (p0[1] + p1[1] + p2[1]) / 3.0,
                (p0[2] + p1[2] + p2[2]) / 3.0,
            )
            centroid_sum += triangle_centroid * triangle_area
        return centroid_sum / total_area

    @staticmethod
    def area_quad(vertices):
        """Return the area of a quad by the shoelace formula.

        Raises ValueError unless exactly four vertices are given.
        """
        vertices = list(vertices)
        if len(vertices) != 4:
            raise ValueError("Polygon must have exactly 4 vertices.")
        return Point.area(vertices)