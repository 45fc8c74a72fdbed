"""Three-dimensional vectors with the operations used in statics problems."""

import math
from dataclasses import dataclass

from . import globals as constants


@dataclass(frozen=True)
class Projection:
    """Result of projecting one vector onto another.

    ``vector`` is the projected vector, ``length`` its signed length along the
    target direction, ``perpendicular`` the remainder orthogonal to the target
    and ``perpendicular_length`` that remainder's length.
    """

    vector: "Vector"
    length: float
    perpendicular: "Vector"
    perpendicular_length: float


class Vector:
    """A mutable 3D vector.

    Besides its x, y, z coordinates a vector carries unit scalars ``a, b, c``
    which ``length(predefined_length)`` uses to rebuild the coordinates.
    """

    __slots__ = ("_xyz", "_abc", "_length")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._xyz = [float(x), float(y), float(z)]
        self._abc = [0.0, 0.0, 0.0]
        self._length = None

    # Construction helpers -------------------------------------------------

    @classmethod
    def from_scalars(cls, a, b, c=0.0):
        """Return a zero vector whose unit scalars are ``a, b, c``."""
        vector = cls(0.0, 0.0, 0.0)
        vector._abc = [float(a), float(b), float(c)]
        return vector

    @classmethod
    def x_axis(cls):
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def y_axis(cls):
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def z_axis(cls):
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_start_and_end(cls, start, end):
        """Return the vector pointing from ``start`` to ``end``."""
        return cls(end[0] - start[0], end[1] - start[1], end[2] - start[2])

    @classmethod
    def sum_of_vectors(cls, vectors):
        """Return the component-wise sum of ``vectors``."""
        x = y = z = 0.0
        for vector in vectors:
            x += vector[0]
            y += vector[1]
            z += vector[2]
        return cls(x, y, z)

    def _copy(self):
        result = Vector.__new__(Vector)
        result._xyz = list(self._xyz)
        result._abc = list(self._abc)
        result._length = self._length
        return result

    # Components -----------------------------------------------------------

    @property
    def scalars(self):
        """The unit scalars ``(a, b, c)``."""
        return tuple(self._abc)

    def xc(self):
        """Return the component along the x-axis."""
        return Vector(self._xyz[0], 0.0, 0.0)

    def yc(self):
        """Return the component along the y-axis."""
        return Vector(0.0, self._xyz[1], 0.0)

    def zc(self):
        """Return the component along the z-axis."""
        return Vector(0.0, 0.0, self._xyz[2])

    def __getitem__(self, index):
        return self._xyz[index]

    def __setitem__(self, index, value):
        self._xyz[index] = float(value)
        self._length = None

    def __iter__(self):
        return iter(self._xyz)

    # Arithmetic -----------------------------------------------------------

    def __iadd__(self, other):
        for i in range(3):
            self._xyz[i] += other[i]
        self._length = None
        return self

    def __isub__(self, other):
        for i in range(3):
            self._xyz[i] -= other[i]
        self._length = None
        return self

    def __imul__(self, factor):
        self._xyz = [value * factor for value in self._xyz]
        self._length = None
        return self

    def __itruediv__(self, factor):
        self._xyz = [value / factor for value in self._xyz]
        self._length = None
        return self

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        result = self._copy()
        result -= other
        return result

    def __mul__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        result = self._copy()
        result *= factor
        return result

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def __truediv__(self, factor):
        if not isinstance(factor, (int, float)):
            return NotImplemented
        result = self._copy()
        result /= factor
        return result

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._xyz == other._xyz

    __hash__ = None

    def __str__(self):
        x, y, z = self._xyz
        a, b, c = self._abc
        return (
            f"Vector {x:g} {y:g} {z:g} length {self.length():g} "
            f"scalar {a:g} {b:g} {c:g}"
        )

    def __repr__(self):
        x, y, z = self._xyz
        return f"Vector({x!r}, {y!r}, {z!r})"

    # Length and direction -------------------------------------------------

    def reverse(self):
        """Flip the direction of the vector in place."""
        self._xyz = [-value for value in self._xyz]

    def length(self, predefined_length=0.0):
        """Return the length, cached until the vector changes.

        A non-zero ``predefined_length`` first rebuilds the coordinates as the
        unit scalars times that length.
        """
        if predefined_length != 0.0:
            self._xyz = [scalar * predefined_length for scalar in self._abc]
            self._length = None
        if self._length is None:
            self._length = self.compute_length()
        return self._length

    def compute_length(self):
        """Compute the length without overflow for large components."""
        x, y, z = (abs(value) for value in self._xyz)
        tol = constants.ZERO_TOLERANCE
        x_zero, y_zero, z_zero = x < tol, y < tol, z < tol

        if x_zero and y_zero and z_zero:
            return 0.0
        if x_zero and y_zero:
            return z
        if x_zero and z_zero:
            return y
        if y_zero and z_zero:
            return x

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

    def unitize(self):
        """Scale to unit length in place; return False for a zero vector."""
        d = self.length()
        if d > 0.0:
            self._xyz = [value / d for value in self._xyz]
            self._length = 1.0
            return True
        return False

    def unitized(self):
        """Return a unit-length copy."""
        result = self._copy()
        result.unitize()
        return result

    def projection(self, projection_vector, tolerance=constants.ZERO_TOLERANCE):
        """Project this vector onto ``projection_vector``.

        A target shorter than ``tolerance`` gives an all-zero result.
        """
        target_length = projection_vector.length()
        if target_length < tolerance:
            return Projection(Vector(0.0, 0.0, 0.0), 0.0, Vector(0.0, 0.0, 0.0), 0.0)

        unit = Vector(
            projection_vector[0] / target_length,
            projection_vector[1] / target_length,
            projection_vector[2] / target_length,
        )
        projected_length = self.dot(unit)
        projected = unit * projected_length
        perpendicular = self - projected
        return Projection(
            projected, projected_length, perpendicular, perpendicular.length()
        )

    def is_parallel_to(self, other):
        """Return 1 if parallel, -1 if antiparallel, 0 otherwise.

        The angular tolerance is ``globals.ANGLE`` degrees; a zero vector is
        never parallel.
        """
        ll = self.length() * other.length()
        if ll <= 0.0:
            return 0
        cos_angle = self.dot(other) / ll
        cos_tol = math.cos(constants.ANGLE * (constants.PI / 180.0))
        if cos_angle >= cos_tol:
            return 1
        if cos_angle <= -cos_tol:
            return -1
        return 0

    def dot(self, other):
        """Return the dot product."""
        return sum(a * b for a, b in zip(self._xyz, other))

    def cross(self, other):
        """Return the cross product, unitized."""
        x0, y0, z0 = self._xyz
        x1, y1, z1 = other[0], other[1], other[2]
        result = Vector(y0 * z1 - z0 * y1, z0 * x1 - x0 * z1, x0 * y1 - y0 * x1)
        result.unitize()
        return result

    def angle(
        self,
        other,
        sign_by_cross_product=True,
        degrees=True,
        tolerance=constants.ZERO_TOLERANCE,
    ):
        """Return the angle to ``other``.

        With ``sign_by_cross_product`` the angle is negative when the z
        component of the cross product is negative. Returns 0 when either
        vector is (nearly) zero.
        """
        dot = self.dot(other)
        denominator = self.length() * other.length()
        if denominator < tolerance:
            return 0.0
        cos_angle = max(-1.0, min(1.0, dot / denominator))
        angle = math.acos(cos_angle)
        if sign_by_cross_product and self.cross(other)[2] < 0:
            angle = -angle
        return angle * (constants.TO_DEGREES if degrees else 1.0)

    def get_leveled_vector(self, vertical_height):
        """Return a copy scaled from the vertical height and the angle to +Z."""
        copy = Vector(*self._xyz)
        if copy.unitize():
            angle = copy.angle(Vector.z_axis(), True)
            copy *= vertical_height / math.cos(angle)
        return copy

    def coordinate_direction_3angles(self, degrees=False):
        """Return the angles ``(alpha, beta, gamma)`` to the x, y and z axes."""
        x, y, z = self._xyz
        r = math.sqrt(x * x + y * y + z * z)
        angles = (math.acos(x / r), math.acos(y / r), math.acos(z / r))
        if degrees:
            return tuple(angle * 180.0 / constants.PI for angle in angles)
        return angles

    def coordinate_direction_2angles(self, degrees=False):
        """Return the spherical angles ``(phi, theta)`` of the vector."""
        x, y, z = self._xyz
        r = math.sqrt(x * x + y * y + z * z)
        phi = math.acos(z / r)
        theta = math.atan2(y, x)
        if degrees:
            return (phi * 180.0 / constants.PI, theta * 180.0 / constants.PI)
        return (phi, theta)

    def perpendicular_to(self, other):
        """Set this vector perpendicular to ``other``; return False if ``other`` is zero."""
        ax, ay, az = abs(other[0]), abs(other[1]), abs(other[2])
        if ay > ax:
            if az > ay:
                i, j, k, a, b = 2, 1, 0, other[2], -other[1]
            elif az >= ax:
                i, j, k, a, b = 1, 2, 0, other[1], -other[2]
            else:
                i, j, k, a, b = 1, 0, 2, other[1], -other[0]
        elif az > ax:
            i, j, k, a, b = 2, 0, 1, other[2], -other[0]
        elif az > ay:
            i, j, k, a, b = 0, 2, 1, other[0], -other[2]
        else:
            i, j, k, a, b = 0, 1, 2, other[0], -other[1]

        self._xyz[i] = float(b)
        self._xyz[j] = float(a)
        self._xyz[k] = 0.0
        self._length = None
        return a != 0.0

    # Scaling ---------------------------------------------------------------

    def scale(self, factor):
        """Multiply every coordinate by ``factor`` in place."""
        self._xyz = [value * factor for value in self._xyz]
        self._length = None

    def scale_up(self):
        """Scale up by ``globals.SCALE``."""
        self.scale(constants.SCALE)

    def scale_down(self):
        """Scale down by ``globals.SCALE``."""
        self.scale(1.0 / constants.SCALE)

    def rescale(self, factor):
        """Unitize in place, then scale to length ``factor``."""
        self.unitize()
        self.scale(factor)

    def rescaled(self, factor):
        """Return a copy of length ``factor`` in the same direction."""
        result = Vector(*self._xyz)
        result.unitize()
        result.scale(factor)
        return result