"""Numeric constants and tolerances shared across the geometry modules."""

import math

DOUBLE_MIN = 2.22507385850720200e-308
DOUBLE_MAX = 1.7976931348623158e308
EPSILON = 2.2204460492503131e-16
SQRT_EPSILON = 1.490116119385000000e-8

PI = 3.14159265358979323846
TO_RAD = 0.01745329251994329576
SCALE = 1e6
ANGLE = 0.11

GIGA = 1e9
MEGA = 1e6
KILO = 1e3
ZERO_TOLERANCE = 2.3283064365386962890625e-10
MILLI = 1e-3
MICRO = 1e-6
NANO = 1e-9

FORCE = 1.0
MASS = 1.0
LENGTH = 1.0
TO_DEGREES = 57.295779513082320876798154814105
TO_RADIANS = 0.01745329251994329576923690768489

TOLERANCE = 1e-3


def is_finite(x):
    """Return True when ``x`` is neither infinite nor NaN."""
    return math.isfinite(x)