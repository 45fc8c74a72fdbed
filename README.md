# geostatics

A compact toolkit for 3D geometry and engineering statics, written in plain Python
with no third-party dependencies.

## What it offers

- `geostatics.vector.Vector`: mutable 3D vectors with arithmetic (`+`, `-`, `*`, `/`
  and their in-place forms), cached length, `unitize`/`unitized`, `dot`, `cross`
  (which returns a unit vector), `projection` (returning a `Projection` with the
  projected vector, its length, the perpendicular part and its length), signed
  `angle`, `is_parallel_to`, `coordinate_direction_3angles`,
  `coordinate_direction_2angles`, `perpendicular_to`, `get_leveled_vector`, and
  scaling with `scale`, `scale_up`, `scale_down`, `rescale` and `rescaled`.
  `Vector.from_scalars` keeps unit scalars which `length(predefined_length)` uses to
  rebuild the coordinates.
- `geostatics.point.Point`: points with `mid_point`, `distance`, `translate`,
  `translated`, `scale`, `scaled`, the static helpers `ccw`, `area`, `area_quad` and
  `centroid_quad`, and conversion with `to_vector`.
- `geostatics.line.Line`: segments with `length`, `squared_length`, `to_vector`,
  `point_at`, `scale`, `scaled`, `translate` and `translated`.
- `geostatics.matrix.Matrix`: dense matrices indexed as `m[row, col]`, built with
  `Matrix(rows, cols)`, `Matrix.from_rows` or `Matrix.identity`, multiplied with
  `a @ b` (or `a * b`).
- `geostatics.gaussian`: `gauss_partial` solves `a x = b` by Gaussian elimination
  with scaled partial pivoting and raises `ValueError` for a singular matrix;
  `swap_rows` swaps two matrix rows in place.
- `geostatics.xform`: 4x4 transforms `translation`, `scaling`, `change_basis`,
  `plane_to_plane`, `plane_to_xy` and `xy_to_plane`, and `apply`, which transforms a
  point or a nested list or tuple of points.
- `geostatics.arc.Arc`: the circle through three XY points, with `center`, `radius`,
  the start, mid and end angles, and `divide_arc_into_points`.
- `geostatics.offset_2d`: `intersect` (two lines in XY), `offset_segments` and
  `offset_polyline` (mitred offset of an XY polyline).
- `geostatics.point_and_vector`: `moment_component_signs_varignon`,
  `moment_varignon` and `moments_varignon_sum` for moments about the origin by
  Varignon's theorem (counterclockwise positive).
- `geostatics.moments`: `get_moment_sign` and `get_moment`, with clockwise positive
  by default.
- `geostatics.logger`: `log` prints a colour-coded message and appends it to a log
  file (`app.log` unless `log_path` is given); `read_full_log` reads a log file back.
  `LogLevel` selects the colour.
- `geostatics.globals`: shared constants and tolerances (`ZERO_TOLERANCE`, `SCALE`,
  `ANGLE`, `TO_DEGREES`, ...) and `is_finite`.

## Installation

```
pip install .
```

Run the tests with:

```
pip install ".[test]"
pytest
```

## Examples

Vectors:

```python
from geostatics.vector import Vector

v = Vector(1, 2, 3)
print(v.length())
print(v.unitized())
print(repr(Vector(1, 0, 0).cross(Vector(0, 1, 0))))   # Vector(0.0, 0.0, 1.0)

p = Vector(0, 300, 0).projection(Vector(2, 6, 3))
print(p.vector, p.length, p.perpendicular_length)
```

Solving a linear system:

```python
from geostatics.matrix import Matrix
from geostatics.gaussian import gauss_partial

a = Matrix.from_rows([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]])
print(gauss_partial(a, [8, -11, -3]))            # approximately [2.0, 3.0, -1.0]
```

Transforms:

```python
from geostatics import xform
from geostatics.point import Point
from geostatics.vector import Vector

m = xform.xy_to_plane(Point(0, 0, 0), Vector(0, 1, 0), Vector(0, 0, 1))
print(xform.apply(m, Point(1, 0, 0)))            # Point: 0 1 0
```

Moments by Varignon's theorem:

```python
from geostatics.point import Point
from geostatics.vector import Vector
from geostatics.point_and_vector import moment_varignon

print(moment_varignon(Point(5, 2, 0), Vector(80, -60, 0)))   # -460.0
```

## What it does not do

The package has no plane type: there is no plane equation, no point-to-plane
distance, no line-plane intersection and no cutting of polygons by a plane. It also
has no helpers for the laws of sines and cosines. Everything is a library; there is
no command-line program.