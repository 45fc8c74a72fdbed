"""3D geometry and statics: vectors, points, lines, matrices, transforms, arcs, offsets and moments."""

__version__ = "0.1.0"