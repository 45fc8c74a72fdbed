"""Solving linear systems by Gaussian elimination with scaled partial pivoting."""

from .matrix import Matrix


def swap_rows(matrix, i, j):
    """Swap rows ``i`` and ``j`` of ``matrix`` in place."""
    for k in range(matrix.cols):
        matrix[i, k], matrix[j, k] = matrix[j, k], matrix[i, k]


def gauss_partial(a, b):
    """Solve ``a x = b`` and return ``x`` as a list of floats.

    Raises ValueError if the sizes do not agree or the matrix is singular.
    """
    n = a.rows
    if a.cols != n:
        raise ValueError("matrix must be square")
    if len(b) != n:
        raise ValueError("right-hand side length must match the matrix size")

    aug = Matrix(n, n + 1)
    for i in range(n):
        for j in range(n):
            aug[i, j] = a[i, j]
        aug[i, n] = b[i]

    for k in range(n):
        max_index = k
        max_value = 0.0
        for i in range(k, n):
            scale_factor = max(abs(aug[i, j]) for j in range(k, n))
            if scale_factor == 0:
                continue
            scaled = abs(aug[i, k]) / scale_factor
            if scaled > max_value:
                max_index = i
                max_value = scaled
        if aug[max_index, k] == 0:
            raise ValueError("matrix is singular")
        if k != max_index:
            swap_rows(aug, k, max_index)
        for i in range(k + 1, n):
            f = aug[i, k] / aug[k, k]
            for j in range(k + 1, n + 1):
                aug[i, j] -= aug[k, j] * f
            aug[i, k] = 0.0

    x = [0.0] * n
    for i in reversed(range(n)):
        value = aug[i, n]
        for j in range(i + 1, n):
            value -= aug[i, j] * x[j]
        x[i] = value / aug[i, i]
    return x