"""Dense row-major matrix of floats."""


class Matrix:
    """An m x n matrix of floats, indexed with ``matrix[row, col]``."""

    def __init__(self, rows, cols):
        self._rows = rows
        self._cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, values):
        """Build a matrix from a sequence of rows."""
        rows = [[float(value) for value in row] for row in values]
        if not rows:
            raise ValueError("Matrix needs at least one row")
        matrix = cls(0, 0)
        matrix._rows = len(rows)
        matrix._cols = len(rows[0])
        matrix._data = rows
        return matrix

    @classmethod
    def identity(cls, size):
        """Return the size x size identity matrix."""
        result = cls(size, size)
        for i in range(size):
            result[i, i] = 1.0
        return result

    @property
    def rows(self):
        return self._rows

    @property
    def cols(self):
        return self._cols

    def __getitem__(self, key):
        row, col = key
        return self._data[row][col]

    def __setitem__(self, key, value):
        row, col = key
        self._data[row][col] = float(value)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError("Matrix sizes do not match for multiplication")
        columns = list(zip(*other._data))
        result = Matrix(self._rows, other._cols)
        result._data = [
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._data
        ]
        return result

    def __mul__(self, other):
        return self.__matmul__(other)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    __hash__ = None

    def __str__(self):
        lines = ["Matrix: \n"]
        for row in self._data:
            lines.append("".join(f"{value:.17f} " for value in row) + "\n")
        return "".join(lines)

    def __repr__(self):
        return f"Matrix.from_rows({self._data!r})"