from __future__ import annotations

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from linalg.errors import (
    DimensionMismatchError,
    NonSquareMatrixError,
    NotInvertibleError,
    SubmatrixError,
)
from typings.tuples import Point, Vector
from utils.grid_iteration import Position, matrix_positions
from utils.numeric import feq


class Matrix:
    """
    Dense height x width grid of floats.
    Cells change only through explicit writes; every other operation returns a new matrix.
    """

    __slots__ = ("_values",)

    def __init__(self, height: int, width: int) -> None:
        if height < 1 or width < 1:
            raise ValueError(f"Matrix requires at least one row and one column, got {height}x{width}")
        self._values: np.ndarray = np.zeros((height, width), dtype=float)

    @classmethod
    def with_values(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        if len(rows) == 0:
            raise ValueError("Matrix requires at least one row")
        height = len(rows)
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Matrix is not uniform {height}x{width}. Row {y} has {len(row)} column(s)."
                )
        m = cls(height, width)
        m._values[:, :] = np.asarray(rows, dtype=float)
        return m

    @classmethod
    def new_identity(cls, height: int, width: int) -> Matrix:
        return cls(height, width).identity()

    @classmethod
    def _from_array(cls, values: np.ndarray) -> Matrix:
        m = cls.__new__(cls)
        m._values = np.array(values, dtype=float)
        return m

    @property
    def height(self) -> int:
        return self._values.shape[0]

    @property
    def width(self) -> int:
        return self._values.shape[1]

    def dimensions(self) -> Tuple[int, int]:
        return self.height, self.width

    def is_square(self) -> bool:
        return self.height == self.width

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"({row}, {col}) is outside a {self.height}x{self.width} matrix")

    def at(self, row: int, col: int) -> float:
        self._check_bounds(row, col)
        return float(self._values[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_bounds(row, col)
        self._values[row, col] = value

    def __getitem__(self, position: Position) -> float:
        row, col = position
        return self.at(row, col)

    def __setitem__(self, position: Position, value: float) -> None:
        row, col = position
        self.set(row, col, value)

    def positions(self) -> Iterator[Position]:
        return matrix_positions(self.dimensions())

    def rows(self) -> Iterator[Tuple[float, ...]]:
        for row in self._values:
            yield tuple(float(value) for value in row)

    def columns(self) -> Iterator[Tuple[float, ...]]:
        for column in self._values.T:
            yield tuple(float(value) for value in column)

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def transpose(self) -> Matrix:
        return Matrix._from_array(self._values.T)

    def identity(self) -> Matrix:
        if not self.is_square():
            raise NonSquareMatrixError(f"Identity requires a square matrix: {self.height}x{self.width}")
        return Matrix._from_array(np.eye(self.height, dtype=float))

    def __mul__(self, other: object) -> Union[Matrix, Point, Vector]:
        if isinstance(other, Matrix):
            return self._multiply(other)
        if isinstance(other, (Point, Vector)):
            return self._transform(other)
        return NotImplemented

    def _multiply(self, other: Matrix) -> Matrix:
        if self.width != other.height:
            raise DimensionMismatchError(
                f"width of left ({self.height}x{self.width}) does not match "
                f"height of right ({other.height}x{other.width})"
            )
        return Matrix._from_array(self._values @ other._values)

    def _transform(self, primitive: Union[Point, Vector]) -> Union[Point, Vector]:
        if self.width != 4 or self.height < 3:
            raise DimensionMismatchError(
                f"cannot transform a point or vector with a {self.height}x{self.width} matrix"
            )
        # w = 1 for points, 0 for vectors, so translation leaves vectors untouched
        column = Matrix.with_values([[component] for component in primitive.homogeneous()])
        result = self._multiply(column)
        return type(primitive)(result.at(0, 0), result.at(1, 0), result.at(2, 0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.dimensions() != other.dimensions():
            return False
        return all(feq(self.at(y, x), other.at(y, x)) for y, x in self.positions())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(repr(list(row)) for row in self.rows())
        return f"Matrix.with_values([{rows}])"

    def determinant(self) -> float:
        if not self.is_square():
            raise NonSquareMatrixError(f"Matrix must be square: {self.height}x{self.width}")

        if self.height == 1:
            return self.at(0, 0)

        if self.height == 2:
            a, b = self.at(0, 0), self.at(0, 1)
            c, d = self.at(1, 0), self.at(1, 1)
            return a * d - b * c

        # Laplace expansion along the first row
        return sum(self.cofactor(0, x) * self.at(0, x) for x in range(self.width))

    def submatrix(self, skip_row: int, skip_col: int) -> Matrix:
        if not (0 <= skip_row < self.height and 0 <= skip_col < self.width):
            raise SubmatrixError(
                f"row {skip_row} or column {skip_col} is outside the matrix dimensions {self.height}x{self.width}"
            )
        if self.height < 2 or self.width < 2:
            raise SubmatrixError(f"Matrix {self.height}x{self.width} is too small to take a submatrix")
        remaining = np.delete(np.delete(self._values, skip_row, axis=0), skip_col, axis=1)
        return Matrix._from_array(remaining)

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def is_invertible(self) -> bool:
        try:
            determinant = self.determinant()
        except NotInvertibleError:
            return False
        return not feq(determinant, 0.0)

    def inverse(self) -> Matrix:
        determinant = self.determinant()
        if feq(determinant, 0.0):
            raise NotInvertibleError(f"Matrix is not invertible (determinant {determinant})")

        inverse = Matrix(self.height, self.width)
        if self.height == 1:
            inverse[0, 0] = 1.0 / determinant
            return inverse

        for y, x in self.positions():
            # adjugate: cofactor lookup is transposed, the write is not
            inverse[y, x] = self.cofactor(x, y) / determinant
        return inverse
