"""
Matrix: a generic dense matrix value type.

Elements are stored in a flat row-major list: element (r, c) lives at
offset r * cols + c. The shape is fixed at construction and the list
length always equals rows * cols. Every producing operation (map, map2,
transpose, scale, add, subtract) returns a new Matrix with its own list;
insert is the only in-place mutator.

Usage:
    from pymatrix import Matrix

    m = Matrix.from_values(2, 2, [1, 2, 3, 4])
    m.index(1, 0)               # 3
    m.add(m)                    # [2, 4; 6, 8]
    m.multiply_vector([1, 1])   # [3, 7]
"""

from __future__ import annotations

import copy
import operator
import warnings
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.protocols import R, S
from pymatrix.core.random import resolve_rng
from pymatrix.core.validation import (
    check_2d,
    check_dimension,
    check_index,
    check_length,
    check_rectangular,
    check_same_shape,
)
from pymatrix.formatting import DEFAULT_STYLE, DisplayStyle, render

T = TypeVar('T')
U = TypeVar('U')
B = TypeVar('B')
C = TypeVar('C')


@dataclass(frozen=True, repr=False)
class Matrix(Generic[T]):
    """
    Dense rows x cols matrix over an arbitrary element type.

    Construct via factory classmethods, not directly.

    Equality is structural: two matrices are equal when their shapes and
    element sequences are equal. Matrices are mutable through insert(),
    so they are not hashable.

    Construction:
        Matrix.new(rows, cols, fill)
        Matrix.from_values(rows, cols, values)
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_array(np.eye(3))
        Matrix.random(rows, cols, rng=42)
    """
    _rows: int
    _cols: int
    _values: list[T]

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        check_dimension(self._rows, 'rows')
        check_dimension(self._cols, 'cols')
        # Own a private list whatever the caller handed in
        object.__setattr__(self, '_values', list(self._values))
        check_length(len(self._values), self._rows * self._cols, 'values')

    # === Construction ===

    @classmethod
    def new(cls, rows: int, cols: int, fill: T) -> Matrix[T]:
        """
        Build a matrix with every element equal to fill.

        Each cell holds its own shallow copy of fill, so a mutable fill
        is never shared between cells. A zero row or column count yields
        a valid empty matrix.

        Raises:
            ValidationError: If rows or cols is not an integer
            DimensionMismatchError: If rows or cols is negative
        """
        check_dimension(rows, 'rows')
        check_dimension(cols, 'cols')
        return cls._build(rows, cols, [copy.copy(fill) for _ in range(rows * cols)])

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Iterable[T]) -> Matrix[T]:
        """
        Build a matrix from row-major data.

        Args:
            rows: Number of rows
            cols: Number of columns
            values: Exactly rows * cols elements in row-major order.
                Copied; later changes to the caller's sequence do not
                affect the matrix.

        Returns:
            New Matrix

        Raises:
            ValidationError: If rows or cols is not an integer
            DimensionMismatchError: If rows or cols is negative, or if
                values does not hold rows * cols elements
        """
        check_dimension(rows, 'rows')
        check_dimension(cols, 'cols')
        data = list(values)
        check_length(len(data), rows * cols, 'values')
        return cls._build(rows, cols, data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> Matrix[T]:
        """
        Build a matrix from a sequence of equal-length rows.

        An empty sequence gives a 0 x 0 matrix.

        Raises:
            DimensionMismatchError: If the rows are ragged
        """
        nested = [list(row) for row in rows]
        check_rectangular(nested, 'rows')
        n_cols = len(nested[0]) if nested else 0
        return cls._build(len(nested), n_cols, [x for row in nested for x in row])

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 2D numpy array-like.

        Elements are converted to Python scalars with ndarray.tolist().

        Args:
            array: Anything np.asarray accepts that yields a 2D array

        Returns:
            New Matrix with the array's shape

        Raises:
            DimensionMismatchError: If the array is not 2D
        """
        arr = np.asarray(array)
        check_2d(arr, 'array')
        n_rows, n_cols = arr.shape
        return cls._build(n_rows, n_cols, arr.ravel().tolist())

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        rng: np.random.Generator | int | None = None,
        *,
        dtype: Callable[[float], T] = float,
    ) -> Matrix[T]:
        """
        Build a matrix of independent uniform draws in [0, 1).

        Args:
            rows: Number of rows
            cols: Number of columns
            rng: Random source. None draws from a fresh generator seeded
                from OS entropy; an int seed or a numpy Generator makes
                the result reproducible.
            dtype: Conversion applied to each draw, e.g. float (default),
                fractions.Fraction, decimal.Decimal or numpy.float32

        Returns:
            New Matrix with one draw per cell, in row-major order

        Raises:
            DimensionMismatchError: If rows or cols is negative
            ValidationError: If rng is not a seed or Generator
        """
        check_dimension(rows, 'rows')
        check_dimension(cols, 'cols')
        if isinstance(dtype, type) and issubclass(dtype, (int, np.integer)):
            warnings.warn(
                f"dtype {dtype.__name__} cannot represent draws in [0, 1); "
                f"every element will collapse to an integer",
                RuntimeWarning,
                stacklevel=2,
            )
        generator = resolve_rng(rng)
        draws = generator.random(rows * cols).tolist()
        return cls._build(rows, cols, [dtype(x) for x in draws])

    @classmethod
    def _build(cls, rows: int, cols: int, values: list[T]) -> Matrix[T]:
        """Internal builder; skips the argument checks of the public factories."""
        return cls(rows, cols, values)

    # === Access ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def values(self) -> tuple[T, ...]:
        """Row-major snapshot of the elements."""
        return tuple(self._values)

    def dimensions(self) -> tuple[int, int]:
        """Return (rows, cols)."""
        return (self._rows, self._cols)

    def _offset(self, row: int, col: int) -> int:
        check_index(row, col, self.dimensions())
        return row * self._cols + col

    def index(self, row: int, col: int) -> T:
        """
        Return the element at (row, col).

        Raises:
            IndexOutOfRangeError: If row >= rows or col >= cols (or either
                is negative)
        """
        return self._values[self._offset(row, col)]

    def insert(self, row: int, col: int, value: T) -> None:
        """
        Overwrite the element at (row, col) in place.

        This is the only mutating operation; the shape never changes.

        Raises:
            IndexOutOfRangeError: If row >= rows or col >= cols (or either
                is negative)
        """
        self._values[self._offset(row, col)] = value

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, col = _unpack_key(key)
        return self.index(row, col)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        row, col = _unpack_key(key)
        self.insert(row, col, value)

    def tolist(self) -> list[list[T]]:
        """Return the elements as a list of freshly allocated row lists."""
        c = self._cols
        return [self._values[r * c:(r + 1) * c] for r in range(self._rows)]

    def to_array(self, dtype: DTypeLike = None) -> NDArray[Any]:
        """Return a (rows, cols) numpy array holding the elements."""
        return np.asarray(self._values, dtype=dtype).reshape(self._rows, self._cols)

    # === Elementwise framework ===

    def map(self, f: Callable[[T], B]) -> Matrix[B]:
        """
        Apply f to every element, keeping shape and order.

        Args:
            f: Function of one element. Exceptions it raises propagate.

        Returns:
            New Matrix of f's results
        """
        return self._build(self._rows, self._cols, [f(x) for x in self._values])

    def map2(self, other: Matrix[U], f: Callable[[T, U], C]) -> Matrix[C]:
        """
        Combine elements at identical positions of self and other.

        This is the single combinator behind add, subtract and apply.

        Args:
            other: Matrix with the same shape as self
            f: Function called as f(self_element, other_element)

        Returns:
            New Matrix of f's results

        Raises:
            ShapeMismatchError: If the shapes differ (checked before f is
                ever called)
        """
        check_same_shape(self.dimensions(), other.dimensions(), 'other')
        return self._build(
            self._rows,
            self._cols,
            [f(x, y) for x, y in zip(self._values, other._values)],
        )

    def apply(self, functions: Matrix[Callable[[T], B]]) -> Matrix[B]:
        """
        Apply a same-shape matrix of functions, each to its own element.

        Raises:
            ShapeMismatchError: If functions has a different shape
        """
        return self.map2(functions, lambda x, f: f(x))

    # === Linear algebra ===

    def add(self: Matrix[R], other: Matrix[R]) -> Matrix[R]:
        """
        Elementwise sum.

        Raises:
            ShapeMismatchError: If the shapes differ
        """
        return self.map2(other, operator.add)

    def subtract(self: Matrix[R], other: Matrix[R]) -> Matrix[R]:
        """
        Elementwise difference self - other.

        Raises:
            ShapeMismatchError: If the shapes differ
        """
        return self.map2(other, operator.sub)

    def scale(self: Matrix[R], scalar: R) -> Matrix[R]:
        """Multiply every element by scalar, as element * scalar."""
        return self.map(lambda x: x * scalar)

    def transpose(self) -> Matrix[T]:
        """
        Return a new cols x rows matrix with (i, j) taken from (j, i).

        Output positions are filled in row-major order; the result shares
        no storage with self.
        """
        n_rows, n_cols = self._rows, self._cols
        values = [
            self._values[j * n_cols + i]
            for i in range(n_cols)
            for j in range(n_rows)
        ]
        return self._build(n_cols, n_rows, values)

    def multiply_vector(self: Matrix[S], v: Sequence[S], *, start: Any = 0) -> list[S]:
        """
        Matrix-vector product.

        Computes output[i] = v[0] * m[i, 0] + ... + v[cols-1] * m[i, cols-1],
        folding left to right from start. The vector element is the left
        operand of every product.

        Args:
            v: Vector of length cols
            start: Additive identity the fold begins from. This is also the
                value of every output element when cols is zero.

        Returns:
            List of length rows

        Raises:
            DimensionMismatchError: If len(v) != cols
        """
        check_length(len(v), self._cols, 'v')
        n_cols = self._cols
        return [
            reduce(
                operator.add,
                (v[j] * self._values[i * n_cols + j] for j in range(n_cols)),
                start,
            )
            for i in range(self._rows)
        ]

    # === Operators ===

    def __add__(self, other: object) -> Matrix[Any]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix[Any]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: Any) -> Matrix[Any]:
        if isinstance(scalar, Matrix):
            return NotImplemented
        return self.scale(scalar)

    def __matmul__(self, vector: Any) -> list[Any]:
        if isinstance(vector, Matrix):
            return NotImplemented
        return self.multiply_vector(vector)

    # === Display ===

    def format(self, style: DisplayStyle = DEFAULT_STYLE) -> str:
        """
        Render as text, "[a, b; c, d]" with the default style.

        Never writes to a stream; printing is up to the caller.
        """
        return render(self.tolist(), style)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._values!r})"


def _unpack_key(key: Any) -> tuple[int, int]:
    if not (isinstance(key, tuple) and len(key) == 2):
        raise TypeError(f"Matrix indices must be (row, col) pairs, got {key!r}")
    return key
