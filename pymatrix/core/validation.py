"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. Every fallible Matrix operation
calls them before touching storage.

Design principles:
    - No silent coercion of dimensions or indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    ValidationError,
)


def check_integer(value: Any, name: str) -> None:
    """
    Verify value is an integer (Python int or numpy integer, not bool).

    No coercion: 2.0 is rejected just like 1.5.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not an integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected integer, got {type(value).__name__} {value!r}"
        )


def check_dimension(value: int, name: str) -> None:
    """
    Verify a dimension is a non-negative integer.

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value is not an integer
        DimensionMismatchError: If value is negative
    """
    check_integer(value, name)
    if value < 0:
        raise DimensionMismatchError(
            f"{name}: must be non-negative, got {value}",
            expected=0,
            actual=value,
            name=name,
        )


def check_length(length: int, expected: int, name: str) -> None:
    """
    Verify a flat sequence has exactly the expected length.

    Args:
        length: Length of the supplied sequence
        expected: Required length
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If length != expected
    """
    if length != expected:
        raise DimensionMismatchError(
            f"{name}: expected length {expected}, got {length}",
            expected=expected,
            actual=length,
            name=name,
        )


def check_index(row: int, col: int, shape: tuple[int, int]) -> None:
    """
    Verify (row, col) addresses an existing element.

    The bound is strict: row == rows and col == cols are out of range.
    Negative indices are rejected rather than wrapped.

    Args:
        row: Row index
        col: Column index
        shape: (rows, cols) of the matrix

    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfRangeError: If either index is outside the shape
    """
    check_integer(row, 'row')
    check_integer(col, 'col')
    rows, cols = shape
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexOutOfRangeError(
            f"index ({row}, {col}) out of range for shape {shape}",
            row=row,
            col=col,
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    name: str
) -> None:
    """
    Verify two shapes are identical.

    Args:
        left: Shape of the receiver
        right: Shape of the other operand
        name: Parameter name of the other operand for error messages

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if left != right:
        raise ShapeMismatchError(
            f"{name}: shape {right} does not match {left}",
            left_shape=left,
            right_shape=right,
        )


def check_rectangular(rows: list[list[Any]], name: str) -> None:
    """
    Verify every row of a nested list has the same length.

    Args:
        rows: Rows to check
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If any row differs in length from the first
    """
    if not rows:
        return
    width = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != width:
            raise DimensionMismatchError(
                f"{name}: row {i} has length {len(row)}, expected {width}",
                expected=width,
                actual=len(row),
                name=name,
            )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If array is not 2D
    """
    if np.ndim(array) != 2:
        raise DimensionMismatchError(
            f"{name}: expected 2D array, got {np.ndim(array)}D with shape {np.shape(array)}",
            expected=2,
            actual=int(np.ndim(array)),
            name=name,
        )
