"""
pymatrix: a generic dense matrix value type for Python.

A small numerical building block: a rows x cols grid over any element
type with ring-like arithmetic (int, float, Fraction, Decimal, numpy
scalars, user types), with bounds-checked access, elementwise mapping,
transpose, scaling, addition, subtraction and matrix-vector products.

Submodules:
    matrix: The Matrix type
    formatting: Text rendering styles
    core: Exceptions, validators, element protocols, random sources
"""

__version__ = "0.1.0"

from pymatrix.matrix import Matrix
from pymatrix.formatting import DisplayStyle, DEFAULT_STYLE
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    ShapeMismatchError,
    IndexOutOfRangeError,
)

__all__ = [
    "__version__",
    "Matrix",
    "DisplayStyle",
    "DEFAULT_STYLE",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
]
