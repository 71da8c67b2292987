"""
Core infrastructure for pymatrix.

This module provides the shared abstractions the Matrix type is built on.

Key components:
    exceptions: Exception hierarchy
    validation: Fail-fast input validators
    protocols: Element capability protocols
    random: Injectable random source resolution
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    ShapeMismatchError,
    IndexOutOfRangeError,
)
from pymatrix.core.protocols import SupportsRing, SupportsSum
from pymatrix.core.random import resolve_rng

__all__ = [
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    # Protocols
    "SupportsRing",
    "SupportsSum",
    # Random
    "resolve_rng",
]
