"""
Element capability protocols for pymatrix.

These define the structural interfaces an element type must satisfy for
each tier of Matrix operations. We use Protocol (structural typing) rather
than ABC (nominal typing) so that int, float, Fraction, Decimal, numpy
scalars and user types all qualify without registration.

Capability tiers:
    - (none): construction, indexing, map, map2, transpose
    - SupportsRing: add, subtract, scale
    - SupportsSum: multiply_vector
"""

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SupportsRing(Protocol):
    """
    Closed under addition, subtraction and multiplication.

    Multiplication need not be commutative; Matrix keeps a fixed operand
    order wherever it multiplies.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


@runtime_checkable
class SupportsSum(SupportsRing, Protocol):
    """
    A ring element that can be folded with the built-in sum().

    sum() starts from an additive identity (0 unless a start value is
    supplied), so the type must accept identity + element.
    """

    def __radd__(self, other: Any) -> Any:
        ...


R = TypeVar('R', bound=SupportsRing)
S = TypeVar('S', bound=SupportsSum)
