"""
The Integer Ring ZZ.

A thin ring wrapper over Python's arbitrary-precision ``int``. There is no
modulus and no reduction; every operation is exact.

Example:
    >>> from ringpoly.rings import ZZ, Integer
    >>> a = ZZ.element(12)
    >>> b = Integer(-5)
    >>> a * b + 3
    Integer(-57)
    >>> -b
    Integer(5)
"""

from __future__ import annotations
from functools import total_ordering
from numbers import Integral
from typing import Optional, Union
import operator

from .base import MaybeMultiplicativeInverse, Ring, RingElement


def _as_int(other) -> Optional[int]:
    """Extract an int from an Integer or an integral value, else None."""
    if isinstance(other, Integer):
        return other.value
    if isinstance(other, Integral):
        return int(other)
    return None


@total_ordering
class Integer(RingElement, MaybeMultiplicativeInverse):
    """
    An element of ZZ.

    Attributes:
        value: The wrapped Python int

    Mixed arithmetic with plain integers (including numpy integer scalars)
    works on either side of the operator.
    """

    __slots__ = ('value',)

    def __init__(self, value: Union[int, Integer] = 0):
        self.value = operator.index(value)

    @classmethod
    def zero(cls) -> Integer:
        return cls(0)

    @classmethod
    def one(cls) -> Integer:
        return cls(1)

    def __repr__(self) -> str:
        return f"Integer({self.value})"

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __hash__(self) -> int:
        return hash(self.value)

    def __eq__(self, other: object) -> bool:
        other_val = _as_int(other)
        if other_val is None:
            return NotImplemented
        return self.value == other_val

    def __lt__(self, other) -> bool:
        other_val = _as_int(other)
        if other_val is None:
            return NotImplemented
        return self.value < other_val

    # Arithmetic Operations

    def __add__(self, other: Union[Integer, int]) -> Integer:
        other_val = _as_int(other)
        if other_val is None:
            return NotImplemented
        return Integer(self.value + other_val)

    def __radd__(self, other: int) -> Integer:
        return self.__add__(other)

    def __sub__(self, other: Union[Integer, int]) -> Integer:
        other_val = _as_int(other)
        if other_val is None:
            return NotImplemented
        return Integer(self.value - other_val)

    def __rsub__(self, other: int) -> Integer:
        other_val = _as_int(other)
        if other_val is None:
            return NotImplemented
        return Integer(other_val - self.value)

    def __mul__(self, other: Union[Integer, int]) -> Integer:
        other_val = _as_int(other)
        if other_val is None:
            return NotImplemented
        return Integer(self.value * other_val)

    def __rmul__(self, other: int) -> Integer:
        return self.__mul__(other)

    def __neg__(self) -> Integer:
        return Integer(-self.value)

    def inverse(self) -> Optional[Integer]:
        """The units of ZZ are 1 and -1; every other integer has no inverse."""
        if self.value in (1, -1):
            return Integer(self.value)
        return None


Integer.ZERO = Integer(0)


class IntegerRing(Ring):
    """
    The ring of integers.

    All instances are interchangeable; use the module-level ``ZZ``.
    """

    def __repr__(self) -> str:
        return "IntegerRing()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IntegerRing)

    def __hash__(self) -> int:
        return hash(IntegerRing)

    def zero(self) -> Integer:
        return Integer.zero()

    def one(self) -> Integer:
        return Integer.one()

    def element(self, value: Union[int, Integer]) -> Integer:
        """Create an Integer from an int-like value."""
        if isinstance(value, Integer):
            return value
        return Integer(value)


ZZ = IntegerRing()
