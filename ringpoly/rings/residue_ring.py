"""
Modular Integer Arithmetic: the residue ring Z/nZ.

This module implements arithmetic modulo a fixed positive integer n. Unlike
a prime field, n may be composite, so not every non-zero element has an
inverse. The ring factory owns the modulus; every element keeps a reference
to the factory instead of its own copy of the modulus.

Key Concepts:
    - Values are always stored in the Euclidean residue range [0, n)
    - Addition: (a + b) mod n
    - Subtraction: (a - b) mod n
    - Multiplication: (a * b) mod n
    - Inversion: exists iff gcd(a, n) = 1 (extended Euclid); otherwise None
    - Elements with no ring (bare zero()/one()) behave as plain integers

Example:
    >>> ring = ResidueRing(12)
    >>> a = ring.element(7)
    >>> b = ring.element(9)
    >>> a + b  # 16 mod 12 = 4
    ResidueElement(4, mod 12)
    >>> a.inverse()  # 7 * 7 = 49 = 1 mod 12
    ResidueElement(7, mod 12)
    >>> b.inverse() is None  # gcd(9, 12) = 3
    True
"""

from __future__ import annotations
from numbers import Integral
from typing import Optional, Tuple, Union
import operator

from ..config import logger
from ..exceptions import RingMismatchError
from .base import MaybeMultiplicativeInverse, Ring, RingElement


class ResidueElement(RingElement, MaybeMultiplicativeInverse):
    """
    An element of Z/nZ.

    Attributes:
        value: The integer value (always in range [0, n-1] when a ring is set)
        ring: The parent ResidueRing, or None for a bare integer identity

    Binary operations between two elements take the left operand's ring,
    falling back to the right operand's when the left has none.
    Equality and hashing look at the canonical value alone, so an element
    behaves like the int it holds inside sets and dicts.

    Example:
        >>> ring = ResidueRing(97)
        >>> a = ResidueElement(45, ring)
        >>> b = ResidueElement(67, ring)
        >>> a + b  # 45 + 67 = 112 → 112 mod 97 = 15
        ResidueElement(15, mod 97)
    """

    __slots__ = ('value', 'ring')

    def __init__(self, value: Union[int, Integral], ring: Optional[ResidueRing] = None):
        self.ring = ring
        value = operator.index(value)
        if ring is not None:
            value %= ring.modulus
        self.value = value

    @classmethod
    def zero(cls) -> ResidueElement:
        return cls(0)

    @classmethod
    def one(cls) -> ResidueElement:
        return cls(1)

    @property
    def modulus(self) -> Optional[int]:
        """The modulus of the parent ring, or None."""
        return self.ring.modulus if self.ring is not None else None

    def __repr__(self) -> str:
        if self.ring is None:
            return f"ResidueElement({self.value})"
        return f"ResidueElement({self.value}, mod {self.ring.modulus})"

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __hash__(self) -> int:
        return hash(self.value)

    def _unpack(self, other) -> Optional[Tuple[int, Optional[ResidueRing]]]:
        """Split ``other`` into (value, ring), or None if unsupported."""
        if isinstance(other, ResidueElement):
            if (self.ring is not None and other.ring is not None
                    and self.ring != other.ring):
                raise RingMismatchError(self.ring, other.ring)
            return other.value, other.ring
        if isinstance(other, Integral):
            return int(other), None
        return None

    def _adopt(self, other_ring: Optional[ResidueRing]) -> Optional[ResidueRing]:
        return self.ring if self.ring is not None else other_ring

    def __eq__(self, other: object) -> bool:
        # Canonical values only, exactly as ints compare; the ring is ignored.
        if isinstance(other, ResidueElement):
            return self.value == other.value
        if isinstance(other, Integral):
            return self.value == other
        return NotImplemented

    # Arithmetic Operations

    def __add__(self, other: Union[ResidueElement, int]) -> ResidueElement:
        """Addition in the ring: (a + b) mod n"""
        unpacked = self._unpack(other)
        if unpacked is None:
            return NotImplemented
        other_val, other_ring = unpacked
        return ResidueElement(self.value + other_val, self._adopt(other_ring))

    def __radd__(self, other: int) -> ResidueElement:
        return self.__add__(other)

    def __sub__(self, other: Union[ResidueElement, int]) -> ResidueElement:
        """Subtraction in the ring: (a - b) mod n"""
        unpacked = self._unpack(other)
        if unpacked is None:
            return NotImplemented
        other_val, other_ring = unpacked
        return ResidueElement(self.value - other_val, self._adopt(other_ring))

    def __rsub__(self, other: int) -> ResidueElement:
        if not isinstance(other, Integral):
            return NotImplemented
        return ResidueElement(int(other) - self.value, self.ring)

    def __mul__(self, other: Union[ResidueElement, int]) -> ResidueElement:
        """Multiplication in the ring: (a * b) mod n"""
        unpacked = self._unpack(other)
        if unpacked is None:
            return NotImplemented
        other_val, other_ring = unpacked
        return ResidueElement(self.value * other_val, self._adopt(other_ring))

    def __rmul__(self, other: int) -> ResidueElement:
        return self.__mul__(other)

    def __neg__(self) -> ResidueElement:
        """Negation: -a = n - a"""
        return ResidueElement(-self.value, self.ring)

    def inverse(self) -> Optional[ResidueElement]:
        """
        Compute the modular inverse using the Extended Euclidean Algorithm.

        Finds b such that a * b ≡ 1 (mod n). This succeeds exactly when
        gcd(a, n) = 1, which for a prime modulus means a ≠ 0.

        Returns:
            The inverse element, or None if a is not a unit. Elements without
            a ring are plain integers, whose only units are 1 and -1.
        """
        if self.ring is None:
            if self.value in (1, -1):
                return ResidueElement(self.value)
            return None

        modulus = self.ring.modulus
        if modulus == 1:
            # Z/1Z is the zero ring, where 0 = 1 is its own inverse.
            return self.ring.zero()

        old_r, r = self.value, modulus
        old_s, s = 1, 0

        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s

        # old_r is gcd(a, n), old_s the Bezout coefficient of a
        if old_r != 1:
            return None

        return ResidueElement(old_s, self.ring)


ResidueElement.ZERO = ResidueElement(0)


class ResidueRing(Ring):
    """
    The residue ring Z/nZ for a fixed positive modulus n.

    The ring owns the modulus. Elements it produces keep a reference back to
    it, so a large modulus is never copied per element.

    Attributes:
        modulus: The positive modulus n

    Example:
        >>> ring = ResidueRing(10)
        >>> ring.element(-3)
        ResidueElement(7, mod 10)
    """

    def __init__(self, modulus: int):
        """
        Initialize a residue ring.

        Args:
            modulus: The modulus n. Must be positive; need not be prime.

        Raises:
            ValueError: If the modulus is zero or negative
        """
        modulus = operator.index(modulus)
        if modulus <= 0:
            raise ValueError("Modulus must be positive")
        self._modulus = modulus
        logger.debug("Created residue ring Z/%dZ", modulus)

    @property
    def modulus(self) -> int:
        return self._modulus

    def __repr__(self) -> str:
        return f"ResidueRing({self._modulus})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResidueRing):
            return self._modulus == other._modulus
        return NotImplemented

    def __hash__(self) -> int:
        return hash((ResidueRing, self._modulus))

    def element(self, value: Union[int, ResidueElement]) -> ResidueElement:
        """Create a ring element from an integer or a bare element."""
        if isinstance(value, ResidueElement):
            if value.ring is not None and value.ring != self:
                raise RingMismatchError(self, value.ring)
            return ResidueElement(value.value, self)
        return ResidueElement(value, self)

    number = element

    def zero(self) -> ResidueElement:
        """Return the additive identity (0)."""
        return ResidueElement(0, self)

    def one(self) -> ResidueElement:
        """Return the multiplicative identity (1)."""
        return ResidueElement(1, self)


Zmod = ResidueRing
