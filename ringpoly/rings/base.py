"""
The Ring Contract.

Every coefficient type the polynomial engine works with implements the
interfaces in this module. The engine is written purely against them, so a
new ring plugs in without touching polynomial code.

Key Concepts:
    - RingElement: a value supporting +, -, *, unary -, and ==, with
      class-level additive and multiplicative identities
    - MaybeMultiplicativeInverse: optional capability for rings that are not
      fields; ``inverse()`` returns None for non-units instead of failing
    - Ring: a factory/handle producing elements. Polynomials keep a reference
      to their Ring so the zero polynomial still knows its coefficient ring

The contract is trusted, not checked: addition must be associative and
commutative, multiplication associative and commutative, and equality an
equivalence relation. The engine never verifies distributivity.

Example:
    >>> from ringpoly.rings import ZZ, Zmod
    >>> ZZ.element(5) + ZZ.one()
    Integer(6)
    >>> Zmod(7).element(5) * 3
    ResidueElement(1, mod 7)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional


class RingElement(ABC):
    """
    An element of a commutative ring with identity.

    Binary operators never mutate their operands. Python's augmented
    assignment (``a += b``) falls back to the binary operator and rebinds
    the name, which is the mutating form for ring elements.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def zero(cls) -> RingElement:
        """Return the additive identity."""

    @classmethod
    @abstractmethod
    def one(cls) -> RingElement:
        """Return the multiplicative identity."""

    @abstractmethod
    def __add__(self, other): ...

    @abstractmethod
    def __sub__(self, other): ...

    @abstractmethod
    def __mul__(self, other): ...

    @abstractmethod
    def __neg__(self) -> RingElement: ...

    @abstractmethod
    def __eq__(self, other) -> bool: ...

    def is_zero(self) -> bool:
        """Check if this element is the additive identity."""
        return self == self.zero()

    def is_one(self) -> bool:
        """Check if this element is the multiplicative identity."""
        return self == self.one()


class MaybeMultiplicativeInverse(ABC):
    """Capability of rings whose elements may or may not be units."""

    __slots__ = ()

    @abstractmethod
    def inverse(self) -> Optional[RingElement]:
        """
        Return the multiplicative inverse if this element is a unit.

        Returns:
            The inverse element, or None when no inverse exists. A missing
            inverse is normal control flow, not an error.
        """


class Ring(ABC):
    """
    A ring factory.

    Concrete rings produce their elements through ``element`` and expose the
    identities. The polynomial engine only ever calls these three methods.
    """

    @abstractmethod
    def zero(self) -> RingElement:
        """Return the additive identity of this ring."""

    @abstractmethod
    def one(self) -> RingElement:
        """Return the multiplicative identity of this ring."""

    @abstractmethod
    def element(self, value) -> RingElement:
        """Convert ``value`` (an int or an element of this ring) into an element."""

    def elements(self, values: Iterable) -> List[RingElement]:
        """Convert every value in ``values``."""
        return [self.element(v) for v in values]
