"""
Univariate Polynomials over an Arbitrary Ring.

This module implements the polynomial engine. A polynomial is stored as a
list of ring elements, low degree first, and every algorithm is written
against the ring contract in ``ringpoly.rings.base``. The same code therefore
works over ZZ, over Z/nZ for composite n, and over any future ring.

Key Concepts:
    - Canonical form: the coefficient list never ends in a zero, so the
      empty list is the zero polynomial and len == degree + 1 otherwise
    - Degree of the zero polynomial is 0 by convention; use is_zero() to tell
      it apart from a non-zero constant
    - Karatsuba multiplication: ~n^1.585 ring multiplications instead of n^2
    - Pseudo-remainder: division that never needs the divisor's leading
      coefficient to be invertible, so it is valid over any ring

Example:
    >>> from ringpoly.rings import ZZ
    >>> p = Polynomial([1, 2, 3], ZZ)       # 1 + 2x + 3x^2
    >>> q = Polynomial([4, 5, 6], ZZ)
    >>> (p * q).coefficients
    (Integer(4), Integer(13), Integer(28), Integer(27), Integer(18))
    >>> (q % Polynomial([1, 1], ZZ)).coefficients
    (Integer(5),)

Pseudo-remainder semantics:
    Each reduction step multiplies the whole dividend by lc(b). The result
    therefore carries accumulated powers of lc(b) compared with division over
    a field. For a monic divisor the two agree.
"""

from __future__ import annotations
from numbers import Integral
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import EngineConfig, get_config, logger
from ..exceptions import RingMismatchError
from ..rings.base import Ring, RingElement
from ..rings.integer_ring import ZZ
from ..utils import (
    next_power_of_two,
    pad_coefficients,
    shift_coefficients,
    strip_trailing_zeros,
)


class Polynomial(RingElement):
    """
    A univariate polynomial with coefficients in a ring.

    Attributes:
        ring: The coefficient ring (a ``Ring`` factory such as ZZ or Zmod(7))

    The coefficient list is private and owned by the polynomial. Binary
    operators return new polynomials; the augmented operators (+=, -=, *=,
    %=) update the left operand in place.

    A polynomial is itself a ring element, so ``PolynomialRing(ring)`` can
    serve as the coefficient ring of another polynomial (R[y][x]).

    Example:
        >>> p = Polynomial([0, 1, 5, 3, 0, 0])
        >>> p.coefficients
        (Integer(0), Integer(1), Integer(5), Integer(3))
        >>> p.degree
        3
    """

    __hash__ = None

    def __init__(self, coefficients: Iterable = (), ring: Ring = ZZ):
        """
        Build a polynomial from coefficients, lowest degree first.

        Args:
            coefficients: Ring elements or values the ring can convert
            ring: Coefficient ring, ZZ by default

        Trailing zero coefficients are stripped.
        """
        self.ring = ring
        self._coefficients = strip_trailing_zeros(ring.elements(coefficients), ring.zero())

    @classmethod
    def from_coefficients(cls, coefficients: Iterable, ring: Ring = ZZ) -> Polynomial:
        """Build a canonical polynomial from an ordered coefficient sequence."""
        return cls(coefficients, ring)

    @classmethod
    def zero(cls, ring: Ring = ZZ) -> Polynomial:
        """The zero polynomial over ``ring``."""
        return cls((), ring)

    @classmethod
    def one(cls, ring: Ring = ZZ) -> Polynomial:
        """The constant polynomial 1 over ``ring``."""
        return cls((ring.one(),), ring)

    @classmethod
    def _from_elements(cls, coefficients: List[RingElement], ring: Ring) -> Polynomial:
        """Wrap an owned list of ring elements, skipping conversion."""
        poly = cls.__new__(cls)
        poly.ring = ring
        poly._coefficients = strip_trailing_zeros(coefficients, ring.zero())
        return poly

    def copy(self) -> Polynomial:
        return Polynomial._from_elements(list(self._coefficients), self.ring)

    # Accessors

    @property
    def coefficients(self) -> Tuple[RingElement, ...]:
        """Read-only view of the canonical coefficients, lowest degree first."""
        return tuple(self._coefficients)

    def coefficient(self, i: int) -> RingElement:
        """
        Coefficient of x^i.

        Indices past the stored length are formally zero and return the
        ring's zero rather than signalling absence.

        Raises:
            IndexError: If i is negative
        """
        if i < 0:
            raise IndexError(f"Coefficient index must be non-negative, got {i}")
        if i < len(self._coefficients):
            return self._coefficients[i]
        return self.ring.zero()

    @property
    def degree(self) -> int:
        """Degree of the polynomial; 0 for the zero polynomial."""
        return max(len(self._coefficients) - 1, 0)

    @property
    def constant(self) -> RingElement:
        """The constant term (ring zero for the zero polynomial)."""
        return self.coefficient(0)

    @property
    def leading_coefficient(self) -> RingElement:
        """Coefficient of the highest-degree term (ring zero for the zero polynomial)."""
        if not self._coefficients:
            return self.ring.zero()
        return self._coefficients[-1]

    def is_zero(self) -> bool:
        return not self._coefficients

    def is_one(self) -> bool:
        return len(self._coefficients) == 1 and self._coefficients[0] == self.ring.one()

    def is_linear(self) -> bool:
        return self.degree == 1

    def __repr__(self) -> str:
        coeffs = ", ".join(str(c) for c in self._coefficients)
        return f"Polynomial([{coeffs}], {self.ring!r})"

    def __str__(self) -> str:
        if not self._coefficients:
            return "0"
        terms = []
        for i in range(len(self._coefficients) - 1, -1, -1):
            c = self._coefficients[i]
            if c == self.ring.zero():
                continue
            if i == 0:
                terms.append(str(c))
            elif i == 1:
                terms.append(f"{c}*x")
            else:
                terms.append(f"{c}*x^{i}")
        return " + ".join(terms)

    def evaluate(self, x) -> RingElement:
        """Evaluate the polynomial at x using Horner's method."""
        if isinstance(x, Integral) and not isinstance(x, RingElement):
            x = self.ring.element(x)
        result = self.ring.zero()
        for coeff in reversed(self._coefficients):
            result = result * x + coeff
        return result

    def shifted_by(self, x_deg: int) -> Polynomial:
        """Return this polynomial multiplied by x^x_deg."""
        if x_deg == 0 or self.is_zero():
            return self.copy()
        shifted = shift_coefficients(self._coefficients, x_deg, self.ring.zero())
        return Polynomial._from_elements(shifted, self.ring)

    def shift_by(self, x_deg: int) -> Polynomial:
        """Multiply this polynomial by x^x_deg in place."""
        if x_deg < 0:
            raise ValueError(f"Shift must be non-negative, got {x_deg}")
        if not self.is_zero():
            self._coefficients = shift_coefficients(self._coefficients, x_deg, self.ring.zero())
        return self

    def _check_ring(self, other: Polynomial):
        if self.ring != other.ring:
            raise RingMismatchError(self.ring, other.ring)

    def _is_coefficient_of(self, other: Polynomial) -> bool:
        """True if ``other`` has polynomials over our ring as coefficients."""
        return isinstance(other.ring, PolynomialRing) and other.ring.base == self.ring

    def _scalar(self, value) -> Optional[RingElement]:
        """Convert a scalar operand into the coefficient ring, or None."""
        if isinstance(value, Polynomial):
            if value._is_coefficient_of(self):
                return self.ring.element(value)
            raise RingMismatchError(self.ring, value.ring)
        if isinstance(value, (RingElement, Integral)):
            return self.ring.element(value)
        return None

    # Equality

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if len(self._coefficients) != len(other._coefficients):
            return False
        return all(a == b for a, b in zip(self._coefficients, other._coefficients))

    # Addition

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_ring(other)
        if self.is_zero():
            return other.copy()
        if other.is_zero():
            return self.copy()

        if len(self._coefficients) >= len(other._coefficients):
            short, long = other._coefficients, self._coefficients
        else:
            short, long = self._coefficients, other._coefficients

        coeffs = list(long)
        for i, c in enumerate(short):
            coeffs[i] = coeffs[i] + c
        return Polynomial._from_elements(coeffs, self.ring)

    def __iadd__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_ring(other)
        rhs = list(other._coefficients)
        zero = self.ring.zero()
        coeffs = pad_coefficients(self._coefficients, len(rhs), zero)
        for i, c in enumerate(rhs):
            coeffs[i] = coeffs[i] + c
        self._coefficients = strip_trailing_zeros(coeffs, zero)
        return self

    # Subtraction

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_ring(other)
        if self.is_zero():
            return -other

        coeffs = pad_coefficients(self._coefficients, len(other._coefficients), self.ring.zero())
        for i, c in enumerate(other._coefficients):
            coeffs[i] = coeffs[i] - c
        return Polynomial._from_elements(coeffs, self.ring)

    def __isub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_ring(other)
        rhs = list(other._coefficients)
        zero = self.ring.zero()
        coeffs = pad_coefficients(self._coefficients, len(rhs), zero)
        for i, c in enumerate(rhs):
            coeffs[i] = coeffs[i] - c
        self._coefficients = strip_trailing_zeros(coeffs, zero)
        return self

    # Negation

    def __neg__(self) -> Polynomial:
        return Polynomial._from_elements([-c for c in self._coefficients], self.ring)

    # Multiplication

    def __mul__(self, other) -> Polynomial:
        if isinstance(other, Polynomial):
            if self._is_coefficient_of(other):
                # Same type on both sides, so __rmul__ is never tried for us.
                return other.__rmul__(self)
            if other.ring == self.ring:
                return self.mul(other)
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        return self.scalar_mul(scalar)

    def __rmul__(self, other) -> Polynomial:
        scalar = self._scalar(other)
        if scalar is None:
            return NotImplemented
        return self.scalar_mul(scalar)

    def __imul__(self, other) -> Polynomial:
        if isinstance(other, Polynomial) and other.ring == self.ring:
            product = self.mul(other)
        else:
            scalar = self._scalar(other)
            if scalar is None:
                return NotImplemented
            product = self.scalar_mul(scalar)
        self._coefficients = product._coefficients
        return self

    def scalar_mul(self, scalar: RingElement) -> Polynomial:
        """
        Multiply every coefficient by ``scalar``.

        A zero scalar gives the zero polynomial regardless of degree. Products
        that vanish (zero divisors in Z/nZ) are stripped afterwards.
        """
        if scalar == self.ring.zero():
            return Polynomial.zero(self.ring)
        return Polynomial._from_elements([c * scalar for c in self._coefficients], self.ring)

    def mul(self, other: Polynomial, config: Optional[EngineConfig] = None) -> Polynomial:
        """
        Multiply two polynomials.

        Args:
            other: Polynomial over the same ring
            config: Engine configuration; the process-wide default if None

        Returns:
            The canonical product
        """
        self._check_ring(other)
        config = config or get_config()
        coeffs = multiply_coefficients(
            self._coefficients, other._coefficients, self.ring.zero(),
            cutoff=config.karatsuba_cutoff,
        )
        return Polynomial._from_elements(coeffs, self.ring)

    # Remainder

    def __mod__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_ring(other)
        coeffs = list(self._coefficients)
        pseudo_remainder(coeffs, other._coefficients, self.ring.zero())
        return Polynomial._from_elements(coeffs, self.ring)

    def __imod__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_ring(other)
        pseudo_remainder(self._coefficients, list(other._coefficients), self.ring.zero())
        return self


class PolynomialRing(Ring):
    """
    The ring R[x] of polynomials over a base ring R.

    Its elements are ``Polynomial`` values over ``base``, which makes it a
    valid coefficient ring in its own right.

    Example:
        >>> Ry = PolynomialRing(ZZ)
        >>> p = Polynomial([Ry.element([1, 1]), Ry.one()], Ry)   # (1 + y) + x
        >>> (p * p).coefficient(0)
        Polynomial([1, 2, 1], IntegerRing())
    """

    def __init__(self, base: Ring = ZZ):
        self.base = base

    def __repr__(self) -> str:
        return f"PolynomialRing({self.base!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PolynomialRing):
            return self.base == other.base
        return NotImplemented

    def __hash__(self) -> int:
        return hash((PolynomialRing, self.base))

    def zero(self) -> Polynomial:
        return Polynomial.zero(self.base)

    def one(self) -> Polynomial:
        return Polynomial.one(self.base)

    def element(self, value) -> Polynomial:
        """
        Convert ``value`` into a polynomial over the base ring.

        Polynomials over the base ring are copied, lists and tuples are read
        as coefficient sequences, and anything else becomes a constant.

        Raises:
            RingMismatchError: If ``value`` is a polynomial over another ring
        """
        if isinstance(value, Polynomial):
            if value.ring != self.base:
                raise RingMismatchError(self.base, value.ring)
            return value.copy()
        if isinstance(value, (list, tuple)):
            return Polynomial(value, self.base)
        return Polynomial((value,), self.base)


# =============================================================================
# Coefficient-level algorithms
# =============================================================================

def multiply_coefficients(lhs: Sequence[RingElement], rhs: Sequence[RingElement],
                          zero: RingElement, cutoff: int = 2) -> List[RingElement]:
    """
    Product of two canonical coefficient lists.

    Degenerate shapes are handled directly: an empty operand gives the empty
    list, a single coefficient is a scalar multiplication, and two linear
    operands use the four cross products of (a + bx)(c + dx). Everything else
    is padded with ``zero`` to the next power of two and handed to Karatsuba.

    The result may end in zeros when the ring has zero divisors; callers
    canonicalize.
    """
    len_l, len_r = len(lhs), len(rhs)
    if len_l == 0 or len_r == 0:
        return []
    if len_l == 1:
        return _scale(rhs, lhs[0], zero)
    if len_r == 1:
        return _scale(lhs, rhs[0], zero)
    if len_l == 2 and len_r == 2:
        return _linear_product(lhs, rhs)

    n = next_power_of_two(max(len_l, len_r))
    logger.debug("Karatsuba multiply: %d x %d coefficients padded to %d", len_l, len_r, n)
    return karatsuba(
        pad_coefficients(lhs, n, zero),
        pad_coefficients(rhs, n, zero),
        zero,
        cutoff=cutoff,
    )


def karatsuba(lhs: Sequence[RingElement], rhs: Sequence[RingElement],
              zero: RingElement, cutoff: int = 2) -> List[RingElement]:
    """
    Karatsuba multiplication of two equal-length coefficient lists.

    The length must be a power of two so every split at k = n/2 is exact.
    The middle term is formed as p1*q0 + p0*q1 from two separate products
    rather than (p0 + p1)(q0 + q1) - p0*q0 - p1*q1.

    Args:
        lhs, rhs: Coefficient lists of the same power-of-two length
        zero: The ring's additive identity, used for shifting
        cutoff: Blocks of at most this length use schoolbook convolution

    Returns:
        The 2n - 1 coefficients of the product
    """
    d = len(lhs)
    if d == 0:
        return []
    if d == 1:
        return [lhs[0] * rhs[0]]
    if d == 2:
        return _linear_product(lhs, rhs)
    if d <= cutoff:
        return schoolbook_multiply(lhs, rhs, zero)

    k = d // 2
    p0, p1 = lhs[:k], lhs[k:]
    q0, q1 = rhs[:k], rhs[k:]

    p0q0 = karatsuba(p0, q0, zero, cutoff)
    p1q0 = karatsuba(p1, q0, zero, cutoff)
    p0q1 = karatsuba(p0, q1, zero, cutoff)
    p1q1 = karatsuba(p1, q1, zero, cutoff)

    middle = [a + b for a, b in zip(p1q0, p0q1)]
    middle = shift_coefficients(middle, k, zero)
    high = shift_coefficients(p1q1, d, zero)

    length = max(len(p0q0), len(middle), len(high))
    return [
        _get(p0q0, i, zero) + _get(middle, i, zero) + _get(high, i, zero)
        for i in range(length)
    ]


def schoolbook_multiply(lhs: Sequence[RingElement], rhs: Sequence[RingElement],
                        zero: RingElement) -> List[RingElement]:
    """Direct O(n*m) convolution of two coefficient lists."""
    if not lhs or not rhs:
        return []
    result = [zero] * (len(lhs) + len(rhs) - 1)
    for i, a in enumerate(lhs):
        for j, b in enumerate(rhs):
            result[i + j] = result[i + j] + a * b
    return result


def pseudo_remainder(a: List[RingElement], b: Sequence[RingElement], zero: RingElement):
    """
    Reduce ``a`` modulo ``b`` in place by pseudo-division.

    While deg(a) >= deg(b): scale all of ``a`` by lc(b), subtract
    lc(a) * x^(deg(a) - deg(b)) * b, and strip the cancelled top terms.
    At most deg(a) - deg(b) + 1 steps run.

    Args:
        a: Canonical dividend coefficients, overwritten with the remainder
        b: Canonical divisor coefficients

    Raises:
        ZeroDivisionError: If ``b`` is the zero polynomial
    """
    if not b:
        raise ZeroDivisionError("Polynomial remainder by the zero polynomial")

    deg_b = len(b) - 1
    lc_b = b[deg_b]
    steps = 0

    while len(a) >= len(b):
        deg_a = len(a) - 1
        lc_a = a[deg_a]

        for i in range(len(a)):
            a[i] = a[i] * lc_b

        shift = deg_a - deg_b
        for i in range(deg_b + 1):
            a[i + shift] = a[i + shift] - b[i] * lc_a

        strip_trailing_zeros(a, zero)
        steps += 1

    logger.debug("Pseudo-remainder finished after %d steps, remainder length %d", steps, len(a))
    return a


def _get(coeffs: Sequence[RingElement], i: int, zero: RingElement) -> RingElement:
    return coeffs[i] if i < len(coeffs) else zero


def _scale(coeffs: Sequence[RingElement], scalar: RingElement, zero: RingElement) -> List[RingElement]:
    if scalar == zero:
        return []
    return [c * scalar for c in coeffs]


def _linear_product(lhs: Sequence[RingElement], rhs: Sequence[RingElement]) -> List[RingElement]:
    # (a + bx)(c + dx) = ac + (ad + bc)x + bd x^2
    a, b = lhs[0], lhs[1]
    c, d = rhs[0], rhs[1]
    return [a * c, a * d + b * c, b * d]
