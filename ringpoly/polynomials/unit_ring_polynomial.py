"""
Polynomial operations that need units of the coefficient ring.

Pseudo-division works over any ring. When the divisor's leading coefficient
happens to be a unit, ordinary long division is possible as well and gives a
true quotient and remainder. These helpers require coefficients that
implement ``MaybeMultiplicativeInverse`` and treat a non-unit leading
coefficient as a caller error.

Example:
    >>> from ringpoly.rings import Zmod
    >>> ring = Zmod(7)
    >>> a = Polynomial([1, 0, 3], ring)    # 3x^2 + 1
    >>> b = Polynomial([2, 5], ring)       # 5x + 2
    >>> q, r = unit_divmod(a, b)
    >>> q * b + r == a
    True
"""

from __future__ import annotations
from typing import Optional, Tuple

from ..rings.base import MaybeMultiplicativeInverse, RingElement
from ..utils import strip_trailing_zeros
from .generic import Polynomial


def _inverse_of_leading(poly: Polynomial) -> Optional[RingElement]:
    lc = poly.leading_coefficient
    if not isinstance(lc, MaybeMultiplicativeInverse):
        raise TypeError(f"{type(lc).__name__} does not support multiplicative inverses")
    return lc.inverse()


def monic(poly: Polynomial) -> Optional[Polynomial]:
    """
    Scale ``poly`` so its leading coefficient is one.

    Returns:
        The monic associate, or None when the leading coefficient is not a
        unit (this includes the zero polynomial)
    """
    if poly.is_zero():
        return None
    inv = _inverse_of_leading(poly)
    if inv is None:
        return None
    return poly * inv


def unit_divmod(a: Polynomial, b: Polynomial) -> Tuple[Polynomial, Polynomial]:
    """
    Long division of ``a`` by ``b`` whose leading coefficient is a unit.

    Returns:
        (quotient, remainder) with a == quotient * b + remainder and
        deg(remainder) < deg(b) or remainder zero

    Raises:
        ZeroDivisionError: If b is the zero polynomial
        ValueError: If b's leading coefficient has no inverse
    """
    if b.is_zero():
        raise ZeroDivisionError("Polynomial division by the zero polynomial")
    a._check_ring(b)
    inv = _inverse_of_leading(b)
    if inv is None:
        raise ValueError(f"Leading coefficient {b.leading_coefficient} is not a unit")

    zero = a.ring.zero()
    divisor = b.coefficients
    remainder = list(a.coefficients)
    quotient = [zero] * max(len(remainder) - len(divisor) + 1, 0)

    while len(remainder) >= len(divisor):
        factor = remainder[-1] * inv
        shift = len(remainder) - len(divisor)
        quotient[shift] = factor
        for i, c in enumerate(divisor):
            remainder[i + shift] = remainder[i + shift] - c * factor
        strip_trailing_zeros(remainder, zero)

    return Polynomial(quotient, a.ring), Polynomial(remainder, a.ring)
