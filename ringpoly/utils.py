"""
Coefficient-list helpers shared by the polynomial engine.

Coefficient lists are stored low-degree-first: index ``i`` holds the
coefficient of ``x^i``. These helpers work on plain lists of ring elements
and never look inside the elements beyond ``==`` and the ring's zero.
"""

from __future__ import annotations
from typing import List, TypeVar

T = TypeVar("T")


def strip_trailing_zeros(coefficients: List[T], zero: T) -> List[T]:
    """
    Drop trailing coefficients equal to ``zero``, in place.

    Returns the same list for convenience. The empty list is the canonical
    zero polynomial.
    """
    while coefficients and coefficients[-1] == zero:
        coefficients.pop()
    return coefficients


def shift_coefficients(coefficients: List[T], shift: int, zero: T) -> List[T]:
    """
    Multiply a coefficient list by ``x^shift``.

    Prepends ``shift`` copies of ``zero``. Returns a new list unless
    ``shift`` is 0, in which case the input is returned untouched.

    Example:
        >>> shift_coefficients([1, 2], 3, 0)
        [0, 0, 0, 1, 2]
    """
    if shift == 0:
        return coefficients
    if shift < 0:
        raise ValueError(f"Shift must be non-negative, got {shift}")
    return [zero] * shift + list(coefficients)


def pad_coefficients(coefficients: List[T], length: int, zero: T) -> List[T]:
    """Return a copy of ``coefficients`` right-padded with ``zero`` to ``length``."""
    padded = list(coefficients)
    if len(padded) < length:
        padded.extend([zero] * (length - len(padded)))
    return padded


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()
