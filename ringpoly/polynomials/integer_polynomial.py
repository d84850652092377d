"""
Integer-coefficient conveniences.

Polynomials over ZZ are the default use case, so this module adds helpers to
move them in and out of numpy. Arrays use ``dtype=object`` to keep Python's
arbitrary-precision ints exact; fixed-width integer arrays are accepted as
input and widened.

Example:
    >>> import numpy as np
    >>> p = from_array(np.array([9, 4, 6, 1, 8]))
    >>> to_array(p * 2)
    array([18, 8, 12, 2, 16], dtype=object)
"""

from __future__ import annotations
from typing import Iterable

import numpy as np

from ..rings.integer_ring import ZZ
from .generic import Polynomial


def from_integer_coefficients(values: Iterable[int]) -> Polynomial:
    """Build a polynomial over ZZ from plain integers, lowest degree first."""
    return Polynomial.from_coefficients(values, ZZ)


def from_array(array: np.ndarray) -> Polynomial:
    """
    Build a polynomial over ZZ from a one-dimensional integer array.

    Raises:
        ValueError: If the array is not one-dimensional or not integral
    """
    array = np.asarray(array)
    if array.ndim != 1:
        raise ValueError(f"Expected a 1-D coefficient array, got shape {array.shape}")
    if array.dtype != object and not np.issubdtype(array.dtype, np.integer):
        raise ValueError(f"Expected integer coefficients, got dtype {array.dtype}")
    return from_integer_coefficients(int(v) for v in array)


def to_array(poly: Polynomial) -> np.ndarray:
    """Coefficients of an integer polynomial as an exact object array."""
    return np.array([int(c) for c in poly.coefficients], dtype=object)


def evaluate_many(poly: Polynomial, points: Iterable[int]) -> np.ndarray:
    """
    Evaluate an integer polynomial at many points at once.

    Horner's method applied element-wise over an object array, so results
    stay exact for arbitrarily large values.
    """
    xs = np.array([int(x) for x in points], dtype=object)
    result = np.zeros(len(xs), dtype=object)
    for coeff in reversed(poly.coefficients):
        result = result * xs + int(coeff)
    return result
