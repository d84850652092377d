"""
Polynomial engine for ringpoly.

This module provides:
    - Polynomial: univariate polynomials over any ring
    - PolynomialRing: R[x] as a ring, for nested polynomial rings
    - Coefficient-level algorithms (Karatsuba, schoolbook, pseudo-remainder)
    - Integer-coefficient helpers backed by numpy
    - Division helpers for divisors with a unit leading coefficient
"""

from .generic import (
    Polynomial,
    PolynomialRing,
    multiply_coefficients,
    karatsuba,
    schoolbook_multiply,
    pseudo_remainder,
)
from .integer_polynomial import from_integer_coefficients, from_array, to_array, evaluate_many
from .unit_ring_polynomial import monic, unit_divmod

__all__ = [
    "Polynomial",
    "PolynomialRing",
    "multiply_coefficients",
    "karatsuba",
    "schoolbook_multiply",
    "pseudo_remainder",
    "from_integer_coefficients",
    "from_array",
    "to_array",
    "evaluate_many",
    "monic",
    "unit_divmod",
]
