"""
Coefficient rings for ringpoly.

This module provides:
    - The ring contract (RingElement, MaybeMultiplicativeInverse, Ring)
    - The integer ring ZZ (IntegerRing, Integer)
    - Residue rings Z/nZ (ResidueRing / Zmod, ResidueElement)
"""

from .base import RingElement, MaybeMultiplicativeInverse, Ring
from .integer_ring import Integer, IntegerRing, ZZ
from .residue_ring import ResidueElement, ResidueRing, Zmod

__all__ = [
    "RingElement",
    "MaybeMultiplicativeInverse",
    "Ring",
    "Integer",
    "IntegerRing",
    "ZZ",
    "ResidueElement",
    "ResidueRing",
    "Zmod",
]
