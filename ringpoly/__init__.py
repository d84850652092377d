"""
ringpoly
========

A small computer-algebra kernel: univariate polynomials over an abstract ring.

The same arithmetic code runs over the integers, over residue rings Z/nZ
(including composite moduli, which are not fields), and over any type that
implements the ring contract in ``ringpoly.rings.base``.

Modules:
    - rings: the ring contract plus the integer and residue rings
    - polynomials: the polynomial engine (Karatsuba, pseudo-remainder)
    - config: engine tuning and log level

Quick Start:
    >>> from ringpoly import Polynomial, ZZ, Zmod
    >>> p = Polynomial([1, 2, 3], ZZ)
    >>> q = Polynomial([4, 5, 6], ZZ)
    >>> print(p * q)
    18*x^4 + 27*x^3 + 28*x^2 + 13*x + 4
"""

__version__ = "0.1.0"
__author__ = "Your Name"

from .config import EngineConfig, get_config, set_config, set_log_level
from .exceptions import RingMismatchError
from .rings import (
    RingElement,
    MaybeMultiplicativeInverse,
    Ring,
    Integer,
    IntegerRing,
    ZZ,
    ResidueElement,
    ResidueRing,
    Zmod,
)
from .polynomials import Polynomial, PolynomialRing

__all__ = [
    "EngineConfig",
    "get_config",
    "set_config",
    "set_log_level",
    "RingMismatchError",
    "RingElement",
    "MaybeMultiplicativeInverse",
    "Ring",
    "Integer",
    "IntegerRing",
    "ZZ",
    "ResidueElement",
    "ResidueRing",
    "Zmod",
    "Polynomial",
    "PolynomialRing",
]
