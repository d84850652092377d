"""Tests for scalar and polynomial multiplication, including Karatsuba."""

import random

import numpy as np
import pytest

from ringpoly import EngineConfig, Polynomial, ZZ, Zmod, set_config
from ringpoly.polynomials import karatsuba, multiply_coefficients, schoolbook_multiply
from ringpoly.rings import Integer


def random_coefficients(rng, degree):
    """Small random coefficients with a non-zero leading term."""
    coeffs = [rng.randint(-9, 9) for _ in range(degree)]
    coeffs.append(rng.choice([-3, -2, -1, 1, 2, 3]))
    return coeffs


def test_scalar_mul():
    p = Polynomial([9, 4, 6, 1, 8])
    assert (p * Integer(2)).coefficients == (18, 8, 12, 2, 16)
    assert (p * 3).coefficients == (27, 12, 18, 3, 24)


def test_scalar_mul_on_left():
    p = Polynomial([9, 4, 6, 1, 8])
    assert 3 * p == p * 3
    assert Integer(2) * p == p * 2


def test_polynomial_zero_scalar_mul():
    p = Polynomial([1, 2, 3, 4])
    assert (p * Integer(0)).coefficients == ()
    assert (p * 0).coefficients == ()


def test_scalar_mul_zero_divisors_are_stripped():
    ring = Zmod(6)
    p = Polynomial([1, 2, 3], ring)
    assert (p * 2).coefficients == (2, 4)


def test_polynomial_zero_poly_mul():
    p1 = Polynomial([1, 2, 3, 4])
    p2 = Polynomial([0])
    assert (p1 * p2).coefficients == ()
    assert (p2 * p1).coefficients == ()


def test_polynomial_deg_0_mul():
    p1 = Polynomial([1, 2, 4, 8])
    p2 = Polynomial([3])
    assert p1 * p2 == p2 * p1
    assert (p1 * p2).coefficients == (3, 6, 12, 24)


def test_polynomial_deg_1_mul():
    p1 = Polynomial([1, 2])
    p2 = Polynomial([3, 5])
    assert p1 * p2 == p2 * p1
    assert (p1 * p2).coefficients == (3, 11, 10)


def test_polynomial_deg_2_mul():
    p1 = Polynomial([1, 2, 3])
    p2 = Polynomial([4, 5, 6])
    assert (p1 * p2).coefficients == (4, 13, 28, 27, 18)


def test_polynomial_high_same_deg_mul():
    p1 = Polynomial([1, 2, 5, 6, 8, 3, 1])
    p2 = Polynomial([3, 5, 0, 1, 5, 9, 2])
    assert p1 * p2 == p2 * p1
    assert (p1 * p2).coefficients == (3, 11, 25, 44, 61, 73, 69, 92, 107, 100, 48, 15, 2)


def test_polynomial_different_length_mul():
    p1 = Polynomial([1, 2, 3, 5, 6, 7])
    p2 = Polynomial([7, 8, 9])
    assert (p1 * p2).coefficients == (7, 22, 46, 77, 109, 142, 110, 63)


@pytest.mark.parametrize("deg_p", [0, 1, 2, 3, 4, 7, 8, 9, 16])
@pytest.mark.parametrize("deg_q", [0, 1, 2, 3, 5, 15])
def test_matches_schoolbook_convolution(deg_p, deg_q):
    rng = random.Random(deg_p * 100 + deg_q)
    a = random_coefficients(rng, deg_p)
    b = random_coefficients(rng, deg_q)

    expected = np.convolve(a, b).tolist()
    product = Polynomial(a) * Polynomial(b)

    assert list(product.coefficients) == expected
    assert product.degree == deg_p + deg_q


def test_mul_commutes_randomized():
    rng = random.Random(7)
    for _ in range(20):
        p = Polynomial(random_coefficients(rng, rng.randint(0, 12)))
        q = Polynomial(random_coefficients(rng, rng.randint(0, 12)))
        assert p * q == q * p


def test_big_integer_coefficients():
    a = [2 ** 100 + i for i in range(5)]
    b = [3 ** 70 - i for i in range(6)]
    expected = schoolbook_multiply([Integer(x) for x in a], [Integer(x) for x in b], Integer(0))
    assert list((Polynomial(a) * Polynomial(b)).coefficients) == expected


def test_modular_product_matches_reduced_integer_product():
    ring = Zmod(13)
    a = [5, 12, 7, 1, 9]
    b = [11, 3, 8, 4]
    expected = [c % 13 for c in np.convolve(a, b).tolist()]
    product = Polynomial(a, ring) * Polynomial(b, ring)
    assert list(product.coefficients) == expected
    assert all(c.ring is ring for c in product.coefficients)


def test_modular_product_zero_divisors_are_stripped():
    ring = Zmod(6)
    p = Polynomial([0, 3], ring)
    q = Polynomial([0, 2], ring)
    assert (p * q).is_zero()

    p = Polynomial([1, 0, 0, 3], ring)
    q = Polynomial([1, 0, 0, 2], ring)
    assert (p * q).coefficients == (1, 0, 0, 5)


def test_imul_replaces_left_operand():
    p = Polynomial([1, 2, 3])
    alias = p
    p *= Polynomial([4, 5, 6])
    assert alias is p
    assert p.coefficients == (4, 13, 28, 27, 18)


def test_imul_scalar():
    p = Polynomial([1, 2, 3])
    p *= 2
    assert p.coefficients == (2, 4, 6)
    p *= 0
    assert p.is_zero()


def test_imul_self():
    p = Polynomial([1, 1])
    p *= p
    assert p.coefficients == (1, 2, 1)


def test_karatsuba_power_of_two_blocks():
    lhs = [Integer(c) for c in [1, 2, 3, 4]]
    rhs = [Integer(c) for c in [5, 6, 7, 8]]
    assert karatsuba(lhs, rhs, Integer(0)) == [5, 16, 34, 60, 61, 52, 32]


def test_multiply_coefficients_pads_to_power_of_two():
    lhs = [Integer(c) for c in [1, 2, 3]]
    rhs = [Integer(c) for c in [4, 5, 6]]
    result = multiply_coefficients(lhs, rhs, Integer(0))
    # Padded to length 4, so the raw product carries two trailing zeros.
    assert result == [4, 13, 28, 27, 18, 0, 0]


def test_schoolbook_multiply_empty():
    assert schoolbook_multiply([], [Integer(1)], Integer(0)) == []


@pytest.mark.parametrize("cutoff", [1, 2, 4, 8, 64])
def test_cutoff_does_not_change_products(cutoff):
    rng = random.Random(cutoff)
    a = random_coefficients(rng, 20)
    b = random_coefficients(rng, 13)
    expected = np.convolve(a, b).tolist()

    product = Polynomial(a).mul(Polynomial(b), config=EngineConfig(karatsuba_cutoff=cutoff))
    assert list(product.coefficients) == expected


def test_global_config_is_used_by_operator():
    set_config(EngineConfig(karatsuba_cutoff=16))
    p1 = Polynomial([1, 2, 5, 6, 8, 3, 1])
    p2 = Polynomial([3, 5, 0, 1, 5, 9, 2])
    assert (p1 * p2).coefficients == (3, 11, 25, 44, 61, 73, 69, 92, 107, 100, 48, 15, 2)
