"""Tests for residue rings Z/nZ."""

import pytest

from ringpoly.exceptions import RingMismatchError
from ringpoly.rings import ResidueElement, ResidueRing, Zmod


def test_zmod_alias():
    assert Zmod is ResidueRing


@pytest.mark.parametrize("modulus", [0, -1, -97])
def test_non_positive_modulus_rejected(modulus):
    with pytest.raises(ValueError, match="Modulus must be positive"):
        ResidueRing(modulus)


def test_construction_reduces():
    ring = ResidueRing(10)
    assert ring.element(23).value == 3
    assert ring.element(-3).value == 7


def test_add_wrap():
    ring = ResidueRing(97)
    assert ring.element(45) + ring.element(67) == 15


def test_sub_wrap():
    ring = ResidueRing(97)
    assert ring.element(0) - ring.element(1) == ring.element(96)


def test_mul_wrap():
    ring = ResidueRing(97)
    assert ring.element(45) * ring.element(67) == 8


def test_neg():
    ring = ResidueRing(10)
    a = ring.element(3)
    assert (-a).value == 7
    assert a + (-a) == ring.zero()


def test_mixed_int_operands_keep_ring():
    ring = ResidueRing(7)
    a = ring.element(5)
    assert (a + 4).value == 2
    assert (4 + a).value == 2
    assert (a - 6).value == 6
    assert (6 - a).value == 1
    assert (a * 3).value == 1
    assert (3 * a).ring is ring


def test_result_takes_left_ring():
    ring = ResidueRing(7)
    result = ring.element(5) + ResidueElement(4)
    assert result.ring is ring
    assert result.value == 2


def test_result_falls_back_to_right_ring():
    ring = ResidueRing(7)
    result = ResidueElement(3) + ring.element(5)
    assert result.ring is ring
    assert result.value == 1


def test_bare_elements_act_as_integers():
    a = ResidueElement(5) * ResidueElement(9)
    assert a.ring is None
    assert a.value == 45
    assert a.modulus is None


def test_mixing_rings_fails():
    with pytest.raises(RingMismatchError):
        Zmod(5).element(1) + Zmod(7).element(1)


def test_eq_int_compares_canonical_value():
    ring = ResidueRing(7)
    assert ring.element(10) == 3
    assert ring.element(3) != 10
    assert ring.element(-4) == 3


def test_eq_compares_values_across_rings():
    assert Zmod(5).element(3) == Zmod(7).element(3)
    assert Zmod(5).element(8) != Zmod(7).element(8)
    assert Zmod(7).element(3) == Zmod(7).element(10)


def test_eq_is_transitive_with_bare_elements():
    a = Zmod(7).element(3)
    b = ResidueElement(3)
    c = Zmod(11).element(3)
    assert a == b and b == c and a == c
    d = Zmod(11).element(14)
    assert b == d and a == d


def test_hash_agrees_with_eq():
    ring = ResidueRing(7)
    a = ring.element(10)
    assert a == 3 and hash(a) == hash(3)
    assert len({a, 3, ResidueElement(3), Zmod(11).element(3)}) == 1
    assert len({a, 10}) == 2
    assert {a: "x"}[3] == "x"


def test_bare_identities_match_ring_identities():
    ring = ResidueRing(11)
    assert ResidueElement.zero() == ring.zero()
    assert ResidueElement.one() == ring.one()
    assert ResidueElement.ZERO == ring.zero()


def test_rings_compare_by_modulus():
    assert ResidueRing(13) == ResidueRing(13)
    assert ResidueRing(13) != ResidueRing(17)
    assert hash(ResidueRing(13)) == hash(ResidueRing(13))


def test_number_alias():
    ring = ResidueRing(13)
    assert ring.number(20) == ring.element(20)


def test_element_adopts_bare_value():
    ring = ResidueRing(13)
    a = ring.element(ResidueElement(15))
    assert a.ring is ring
    assert a.value == 2


def test_inverse_prime_modulus():
    ring = ResidueRing(13)
    for v in range(1, 13):
        a = ring.element(v)
        inv = a.inverse()
        assert inv is not None
        assert a * inv == ring.one()


def test_inverse_zero_is_none():
    assert ResidueRing(13).zero().inverse() is None


def test_inverse_composite_modulus():
    ring = ResidueRing(12)
    units = {1, 5, 7, 11}
    for v in range(12):
        inv = ring.element(v).inverse()
        if v in units:
            assert ring.element(v) * inv == 1
        else:
            assert inv is None


def test_inverse_large_modulus():
    ring = ResidueRing(2 ** 127 - 1)
    a = ring.element(42)
    assert a * a.inverse() == 1


def test_inverse_bare_elements():
    assert ResidueElement(1).inverse() == 1
    assert ResidueElement(-1).inverse() == -1
    assert ResidueElement(2).inverse() is None


def test_zero_ring():
    ring = ResidueRing(1)
    assert ring.one() == ring.zero()
    assert ring.zero().inverse() == ring.zero()


def test_repr():
    assert repr(ResidueRing(97).element(15)) == "ResidueElement(15, mod 97)"
    assert repr(ResidueElement(3)) == "ResidueElement(3)"
