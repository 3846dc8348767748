import itertools

import pytest

from secret_sharing.crypto import Polynomial, SeededRandom, gf256
from secret_sharing.errors import DivideByZero, InsufficientRandomness


def test_evaluate_matches_expanded_form() -> None:
    poly = Polynomial.from_bytes(b"\x04\x02\xa3")
    x = 0x04
    expected = gf256.add(
        gf256.add(0x04, gf256.mul(0x02, x)),
        gf256.mul(0xA3, gf256.mul(x, x)),
    )
    assert poly.evaluate(x) == expected
    assert poly.evaluate(x) == poly.evaluate(x)


def test_evaluate_at_zero_is_constant_term() -> None:
    poly = Polynomial([0x42, 0x11, 0x99])
    assert poly.evaluate(0) == 0x42


def test_random_fixes_constant_term_and_degree() -> None:
    rng = SeededRandom(b"poly-seed")
    for degree in (1, 2, 7, 254, 255):
        poly = Polynomial.random(zero_at=0x5A, degree=degree, rng=rng)
        assert len(poly) == degree + 1
        assert poly.degree == degree
        assert poly.coefficients[0] == 0x5A
        assert poly.coefficients[-1] != 0


def test_random_redraws_zero_leading_coefficient() -> None:
    stream = iter([b"\x07\x00", b"\x00", b"\x09"])
    poly = Polynomial.random(zero_at=1, degree=2, rng=lambda size: next(stream))
    assert poly.coefficients == (1, 7, 9)


def test_random_gives_up_on_broken_source() -> None:
    with pytest.raises(InsufficientRandomness):
        Polynomial.random(zero_at=1, degree=3, rng=lambda size: b"\x00" * size)


def test_random_rejects_short_reads() -> None:
    with pytest.raises(InsufficientRandomness):
        Polynomial.random(zero_at=1, degree=4, rng=lambda size: b"\x01")


def test_random_rejects_bad_degree() -> None:
    with pytest.raises(ValueError):
        Polynomial.random(zero_at=1, degree=0)
    with pytest.raises(ValueError):
        Polynomial.random(zero_at=1, degree=256)


def test_interpolate_recovers_constant_term() -> None:
    poly = Polynomial.random(zero_at=0xC3, degree=3, rng=SeededRandom(b"interp"))
    points = [(x, poly.evaluate(x)) for x in (3, 9, 17, 200)]
    assert Polynomial.interpolate(points, at=0) == 0xC3
    assert Polynomial.interpolate(points, at=42) == poly.evaluate(42)


def test_interpolate_is_permutation_invariant() -> None:
    poly = Polynomial([0x10, 0x20, 0x30, 0x40])
    points = [(x, poly.evaluate(x)) for x in (1, 2, 3, 4)]
    expected = Polynomial.interpolate(points, at=0)
    for perm in itertools.permutations(points):
        assert Polynomial.interpolate(list(perm), at=0) == expected


def test_interpolate_duplicate_x_raises() -> None:
    with pytest.raises(DivideByZero):
        Polynomial.interpolate([(1, 5), (1, 5), (2, 9)], at=0)


def test_structural_equality_and_repr() -> None:
    assert Polynomial([1, 2, 3]) == Polynomial([1, 2, 3])
    assert Polynomial([1, 2, 3]) != Polynomial([1, 2, 4])
    assert hash(Polynomial([1, 2])) == hash(Polynomial([1, 2]))
    assert repr(Polynomial([4, 2, 163])) == "4 + 2x + 163x^2"
    assert Polynomial.from_bytes(b"") == Polynomial([0])
