"""Polynomials over GF(256) with random generation, evaluation and interpolation."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from secret_sharing.crypto import gf256
from secret_sharing.crypto.prg import RandomSource, draw, system_random
from secret_sharing.errors import InsufficientRandomness

MAX_DEGREE = gf256.ORDER - 1
# Chance of this many consecutive zero draws from a healthy source is 256**-64.
MAX_LEADING_DRAWS = 64


class Polynomial:
    """
    Immutable polynomial whose coefficient ``i`` multiplies ``x**i``.

    Equality is structural: two polynomials are equal when their coefficient
    tuples are equal.
    """

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: Iterable[int]) -> None:
        coeffs = tuple(gf256.element(c) for c in coefficients)
        if not coeffs:
            raise ValueError("Polynomial needs at least one coefficient")
        self._coefficients: Tuple[int, ...] = coeffs

    @classmethod
    def from_bytes(cls, data: bytes) -> "Polynomial":
        """Build from raw coefficient bytes; empty input gives the zero polynomial."""
        return cls(bytes(data) or b"\x00")

    @classmethod
    def random(cls, zero_at: int, degree: int, rng: Optional[RandomSource] = None) -> "Polynomial":
        """
        Random polynomial of exactly ``degree`` with ``p(0) == zero_at``.

        Coefficients 1..degree are drawn uniformly from ``rng``; the leading one
        is redrawn while zero. Raises InsufficientRandomness when the source
        comes up short or never yields a non-zero leading coefficient.
        """
        if not 1 <= degree <= MAX_DEGREE:
            raise ValueError(f"degree must satisfy 1 <= degree <= {MAX_DEGREE}")
        rng = rng or system_random
        coefficients = [gf256.element(zero_at)]
        coefficients.extend(draw(rng, degree))
        draws = 0
        while coefficients[degree] == gf256.ZERO:
            draws += 1
            if draws > MAX_LEADING_DRAWS:
                raise InsufficientRandomness(
                    f"no non-zero leading coefficient after {MAX_LEADING_DRAWS} draws"
                )
            coefficients[degree] = draw(rng, 1)[0]
        return cls(coefficients)

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def __len__(self) -> int:
        return len(self._coefficients)

    def evaluate(self, x: int) -> int:
        """Evaluate at ``x`` with Horner's method."""
        acc = gf256.ZERO
        for coeff in reversed(self._coefficients):
            acc = gf256.add(gf256.mul(acc, x), coeff)
        return acc

    @staticmethod
    def interpolate(points: Sequence[Tuple[int, int]], at: int) -> int:
        """
        Lagrange-interpolate the polynomial through ``points`` and evaluate it at ``at``.

        Points may be given in any order. Two points with the same x coordinate
        raise DivideByZero.
        """
        result = gf256.ZERO
        for i, (xi, yi) in enumerate(points):
            basis = gf256.ONE
            for j, (xj, _) in enumerate(points):
                if i == j:
                    continue
                numer = gf256.sub(at, xj)
                denom = gf256.sub(xi, xj)
                basis = gf256.mul(basis, gf256.div(numer, denom))
            result = gf256.add(result, gf256.mul(yi, basis))
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        terms = []
        for power, coeff in enumerate(self._coefficients):
            if power == 0:
                terms.append(str(coeff))
            elif power == 1:
                terms.append(f"{coeff}x")
            else:
                terms.append(f"{coeff}x^{power}")
        return " + ".join(terms)
