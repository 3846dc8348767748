"""
Shamir's Secret Sharing over GF(256).

Every byte of the secret is the constant term of its own random polynomial of
degree ``threshold - 1``. Share ``x`` carries the values of all those
polynomials at ``x``. Any ``threshold`` shares recover each byte by Lagrange
interpolation at zero; fewer shares are consistent with every possible secret.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from secret_sharing.crypto import gf256
from secret_sharing.crypto.polynomial import Polynomial
from secret_sharing.crypto.prg import RandomSource
from secret_sharing.errors import (
    ShareDataLengthMismatch,
    ThresholdLargerThanShares,
    ThresholdTooLow,
    UnsupportedLength,
)
from secret_sharing.share import Share
from secret_sharing.utils import get_logger

logger = get_logger("shamir")

MAX_SHARES = gf256.ORDER - 1


def validate_parameters(threshold: int, shares: int) -> None:
    """Check ``1 < threshold <= shares <= 255``."""
    for name, value in (("threshold", threshold), ("shares", shares)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if threshold > MAX_SHARES or shares > MAX_SHARES:
        raise UnsupportedLength(f"threshold and shares must not exceed {MAX_SHARES}")
    if threshold <= 1:
        raise ThresholdTooLow("threshold must be at least 2")
    if threshold > shares:
        raise ThresholdLargerThanShares(
            f"threshold {threshold} is larger than the number of shares {shares}"
        )


class Secret:
    """A secret together with the parameters it will be split with."""

    def __init__(self, data: bytes, threshold: int, shares: int) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("secret data must be bytes-like")
        validate_parameters(threshold, shares)
        self.data = bytes(data)
        self.threshold = threshold
        self.shares = shares

    def split(self, rng: Optional[RandomSource] = None) -> List[Share]:
        """Split the secret into ``self.shares`` shares."""
        degree = self.threshold - 1
        points = range(1, self.shares + 1)
        payloads = [bytearray() for _ in points]
        for byte in self.data:
            poly = Polynomial.random(zero_at=byte, degree=degree, rng=rng)
            for x, payload in zip(points, payloads):
                payload.append(poly.evaluate(x))
        logger.debug(
            "Split %d-byte secret into %d shares (threshold %d)",
            len(self.data),
            self.shares,
            self.threshold,
        )
        return [Share(index=x, payload=bytes(p)) for x, p in zip(points, payloads)]

    @staticmethod
    def combine(shares: Iterable[Share]) -> bytes:
        """
        Reconstruct the secret from ``shares``.

        The threshold is not checked: too few shares silently yield the wrong
        bytes. Identical duplicate shares are ignored, while two different
        shares with the same index raise DivideByZero.
        """
        share_list = _dedupe(shares)
        if not share_list:
            return b""
        length = len(share_list[0].payload)
        if any(len(s.payload) != length for s in share_list):
            raise ShareDataLengthMismatch("shares carry payloads of different lengths")
        combined = bytearray()
        for position in range(length):
            points = [(s.index, s.payload[position]) for s in share_list]
            combined.append(Polynomial.interpolate(points, at=gf256.ZERO))
        logger.debug("Combined %d shares into %d-byte secret", len(share_list), length)
        return bytes(combined)


def _dedupe(shares: Iterable[Share]) -> List[Share]:
    seen: Dict[Tuple[int, bytes], Share] = {}
    for share in shares:
        seen.setdefault((share.index, share.payload), share)
    return list(seen.values())


def split_secret(secret: bytes, n: int, t: int, rng: Optional[RandomSource] = None) -> List[Share]:
    """
    Split a secret into n shares with threshold t using Shamir's Secret Sharing.
    """
    return Secret(secret, threshold=t, shares=n).split(rng=rng)


def combine_shares(shares: Iterable[Share]) -> bytes:
    """
    Reconstruct the secret from shares using Lagrange interpolation at x=0.
    """
    return Secret.combine(shares)
