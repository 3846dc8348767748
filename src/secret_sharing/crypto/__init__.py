from . import gf256
from .polynomial import Polynomial
from .prg import SeededRandom, prg_bytes, system_random
from .shamir import Secret, combine_shares, split_secret, validate_parameters

__all__ = [
    "gf256",
    "Polynomial",
    "SeededRandom",
    "prg_bytes",
    "system_random",
    "Secret",
    "combine_shares",
    "split_secret",
    "validate_parameters",
]
