"""
Shamir's Secret Sharing over GF(256): split a byte string into N shares so that
any K of them rebuild it and K-1 reveal nothing.
"""

from .crypto import Secret, combine_shares, split_secret
from .errors import SecretSharingError
from .share import Share, dumps_share, loads_share

__version__ = "0.1.0"

__all__ = [
    "Secret",
    "Share",
    "SecretSharingError",
    "combine_shares",
    "split_secret",
    "dumps_share",
    "loads_share",
    "config",
    "crypto",
    "utils",
]
