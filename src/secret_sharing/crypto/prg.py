import secrets
import threading
from typing import Callable

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from secret_sharing.errors import InsufficientRandomness, RandomUnavailable

RandomSource = Callable[[int], bytes]


def _derive_key_iv(seed: bytes) -> tuple[bytes, bytes]:
    hkdf = HKDF(algorithm=hashes.SHA256(), length=48, salt=None, info=b"secret-sharing/prg")
    material = hkdf.derive(seed)
    return material[:32], material[32:]


def _keystream(seed: bytes):
    key, iv = _derive_key_iv(seed)
    return Cipher(algorithms.AES(key), modes.CTR(iv)).encryptor()


def prg_bytes(seed: bytes, length: int) -> bytes:
    """
    Deterministic PRG based on AES-CTR. For a given seed and length, output is stable.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    if length == 0:
        return b""
    encryptor = _keystream(seed)
    return encryptor.update(b"\x00" * length) + encryptor.finalize()


def system_random(size: int) -> bytes:
    """Default randomness source backed by the operating system CSPRNG."""
    if size < 0:
        raise ValueError("size must be non-negative")
    try:
        return secrets.token_bytes(size)
    except OSError as exc:
        raise RandomUnavailable(f"entropy source failed: {exc}") from exc


class SeededRandom:
    """
    Reproducible randomness source that streams one AES-CTR keystream.

    Successive calls continue the stream, so no byte is ever handed out twice.
    Intended for tests and published vectors; never use a guessable seed to
    split a real secret.
    """

    def __init__(self, seed: bytes) -> None:
        if not seed:
            raise ValueError("seed must be non-empty")
        self._encryptor = _keystream(seed)
        self._lock = threading.Lock()
        self.consumed = 0

    def __call__(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be non-negative")
        with self._lock:
            self.consumed += size
            return self._encryptor.update(b"\x00" * size)


def draw(rng: RandomSource, size: int) -> bytes:
    """Call ``rng`` and insist on exactly ``size`` bytes back."""
    data = rng(size)
    if len(data) != size:
        raise InsufficientRandomness(f"randomness source returned {len(data)} of {size} bytes")
    return bytes(data)
