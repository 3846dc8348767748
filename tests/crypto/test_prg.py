import pytest

from secret_sharing.crypto import SeededRandom, prg_bytes, system_random
from secret_sharing.crypto import prg
from secret_sharing.errors import RandomUnavailable


def test_prg_is_deterministic_and_length() -> None:
    seed = b"seed-123"
    out1 = prg_bytes(seed, 64)
    out2 = prg_bytes(seed, 64)
    assert out1 == out2
    assert len(out1) == 64
    assert prg_bytes(seed + b"x", 64) != out1
    assert prg_bytes(seed, 0) == b""


def test_seeded_random_streams_without_reuse() -> None:
    rng = SeededRandom(b"stream")
    chunks = [rng(10), rng(5), rng(17)]
    assert b"".join(chunks) == prg_bytes(b"stream", 32)
    assert rng.consumed == 32


def test_seeded_random_rejects_empty_seed() -> None:
    with pytest.raises(ValueError):
        SeededRandom(b"")


def test_system_random_sizes() -> None:
    assert len(system_random(16)) == 16
    assert system_random(0) == b""
    with pytest.raises(ValueError):
        system_random(-1)


def test_system_random_wraps_entropy_failure(monkeypatch) -> None:
    def broken(size):
        raise OSError("no entropy")

    monkeypatch.setattr(prg.secrets, "token_bytes", broken)
    with pytest.raises(RandomUnavailable):
        system_random(4)
