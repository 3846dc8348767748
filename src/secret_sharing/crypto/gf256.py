"""
Arithmetic in GF(2^8) using the AES reducing polynomial x^8 + x^4 + x^3 + x + 1.

Field elements are plain ints in 0..255. Multiplication and division go through
discrete log/antilog tables built once at import for the generator 0x03.
"""

from typing import Tuple

from secret_sharing.errors import DivideByZero

ORDER = 256
REDUCING_POLYNOMIAL = 0x11B
GENERATOR = 0x03

ZERO = 0
ONE = 1


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    exp = [0] * (2 * (ORDER - 1))
    log = [0] * ORDER
    value = 1
    for power in range(ORDER - 1):
        exp[power] = value
        log[value] = power
        # value * 0x03 == value * 0x02 ^ value
        doubled = value << 1
        if doubled & 0x100:
            doubled ^= REDUCING_POLYNOMIAL
        value = doubled ^ value
    # Doubled so that LOG[a] + LOG[b] indexes without reduction.
    for power in range(ORDER - 1, 2 * (ORDER - 1)):
        exp[power] = exp[power - (ORDER - 1)]
    return tuple(exp), tuple(log)


EXP_TABLE, LOG_TABLE = _build_tables()


def element(value: int) -> int:
    """Validate that ``value`` is a field element and return it as an int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"GF(256) element must be an int, got {type(value).__name__}")
    if not 0 <= value < ORDER:
        raise ValueError(f"GF(256) element out of range: {value}")
    return value


def add(a: int, b: int) -> int:
    return element(a) ^ element(b)


def sub(a: int, b: int) -> int:
    # Characteristic 2: subtraction is addition.
    return add(a, b)


def mul(a: int, b: int) -> int:
    element(a)
    element(b)
    if a == 0 or b == 0:
        return 0
    return EXP_TABLE[LOG_TABLE[a] + LOG_TABLE[b]]


def div(a: int, b: int) -> int:
    """Return ``a / b``. Raises DivideByZero when ``b`` is zero."""
    element(a)
    element(b)
    if b == 0:
        raise DivideByZero("division by zero in GF(256)")
    if a == 0:
        return 0
    return EXP_TABLE[(LOG_TABLE[a] - LOG_TABLE[b]) % (ORDER - 1)]


def inverse(a: int) -> int:
    """Multiplicative inverse of ``a``."""
    return div(ONE, a)
