"""
Share value type and its external representations.

Binary form is ``bytes([index]) + payload``. Text form is
``"<decimal index>-<hex payload>"``; hex is accepted in either case.
"""

from __future__ import annotations

import binascii
from dataclasses import dataclass
from typing import Any, Callable, Tuple, TypeVar

from secret_sharing.errors import InvalidRepresentation

T = TypeVar("T")

SEPARATOR = "-"
ENCODINGS = ("text", "binary")


@dataclass(frozen=True)
class Share:
    """One secret share: the x coordinate and the polynomial values per secret byte."""

    index: int
    payload: bytes

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError("Share index must be an int")
        if not 0 <= self.index <= 255:
            raise ValueError(f"Share index out of range: {self.index}")
        if not isinstance(self.payload, (bytes, bytearray, memoryview)):
            raise TypeError("Share payload must be bytes-like")
        object.__setattr__(self, "payload", bytes(self.payload))

    def to_bytes(self) -> bytes:
        return bytes([self.index]) + self.payload

    @classmethod
    def from_bytes(cls, data: bytes) -> "Share":
        data = bytes(data)
        if len(data) < 2:
            raise InvalidRepresentation("binary share needs an index byte and a non-empty payload")
        return cls(index=data[0], payload=data[1:])

    def __str__(self) -> str:
        return f"{self.index}{SEPARATOR}{self.payload.hex()}"

    @classmethod
    def from_string(cls, value: str) -> "Share":
        index_part, sep, payload_part = value.strip().partition(SEPARATOR)
        if not sep:
            raise InvalidRepresentation(f"missing '{SEPARATOR}' separator in share text")
        if not (index_part.isascii() and index_part.isdigit()):
            raise InvalidRepresentation(f"share index is not a decimal number: {index_part!r}")
        index = int(index_part)
        if index > 255:
            raise InvalidRepresentation(f"share index out of range: {index}")
        try:
            payload = binascii.unhexlify(payload_part)
        except (binascii.Error, ValueError) as exc:
            raise InvalidRepresentation(f"share payload is not valid hex: {exc}") from exc
        return cls(index=index, payload=payload)

    def represent(self, formatter: Callable[[int, bytes], T]) -> T:
        """Render with a caller-supplied ``formatter(index, payload)``."""
        return formatter(self.index, self.payload)

    @classmethod
    def from_representation(cls, parser: Callable[[Any], Tuple[int, bytes]], value: Any) -> "Share":
        """
        Rebuild a share from a custom representation.

        ``parser`` maps ``value`` to ``(index, payload)``. Any failure it raises
        surfaces as InvalidRepresentation.
        """
        try:
            index, payload = parser(value)
            return cls(index=index, payload=payload)
        except InvalidRepresentation:
            raise
        except Exception as exc:
            raise InvalidRepresentation(f"custom share representation rejected: {exc}") from exc


def dumps_share(share: Share, encoding: str = "text") -> str | bytes:
    if encoding == "text":
        return str(share)
    if encoding == "binary":
        return share.to_bytes()
    raise ValueError(f"Unknown share encoding '{encoding}'")


def loads_share(value: str | bytes | bytearray | memoryview) -> Share:
    """Decode a share, choosing the text or binary form from the value's type."""
    if isinstance(value, str):
        return Share.from_string(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Share.from_bytes(value)
    raise InvalidRepresentation(f"cannot decode a share from {type(value).__name__}")
