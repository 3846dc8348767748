"""Exception hierarchy for secret sharing operations."""


class SecretSharingError(Exception):
    """Base class for every error raised by this package."""


class FieldError(SecretSharingError, ArithmeticError):
    """Arithmetic failure inside GF(256)."""


class DivideByZero(FieldError, ZeroDivisionError):
    """Division by the field's additive identity."""


class ValidationError(SecretSharingError, ValueError):
    """Invalid threshold/share parameters."""


class UnsupportedLength(ValidationError):
    pass


class ThresholdTooLow(ValidationError):
    pass


class ThresholdLargerThanShares(ValidationError):
    pass


class CombineError(SecretSharingError, ValueError):
    """Shares supplied to combine are inconsistent."""


class ShareDataLengthMismatch(CombineError):
    pass


class CodecError(SecretSharingError, ValueError):
    """A share could not be encoded or decoded."""


class InvalidRepresentation(CodecError):
    pass


class RandomUnavailable(SecretSharingError):
    """The randomness source failed."""


class InsufficientRandomness(RandomUnavailable):
    """The randomness source returned too few bytes or kept returning zeros."""


__all__ = [
    "SecretSharingError",
    "FieldError",
    "DivideByZero",
    "ValidationError",
    "UnsupportedLength",
    "ThresholdTooLow",
    "ThresholdLargerThanShares",
    "CombineError",
    "ShareDataLengthMismatch",
    "CodecError",
    "InvalidRepresentation",
    "RandomUnavailable",
    "InsufficientRandomness",
]
