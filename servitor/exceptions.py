"""
Errors raised by servitor.

All of them are ValueError subclasses: they signal malformed input
(wrong key size, corrupted padding, undersized ciphertext), never a
transient condition worth retrying.
"""

from .base import Algorithm


class ServitorError(ValueError):
    """Base class. A failed call never carries a concrete algorithm tag."""

    algorithm = Algorithm.UNKNOWN


class InvalidKeyLengthError(ServitorError):
    pass


class InvalidBlockSizeError(ServitorError):
    pass


class InvalidPlaintextLengthError(ServitorError):
    pass


class InvalidCiphertextLengthError(ServitorError):
    pass


class InvalidPaddingError(ServitorError):
    pass


class InvalidNonceLengthError(ServitorError):
    pass


class EncodingError(ServitorError):
    """base64 / hex text could not be decoded."""
