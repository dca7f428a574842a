"""
PKCS7 padding
=============
Appends N bytes of value N so the total length becomes a multiple of
the block size. Already-aligned input gains a full block, so removal
is never ambiguous.

Removal is the only integrity check in the system: a claimed pad
length of 0, a pad length larger than the block, or inconsistent pad
bytes are all rejected. That is format validation, not authentication.

Dependencies: cryptography >= 41.0
"""

import logging

from cryptography.hazmat.primitives import padding as sym_padding

from .exceptions import (
    InvalidBlockSizeError,
    InvalidPaddingError,
    InvalidPlaintextLengthError,
)

logger = logging.getLogger(__name__)

MIN_BLOCK_SIZE = 1
MAX_BLOCK_SIZE = 255


def _check_block_size(block_size: int) -> None:
    if not MIN_BLOCK_SIZE <= block_size <= MAX_BLOCK_SIZE:
        raise InvalidBlockSizeError(
            f"invalid block size: {block_size}, must be "
            f"{MIN_BLOCK_SIZE}-{MAX_BLOCK_SIZE}"
        )


def add_padding(data: bytes, block_size: int) -> bytes:
    """Return data ‖ PKCS7 padding for block_size (in bytes)."""
    _check_block_size(block_size)
    padder = sym_padding.PKCS7(block_size * 8).padder()
    return padder.update(data) + padder.finalize()


def remove_padding(data: bytes, block_size: int) -> bytes:
    """
    Strip and validate PKCS7 padding.

    Raises InvalidPlaintextLengthError for empty or misaligned input and
    InvalidPaddingError when the pad bytes do not check out.
    """
    _check_block_size(block_size)
    if not data:
        raise InvalidPlaintextLengthError("invalid plaintext: empty")
    if len(data) % block_size:
        raise InvalidPlaintextLengthError(
            f"invalid plaintext length: {len(data)} is not a multiple "
            f"of {block_size}"
        )

    unpadder = sym_padding.PKCS7(block_size * 8).unpadder()
    try:
        return unpadder.update(data) + unpadder.finalize()
    except ValueError:
        logger.warning("Rejected PKCS7 padding (block=%d)", block_size)
        raise InvalidPaddingError("invalid padding") from None
