"""
Servitor Alpha — AES-CBC + UUID passwords
=========================================
AES (Rijndael, FIPS 197) in Cipher Block Chaining mode with PKCS7
padding. Each plaintext block is XORed with the previous ciphertext
block before encryption; a random IV seeds the first block.

Key size: 128 / 192 / 256 bits (16 / 24 / 32 bytes)
IV:       128 bits (16 bytes) — randomly generated per message
Padding:  PKCS7 over a 16-byte block

Bundle format: iv(16) || ciphertext (multiple of 16)

No authentication tag: padding validation is the only tamper check.

Passwords are random UUID4 strings (122 random bits, canonical
36-character hyphenated form).

Dependencies: cryptography >= 41.0
"""

import logging
import os
import uuid

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..base import Algorithm, CryptoProvider, PasswordProvider
from ..exceptions import (
    InvalidCiphertextLengthError,
    InvalidKeyLengthError,
    InvalidPaddingError,
    InvalidPlaintextLengthError,
)
from ..padding import add_padding, remove_padding

logger = logging.getLogger(__name__)


class ServitorAlpha(PasswordProvider, CryptoProvider):
    """AES-CBC symmetric encryption and UUID password generation."""

    BLOCK_SIZE      = 16
    IV_SIZE         = 16
    VALID_KEY_SIZES = (16, 24, 32)

    algorithm = Algorithm.AES

    def __repr__(self) -> str:
        return "ServitorAlpha(AES-CBC)"

    def default_password(self) -> str:
        return str(uuid.uuid4())

    def _check_key(self, key: bytes) -> None:
        if len(key) not in self.VALID_KEY_SIZES:
            logger.warning("Alpha rejected key of %d bytes", len(key))
            raise InvalidKeyLengthError(
                f"invalid key length: {len(key)}, must be 16, 24, or 32"
            )

    def symmetric_encryption(self, key: bytes, plaintext: bytes) -> bytes:
        """
        Pad, encrypt and prepend a fresh IV.
        Returns: iv(16) || ciphertext
        """
        self._check_key(key)
        iv     = os.urandom(self.IV_SIZE)
        padded = add_padding(plaintext, self.BLOCK_SIZE)
        enc    = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
        ct     = enc.update(padded) + enc.finalize()
        logger.debug(
            "Alpha encrypt: pt=%dB ct=%dB key=%d bits",
            len(plaintext), len(ct), len(key) * 8,
        )
        return iv + ct

    def symmetric_decryption(self, key: bytes, ciphertext: bytes) -> bytes:
        """
        Split the IV, decrypt, strip padding.

        Raises InvalidCiphertextLengthError if the bundle is shorter than
        the IV or its body is not block-aligned, InvalidPaddingError if
        the padding is missing or corrupt (wrong key or tampered data).
        """
        self._check_key(key)
        if len(ciphertext) < self.IV_SIZE:
            logger.warning("Alpha rejected %d-byte ciphertext", len(ciphertext))
            raise InvalidCiphertextLengthError(
                f"ciphertext too short: {len(ciphertext)} bytes, "
                f"need at least {self.IV_SIZE}"
            )

        iv   = ciphertext[:self.IV_SIZE]
        body = ciphertext[self.IV_SIZE:]
        if len(body) % self.BLOCK_SIZE:
            logger.warning("Alpha rejected %d-byte ciphertext body", len(body))
            raise InvalidCiphertextLengthError(
                f"ciphertext body must be a multiple of "
                f"{self.BLOCK_SIZE} bytes, got {len(body)}"
            )

        dec    = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
        padded = dec.update(body) + dec.finalize()
        try:
            plaintext = remove_padding(padded, self.BLOCK_SIZE)
        except InvalidPlaintextLengthError:
            # IV-only bundle: nothing to unpad
            raise InvalidPaddingError("invalid padding: empty body") from None
        logger.debug("Alpha decrypt: ct=%dB pt=%dB", len(body), len(plaintext))
        return plaintext
