"""
Servitor Beta — Salsa20 stream + alphabet passwords
===================================================
Salsa20 keystream XORed with the plaintext. No padding: the ciphertext
is exactly as long as the plaintext.

Key:   256-bit (32 bytes)
Nonce: 24 bytes (XSalsa20, default) or 8 bytes (plain Salsa20),
       randomly generated per message

Bundle format: nonce(8|24) || ciphertext

No authentication tag. Never reuse a (key, nonce) pair: two messages
under the same keystream leak their XOR.

Passwords are drawn character by character from a fixed 93-character
alphabet using the secrets module.

Dependencies: pycryptodome >= 3.15
"""

import logging
import os
import secrets

from ..base import Algorithm, CryptoProvider, PasswordProvider
from ..exceptions import InvalidCiphertextLengthError, InvalidKeyLengthError
from ..salsa20 import xor_keystream

logger = logging.getLogger(__name__)

# Letters, digits and every printable ASCII symbol except the backslash.
PASSWORD_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
    "~!@#$%^&*()_+-=`[]{}|;:'\",.<>/?"
)

MIN_PASSWORD_LENGTH     = 16
MAX_PASSWORD_LENGTH     = 64
DEFAULT_PASSWORD_LENGTH = 32
VALID_NONCE_LENGTHS     = (8, 24)
DEFAULT_NONCE_LENGTH    = 24
KEY_SIZE                = 32


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ServitorBeta(PasswordProvider, CryptoProvider):
    """
    Salsa20 symmetric encryption and random-alphabet passwords.

    Out-of-range or non-integer configuration is clamped to the defaults instead of
    raising:
        password_length  16..64    else 32
        nonce_length     8 or 24   else 24
    Both values are fixed for the lifetime of the instance.
    """

    algorithm = Algorithm.SALSA20

    def __init__(self, password_length: int = DEFAULT_PASSWORD_LENGTH,
                 nonce_length: int = DEFAULT_NONCE_LENGTH):
        if not (_is_int(password_length)
                and MIN_PASSWORD_LENGTH <= password_length <= MAX_PASSWORD_LENGTH):
            logger.debug(
                "Password length %s out of range, using %d",
                password_length, DEFAULT_PASSWORD_LENGTH,
            )
            password_length = DEFAULT_PASSWORD_LENGTH
        if not _is_int(nonce_length) or nonce_length not in VALID_NONCE_LENGTHS:
            logger.debug(
                "Nonce length %s not supported, using %d",
                nonce_length, DEFAULT_NONCE_LENGTH,
            )
            nonce_length = DEFAULT_NONCE_LENGTH
        self._password_length = password_length
        self._nonce_length    = nonce_length

    @property
    def password_length(self) -> int:
        return self._password_length

    @property
    def nonce_length(self) -> int:
        return self._nonce_length

    def __repr__(self) -> str:
        return (f"ServitorBeta(password_length={self._password_length}, "
                f"nonce_length={self._nonce_length})")

    def default_password(self) -> str:
        return "".join(
            secrets.choice(PASSWORD_ALPHABET)
            for _ in range(self._password_length)
        )

    @staticmethod
    def _check_key(key: bytes) -> None:
        if len(key) != KEY_SIZE:
            logger.warning("Beta rejected key of %d bytes", len(key))
            raise InvalidKeyLengthError(
                f"invalid key length: {len(key)}, must be {KEY_SIZE}"
            )

    def symmetric_encryption(self, key: bytes, plaintext: bytes) -> bytes:
        """Returns: nonce || plaintext XOR keystream"""
        self._check_key(key)
        nonce = os.urandom(self._nonce_length)
        ct    = xor_keystream(key, nonce, plaintext)
        logger.debug(
            "Beta encrypt: pt=%dB nonce=%dB", len(plaintext), len(nonce)
        )
        return nonce + ct

    def symmetric_decryption(self, key: bytes, ciphertext: bytes) -> bytes:
        """
        Split the nonce at the configured nonce length and XOR the
        keystream back. A wrong key yields garbage, not an error.
        """
        self._check_key(key)
        if len(ciphertext) < self._nonce_length:
            logger.warning("Beta rejected %d-byte ciphertext", len(ciphertext))
            raise InvalidCiphertextLengthError(
                f"ciphertext too short: {len(ciphertext)} bytes, "
                f"need at least {self._nonce_length}"
            )
        nonce = ciphertext[:self._nonce_length]
        ct    = ciphertext[self._nonce_length:]
        logger.debug("Beta decrypt: ct=%dB nonce=%dB", len(ct), len(nonce))
        return xor_keystream(key, nonce, ct)
