"""
Servitor Omega — provider facade
================================
Composes one PasswordProvider and one CryptoProvider, chosen
independently (Alpha/Alpha, Beta/Beta, Alpha/Beta, Beta/Alpha are all
valid), and delegates every call to them.

Successful encrypt/decrypt results are tagged with the algorithm of the
active crypto provider. Failures propagate unchanged as ServitorError,
whose tag is always Algorithm.UNKNOWN; no partial output is returned.

    omega = ServitorOmega(ServitorBeta(), ServitorAlpha())
    password = omega.generate_password()
    ciphertext, algorithm = omega.encrypt(key, b"hello")
    plaintext, _ = omega.decrypt(key, ciphertext)
"""

import logging
from typing import NamedTuple

from .base import Algorithm, CryptoProvider, PasswordProvider

logger = logging.getLogger(__name__)


class CryptoResult(NamedTuple):
    data: bytes
    algorithm: Algorithm


class ServitorOmega:
    """Delegating facade over a password provider and a crypto provider."""

    def __init__(self, password_provider: PasswordProvider,
                 crypto_provider: CryptoProvider):
        self._password_provider = password_provider
        self._crypto_provider   = crypto_provider
        logger.debug(
            "ServitorOmega password=%r crypto=%r",
            password_provider, crypto_provider,
        )

    @property
    def password_provider(self) -> PasswordProvider:
        return self._password_provider

    @property
    def crypto_provider(self) -> CryptoProvider:
        return self._crypto_provider

    @property
    def algorithm(self) -> Algorithm:
        tag = getattr(self._crypto_provider, "algorithm", None)
        return tag if isinstance(tag, Algorithm) else Algorithm.UNKNOWN

    def generate_password(self) -> str:
        return self._password_provider.default_password()

    def encrypt(self, key: bytes, plaintext: bytes) -> CryptoResult:
        ciphertext = self._crypto_provider.symmetric_encryption(key, plaintext)
        return CryptoResult(ciphertext, self.algorithm)

    def decrypt(self, key: bytes, ciphertext: bytes) -> CryptoResult:
        plaintext = self._crypto_provider.symmetric_decryption(key, ciphertext)
        return CryptoResult(plaintext, self.algorithm)

    def __repr__(self) -> str:
        return (f"ServitorOmega(password={self._password_provider!r}, "
                f"crypto={self._crypto_provider!r})")
