"""
Provider interfaces
===================
Two small capabilities, injected independently into the Omega facade:

    PasswordProvider  — produces a fresh default password
    CryptoProvider    — symmetric encrypt / decrypt of raw bytes

Every CryptoProvider names its own algorithm through the ``algorithm``
attribute, so the facade can tag results without inspecting types.
"""

from abc import ABC, abstractmethod
from enum import Enum


class Algorithm(str, Enum):
    """Closed set of algorithm tags reported by the facade."""

    AES     = "AES"
    SALSA20 = "Salsa20"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


class PasswordProvider(ABC):

    @abstractmethod
    def default_password(self) -> str:
        """Return a freshly generated password."""


class CryptoProvider(ABC):

    algorithm: Algorithm = Algorithm.UNKNOWN

    @abstractmethod
    def symmetric_encryption(self, key: bytes, plaintext: bytes) -> bytes:
        """Encrypt plaintext → prefix (IV / nonce) ‖ ciphertext."""

    @abstractmethod
    def symmetric_decryption(self, key: bytes, ciphertext: bytes) -> bytes:
        """Decrypt a blob produced by symmetric_encryption() → plaintext."""
