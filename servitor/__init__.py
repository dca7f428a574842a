"""
servitor — pluggable symmetric encryption and password generation
=================================================================
Two interchangeable strategies behind one facade.

Providers:
    Alpha  — AES-CBC + PKCS7 (128/192/256-bit keys), UUID passwords
    Beta   — Salsa20 / XSalsa20 stream (256-bit key), alphabet passwords
    Omega  — facade: delegates and tags results with the active algorithm

Helpers:
    add_padding / remove_padding          — PKCS7
    base64_encode / base64_decode         — transport encoding
    hex_encode / hex_decode               — display encoding

No authentication tag is produced by either provider. The ciphertext
does not say which provider made it; the receiver must know.

Author : servitor maintainers
License: MIT
"""

__version__  = "1.0.0"
__author__   = "servitor maintainers"
__project__  = "servitor"

from .base        import Algorithm, PasswordProvider, CryptoProvider
from .exceptions  import (
    ServitorError,
    InvalidKeyLengthError,
    InvalidBlockSizeError,
    InvalidPlaintextLengthError,
    InvalidCiphertextLengthError,
    InvalidPaddingError,
    InvalidNonceLengthError,
    EncodingError,
)
from .padding     import add_padding, remove_padding
from .encoding    import base64_encode, base64_decode, hex_encode, hex_decode
from .providers   import ServitorAlpha, ServitorBeta
from .omega       import ServitorOmega, CryptoResult

__all__ = [
    "Algorithm",
    "PasswordProvider",
    "CryptoProvider",
    "ServitorAlpha",
    "ServitorBeta",
    "ServitorOmega",
    "CryptoResult",
    "add_padding",
    "remove_padding",
    "base64_encode",
    "base64_decode",
    "hex_encode",
    "hex_decode",
    "ServitorError",
    "InvalidKeyLengthError",
    "InvalidBlockSizeError",
    "InvalidPlaintextLengthError",
    "InvalidCiphertextLengthError",
    "InvalidPaddingError",
    "InvalidNonceLengthError",
    "EncodingError",
]
