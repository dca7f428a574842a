"""
Text transforms for ciphertext transport and display.

Standard base64 (with '=' padding) and lowercase hex. Both are lossless
and never touch the cryptographic content.
"""

import base64
import binascii

from .exceptions import EncodingError


def base64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def base64_decode(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"invalid base64 input: {exc}") from exc


def hex_encode(data: bytes) -> str:
    return data.hex()


def hex_decode(text: str) -> bytes:
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"invalid hex input: {exc}") from exc
