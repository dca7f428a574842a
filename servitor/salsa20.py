"""
Salsa20 / XSalsa20 keystream
============================
Salsa20 (Bernstein, 2005) is a 20-round ARX stream cipher: a 256-bit
key and a nonce drive a pseudorandom keystream that is XORed with the
data. Encryption and decryption are the same operation.

Nonce sizes:
    8 bytes   — plain Salsa20
    24 bytes  — XSalsa20: HSalsa20(key, nonce[:16]) derives a subkey,
                then Salsa20(subkey, nonce[16:]) produces the stream.
                The 192-bit nonce is safe to pick at random.

Output is byte-compatible with NaCl's crypto_stream_xsalsa20_xor and
Go's golang.org/x/crypto/salsa20.XORKeyStream.

Dependencies: pycryptodome >= 3.15 (Salsa20 core)
"""

import struct

from Crypto.Cipher import Salsa20

from .exceptions import InvalidKeyLengthError, InvalidNonceLengthError

KEY_SIZE          = 32
SALSA20_NONCE     = 8
XSALSA20_NONCE    = 24
HSALSA20_INPUT    = 16
VALID_NONCE_SIZES = (SALSA20_NONCE, XSALSA20_NONCE)

# "expand 32-byte k"
_SIGMA = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)
_MASK  = 0xFFFFFFFF


def _rotl(v: int, n: int) -> int:
    return ((v << n) | (v >> (32 - n))) & _MASK


def _quarter_round(x: list, a: int, b: int, c: int, d: int) -> None:
    x[b] ^= _rotl((x[a] + x[d]) & _MASK, 7)
    x[c] ^= _rotl((x[b] + x[a]) & _MASK, 9)
    x[d] ^= _rotl((x[c] + x[b]) & _MASK, 13)
    x[a] ^= _rotl((x[d] + x[c]) & _MASK, 18)


def hsalsa20(key: bytes, nonce: bytes) -> bytes:
    """
    HSalsa20 core: 32-byte key + 16-byte input → 32-byte subkey.

    Same state layout and rounds as Salsa20, but without the final
    feed-forward addition; the output is words 0, 5, 10, 15, 6, 7, 8, 9.
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLengthError(
            f"invalid key length: {len(key)}, must be {KEY_SIZE}"
        )
    if len(nonce) != HSALSA20_INPUT:
        raise InvalidNonceLengthError(
            f"HSalsa20 input must be {HSALSA20_INPUT} bytes, got {len(nonce)}"
        )

    k = struct.unpack("<8I", key)
    n = struct.unpack("<4I", nonce)
    x = [
        _SIGMA[0], k[0], k[1], k[2],
        k[3], _SIGMA[1], n[0], n[1],
        n[2], n[3], _SIGMA[2], k[4],
        k[5], k[6], k[7], _SIGMA[3],
    ]

    for _ in range(10):
        # column round
        _quarter_round(x, 0, 4, 8, 12)
        _quarter_round(x, 5, 9, 13, 1)
        _quarter_round(x, 10, 14, 2, 6)
        _quarter_round(x, 15, 3, 7, 11)
        # row round
        _quarter_round(x, 0, 1, 2, 3)
        _quarter_round(x, 5, 6, 7, 4)
        _quarter_round(x, 10, 11, 8, 9)
        _quarter_round(x, 15, 12, 13, 14)

    return struct.pack(
        "<8I", x[0], x[5], x[10], x[15], x[6], x[7], x[8], x[9]
    )


def xor_keystream(key: bytes, nonce: bytes, data: bytes) -> bytes:
    """
    XOR data with the Salsa20 (8-byte nonce) or XSalsa20 (24-byte nonce)
    keystream. The keystream starts at block counter 0.
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLengthError(
            f"invalid key length: {len(key)}, must be {KEY_SIZE}"
        )
    if len(nonce) not in VALID_NONCE_SIZES:
        raise InvalidNonceLengthError(
            f"invalid nonce length: {len(nonce)}, must be 8 or 24"
        )
    if not data:
        return b""

    if len(nonce) == XSALSA20_NONCE:
        key   = hsalsa20(key, nonce[:HSALSA20_INPUT])
        nonce = nonce[HSALSA20_INPUT:]

    return Salsa20.new(key=key, nonce=nonce).encrypt(data)
