"""
servitor — Live Demo: password, encrypt, encode, decode, decrypt
================================================================
Run:  python examples/demo_servitor.py

Wires a Beta password provider (constructed with an unsupported nonce
length, which is clamped to 24) to an Alpha crypto provider, then walks
one message through the whole cycle for each crypto provider.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from servitor import (
    ServitorAlpha, ServitorBeta, ServitorOmega, ServitorError,
    base64_encode, base64_decode, hex_encode,
)

LINE = "═" * 70
KEY  = b"f6SrJBymPB9eDyy1NmBu1RfnM5x1YTcF"
MSG  = b"Hello, Servitor Omega!"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def run(omega):
    t0 = time.perf_counter()
    encrypted, algorithm = omega.encrypt(KEY, MSG)
    b64 = base64_encode(encrypted)
    ok(f"[Encryption] Algorithm: {algorithm}, encrypted base64", b64)
    ok(f"[Encryption] Algorithm: {algorithm}, encrypted hex", hex_encode(encrypted))

    decrypted, algorithm = omega.decrypt(KEY, base64_decode(b64))
    elapsed = time.perf_counter() - t0
    ok(f"[Decryption] Algorithm: {algorithm}, decrypted", decrypted.decode())
    ok("Round-trip", f"{elapsed*1000:.2f} ms")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=" %(levelname)s %(name)s: %(message)s")

    alpha = ServitorAlpha()
    beta  = ServitorBeta(32, 34)

    print(f"\n{LINE}")
    print("  servitor — Omega facade demo")
    print(LINE)
    print(f"  Message: {MSG.decode()}")

    header("Omega(password=Beta, crypto=Alpha) — AES-CBC")
    omega = ServitorOmega(beta, alpha)
    ok("Generated password", omega.generate_password())
    ok("Beta nonce length (34 requested)", str(beta.nonce_length))
    run(omega)

    header("Omega(password=Alpha, crypto=Beta) — XSalsa20")
    omega = ServitorOmega(alpha, beta)
    ok("Generated password", omega.generate_password())
    run(omega)

    header("Rejected input")
    try:
        omega.encrypt(b"short-key", MSG)
    except ServitorError as exc:
        ok(f"{type(exc).__name__} (algorithm={exc.algorithm})", str(exc))

    print(f"\n{LINE}\n")
