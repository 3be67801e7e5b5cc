"""Multiplication in the binary fields GF(2^64) and GF(2^128) used by MGM."""

from __future__ import annotations

# Reduction polynomials without their leading term:
# x^64 + x^4 + x^3 + x + 1 and x^128 + x^7 + x^2 + x + 1.
_R64 = 0x1B
_R128 = 0x87


def _mul(x: int, y: int, bits: int, poly: int) -> int:
    top = 1 << (bits - 1)
    mask = (1 << bits) - 1
    z = 0
    while y:
        if y & 1:
            z ^= x
        y >>= 1
        x = ((x << 1) & mask) ^ poly if x & top else x << 1
    return z


def _field_mul(x: bytes, y: bytes, size: int, poly: int) -> bytes:
    x, y = bytes(x), bytes(y)
    if len(x) != size or len(y) != size:
        raise ValueError(
            f"operands must be {size} bytes, got {len(x)} and {len(y)}"
        )
    product = _mul(
        int.from_bytes(x, "big"), int.from_bytes(y, "big"), size * 8, poly
    )
    return product.to_bytes(size, "big")


def gf64_mul(x: bytes, y: bytes) -> bytes:
    """Multiply two 8-byte big-endian elements of GF(2^64)."""
    return _field_mul(x, y, 8, _R64)


def gf128_mul(x: bytes, y: bytes) -> bytes:
    """Multiply two 16-byte big-endian elements of GF(2^128)."""
    return _field_mul(x, y, 16, _R128)