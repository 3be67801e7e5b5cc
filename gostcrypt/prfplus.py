"""The prf+ key expansion function of IKEv2."""

from __future__ import annotations

from typing import Protocol


class PRF(Protocol):
    """A pseudo-random function with a fixed output length."""

    block_size: int

    def derive(self, salt: bytes) -> bytes:
        """Return block_size bytes derived from salt."""
        ...


def prf_plus(prf: PRF, length: int, salt: bytes) -> bytes:
    """Expand salt into length bytes: T1 = prf(S|0x01), Ti = prf(Ti-1|S|i)."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    salt = bytes(salt)
    block = bytes(prf.derive(salt + b"\x01"))[: prf.block_size]
    output = bytearray(block)
    counter = 2
    while len(output) < length:
        block = bytes(prf.derive(block + salt + bytes([counter & 0xFF])))
        block = block[: prf.block_size]
        output += block
        counter += 1
    return bytes(output[:length])