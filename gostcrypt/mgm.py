"""Multilinear Galois Mode (MGM) authenticated encryption."""

from __future__ import annotations

import hmac
from collections.abc import Iterator
from itertools import chain
from typing import Protocol

from gostcrypt.gf import gf64_mul, gf128_mul


class BlockCipher(Protocol):
    """A block cipher usable by MGM: only encryption is needed."""

    block_size: int

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one block."""
        ...


class AuthenticationError(ValueError):
    """Raised when a ciphertext fails tag verification."""


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _incr(counter: bytes) -> bytes:
    size = len(counter)
    value = (int.from_bytes(counter, "big") + 1) % (1 << (8 * size))
    return value.to_bytes(size, "big")


class MGM:
    """MGM AEAD over a 64- or 128-bit block cipher."""

    def __init__(self, cipher: BlockCipher, tag_size: int) -> None:
        block_size = cipher.block_size
        if block_size not in (8, 16):
            raise ValueError("only 64/128 blocksizes allowed")
        if not 4 <= tag_size <= block_size:
            raise ValueError("invalid tag size")
        self.cipher = cipher
        self.block_size = block_size
        self.tag_size = tag_size
        self.max_size = (1 << (block_size * 8 // 2)) - 1
        self._half = block_size // 2
        self._mul = gf64_mul if block_size == 8 else gf128_mul

    def nonce_size(self) -> int:
        """Length of the nonce in bytes."""
        return self.block_size

    def overhead(self) -> int:
        """Number of bytes the tag adds to a ciphertext."""
        return self.tag_size

    def _encrypt(self, block: bytes) -> bytes:
        return bytes(self.cipher.encrypt(block))

    def _padded_blocks(self, data: bytes) -> Iterator[bytes]:
        bs = self.block_size
        for start in range(0, len(data), bs):
            yield data[start:start + bs].ljust(bs, b"\x00")

    def _validate_nonce(self, nonce: bytes) -> None:
        if len(nonce) != self.block_size:
            raise ValueError("nonce length must be equal to cipher's blocksize")
        if nonce[0] & 0x80:
            raise ValueError("nonce must not have higher bit set")

    def _validate_sizes(self, text: bytes, additional_data: bytes) -> None:
        if not text and not additional_data:
            raise ValueError(
                "at least either text or additional data must be provided"
            )
        if len(additional_data) > self.max_size:
            raise ValueError("additional data is too big")
        if len(text) + len(additional_data) > self.max_size:
            raise ValueError("text with additional data are too big")

    def _auth(self, nonce: bytes, text: bytes, additional_data: bytes) -> bytes:
        half = self._half
        z = self._encrypt(bytes([nonce[0] | 0x80]) + nonce[1:])
        total = bytes(self.block_size)
        for block in chain(
            self._padded_blocks(additional_data), self._padded_blocks(text)
        ):
            h = self._encrypt(z)
            total = _xor(total, self._mul(h, block))
            z = _incr(z[:half]) + z[half:]
        h = self._encrypt(z)
        mask = (1 << (8 * half)) - 1
        lengths = ((len(additional_data) * 8) & mask).to_bytes(half, "big") + (
            (len(text) * 8) & mask
        ).to_bytes(half, "big")
        total = _xor(total, self._mul(lengths, h))
        return self._encrypt(total)[: self.tag_size]

    def _crypt(self, nonce: bytes, data: bytes) -> bytes:
        bs, half = self.block_size, self._half
        y = self._encrypt(bytes([nonce[0] & 0x7F]) + nonce[1:])
        out = bytearray()
        for start in range(0, len(data), bs):
            out += _xor(data[start:start + bs], self._encrypt(y))
            y = y[:half] + _incr(y[half:])
        return bytes(out)

    def seal(
        self, nonce: bytes, plaintext: bytes, additional_data: bytes = b""
    ) -> bytes:
        """Encrypt and authenticate; return ciphertext followed by the tag."""
        nonce, plaintext = bytes(nonce), bytes(plaintext)
        additional_data = bytes(additional_data)
        self._validate_nonce(nonce)
        self._validate_sizes(plaintext, additional_data)
        ciphertext = self._crypt(nonce, plaintext)
        return ciphertext + self._auth(nonce, ciphertext, additional_data)

    def open(
        self, nonce: bytes, ciphertext: bytes, additional_data: bytes = b""
    ) -> bytes:
        """Verify and decrypt; raise AuthenticationError on a bad tag."""
        nonce, ciphertext = bytes(nonce), bytes(ciphertext)
        additional_data = bytes(additional_data)
        self._validate_nonce(nonce)
        self._validate_sizes(ciphertext, additional_data)
        if len(ciphertext) < self.tag_size:
            raise ValueError("ciphertext is too short")
        body = ciphertext[: len(ciphertext) - self.tag_size]
        tag = ciphertext[len(body):]
        expected = self._auth(nonce, body, additional_data)
        if not hmac.compare_digest(expected, tag):
            raise AuthenticationError("invalid authentication tag")
        return self._crypt(nonce, body)