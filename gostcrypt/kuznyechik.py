"""GOST R 34.12-2015 128-bit block cipher (Kuznyechik)."""

from __future__ import annotations

BLOCK_SIZE = 16
KEY_SIZE = 32

_LC = (148, 32, 133, 16, 194, 192, 1, 251, 1, 192, 194, 16, 133, 32, 148, 1)

_PI = bytes((
    252, 238, 221, 17, 207, 110, 49, 22, 251, 196, 250,
    218, 35, 197, 4, 77, 233, 119, 240, 219, 147, 46,
    153, 186, 23, 54, 241, 187, 20, 205, 95, 193, 249,
    24, 101, 90, 226, 92, 239, 33, 129, 28, 60, 66, 139,
    1, 142, 79, 5, 132, 2, 174, 227, 106, 143, 160, 6,
    11, 237, 152, 127, 212, 211, 31, 235, 52, 44, 81,
    234, 200, 72, 171, 242, 42, 104, 162, 253, 58, 206,
    204, 181, 112, 14, 86, 8, 12, 118, 18, 191, 114, 19,
    71, 156, 183, 93, 135, 21, 161, 150, 41, 16, 123,
    154, 199, 243, 145, 120, 111, 157, 158, 178, 177,
    50, 117, 25, 61, 255, 53, 138, 126, 109, 84, 198,
    128, 195, 189, 13, 87, 223, 245, 36, 169, 62, 168,
    67, 201, 215, 121, 214, 246, 124, 34, 185, 3, 224,
    15, 236, 222, 122, 148, 176, 188, 220, 232, 40, 80,
    78, 51, 10, 74, 167, 151, 96, 115, 30, 0, 98, 68,
    26, 184, 56, 130, 100, 159, 38, 65, 173, 69, 70,
    146, 39, 94, 85, 47, 140, 163, 165, 125, 105, 213,
    149, 59, 7, 88, 179, 64, 134, 172, 29, 247, 48, 55,
    107, 228, 136, 217, 231, 137, 225, 27, 131, 73, 76,
    63, 248, 254, 141, 83, 170, 144, 202, 216, 133, 97,
    32, 113, 103, 164, 45, 43, 9, 91, 203, 155, 37, 208,
    190, 229, 108, 82, 89, 166, 116, 210, 230, 244, 180,
    192, 209, 102, 175, 194, 57, 75, 99, 182,
))


def _gf_mul(a: int, b: int) -> int:
    """Multiply in GF(2^8) modulo x^8 + x^7 + x^6 + x + 1."""
    c = 0
    while b:
        if b & 1:
            c ^= a
        a = ((a << 1) ^ 0xC3) & 0xFF if a & 0x80 else a << 1
        b >>= 1
    return c


def _build_inverse(table: bytes) -> bytes:
    inverse = bytearray(256)
    for i, value in enumerate(table):
        inverse[value] = i
    return bytes(inverse)


_PI_INV = _build_inverse(_PI)

# Multiplication tables for each coefficient of the linear transform.
_MUL = {coef: bytes(_gf_mul(x, coef) for x in range(256)) for coef in set(_LC)}
_LC_TABLES = tuple(_MUL[coef] for coef in _LC[:15])


def _check_block(block: bytes) -> list[int]:
    blk = list(block)
    if len(blk) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(blk)}")
    return blk


def _r(blk: list[int]) -> list[int]:
    """One step of the linear feedback register."""
    t = blk[15]
    for table, value in zip(_LC_TABLES, blk):
        t ^= table[value]
    return [t] + blk[:15]


def _r_inv(blk: list[int]) -> list[int]:
    shifted = blk[1:]
    t = blk[0]
    for table, value in zip(_LC_TABLES, shifted):
        t ^= table[value]
    return shifted + [t]


def _l(blk: list[int]) -> list[int]:
    for _ in range(BLOCK_SIZE):
        blk = _r(blk)
    return blk


def _l_inv(blk: list[int]) -> list[int]:
    for _ in range(BLOCK_SIZE):
        blk = _r_inv(blk)
    return blk


def _s(blk: list[int]) -> list[int]:
    return [_PI[b] for b in blk]


def _s_inv(blk: list[int]) -> list[int]:
    return [_PI_INV[b] for b in blk]


def _xor(a: list[int], b: bytes | list[int]) -> list[int]:
    return [x ^ y for x, y in zip(a, b)]


def substitute(block: bytes) -> bytes:
    """Apply the nonlinear S transformation to a 16-byte block."""
    return bytes(_s(_check_block(block)))


def linear(block: bytes) -> bytes:
    """Apply the linear L transformation to a 16-byte block."""
    return bytes(_l(_check_block(block)))


def linear_inverse(block: bytes) -> bytes:
    """Apply the inverse of the L transformation to a 16-byte block."""
    return bytes(_l_inv(_check_block(block)))


_ROUND_CONSTANTS = tuple(
    bytes(_l([0] * 15 + [i + 1])) for i in range(32)
)


def round_constant(index: int) -> bytes:
    """Return the key schedule constant C_(index+1), index in 0..31."""
    if not 0 <= index < len(_ROUND_CONSTANTS):
        raise IndexError(f"round constant index out of range: {index}")
    return _ROUND_CONSTANTS[index]


class Cipher:
    """Kuznyechik block cipher with a fixed 256-bit key."""

    block_size = BLOCK_SIZE

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != KEY_SIZE:
            raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
        kr0 = list(key[:BLOCK_SIZE])
        kr1 = list(key[BLOCK_SIZE:])
        round_keys = [bytes(kr0), bytes(kr1)]
        for i in range(4):
            for j in range(8):
                krt = _xor(_l(_s(_xor(kr0, _ROUND_CONSTANTS[8 * i + j]))), kr1)
                kr1, kr0 = kr0, krt
            round_keys.extend((bytes(kr0), bytes(kr1)))
        self.round_keys: tuple[bytes, ...] = tuple(round_keys)

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        blk = _check_block(block)
        for rk in self.round_keys[:9]:
            blk = _l(_s(_xor(blk, rk)))
        return bytes(_xor(blk, self.round_keys[9]))

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        blk = _check_block(block)
        for rk in reversed(self.round_keys[1:]):
            blk = _s_inv(_l_inv(_xor(blk, rk)))
        return bytes(_xor(blk, self.round_keys[0]))