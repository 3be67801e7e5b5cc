# gostcrypt

Pure Python implementations of several Russian GOST cryptographic primitives:

- **Kuznyechik** (GOST R 34.12-2015, 128-bit block cipher) — `gostcrypt.kuznyechik`
- **Padding procedures** of GOST R 34.13-2015 — `gostcrypt.padding`
- **Multiplication** in GF(2^64) and GF(2^128) — `gostcrypt.gf`
- **MGM** (Multilinear Galois Mode) authenticated encryption — `gostcrypt.mgm`
- **prf+** key expansion (IKEv2) — `gostcrypt.prfplus`

Only the standard library is used.

## Installation

```
pip install gostcrypt
```

To run the test suite:

```
pip install "gostcrypt[test]"
pytest
```

## Usage

### Kuznyechik block cipher

```python
from gostcrypt.kuznyechik import Cipher

key = bytes(32)                # 256-bit key; use a random key in practice
cipher = Cipher(key)

block = bytes(range(16))       # one 16-byte block
encrypted = cipher.encrypt(block)
assert cipher.decrypt(encrypted) == block
```

`Cipher` works on exactly one 16-byte block at a time (`BLOCK_SIZE`); a key
of any length other than 32 bytes (`KEY_SIZE`) or a block of any other length
raises `ValueError`. The ten expanded round keys are available as
`cipher.round_keys`.

The cipher's building blocks are exposed as well: `substitute(block)` (the S
transformation), `linear(block)` and `linear_inverse(block)` (the L
transformation and its inverse), and `round_constant(index)`, which returns
the key schedule constant for `index` in 0..31 and raises `IndexError`
otherwise.

### Padding

```python
from gostcrypt.padding import pad_size, pad1, pad2, pad3

pad_size(5, 16)          # 11
pad1(b"abc", 8)          # b"abc" + 5 zero bytes
pad2(b"abc", 8)          # b"abc" + b"\x80" + 4 zero bytes; always adds at least one byte
pad3(b"abcdefgh", 8)     # already aligned: returned unchanged
pad3(b"abc", 8)          # not aligned: same as pad2
```

Data shorter than one block is always padded to a full block, so
`pad1(b"", 8)` gives eight zero bytes. A block size below 1 raises
`ValueError`.

### Galois field multiplication

```python
from gostcrypt.gf import gf64_mul, gf128_mul

gf64_mul(bytes(7) + b"\x02", bytes(7) + b"\x03")   # 8-byte big-endian operands
gf128_mul(bytes(16), bytes(16))                      # 16-byte big-endian operands
```

The fields are reduced by x^64 + x^4 + x^3 + x + 1 and
x^128 + x^7 + x^2 + x + 1. Operands of the wrong length raise `ValueError`.

### MGM authenticated encryption

```python
from gostcrypt.kuznyechik import Cipher
from gostcrypt.mgm import MGM, AuthenticationError

key = bytes(32)
aead = MGM(Cipher(key), tag_size=16)

nonce = bytes(aead.nonce_size())   # highest bit of the first byte must be clear
sealed = aead.seal(nonce, b"attack at dawn", b"header")
assert len(sealed) == len(b"attack at dawn") + aead.overhead()

assert aead.open(nonce, sealed, b"header") == b"attack at dawn"

try:
    aead.open(nonce, sealed, b"other header")
except AuthenticationError:
    pass
```

`MGM` accepts any object following the `BlockCipher` protocol — a
`block_size` attribute of 8 or 16 and an `encrypt(block)` method. The tag size
must be between 4 and the block size. `seal` returns the ciphertext followed
by the tag; `open` checks the tag in constant time before decrypting.
`AuthenticationError` is a subclass of `ValueError`. A nonce of the wrong
length or with its highest bit set, both text and additional data empty,
input longer than the mode allows, or a ciphertext shorter than the tag all
raise `ValueError`.

### prf+

```python
import hashlib
import hmac

from gostcrypt.prfplus import prf_plus


class HmacSha256:
    block_size = 32

    def __init__(self, key: bytes) -> None:
        self._key = key

    def derive(self, salt: bytes) -> bytes:
        return hmac.new(self._key, salt, hashlib.sha256).digest()


keying_material = prf_plus(HmacSha256(b"secret"), 80, b"seed")
assert len(keying_material) == 80
```

Any object with a `block_size` attribute and a `derive(salt)` method satisfies
the `PRF` protocol. A negative length raises `ValueError`.

## What this package does not do

- It has no hash functions (neither GOST R 34.11-2012 nor GOST R 34.11-94),
  no HMAC or key derivation built on them, and no ready-made PRF for
  `prf_plus`: callers bring their own.
- It has no 64-bit GOST block cipher. `MGM` supports 64-bit blocks, but the
  cipher must be supplied by the caller.
- It provides no command-line tool and no streaming or file encryption.