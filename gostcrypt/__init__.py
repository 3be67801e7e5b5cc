"""Kuznyechik block cipher, GOST padding, GF(2^n) multiplication, MGM AEAD and prf+."""

__version__ = "0.1.0"

__all__ = ["gf", "kuznyechik", "mgm", "padding", "prfplus"]