"""GOST R 34.13-2015 padding methods."""

from __future__ import annotations


def pad_size(data_size: int, block_size: int) -> int:
    """Return how many bytes complete data_size to a whole number of blocks.

    Data shorter than one block is always padded to a full block.
    """
    if block_size < 1:
        raise ValueError(f"block size must be positive, got {block_size}")
    if data_size < block_size:
        return block_size - data_size
    remainder = data_size % block_size
    return 0 if remainder == 0 else block_size - remainder


def pad1(data: bytes, block_size: int) -> bytes:
    """Pad with zero bytes (procedure 1)."""
    data = bytes(data)
    return data + bytes(pad_size(len(data), block_size))


def pad2(data: bytes, block_size: int) -> bytes:
    """Pad with a 0x80 marker followed by zero bytes (procedure 2)."""
    data = bytes(data)
    return data + b"\x80" + bytes(pad_size(len(data) + 1, block_size))


def pad3(data: bytes, block_size: int) -> bytes:
    """Leave aligned data as is, otherwise pad as procedure 2 (procedure 3)."""
    data = bytes(data)
    if pad_size(len(data), block_size) == 0:
        return data
    return pad2(data, block_size)