"""Byte-order detection, element byte swapping and bounded byte copies."""

from __future__ import annotations

import sys

__all__ = [
    "is_little_endian",
    "is_big_endian",
    "swap_bytes",
    "to_big_endian",
    "transfer",
]


def is_little_endian() -> bool:
    """Return True on a little-endian machine."""
    return sys.byteorder == "little"


def is_big_endian() -> bool:
    """Return True on a big-endian machine."""
    return not is_little_endian()


def _elements(data: bytes, size: int) -> bytes:
    if size <= 0:
        raise ValueError(f"element size must be positive, got {size}")
    raw = bytes(data)
    if len(raw) % size:
        raise ValueError(f"length {len(raw)} is not a multiple of element size {size}")
    return raw


def swap_bytes(data: bytes, size: int) -> bytes:
    """Reverse the byte order of every size-byte element of data."""
    raw = _elements(data, size)
    return b"".join(raw[i:i + size][::-1] for i in range(0, len(raw), size))


def to_big_endian(data: bytes, size: int) -> bytes:
    """Convert native-order elements to big-endian; a plain copy on big-endian hosts."""
    if is_little_endian():
        return swap_bytes(data, size)
    return _elements(data, size)


def transfer(data: bytes, out_len: int) -> bytes:
    """Return at most out_len leading bytes of data."""
    return bytes(data[: max(out_len, 0)])