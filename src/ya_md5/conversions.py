from __future__ import annotations

import struct
from typing import Tuple

_MASK_32 = 0xFFFFFFFF
_MASK_64 = 0xFFFFFFFFFFFFFFFF


def bytes_to_word(data: bytes) -> int:
    """Unpack 4 little-endian bytes into a 32-bit word."""
    return struct.unpack("<I", data)[0]


def word_to_bytes(word: int) -> bytes:
    """Pack a 32-bit word as 4 little-endian bytes."""
    return struct.pack("<I", word & _MASK_32)


def length_to_bytes(length: int) -> bytes:
    """Pack a bit count as 8 little-endian bytes, truncated modulo 2**64."""
    return struct.pack("<Q", length & _MASK_64)


def bytes_to_words(data: bytes) -> Tuple[int, ...]:
    # Same layout as bytes_to_word applied to every 4-byte window.
    return struct.unpack(f"<{len(data) // 4}I", data)


__all__ = ["bytes_to_word", "word_to_bytes", "length_to_bytes", "bytes_to_words"]
