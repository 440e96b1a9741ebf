from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .conversions import bytes_to_words
from .errors import InvalidBlockSize

BLOCK_SIZE = 64  # 512 / 8


@dataclass(frozen=True)
class Block:
    """
    One 64-byte window of the padded message.

    The compression function consumes blocks whole; the length is checked on
    construction so a Block never holds anything but 64 bytes.
    """

    _data: bytes

    def __post_init__(self) -> None:
        if len(self._data) != BLOCK_SIZE:
            raise InvalidBlockSize(len(self._data))

    @classmethod
    def from_exact_slice(cls, data: bytes) -> "Block":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("block data must be bytes-like")
        return cls(bytes(data))

    @classmethod
    def zero(cls) -> "Block":
        return cls(bytes(BLOCK_SIZE))

    def as_bytes(self) -> bytes:
        return self._data

    def words(self) -> Tuple[int, ...]:
        """The 16 little-endian message words of this block."""
        return bytes_to_words(self._data)


__all__ = ["BLOCK_SIZE", "Block"]
