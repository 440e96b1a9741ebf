from __future__ import annotations

import logging

from .block import BLOCK_SIZE, Block
from .conversions import length_to_bytes
from .digest import Digest
from .errors import AlreadyFinalized
from .state import CompressionState

logger = logging.getLogger(__name__)

_MASK_64 = 0xFFFFFFFFFFFFFFFF

PADDING_MARKER = 0x80
LENGTH_SIZE = 8  # 64 / 8
# Longest tail that still leaves room for the marker and the length field.
MAX_SINGLE_BLOCK_TAIL = BLOCK_SIZE - LENGTH_SIZE - 1
BLOCK_BITS = BLOCK_SIZE * 8


class ChunkProcessor:
    """
    Splits a byte stream into 64-byte blocks and folds them into the MD5 state.

    Input may arrive in pieces of any size; whatever does not fill a block is
    kept until the next ``update`` or until ``finalize`` pads the message.
    """

    def __init__(self):
        self._state = CompressionState.initial()
        self._tail = b""
        self._bit_count = 0
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def bytes_consumed(self) -> int:
        """Bytes fed so far, including the buffered tail (modulo 2**61)."""
        return (self._bit_count >> 3) + len(self._tail)

    def update(self, data: bytes) -> None:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")
        self._check_open()

        raw = self._tail + bytes(data)
        self._tail = b""

        offset_limit = len(raw) - (len(raw) % BLOCK_SIZE)
        view = memoryview(raw)
        for idx in range(0, offset_limit, BLOCK_SIZE):
            self._fold(Block.from_exact_slice(view[idx : idx + BLOCK_SIZE]))
            self._bit_count = (self._bit_count + BLOCK_BITS) & _MASK_64

        self._tail = raw[offset_limit:]

    def finalize(self) -> Digest:
        self._check_open()
        self._finalized = True

        tail_len = len(self._tail)
        self._bit_count = (self._bit_count + tail_len * 8) & _MASK_64

        padded = bytearray(BLOCK_SIZE)
        padded[:tail_len] = self._tail
        padded[tail_len] = PADDING_MARKER
        self._tail = b""

        two_blocks = tail_len > MAX_SINGLE_BLOCK_TAIL
        logger.debug(
            "Finalizing %d bits with %s padding",
            self._bit_count,
            "two-block" if two_blocks else "one-block",
        )
        if two_blocks:
            self._fold(Block.from_exact_slice(padded))
            padded = bytearray(Block.zero().as_bytes())

        padded[BLOCK_SIZE - LENGTH_SIZE :] = length_to_bytes(self._bit_count)
        self._fold(Block.from_exact_slice(padded))
        return Digest(self._state.to_bytes())

    # Internal helpers -------------------------------------------------
    def _fold(self, block: Block) -> None:
        self._state = self._state.advance(block)

    def _check_open(self) -> None:
        if self._finalized:
            raise AlreadyFinalized("finalize() has already been called on this hasher")


__all__ = ["ChunkProcessor", "MAX_SINGLE_BLOCK_TAIL"]
