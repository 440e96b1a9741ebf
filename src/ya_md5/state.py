from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .block import Block
from .config import TRACE
from .conversions import word_to_bytes

logger = logging.getLogger(__name__)

_MASK_32 = 0xFFFFFFFF

# K[i] = floor(2**32 * abs(sin(i + 1))) for i = 0..63
K: Tuple[int, ...] = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

INITIAL_A = 0x67452301
INITIAL_B = 0xEFCDAB89
INITIAL_C = 0x98BADCFE
INITIAL_D = 0x10325476


def _aux_f(x: int, y: int, z: int) -> int:
    return ((x & y) | (~x & z)) & _MASK_32


def _aux_g(x: int, y: int, z: int) -> int:
    return ((x & z) | (y & ~z)) & _MASK_32


def _aux_h(x: int, y: int, z: int) -> int:
    return (x ^ y ^ z) & _MASK_32


def _aux_i(x: int, y: int, z: int) -> int:
    return (y ^ (x | ~z)) & _MASK_32


def _rotl(x: int, b: int) -> int:
    """Rotate left for 32-bit values."""
    return ((x << b) | (x >> (32 - b))) & _MASK_32


_Step = Tuple[Callable[[int, int, int], int], int, int, int]

# (auxiliary function, message word, left rotation, constant index), RFC 1321 order.
STEPS: Tuple[_Step, ...] = (
    # Round 1
    (_aux_f, 0, 7, 0), (_aux_f, 1, 12, 1), (_aux_f, 2, 17, 2), (_aux_f, 3, 22, 3),
    (_aux_f, 4, 7, 4), (_aux_f, 5, 12, 5), (_aux_f, 6, 17, 6), (_aux_f, 7, 22, 7),
    (_aux_f, 8, 7, 8), (_aux_f, 9, 12, 9), (_aux_f, 10, 17, 10), (_aux_f, 11, 22, 11),
    (_aux_f, 12, 7, 12), (_aux_f, 13, 12, 13), (_aux_f, 14, 17, 14), (_aux_f, 15, 22, 15),
    # Round 2
    (_aux_g, 1, 5, 16), (_aux_g, 6, 9, 17), (_aux_g, 11, 14, 18), (_aux_g, 0, 20, 19),
    (_aux_g, 5, 5, 20), (_aux_g, 10, 9, 21), (_aux_g, 15, 14, 22), (_aux_g, 4, 20, 23),
    (_aux_g, 9, 5, 24), (_aux_g, 14, 9, 25), (_aux_g, 3, 14, 26), (_aux_g, 8, 20, 27),
    (_aux_g, 13, 5, 28), (_aux_g, 2, 9, 29), (_aux_g, 7, 14, 30), (_aux_g, 12, 20, 31),
    # Round 3
    (_aux_h, 5, 4, 32), (_aux_h, 8, 11, 33), (_aux_h, 11, 16, 34), (_aux_h, 14, 23, 35),
    (_aux_h, 1, 4, 36), (_aux_h, 4, 11, 37), (_aux_h, 7, 16, 38), (_aux_h, 10, 23, 39),
    (_aux_h, 13, 4, 40), (_aux_h, 0, 11, 41), (_aux_h, 3, 16, 42), (_aux_h, 6, 23, 43),
    (_aux_h, 9, 4, 44), (_aux_h, 12, 11, 45), (_aux_h, 15, 16, 46), (_aux_h, 2, 23, 47),
    # Round 4
    (_aux_i, 0, 6, 48), (_aux_i, 7, 10, 49), (_aux_i, 14, 15, 50), (_aux_i, 5, 21, 51),
    (_aux_i, 12, 6, 52), (_aux_i, 3, 10, 53), (_aux_i, 10, 15, 54), (_aux_i, 1, 21, 55),
    (_aux_i, 8, 6, 56), (_aux_i, 15, 10, 57), (_aux_i, 6, 15, 58), (_aux_i, 13, 21, 59),
    (_aux_i, 4, 6, 60), (_aux_i, 11, 10, 61), (_aux_i, 2, 15, 62), (_aux_i, 9, 21, 63),
)


def _apply_step(regs: List[int], words: Sequence[int], step: int) -> None:
    # The target register cycles A, D, C, B; the other three follow it in
    # A, B, C, D order and are left untouched.
    aux, word, shift, constant = STEPS[step]
    target = -step % 4
    x = regs[(target + 1) % 4]
    y = regs[(target + 2) % 4]
    z = regs[(target + 3) % 4]
    value = (regs[target] + aux(x, y, z) + words[word] + K[constant]) & _MASK_32
    regs[target] = (x + _rotl(value, shift)) & _MASK_32


@dataclass(frozen=True)
class CompressionState:
    """
    The running 128-bit MD5 state as four 32-bit words.

    Instances are immutable: ``advance`` folds one block and returns a new
    state, so a state can be shared freely between callers.
    """

    a: int = INITIAL_A
    b: int = INITIAL_B
    c: int = INITIAL_C
    d: int = INITIAL_D

    @classmethod
    def initial(cls) -> "CompressionState":
        return cls()

    def __str__(self) -> str:
        return (
            f"CompressionState {{ a: {self.a:08x}, b: {self.b:08x}, "
            f"c: {self.c:08x}, d: {self.d:08x} }}"
        )

    def advance_step(self, words: Sequence[int], step: int) -> "CompressionState":
        """Run a single step (0-based) of the compression function without feed-forward."""
        if not 0 <= step < len(STEPS):
            raise ValueError(f"step must be in range 0..63, got {step}")
        regs = [self.a, self.b, self.c, self.d]
        _apply_step(regs, words, step)
        return CompressionState(*regs)

    def advance(self, block: Block) -> "CompressionState":
        """
        Fold one block into the state.

        Runs all 64 steps over the block's message words, then adds the
        result to the incoming state word by word (modulo 2**32).
        """
        words = block.words()
        regs = [self.a, self.b, self.c, self.d]
        tracing = logger.isEnabledFor(TRACE)
        for step in range(len(STEPS)):
            _apply_step(regs, words, step)
            if tracing:
                logger.log(
                    TRACE,
                    "State at step %02d: %s",
                    step + 1,
                    CompressionState(*regs),
                )
        return CompressionState(
            (self.a + regs[0]) & _MASK_32,
            (self.b + regs[1]) & _MASK_32,
            (self.c + regs[2]) & _MASK_32,
            (self.d + regs[3]) & _MASK_32,
        )

    def to_bytes(self) -> bytes:
        return (
            word_to_bytes(self.a)
            + word_to_bytes(self.b)
            + word_to_bytes(self.c)
            + word_to_bytes(self.d)
        )


__all__ = ["K", "STEPS", "INITIAL_A", "INITIAL_B", "INITIAL_C", "INITIAL_D", "CompressionState"]
