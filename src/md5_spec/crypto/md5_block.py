"""MD5 block transform (RFC 1321 section 3.4).

`transform` is a pure function over the four chaining words and a single
64-byte block. Message words are decoded little-endian.
"""

from __future__ import annotations

import struct
from typing import Tuple

from ..config import BLOCK_SIZE, WORD_MASK


State = Tuple[int, int, int, int]

_BLOCK_WORDS = struct.Struct("<16I")

# T[i] = floor(abs(sin(i + 1)) * 2**32)
T = [
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee,
    0xf57c0faf, 0x4787c62a, 0xa8304613, 0xfd469501,
    0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be,
    0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa,
    0xd62f105d, 0x02441453, 0xd8a1e681, 0xe7d3fbc8,
    0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed,
    0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c,
    0xa4beea44, 0x4bdecfa9, 0xf6bb4b60, 0xbebfbc70,
    0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05,
    0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039,
    0x655b59c3, 0x8f0ccc92, 0xffeff47d, 0x85845dd1,
    0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1,
    0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
]

# Per-step left rotation amounts
SHIFTS = [
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
]

# Message word index used at each step
SCHEDULE = (
    list(range(16))
    + [(1 + 5 * i) & 15 for i in range(16)]
    + [(5 + 3 * i) & 15 for i in range(16)]
    + [(7 * i) & 15 for i in range(16)]
)


def rotate_left(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & WORD_MASK


def _f(b: int, c: int, d: int) -> int:
    return d ^ (b & (c ^ d))


def _g(b: int, c: int, d: int) -> int:
    return c ^ (d & (b ^ c))


def _h(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _i(b: int, c: int, d: int) -> int:
    return c ^ (b | (~d & WORD_MASK))


ROUND_FUNCTIONS = (_f, _g, _h, _i)


def transform(state: State, block: bytes) -> State:
    """Compress one 64-byte block into the chaining state."""
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    x = _BLOCK_WORDS.unpack(block)
    a, b, c, d = state
    for step in range(64):
        fn = ROUND_FUNCTIONS[step >> 4]
        t = (a + fn(b, c, d) + T[step] + x[SCHEDULE[step]]) & WORD_MASK
        a, d, c = d, c, b
        b = (b + rotate_left(t, SHIFTS[step])) & WORD_MASK
    return (
        (state[0] + a) & WORD_MASK,
        (state[1] + b) & WORD_MASK,
        (state[2] + c) & WORD_MASK,
        (state[3] + d) & WORD_MASK,
    )


def transform_blocks(state: State, data: bytes) -> State:
    """Apply `transform` to every 64-byte slice of `data`."""
    if len(data) % BLOCK_SIZE != 0:
        raise ValueError(f"data length must be a multiple of {BLOCK_SIZE}")
    view = memoryview(data)
    for offset in range(0, len(view), BLOCK_SIZE):
        state = transform(state, view[offset : offset + BLOCK_SIZE])
    return state
