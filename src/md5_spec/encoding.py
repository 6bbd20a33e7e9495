"""Binary state record codec.

Layout (big-endian unless noted):

    magic[4] || s0 u32 || s1 u32 || s2 u32 || s3 u32 || buffer[64] || len u64

The buffer occupancy is not stored; decoders derive it as `len % 64`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .config import BLOCK_SIZE, MAGIC, MARSHALED_SIZE
from .errors import ErrorCode, SpecError


@dataclass
class Writer:
    buf: bytearray = field(default_factory=bytearray)

    def write_u32(self, v: int) -> None:
        self.buf.extend(int(v).to_bytes(4, "big", signed=False))

    def write_u64(self, v: int) -> None:
        self.buf.extend(int(v).to_bytes(8, "big", signed=False))

    def write_bytes(self, b: bytes) -> None:
        self.buf.extend(b)

    def write_zeros(self, n: int) -> None:
        self.buf.extend(bytes(n))


@dataclass
class Reader:
    data: bytes
    pos: int = 0

    def _take(self, n: int) -> bytes:
        if self.pos + n > len(self.data):
            raise SpecError(ErrorCode.INVALID_LENGTH, "unexpected end of hash state")
        chunk = self.data[self.pos : self.pos + n]
        self.pos += n
        return chunk

    def read_u32(self) -> int:
        return int.from_bytes(self._take(4), "big", signed=False)

    def read_u64(self) -> int:
        return int.from_bytes(self._take(8), "big", signed=False)

    def read_bytes(self, n: int) -> bytes:
        return self._take(n)


def marshal_state(state: Tuple[int, int, int, int], buffered: bytes, length: int) -> bytes:
    """Encode chaining words, the active buffer prefix and the total length.

    `buffered` is the occupied prefix of the carry buffer; the rest of the
    64-byte field is zero-filled.
    """
    w = Writer()
    w.write_bytes(MAGIC)
    for word in state:
        w.write_u32(word)
    w.write_bytes(buffered)
    w.write_zeros(BLOCK_SIZE - len(buffered))
    w.write_u64(length)
    return bytes(w.buf)


def unmarshal_state(record: bytes) -> Tuple[Tuple[int, int, int, int], bytes, int]:
    """Decode a state record into `(state, buffer, length)`.

    The whole 64-byte buffer is returned as stored. Bytes past `length % 64`
    are not checked.
    """
    data = bytes(record)
    if len(data) < len(MAGIC) or data[: len(MAGIC)] != MAGIC:
        raise SpecError(ErrorCode.INVALID_FORMAT, "invalid hash state identifier")
    if len(data) != MARSHALED_SIZE:
        raise SpecError(ErrorCode.INVALID_LENGTH, "invalid hash state size")
    r = Reader(data, pos=len(MAGIC))
    state = (r.read_u32(), r.read_u32(), r.read_u32(), r.read_u32())
    buf = r.read_bytes(BLOCK_SIZE)
    length = r.read_u64()
    return state, buf, length
