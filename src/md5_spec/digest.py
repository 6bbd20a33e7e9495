"""Streaming MD5 digest engine (RFC 1321).

MD5 is cryptographically broken and must not be used for secure applications.

A `Digest` buffers input until a full 64-byte block is available and feeds
whole blocks straight from the caller's data. `sum()` finalizes a private
copy, so callers can keep writing after asking for a digest. The internal
state can be saved to and restored from a 92-byte record.
"""

from __future__ import annotations

import struct

from .config import (
    ALGORITHM_NAME,
    BLOCK_SIZE,
    INIT_STATE,
    LENGTH_FIELD_SIZE,
    LENGTH_MASK,
    PAD_MARKER,
    SIZE,
)
from .crypto.md5_block import transform, transform_blocks
from .encoding import marshal_state, unmarshal_state
from .errors import ErrorCode, SpecError


_DIGEST_WORDS = struct.Struct("<4I")


class Digest:
    """Partial evaluation of an MD5 checksum."""

    name = ALGORITHM_NAME
    digest_size = SIZE
    block_size = BLOCK_SIZE

    def __init__(self) -> None:
        self._x = bytearray(BLOCK_SIZE)
        self.reset()

    def reset(self) -> None:
        self._s = INIT_STATE
        self._nx = 0
        self._len = 0

    def size(self) -> int:
        return SIZE

    def write(self, data: bytes) -> int:
        """Absorb `data` and return the number of bytes accepted."""
        p = memoryview(data).cast("B")
        nn = len(p)
        self._len = (self._len + nn) & LENGTH_MASK
        if self._nx > 0:
            n = min(BLOCK_SIZE - self._nx, nn)
            self._x[self._nx : self._nx + n] = p[:n]
            self._nx += n
            if self._nx == BLOCK_SIZE:
                self._s = transform(self._s, self._x)
                self._nx = 0
            p = p[n:]
        if len(p) >= BLOCK_SIZE:
            n = len(p) - len(p) % BLOCK_SIZE
            self._s = transform_blocks(self._s, p[:n])
            p = p[n:]
        if len(p) > 0:
            self._x[: len(p)] = p
            self._nx = len(p)
        return nn

    def copy(self) -> "Digest":
        d = type(self).__new__(type(self))
        d._s = self._s
        d._x = bytearray(self._x)
        d._nx = self._nx
        d._len = self._len
        return d

    def sum(self, prefix: bytes = b"") -> bytes:
        """Return `prefix` followed by the digest of everything written so far.

        The receiver is left untouched.
        """
        d0 = self.copy()
        return bytes(prefix) + d0._check_sum()

    def _check_sum(self) -> bytes:
        # 1 byte end marker :: 0-63 padding bytes :: 8 byte length in bits
        length = self._len
        pad = (55 - length) % BLOCK_SIZE
        tmp = bytearray(1 + pad + LENGTH_FIELD_SIZE)
        tmp[0] = PAD_MARKER
        tmp[1 + pad :] = ((length << 3) & LENGTH_MASK).to_bytes(LENGTH_FIELD_SIZE, "little")
        self.write(tmp)

        if self._nx != 0:
            raise SpecError(
                ErrorCode.INTERNAL_ERROR,
                f"padding left {self._nx} bytes in the block buffer",
            )
        return _DIGEST_WORDS.pack(*self._s)

    # hashlib-style surface

    def update(self, data: bytes) -> None:
        self.write(data)

    def digest(self) -> bytes:
        return self.sum()

    def hexdigest(self) -> str:
        return self.sum().hex()

    # State persistence

    def marshal_binary(self) -> bytes:
        return marshal_state(self._s, self._x[: self._nx], self._len)

    def unmarshal_binary(self, record: bytes) -> None:
        state, buf, length = unmarshal_state(record)
        self._s = state
        self._x[:] = buf
        self._len = length
        self._nx = length % BLOCK_SIZE

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name} len={self._len}>"


def new() -> Digest:
    return Digest()


def new_from_binary(record: bytes) -> Digest:
    """Resume hashing from a record produced by `Digest.marshal_binary`."""
    d = Digest()
    d.unmarshal_binary(record)
    return d


def checksum(data: bytes) -> bytes:
    """One-shot MD5 of `data`."""
    d = Digest()
    d.write(data)
    return d._check_sum()
