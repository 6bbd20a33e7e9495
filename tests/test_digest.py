"""Streaming digest engine tests."""

from __future__ import annotations

import hashlib

import pytest

from md5_spec.config import BLOCK_SIZE, SIZE
from md5_spec.crypto.hash_vectors import pattern_bytes
from md5_spec.digest import Digest, checksum, new
from md5_spec.errors import ErrorCode, SpecError

EMPTY_DIGEST = "d41d8cd98f00b204e9800998ecf8427e"
ABC_DIGEST = "900150983cd24fb0d6963f7d28e17f72"

LENGTHS = [0, 1, 3, 55, 56, 57, 63, 64, 65, 127, 128, 129, 1000]


def test_known_vectors() -> None:
    assert checksum(b"").hex() == EMPTY_DIGEST
    assert checksum(b"abc").hex() == ABC_DIGEST
    d = new()
    assert d.sum().hex() == EMPTY_DIGEST
    d.write(b"abc")
    assert d.sum().hex() == ABC_DIGEST


def test_split_writes_match_single_write() -> None:
    a = new()
    a.write(b"12345")
    a.write(b"67890")
    b = new()
    b.write(b"1234567890")
    assert a.sum() == b.sum()
    assert a.hexdigest() == hashlib.md5(b"1234567890").hexdigest()


@pytest.mark.parametrize("length", LENGTHS)
def test_matches_hashlib(length: int) -> None:
    data = pattern_bytes(length)
    assert checksum(data) == hashlib.md5(data).digest()


@pytest.mark.parametrize("chunk", [1, 5, 63, 64, 65, 100])
def test_chunking_invariance(chunk: int) -> None:
    data = pattern_bytes(777)
    d = new()
    for i in range(0, len(data), chunk):
        d.write(data[i : i + chunk])
    assert d.sum() == checksum(data)


def test_uneven_chunks_cross_block_edges() -> None:
    data = pattern_bytes(300)
    cuts = [0, 10, 10, 74, 75, 200, 300]
    d = new()
    for lo, hi in zip(cuts, cuts[1:]):
        d.write(data[lo:hi])
    assert d.sum() == checksum(data)


def test_write_returns_byte_count() -> None:
    d = new()
    assert d.write(b"") == 0
    assert d.write(b"hello") == 5
    assert d.write(bytes(200)) == 200


def test_write_accepts_bytes_like() -> None:
    d = new()
    d.write(bytearray(b"ab"))
    d.write(memoryview(b"c"))
    assert d.hexdigest() == ABC_DIGEST


def test_sum_does_not_mutate() -> None:
    d = new()
    d.write(b"message")
    first = d.sum()
    second = d.sum()
    assert first == second
    d.write(b" digest")
    assert d.hexdigest() == "f96b697d7cb7938d525a2f31aaf161d0"


def test_sum_appends_to_prefix() -> None:
    d = new()
    out = d.sum(b"prefix")
    assert out[:6] == b"prefix"
    assert out[6:].hex() == EMPTY_DIGEST
    assert len(out) == 6 + SIZE


def test_interleaved_sum_and_write() -> None:
    data = pattern_bytes(200)
    d = new()
    for i in range(0, len(data), 33):
        d.write(data[i : i + 33])
        assert d.sum() == hashlib.md5(data[: i + 33]).digest()


def test_reset_matches_fresh_engine() -> None:
    d = new()
    d.write(pattern_bytes(150))
    d.reset()
    assert d.sum() == new().sum()
    assert d.marshal_binary() == new().marshal_binary()


def test_copy_is_independent() -> None:
    d = new()
    d.write(b"ab")
    c = d.copy()
    c.write(b"c")
    assert c.hexdigest() == ABC_DIGEST
    assert d.sum() == checksum(b"ab")
    d.write(b"xyz")
    assert c.hexdigest() == ABC_DIGEST


def test_hashlib_surface() -> None:
    d = Digest()
    assert d.name == "md5"
    assert d.digest_size == SIZE
    assert d.block_size == BLOCK_SIZE
    assert d.size() == SIZE
    assert d.update(b"abc") is None
    assert d.digest().hex() == ABC_DIGEST
    assert "len=3" in repr(d)


def test_write_rejects_text() -> None:
    with pytest.raises(TypeError):
        new().write("abc")  # type: ignore[arg-type]


def test_padding_defect_is_fatal() -> None:
    d = new()
    # Force a buffer that the padding arithmetic cannot have produced
    d._len = 1
    d._nx = 2
    with pytest.raises(SpecError) as excinfo:
        d.sum()
    assert excinfo.value.code == ErrorCode.INTERNAL_ERROR
