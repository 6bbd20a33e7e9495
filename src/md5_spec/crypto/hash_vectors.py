"""MD5 test vector generators."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..config import BLOCK_SIZE, MARSHALED_SIZE, SIZE
from ..digest import Digest


@dataclass
class HashVector:
    name: str
    description: Optional[str]
    input_hex: str
    input_ascii: Optional[str]
    input_length: int
    expected_hex: str


@dataclass
class StateVector:
    name: str
    description: Optional[str]
    prefix_hex: str
    prefix_length: int
    state_hex: str
    continuation_hex: str
    expected_hex: str


# RFC 1321 appendix A.5
RFC1321_SUITE = [
    ("empty_string", "", "d41d8cd98f00b204e9800998ecf8427e"),
    ("a", "a", "0cc175b9c0f1b6a831c399e269772661"),
    ("abc", "abc", "900150983cd24fb0d6963f7d28e17f72"),
    ("message_digest", "message digest", "f96b697d7cb7938d525a2f31aaf161d0"),
    ("alphabet", "abcdefghijklmnopqrstuvwxyz", "c3fcd3d76192e4007dfb496cca67e13b"),
    (
        "alphanumeric",
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
        "d174ab98d277d9f5a5611c2c9f419d9f",
    ),
    (
        "digits_80",
        "1234567890" * 8,
        "57edf4a22be3c955ac49da2e2107b67a",
    ),
]

# Lengths around the padding and block edges
BOUNDARY_LENGTHS = [55, 56, 57, 63, 64, 65, 119, 120, 128, 1000]


def pattern_bytes(length: int) -> bytes:
    return bytes(i & 0xFF for i in range(length))


def _md5(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


def md5_vectors() -> Dict[str, Any]:
    vectors: List[HashVector] = []

    for name, text, expected in RFC1321_SUITE:
        data = text.encode("ascii")
        vectors.append(
            HashVector(
                name=f"rfc1321_{name}",
                description="RFC 1321 A.5 test suite",
                input_hex=data.hex(),
                input_ascii=text,
                input_length=len(data),
                expected_hex=expected,
            )
        )

    for length in BOUNDARY_LENGTHS:
        data = pattern_bytes(length)
        vectors.append(
            HashVector(
                name=f"pattern_{length}",
                description=f"{length} bytes of 0x00..0xff counter",
                input_hex=data.hex(),
                input_ascii=None,
                input_length=length,
                expected_hex=_md5(data),
            )
        )

    return {
        "algorithm": "MD5",
        "output_size": SIZE,
        "block_size": BLOCK_SIZE,
        "test_vectors": [v.__dict__ for v in vectors],
    }


def state_vectors() -> Dict[str, Any]:
    """Marshaled mid-stream states with the digest expected after resuming."""
    vectors: List[StateVector] = []

    cases = [
        ("fresh", b"", b"abc"),
        ("split_12345", b"12345", b"67890"),
        ("one_short_of_block", pattern_bytes(BLOCK_SIZE - 1), b"\x00"),
        ("exact_block", pattern_bytes(BLOCK_SIZE), b"tail"),
        ("block_plus_one", pattern_bytes(BLOCK_SIZE + 1), pattern_bytes(200)),
        ("two_blocks_and_change", pattern_bytes(2 * BLOCK_SIZE + 7), b""),
    ]
    for name, prefix, continuation in cases:
        d = Digest()
        d.write(prefix)
        vectors.append(
            StateVector(
                name=name,
                description=f"resume after {len(prefix)} bytes",
                prefix_hex=prefix.hex(),
                prefix_length=len(prefix),
                state_hex=d.marshal_binary().hex(),
                continuation_hex=continuation.hex(),
                expected_hex=_md5(prefix + continuation),
            )
        )

    return {
        "algorithm": "MD5",
        "state_size": MARSHALED_SIZE,
        "test_vectors": [v.__dict__ for v in vectors],
    }
