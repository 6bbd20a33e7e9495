"""Helpers to locate and replay MD5 fixture vectors."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from md5_spec.config import FIXTURES_ENV
from md5_spec.digest import Digest, checksum, new_from_binary

ROOT = Path(__file__).resolve().parent.parent


def fixtures_dir() -> Path:
    """Fixture root, overridable through the MD5_SPEC_FIXTURES environment variable."""
    return Path(os.environ.get(FIXTURES_ENV, str(ROOT / "fixtures")))


def _hex_to_bytes(v: str | None) -> bytes:
    if not v:
        return b""
    return bytes.fromhex(v)


def replay_hash_vector(item: dict[str, Any]) -> str:
    return checksum(_hex_to_bytes(item.get("input_hex"))).hex()


def replay_state_vector(item: dict[str, Any]) -> str:
    d: Digest = new_from_binary(_hex_to_bytes(item["state_hex"]))
    d.write(_hex_to_bytes(item.get("continuation_hex")))
    return d.hexdigest()
