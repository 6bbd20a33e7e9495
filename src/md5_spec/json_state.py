"""Human-readable JSON rendering of a digest's state.

Non-normative: the binary record in `encoding` is the persistence format.
The JSON form is built from that record, so it never reaches into engine
internals:

    {"s": [s0, s1, s2, s3], "x": "<64 bytes hex>", "nx": 3, "len": 3}
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .config import BLOCK_SIZE, LENGTH_MASK, WORD_MASK
from .digest import Digest
from .encoding import marshal_state, unmarshal_state
from .errors import ErrorCode, SpecError

logger = logging.getLogger(__name__)


def state_to_dict(d: Digest) -> dict[str, Any]:
    state, buf, length = unmarshal_state(d.marshal_binary())
    return {
        "s": list(state),
        "x": buf.hex(),
        "nx": length % BLOCK_SIZE,
        "len": length,
    }


def state_to_json(d: Digest) -> str:
    return json.dumps(state_to_dict(d), separators=(",", ":"))


def _bad(message: str) -> SpecError:
    return SpecError(ErrorCode.INVALID_JSON_STATE, message)


def _as_int(obj: dict[str, Any], key: str, limit: int) -> int:
    v = obj.get(key)
    # bool is an int subclass; reject it explicitly
    if not isinstance(v, int) or isinstance(v, bool):
        raise _bad(f"{key} must be an integer")
    if not (0 <= v <= limit):
        raise _bad(f"{key} out of range")
    return v


def state_from_dict(obj: Any) -> Digest:
    if not isinstance(obj, dict):
        raise _bad("state must be an object")
    for key in ("s", "x", "nx", "len"):
        if key not in obj:
            raise _bad(f"missing field {key!r}")

    words = obj["s"]
    if not isinstance(words, list) or len(words) != 4:
        raise _bad("s must be a list of 4 words")
    state = tuple(_as_int({"s": w}, "s", WORD_MASK) for w in words)

    x = obj["x"]
    if not isinstance(x, str):
        raise _bad("x must be a hex string")
    try:
        buf = bytes.fromhex(x)
    except ValueError as e:
        raise _bad(f"x is not valid hex: {e}") from e
    if len(buf) != BLOCK_SIZE:
        raise _bad(f"x must be {BLOCK_SIZE} bytes, got {len(buf)}")

    length = _as_int(obj, "len", LENGTH_MASK)
    nx = _as_int(obj, "nx", BLOCK_SIZE - 1)
    if nx != length % BLOCK_SIZE:
        raise _bad(f"nx={nx} does not match len % {BLOCK_SIZE}")

    d = Digest()
    d.unmarshal_binary(marshal_state(state, buf[:nx], length))
    return d


def state_from_json(text: str) -> Digest:
    """Strictly parse a JSON state; raises `SpecError` on malformed input."""
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise _bad(f"invalid JSON: {e}") from e
    return state_from_dict(obj)


def new_from_json(text: str) -> Digest:
    """Lenient variant of `state_from_json`: falls back to a fresh digest."""
    try:
        return state_from_json(text)
    except SpecError as e:
        logger.warning(f"Discarding unreadable md5 state, starting fresh: {e}")
        return Digest()
