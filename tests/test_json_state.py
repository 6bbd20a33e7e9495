"""JSON state rendering tests."""

from __future__ import annotations

import json
import logging

import pytest

from md5_spec.config import INIT_STATE
from md5_spec.crypto.hash_vectors import pattern_bytes
from md5_spec.digest import checksum, new
from md5_spec.errors import ErrorCode, SpecError
from md5_spec.json_state import (
    new_from_json,
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)


def test_state_to_dict_fields() -> None:
    d = new()
    d.write(b"12345")
    obj = state_to_dict(d)
    assert obj["s"] == list(INIT_STATE)
    assert obj["nx"] == 5
    assert obj["len"] == 5
    assert bytes.fromhex(obj["x"]) == b"12345" + bytes(59)


def test_json_resume_12345() -> None:
    d = new()
    d.write(b"12345")
    m2 = new_from_json(state_to_json(d))
    m2.write(b"67890")
    assert m2.sum() == checksum(b"1234567890")


def test_json_round_trip_after_blocks() -> None:
    d = new()
    d.write(pattern_bytes(150))
    resumed = state_from_json(state_to_json(d))
    assert resumed.marshal_binary() == d.marshal_binary()


def _valid() -> dict:
    d = new()
    d.write(b"abc")
    return state_to_dict(d)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda o: o.pop("s"),
        lambda o: o.update(s=[1, 2, 3]),
        lambda o: o.update(s=[1, 2, 3, 2**32]),
        lambda o: o.update(s=[1, 2, 3, True]),
        lambda o: o.update(x="zz"),
        lambda o: o.update(x="00" * 63),
        lambda o: o.update(x=5),
        lambda o: o.update(nx=4),
        lambda o: o.update(nx=64),
        lambda o: o.update(len=-1),
        lambda o: o.update(len="3"),
    ],
)
def test_state_from_dict_rejects_malformed(mutate) -> None:
    obj = _valid()
    mutate(obj)
    with pytest.raises(SpecError) as excinfo:
        state_from_dict(obj)
    assert excinfo.value.code == ErrorCode.INVALID_JSON_STATE


def test_state_from_json_rejects_bad_text() -> None:
    for text in ("", "{", "[]", "null"):
        with pytest.raises(SpecError) as excinfo:
            state_from_json(text)
        assert excinfo.value.code == ErrorCode.INVALID_JSON_STATE


def test_new_from_json_falls_back_to_fresh(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="md5_spec.json_state"):
        d = new_from_json(json.dumps({"s": "nope"}))
    assert d.sum() == new().sum()
    assert "starting fresh" in caplog.text
