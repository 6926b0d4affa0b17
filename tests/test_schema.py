"""
tests/test_schema.py – result record shapes and their wire form.
"""
from __future__ import annotations

import pydantic
import pytest

from imgvalidate.models.schema import ValidationFailure, ValidationSuccess, to_wire

HASH = "a" * 64


def test_success_wire_record():
    wire = to_wire(ValidationSuccess(hash=HASH))
    assert wire == {
        "valid": True,
        "hash": HASH,
        "timestamp": None,
        "gps": None,
        "error": None,
    }


def test_failure_wire_record_omits_stage():
    wire = to_wire(ValidationFailure(stage="read", error="Failed to read file: boom"))
    assert wire == {
        "valid": False,
        "hash": "",
        "timestamp": None,
        "gps": None,
        "error": "Failed to read file: boom",
    }


def test_success_cannot_carry_error():
    with pytest.raises(pydantic.ValidationError):
        ValidationSuccess(hash=HASH, error="nope")


def test_success_rejects_non_hex_or_uppercase_hash():
    with pytest.raises(pydantic.ValidationError):
        ValidationSuccess(hash="")
    with pytest.raises(pydantic.ValidationError):
        ValidationSuccess(hash="A" * 64)


def test_failure_requires_message_and_empty_hash():
    with pytest.raises(pydantic.ValidationError):
        ValidationFailure(stage="open", error="")
    with pytest.raises(pydantic.ValidationError):
        ValidationFailure(stage="open", error="x", hash=HASH)
    with pytest.raises(pydantic.ValidationError):
        ValidationFailure(stage="open", error="x", valid=True)


def test_records_are_frozen():
    res = ValidationSuccess(hash=HASH)
    with pytest.raises(pydantic.ValidationError):
        res.hash = "b" * 64
