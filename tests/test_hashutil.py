"""
tests/test_hashutil.py – chunked reading and streaming SHA-256.
"""
from __future__ import annotations

import hashlib
import io

import pytest

from imgvalidate.hashutil import DEFAULT_CHUNK_SIZE, iter_chunks, sha256_chunks

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.mark.parametrize("size", [1, 7, 1024, DEFAULT_CHUNK_SIZE, 10_000_000])
def test_digest_is_chunk_size_invariant(size):
    data = bytes(range(256)) * 50 + b"tail"
    expected = hashlib.sha256(data).hexdigest()
    assert sha256_chunks(iter_chunks(io.BytesIO(data), size)) == expected


def test_iter_chunks_respects_size_and_stops_at_eof():
    chunks = list(iter_chunks(io.BytesIO(b"abcdefghij"), 4))
    assert chunks == [b"abcd", b"efgh", b"ij"]


def test_empty_stream_yields_nothing():
    assert list(iter_chunks(io.BytesIO(b""), 16)) == []
    assert sha256_chunks([]) == EMPTY_SHA256


def test_digest_is_lowercase_hex():
    digest = sha256_chunks([b"IMG", b"_0001"])
    assert digest == hashlib.sha256(b"IMG_0001").hexdigest()
    assert digest == digest.lower()
    assert len(digest) == 64
