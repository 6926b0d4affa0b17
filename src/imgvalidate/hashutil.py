# src/imgvalidate/hashutil.py
from __future__ import annotations
import hashlib
from typing import BinaryIO, Final, Iterable, Iterator

DEFAULT_CHUNK_SIZE: Final[int] = 1024 * 1024


def iter_chunks(f: BinaryIO, size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield successive chunks of at most `size` bytes until EOF.
    Read errors propagate to the caller.
    """
    while True:
        chunk = f.read(size)
        if not chunk:
            # EOF
            break
        yield chunk


def sha256_chunks(chunks: Iterable[bytes]) -> str:
    """
    Compute the lowercase hex SHA-256 of a stream of byte chunks.
    """
    h = hashlib.sha256()
    for chunk in chunks:
        h.update(chunk)
    return h.hexdigest()
