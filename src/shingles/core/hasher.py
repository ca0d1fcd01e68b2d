"""Hashing of produced shingles.

:class:`ShingleHasher` consumes any shingle iterator and yields one
fixed-width unsigned integer per shingle.  Values are encoded into a
canonical byte stream and digested with keyed BLAKE2b, so equal shingles
hash identically no matter how they were built.
"""

from __future__ import annotations

import hashlib
import struct
from collections.abc import Sequence
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from ..types import SequenceView, TextView

DEFAULT_KEY = bytes(16)
DEFAULT_DIGEST_SIZE = 8


def _encode_int(value: int) -> bytes:
    raw = value.to_bytes(value.bit_length() // 8 + 1, "little", signed=True)
    return struct.pack("<B", len(raw)) + raw


def _feed(h: Any, item: Any) -> None:
    if isinstance(item, np.generic):
        item = item.item()
    if item is None:
        h.update(b"n")
    elif isinstance(item, int):
        # bools and integral floats share the int encoding
        h.update(b"i" + _encode_int(int(item)))
    elif isinstance(item, float):
        if item.is_integer():
            h.update(b"i" + _encode_int(int(item)))
        else:
            h.update(b"f" + struct.pack("<d", item))
    elif isinstance(item, (str, TextView)):
        raw = item.encode("utf-8") if isinstance(item, str) else item.tobytes()
        h.update(b"s" + struct.pack("<Q", len(raw)) + raw)
    elif isinstance(item, (Sequence, SequenceView, np.ndarray)):
        h.update(b"l" + struct.pack("<Q", len(item)))
        for sub in item:
            _feed(h, sub)
    elif isinstance(item, memoryview):
        _feed(h, item.tolist())
    else:
        raise TypeError(f"cannot hash shingle item of type {type(item).__name__}")


def hash_shingle(
    item: Any,
    key: bytes = DEFAULT_KEY,
    digest_size: int = DEFAULT_DIGEST_SIZE,
) -> int:
    """Return the keyed hash of a single shingle as an unsigned integer.

    ``TypeError`` is raised for values with no canonical encoding.
    """

    h = hashlib.blake2b(key=key, digest_size=digest_size)
    _feed(h, item)
    return int.from_bytes(h.digest(), "little")


class ShingleHasher(Iterator[int]):
    """Iterator reproducing hashes of the items of *source*.

    >>> from shingles import windowed
    >>> hashes = list(ShingleHasher(windowed("hello", 4)))
    >>> len(hashes)
    2
    """

    def __init__(
        self,
        source: Iterable[Any],
        key: Optional[bytes] = None,
        digest_size: Optional[int] = None,
    ) -> None:
        self._source = iter(source)
        self.key = DEFAULT_KEY if key is None else bytes(key)
        self.digest_size = DEFAULT_DIGEST_SIZE if digest_size is None else digest_size
        if len(self.key) > hashlib.blake2b.MAX_KEY_SIZE:
            raise ValueError(f"key longer than {hashlib.blake2b.MAX_KEY_SIZE} bytes")
        if not 1 <= self.digest_size <= hashlib.blake2b.MAX_DIGEST_SIZE:
            raise ValueError(
                f"digest_size must be between 1 and {hashlib.blake2b.MAX_DIGEST_SIZE}"
            )

    def __iter__(self) -> "ShingleHasher":
        return self

    def __next__(self) -> int:
        item = next(self._source)
        return hash_shingle(item, self.key, self.digest_size)
