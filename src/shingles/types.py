"""Common type helpers for shingles.

This module defines the lightweight views handed out by the windowers and
the cursor variants used by the two-dimensional iterators.  Views never own
data: they keep a reference to the caller's buffer plus an index range.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class Window:
    """Index based window used for segmenting sequences."""

    start: int
    end: int

    @property
    def width(self) -> int:
        """Return the number of elements covered by the window."""

        return self.end - self.start


class SequenceView(Sequence):
    """Read-only view of ``base[start:stop]`` that does not copy *base*."""

    __slots__ = ("base", "start", "stop")

    def __init__(self, base: Sequence[Any], start: int, stop: int) -> None:
        self.base = base
        self.start = start
        self.stop = stop

    @property
    def span(self) -> Window:
        return Window(self.start, self.stop)

    def __len__(self) -> int:
        return self.stop - self.start

    def __getitem__(self, key):
        indices = range(self.start, self.stop)[key]
        if isinstance(key, slice):
            if indices.step == 1:
                return SequenceView(self.base, indices.start, indices.stop)
            return [self.base[i] for i in indices]
        return self.base[indices]

    def __iter__(self) -> Iterator[Any]:
        base = self.base
        for i in range(self.start, self.stop):
            yield base[i]

    def __eq__(self, other: object) -> bool:
        # like a tuple, never equal to text or byte strings
        if isinstance(other, (str, bytes, bytearray, memoryview, TextView)):
            return False
        if not isinstance(other, (Sequence, np.ndarray)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"SequenceView({list(self)!r}, span={self.start}..{self.stop})"

    def to_numpy(self) -> np.ndarray:
        """Return the window as an array.

        ndarray bases are sliced, which numpy turns into a view; other bases
        are converted into a new array.
        """

        if isinstance(self.base, np.ndarray):
            return self.base[self.start : self.stop]
        return np.asarray(list(self))


class TextView:
    """View of a UTF-8 buffer between two character boundaries.

    ``start`` and ``end`` are byte offsets.  The text is decoded only when
    requested through ``str()``.  Views compare equal to other views and to
    ``str`` with the same text, and hash like that ``str``.
    """

    __slots__ = ("buffer", "start", "end")

    def __init__(self, buffer: Union[bytes, bytearray, memoryview], start: int, end: int) -> None:
        self.buffer = buffer
        self.start = start
        self.end = end

    @property
    def span(self) -> Window:
        """Byte span of the view inside its buffer."""

        return Window(self.start, self.end)

    @property
    def nbytes(self) -> int:
        return self.end - self.start

    def memoryview(self) -> memoryview:
        return memoryview(self.buffer)[self.start : self.end]

    def tobytes(self) -> bytes:
        return bytes(self.memoryview())

    def __str__(self) -> str:
        return self.tobytes().decode("utf-8")

    def __len__(self) -> int:
        from .core.boundary import count_chars

        return count_chars(self.buffer, self.start, self.end)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextView):
            return self.memoryview() == other.memoryview()
        if isinstance(other, str):
            return self.memoryview() == other.encode("utf-8")
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"TextView({str(self)!r}, span={self.start}..{self.end})"


# ---------------------------------------------------------------------------
# Cursor state of the two-dimensional windowers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Uninitialized:
    """Cursor before the first window was produced."""


@dataclass(frozen=True)
class ScalarOffset:
    """Column offset shared by every row of fixed-width grids."""

    offset: int


@dataclass(frozen=True)
class RowOffsets:
    """One byte offset per active row of a text grid."""

    offsets: Tuple[int, ...]


Cursor = Union[Uninitialized, ScalarOffset, RowOffsets]

UNINITIALIZED = Uninitialized()
