"""Reference helpers for sliding windows over sequences.

These build every span eagerly from index arithmetic and serve as the
baseline the lazy windowers are checked against.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, TypeVar, Union

from ..types import Window

T = TypeVar("T")


def expected_count(length: int, size: int, step: int = 1) -> int:
    """Return how many windows of *size* fit in *length* advancing by *step*.

    ``ceil((length - size + 1) / step)`` when ``length >= size``, else 0.
    """

    if length < size:
        return 0
    return -(-(length - size + 1) // step)


def iter_windows(data: Union[int, Sequence[T]], size: int, step: int = 1) -> Iterator[Window]:
    """Yield ``Window`` objects describing slices of *data*.

    *data* may be a sequence or its length.  ``size`` is the window length
    and ``step`` controls how far the window advances each iteration.
    Data shorter than ``size`` yields nothing; ``ValueError`` is raised if
    the arguments are not sensible.
    """

    if size <= 0 or step <= 0:
        raise ValueError("size and step must be positive")
    length = data if isinstance(data, int) else len(data)
    for start in range(0, length - size + 1, step):
        yield Window(start, start + size)


def window_slices(data: Sequence[T], size: int, step: int = 1) -> List[Sequence[T]]:
    """Return the subsequences for each sliding window."""

    return [data[w.start : w.end] for w in iter_windows(data, size, step)]
