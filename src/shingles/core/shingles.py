"""One-dimensional shingles over sequences and UTF-8 text.

Both windowers are single-pass iterators: each ``next()`` either returns the
window at the current cursor and advances it by ``step``, or raises
``StopIteration``.  A consumed windower cannot be rewound; build a new one
from the original data instead.

>>> [list(w) for w in windowed([1, 2, 3, 4], 3)]
[[1, 2, 3], [2, 3, 4]]
>>> [str(w) for w in windowed_with_step("привет!", 4, 2)]
['прив', 'ивет']
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from ..types import SequenceView, TextView
from ..utils.windows import expected_count
from .boundary import Buffer, count_chars, scan_boundaries
from .hasher import ShingleHasher
from .params import check_positive


class Shingles:
    """Common state of the 1D windowers: window ``size`` and ``step``."""

    def __init__(self, size: int, step: int = 1) -> None:
        self.size = check_positive("size", size)
        self.step = check_positive("step", step)

    def __iter__(self):
        return self

    def __next__(self):  # pragma: no cover - abstract
        raise NotImplementedError

    def hashes(self, key: Optional[bytes] = None, digest_size: Optional[int] = None) -> ShingleHasher:
        """Return an iterator over the hashes of the remaining shingles."""

        return ShingleHasher(self, key=key, digest_size=digest_size)


class ElementShingles(Shingles):
    """Windows of ``size`` elements over a homogeneous sequence.

    Each window is a :class:`~shingles.types.SequenceView` sharing the
    caller's sequence.
    """

    def __init__(self, data: Sequence[Any], size: int, step: int = 1) -> None:
        super().__init__(size, step)
        self.data = data
        self._pos = 0

    def __length_hint__(self) -> int:
        return expected_count(len(self.data) - self._pos, self.size, self.step)

    def __next__(self) -> SequenceView:
        length = len(self.data)
        if length - self._pos < self.size:
            raise StopIteration
        window = SequenceView(self.data, self._pos, self._pos + self.size)
        self._pos = min(self._pos + self.step, length)
        return window


class TextShingles(Shingles):
    """Windows of ``size`` characters over UTF-8 text.

    ``str`` input is encoded once; ``bytes``-like input must already be
    UTF-8 and is used as is.  Windows are :class:`~shingles.types.TextView`
    objects whose byte offsets always fall on character boundaries.
    """

    def __init__(self, text: Union[str, Buffer], size: int, step: int = 1) -> None:
        super().__init__(size, step)
        self.buffer: Buffer = text.encode("utf-8") if isinstance(text, str) else text
        self._pos = 0

    def __length_hint__(self) -> int:
        chars = count_chars(self.buffer, self._pos)
        return expected_count(chars, self.size, self.step)

    def __next__(self) -> TextView:
        buf = self.buffer
        scan = scan_boundaries(buf, self._pos, self.size, self.step)

        window: Optional[TextView] = None
        if scan.end is not None:
            window = TextView(buf, self._pos, scan.end)
        elif scan.chars == self.size:
            # the window covers exactly the remaining text
            window = TextView(buf, self._pos, len(buf))

        self._pos = scan.next if scan.next is not None else len(buf)

        if window is None:
            raise StopIteration
        return window


def windowed(data: Union[str, Sequence[Any]], size: int) -> Shingles:
    """Shingles of *data* advancing by one element or character."""

    return windowed_with_step(data, size, 1)


def windowed_with_step(data: Union[str, Sequence[Any]], size: int, step: int) -> Shingles:
    """Shingles of *data* advancing by *step*.

    ``str`` gets character windows; every other sequence (``bytes``
    included) gets element windows.  Use :class:`TextShingles` directly for
    UTF-8 encoded bytes.
    """

    if isinstance(data, str):
        return TextShingles(data, size, step)
    return ElementShingles(data, size, step)
