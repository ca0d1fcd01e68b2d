"""Two-dimensional shingles over a list of rows.

Window size and step are ``[x, y]`` pairs: ``y`` counts rows, ``x`` counts
elements (or characters) within a row.  Rows may have different lengths.
A window is accepted when it spans ``height`` rows and at least one of them
reaches the full width; otherwise the row block moves down by ``step[1]``
and the column cursor restarts at zero.

>>> rows = ["abcd", "efgh", "ijkl"]
>>> [[str(part) for part in w] for w in windowed_2d(rows, [3, 3])]
[['abc', 'efg', 'ijk'], ['bcd', 'fgh', 'jkl']]
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from ..types import UNINITIALIZED, Cursor, RowOffsets, ScalarOffset, SequenceView, TextView
from .boundary import Buffer, scan_boundaries
from .hasher import ShingleHasher
from .params import check_pair

logger = logging.getLogger(__name__)

Pair = Union[Sequence[int], Tuple[int, int]]


class Shingles2D:
    """Row-block stepping shared by the 2D windowers.

    ``self.row`` is the index of the first row of the active block; rows
    before it have been dropped.
    """

    def __init__(self, rows: Sequence[Any], size: Pair, step: Pair = (1, 1)) -> None:
        self.rows = rows
        self.width, self.height = check_pair("size", size)
        self.step_x, self.step_y = check_pair("step", step)
        self.row = 0
        self.cursor: Cursor = UNINITIALIZED

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def step(self) -> Tuple[int, int]:
        return self.step_x, self.step_y

    def _has_block(self) -> bool:
        return len(self.rows) - self.row >= self.height

    def _drop_rows(self) -> None:
        self.row = min(self.row + self.step_y, len(self.rows))
        logger.debug("no window fits the row block, moving to row %d", self.row)

    def _exhausted(self) -> None:
        logger.debug(
            "2D shingles exhausted: %d rows left for height %d",
            len(self.rows) - self.row,
            self.height,
        )
        raise StopIteration

    def __iter__(self):
        return self

    def __next__(self):  # pragma: no cover - abstract
        raise NotImplementedError

    def hashes(self, key: Optional[bytes] = None, digest_size: Optional[int] = None) -> ShingleHasher:
        """Return an iterator over the hashes of the remaining 2D shingles."""

        return ShingleHasher(self, key=key, digest_size=digest_size)


class ElementShingles2D(Shingles2D):
    """2D shingles over rows of homogeneous elements.

    All rows of a block share one column cursor.  Rows shorter than the
    window contribute truncated, possibly empty, views.

    >>> rows = [[1, 2, 3, 4], [5, 6, 7, 8]]
    >>> [[list(part) for part in w] for w in windowed_2d_with_step(rows, [2, 2], [2, 2])]
    [[[1, 2], [5, 6]], [[3, 4], [7, 8]]]
    """

    def __next__(self) -> List[SequenceView]:
        cursor = self.cursor
        pos_x = cursor.offset if isinstance(cursor, ScalarOffset) else 0

        while self._has_block():
            has_sufficient_width = False
            window: List[SequenceView] = []
            for data_x in self.rows[self.row : self.row + self.height]:
                length = len(data_x)
                if pos_x + self.width <= length:
                    has_sufficient_width = True
                start = min(pos_x, length)
                stop = min(pos_x + self.width, length)
                window.append(SequenceView(data_x, start, stop))

            if has_sufficient_width:
                self.cursor = ScalarOffset(pos_x + self.step_x)
                return window

            self._drop_rows()
            pos_x = 0

        self.cursor = ScalarOffset(pos_x)
        self._exhausted()


class TextShingles2D(Shingles2D):
    """2D shingles over rows of UTF-8 text.

    Every active row keeps its own byte cursor because the same character
    count spans a different number of bytes in different rows.  ``str``
    rows are encoded once on construction.
    """

    def __init__(self, rows: Sequence[Union[str, Buffer]], size: Pair, step: Pair = (1, 1)) -> None:
        super().__init__(rows, size, step)
        self.buffers: List[Buffer] = [
            row.encode("utf-8") if isinstance(row, str) else row for row in rows
        ]

    def __next__(self) -> List[TextView]:
        cursor = self.cursor
        if isinstance(cursor, RowOffsets):
            offsets = list(cursor.offsets)
        else:
            offsets = [0] * self.height

        while self._has_block():
            has_sufficient_width = False
            window: List[TextView] = []
            for y in range(self.height):
                buf = self.buffers[self.row + y]
                pos_x = offsets[y]
                scan = scan_boundaries(buf, pos_x, self.width, self.step_x)

                if scan.covers(self.width):
                    has_sufficient_width = True
                end = scan.end if scan.end is not None else len(buf)
                window.append(TextView(buf, pos_x, end))
                # an exhausted row yields empty views until the block moves
                offsets[y] = scan.next if scan.next is not None else len(buf)

            if has_sufficient_width:
                self.cursor = RowOffsets(tuple(offsets))
                return window

            self._drop_rows()
            offsets = [0] * self.height

        self.cursor = RowOffsets(tuple(offsets))
        self._exhausted()


def _is_text_grid(rows: Sequence[Any]) -> bool:
    return len(rows) > 0 and all(isinstance(row, str) for row in rows)


def windowed_2d(rows: Sequence[Any], size: Pair) -> Shingles2D:
    """2D shingles of *rows* with step ``[1, 1]``."""

    return windowed_2d_with_step(rows, size, (1, 1))


def windowed_2d_with_step(rows: Sequence[Any], size: Pair, step: Pair) -> Shingles2D:
    """2D shingles of *rows* advancing by ``step = [step_x, step_y]``.

    A grid of ``str`` rows gets character windows; any other grid gets
    element windows.
    """

    if _is_text_grid(rows):
        return TextShingles2D(rows, size, step)
    return ElementShingles2D(rows, size, step)
