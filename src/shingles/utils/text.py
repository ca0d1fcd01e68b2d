"""Text helpers for building 2D grids."""

from __future__ import annotations

from typing import List


def split_rows(text: str, sep: str = "\n") -> List[str]:
    """Split *text* into rows on *sep*.

    A single trailing separator terminates the last row instead of opening
    an empty one, so ``"ab\\ncd\\n"`` gives ``["ab", "cd"]``.  Empty text has
    no rows.
    """

    if not text:
        return []
    rows = text.split(sep)
    if text.endswith(sep):
        rows.pop()
    return rows
