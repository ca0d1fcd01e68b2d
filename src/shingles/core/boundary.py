"""Character boundary scanning over UTF-8 buffers.

A byte starts a character when it is ASCII (``< 128``) or a UTF-8 leading
byte (``>= 192``).  Continuation bytes (``128..191``) never start one, so
counting boundary bytes counts code points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def is_char_boundary(byte: int) -> bool:
    """Return ``True`` if *byte* begins a UTF-8 encoded code point."""

    return byte < 128 or byte >= 192


@dataclass(frozen=True)
class BoundaryScan:
    """Result of :func:`scan_boundaries`.

    Attributes
    ----------
    end:
        Absolute byte offset of the character at position ``size``, i.e. the
        exclusive end of the window, or ``None`` if the buffer ended first.
    next:
        Absolute byte offset of the character at position ``step``, or
        ``None`` if stepping would run past the end of the buffer.
    chars:
        Number of characters counted before the scan stopped.
    """

    end: Optional[int]
    next: Optional[int]
    chars: int

    def covers(self, size: int) -> bool:
        """Whether a window of *size* characters fits from the scan start."""

        return self.end is not None or self.chars == size


def scan_boundaries(buffer: Buffer, start: int, size: int, step: int) -> BoundaryScan:
    """Locate the window end and the next window start in one forward pass."""

    chars = 0
    end: Optional[int] = None
    nxt: Optional[int] = None
    for i in range(start, len(buffer)):
        if not is_char_boundary(buffer[i]):
            continue
        if chars == step:
            nxt = i
        if chars == size:
            end = i
        if nxt is not None and end is not None:
            break
        chars += 1
    return BoundaryScan(end=end, next=nxt, chars=chars)


def count_chars(buffer: Buffer, start: int = 0, end: Optional[int] = None) -> int:
    """Count the code points in ``buffer[start:end]``."""

    if end is None:
        end = len(buffer)
    return sum(1 for i in range(start, end) if is_char_boundary(buffer[i]))
