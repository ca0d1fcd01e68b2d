"""Validation of window sizes and steps."""

from __future__ import annotations

import numbers
from typing import Sequence, Tuple


class InvalidShingleParameters(ValueError):
    """Raised when a windower is constructed with an unusable size or step."""

    def __init__(self, message: str, *, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"{name}={value!r}: {message}")


def check_positive(name: str, value: object) -> int:
    """Return *value* as ``int`` or raise :class:`InvalidShingleParameters`.

    Zero is rejected for steps as well as sizes: a zero step would never
    advance the cursor.
    """

    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidShingleParameters("must be an integer", name=name, value=value)
    if value < 1:
        raise InvalidShingleParameters("must be at least 1", name=name, value=value)
    return int(value)


def check_pair(name: str, value: Sequence[int]) -> Tuple[int, int]:
    """Validate a ``[x, y]`` pair as used by the 2D windowers."""

    try:
        items = tuple(value)
    except TypeError:
        raise InvalidShingleParameters("must be a pair", name=name, value=value) from None
    if len(items) != 2:
        raise InvalidShingleParameters("must be a pair", name=name, value=value)
    x = check_positive(f"{name}[0]", items[0])
    y = check_positive(f"{name}[1]", items[1])
    return x, y
