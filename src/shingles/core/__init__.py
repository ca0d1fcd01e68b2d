"""Core windowing algorithms for shingles."""

from .boundary import BoundaryScan, count_chars, is_char_boundary, scan_boundaries
from .hasher import ShingleHasher, hash_shingle
from .params import InvalidShingleParameters
from .shingles import ElementShingles, Shingles, TextShingles, windowed, windowed_with_step
from .shingles_2d import (
    ElementShingles2D,
    Shingles2D,
    TextShingles2D,
    windowed_2d,
    windowed_2d_with_step,
)

__all__ = [
    "BoundaryScan",
    "count_chars",
    "is_char_boundary",
    "scan_boundaries",
    "ShingleHasher",
    "hash_shingle",
    "InvalidShingleParameters",
    "Shingles",
    "ElementShingles",
    "TextShingles",
    "windowed",
    "windowed_with_step",
    "Shingles2D",
    "ElementShingles2D",
    "TextShingles2D",
    "windowed_2d",
    "windowed_2d_with_step",
]
