"""Overlapping windows ("shingles") over sequences, text and row grids."""

from .core import (
    ElementShingles,
    ElementShingles2D,
    InvalidShingleParameters,
    ShingleHasher,
    Shingles,
    Shingles2D,
    TextShingles,
    TextShingles2D,
    hash_shingle,
    windowed,
    windowed_2d,
    windowed_2d_with_step,
    windowed_with_step,
)
from .types import SequenceView, TextView, Window

__version__ = "0.1.0"

__all__ = [
    "ElementShingles",
    "ElementShingles2D",
    "InvalidShingleParameters",
    "ShingleHasher",
    "Shingles",
    "Shingles2D",
    "TextShingles",
    "TextShingles2D",
    "hash_shingle",
    "windowed",
    "windowed_2d",
    "windowed_2d_with_step",
    "windowed_with_step",
    "SequenceView",
    "TextView",
    "Window",
]
