"""
Test fixtures package for hexcodec tests.

Provides the reference encode/decode tables:
- hex_vectors.py: vectors for bytes, big, uint64 and word-width quantities

Usage:
    from fixtures.hex_vectors import DECODE_BIG

    for text, expected in DECODE_BIG:
        ...
"""

from .hex_vectors import (
    DECODE_BIG,
    DECODE_BYTES,
    DECODE_UINT,
    DECODE_UINT64,
    ENCODE_BIG,
    ENCODE_BYTES,
    ENCODE_UINT,
    ENCODE_UINT64,
    ref_int,
)

__all__ = [
    "ENCODE_BYTES",
    "ENCODE_BIG",
    "ENCODE_UINT64",
    "ENCODE_UINT",
    "DECODE_BYTES",
    "DECODE_BIG",
    "DECODE_UINT64",
    "DECODE_UINT",
    "ref_int",
]
