"""
Hex encoding/decoding for byte strings and integer quantities.

Byte strings use two digits per byte; quantities drop leading zeros.
Decoders accept an optional 0x/0X prefix, encoders never emit one.
"""
from .byte_codec import encode, decode
from .quantity import (
    BIG_BITS,
    decode_big,
    decode_quantity,
    decode_uint,
    decode_uint64,
    encode_big,
    encode_quantity,
    encode_uint,
    encode_uint64,
)
from .validation import has_hex_prefix, is_hex_digits, strip_hex_prefix

__all__ = [
    "encode",
    "decode",
    "encode_big",
    "decode_big",
    "encode_uint64",
    "decode_uint64",
    "encode_uint",
    "decode_uint",
    "encode_quantity",
    "decode_quantity",
    "BIG_BITS",
    "has_hex_prefix",
    "strip_hex_prefix",
    "is_hex_digits",
]
