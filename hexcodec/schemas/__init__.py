"""
Hex Codec Schemas

Error taxonomy shared by every encode/decode path.
"""

from .errors import (
    ErrorCodes,
    HexError,
    HexCodecException,
    EmptyStringError,
    EmptyNumberError,
    HexSyntaxError,
    OddLengthError,
    LeadingZeroError,
    Big256RangeError,
    Uint64RangeError,
    Uint32RangeError,
    exception_for_code,
)

__all__ = [
    "ErrorCodes",
    "HexError",
    "HexCodecException",
    "EmptyStringError",
    "EmptyNumberError",
    "HexSyntaxError",
    "OddLengthError",
    "LeadingZeroError",
    "Big256RangeError",
    "Uint64RangeError",
    "Uint32RangeError",
    "exception_for_code",
]
