"""
Quantity Codec

Leading-zero-free hex encoding of integers. One parameterized routine
covers the arbitrary-precision (256-bit bounded on decode), 64-bit and
machine-word codecs; only the bit width and the overflow error differ.

Rules (decode):
- prefix optional; "0x" alone is EmptyNumber, "" is EmptyString
- digits must be ASCII hex
- no leading zero unless the value is exactly "0"
- at most bits/4 digits
- no sign: decoded values are always non-negative
"""
from __future__ import annotations

from hexcodec.config.runtime import SUPPORTED_WORD_BITS, get_config
from hexcodec.schemas.errors import (
    Big256RangeError,
    EmptyNumberError,
    EmptyStringError,
    HexCodecException,
    HexSyntaxError,
    LeadingZeroError,
    Uint32RangeError,
    Uint64RangeError,
)

from .validation import is_hex_digits, reject, require_str, strip_hex_prefix


BIG_BITS = 256

_RANGE_ERRORS: dict[int, type[HexCodecException]] = {
    32: Uint32RangeError,
    64: Uint64RangeError,
    BIG_BITS: Big256RangeError,
}


def _range_error_for(bits: int) -> type[HexCodecException]:
    try:
        return _RANGE_ERRORS[bits]
    except KeyError:
        raise ValueError(
            f"Unsupported quantity width {bits!r}, expected one of {sorted(_RANGE_ERRORS)}"
        ) from None


def _resolve_word_bits(word_bits: int | None) -> int:
    if word_bits is None:
        return get_config().word_bits
    if word_bits not in SUPPORTED_WORD_BITS:
        raise ValueError(
            f"word_bits must be one of {SUPPORTED_WORD_BITS}, got {word_bits!r}"
        )
    return word_bits


def _require_int(value: object) -> int:
    # bool is an int subclass but never a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"quantity must be int, got {type(value).__name__}"
        )
    return value


def _check_quantity_digits(text: str) -> str:
    """Validate a quantity string and return its bare digits."""
    require_str(text)
    digits, had_prefix = strip_hex_prefix(text)
    if not digits:
        raise reject(EmptyNumberError if had_prefix else EmptyStringError, text)
    if not is_hex_digits(digits):
        raise reject(HexSyntaxError, text)
    if len(digits) > 1 and digits[0] == "0":
        raise reject(LeadingZeroError, text)
    return digits


# =============================================================================
# Generic routines
# =============================================================================

def decode_quantity(text: str, bits: int) -> int:
    """
    Decode a leading-zero-free hex quantity that must fit in `bits` bits.

    Args:
        text: Hex string, prefix optional
        bits: Target width (32, 64 or 256)

    Returns:
        Non-negative integer

    Raises:
        EmptyStringError, EmptyNumberError, HexSyntaxError, LeadingZeroError,
        or the range error for the width (Uint32RangeError, Uint64RangeError,
        Big256RangeError).
        ValueError: If bits is not a supported width.
    """
    range_error = _range_error_for(bits)
    digits = _check_quantity_digits(text)
    # Without leading zeros the digit count bounds the magnitude exactly
    if len(digits) > bits // 4:
        raise reject(range_error, text)
    return int(digits, 16)


def encode_quantity(value: int, bits: int) -> str:
    """
    Encode an unsigned integer that must fit in `bits` bits.

    Raises:
        The range error for the width if value is negative or too wide.
    """
    range_error = _range_error_for(bits)
    _require_int(value)
    if value < 0 or value.bit_length() > bits:
        raise range_error(
            message=f"value {value} does not fit in an unsigned {bits}-bit integer",
            details={"value": str(value), "bits": bits},
        )
    return format(value, "x")


# =============================================================================
# Arbitrary-precision integers
# =============================================================================

def encode_big(value: int) -> str:
    """
    Encode an integer as lowercase hex without prefix or leading zeros.

    Negative values get a leading "-".

    Example:
        >>> encode_big(0xbbb)
        'bbb'
        >>> encode_big(-255)
        '-ff'
    """
    _require_int(value)
    if value < 0:
        return "-" + format(-value, "x")
    return format(value, "x")


def decode_big(text: str) -> int:
    """
    Decode a hex quantity of at most 256 bits.

    Signs are not accepted on input: "-ff" is a syntax error even though
    encode_big(-255) produces it.
    """
    return decode_quantity(text, BIG_BITS)


# =============================================================================
# Fixed-width unsigned integers
# =============================================================================

def encode_uint64(value: int) -> str:
    """Encode an unsigned 64-bit integer; 0 encodes as "0"."""
    return encode_quantity(value, 64)


def decode_uint64(text: str) -> int:
    """Decode a hex quantity into an unsigned 64-bit integer."""
    return decode_quantity(text, 64)


def encode_uint(value: int, word_bits: int | None = None) -> str:
    """
    Encode an unsigned machine-word integer.

    Args:
        value: Integer in [0, 2**word_bits)
        word_bits: 32 or 64; defaults to the configured word width
    """
    return encode_quantity(value, _resolve_word_bits(word_bits))


def decode_uint(text: str, word_bits: int | None = None) -> int:
    """
    Decode a hex quantity into an unsigned machine-word integer.

    On a 32-bit word width overflow raises Uint32RangeError, on 64-bit
    Uint64RangeError.
    """
    return decode_quantity(text, _resolve_word_bits(word_bits))
