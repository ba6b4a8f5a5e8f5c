"""
Byte String Codec

Two hex digits per byte, most-significant nibble first, no leading-zero
canonicalization.
"""
from __future__ import annotations

from hexcodec.schemas.errors import EmptyStringError, HexSyntaxError, OddLengthError

from .validation import is_hex_digits, reject, require_str, strip_hex_prefix


def encode(data: bytes | bytearray | memoryview) -> str:
    """
    Encode bytes as lowercase hex without a prefix.

    Example:
        >>> encode(bytes([0, 1, 2]))
        '000102'
        >>> encode(b"")
        ''
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"encode() expects a bytes-like object, got {type(data).__name__}"
        )
    return bytes(data).hex()


def decode(text: str) -> bytes:
    """
    Decode hex text (prefix optional, case-insensitive) into bytes.

    Args:
        text: Hex string such as "0x02", "0X02" or "02"

    Returns:
        Decoded bytes

    Raises:
        EmptyStringError: If text is empty or is only the prefix
        OddLengthError: If the digit count is odd
        HexSyntaxError: If a non-hex character is present
    """
    require_str(text)
    digits, _ = strip_hex_prefix(text)
    if not digits:
        raise reject(EmptyStringError, text)
    if len(digits) % 2 != 0:
        raise reject(OddLengthError, text)
    if not is_hex_digits(digits):
        raise reject(HexSyntaxError, text)
    return bytes.fromhex(digits)
