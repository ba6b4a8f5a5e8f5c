"""
Hex Validation Primitives

Prefix stripping and hex-digit validation shared by every decode path.

Security/Determinism Notes:
- Only ASCII 0-9, a-f, A-F count as hex digits. Whitespace, underscores,
  signs and non-ASCII digits are rejected even though int(x, 16) and
  bytes.fromhex() would tolerate some of them.
- The prefix is exactly "0x" or "0X"; it is optional on input.
"""
from __future__ import annotations

import logging
import re

from hexcodec.schemas.errors import HexCodecException

logger = logging.getLogger(__name__)

HEX_PREFIXES = ("0x", "0X")

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]*")


def has_hex_prefix(text: str) -> bool:
    """
    Check whether text starts with the 0x/0X marker.

    Example:
        >>> has_hex_prefix("0Xff")
        True
        >>> has_hex_prefix("ff")
        False
    """
    return text.startswith(HEX_PREFIXES)


def strip_hex_prefix(text: str) -> tuple[str, bool]:
    """
    Remove an optional 0x/0X prefix.

    Returns:
        (digits, had_prefix) where digits is the remainder of text.
    """
    if has_hex_prefix(text):
        return text[2:], True
    return text, False


def is_hex_digits(text: str) -> bool:
    """Check that every character of text is an ASCII hex digit (empty is valid)."""
    return _HEX_DIGITS_RE.fullmatch(text) is not None


def require_str(text: object) -> str:
    """Reject non-string decode input before any parsing happens."""
    if not isinstance(text, str):
        raise TypeError(
            f"hex input must be str, got {type(text).__name__}"
        )
    return text


def reject(exc_cls: type[HexCodecException], text: str) -> HexCodecException:
    """Build the exception for a rejected input and log the rejection."""
    exc = exc_cls.for_input(text)
    logger.debug(f"Rejected hex input ({exc.code}): {exc.details.get('input')!r}")
    return exc
