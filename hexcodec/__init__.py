"""
hexcodec - strict hexadecimal codec for wire payloads.

Usage:
    from hexcodec import decode_big, encode_big

    decode_big("0xbBb")   # 3003
    encode_big(3003)      # "bbb"
"""

from __future__ import annotations

import logging
import sys

from hexcodec.config import CodecConfig, get_config
from hexcodec.hexutil import (
    decode,
    decode_big,
    decode_uint,
    decode_uint64,
    encode,
    encode_big,
    encode_uint,
    encode_uint64,
    has_hex_prefix,
    is_hex_digits,
    strip_hex_prefix,
)
from hexcodec.schemas import (
    Big256RangeError,
    EmptyNumberError,
    EmptyStringError,
    ErrorCodes,
    HexCodecException,
    HexError,
    HexSyntaxError,
    LeadingZeroError,
    OddLengthError,
    Uint32RangeError,
    Uint64RangeError,
)

__version__ = "0.1.0"


def configure_logging(level: str | None = None) -> None:
    """Configure a stderr handler for hexcodec log records."""
    level_name = level or get_config().log_level
    log_level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("hexcodec").setLevel(log_level)


__all__ = [
    "encode",
    "decode",
    "encode_big",
    "decode_big",
    "encode_uint64",
    "decode_uint64",
    "encode_uint",
    "decode_uint",
    "has_hex_prefix",
    "strip_hex_prefix",
    "is_hex_digits",
    "CodecConfig",
    "get_config",
    "configure_logging",
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
]
