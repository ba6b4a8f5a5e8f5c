"""
Runtime Configuration Module

Provides configuration loading for the hex codec.
"""

from .runtime import (
    CodecConfig,
    SUPPORTED_WORD_BITS,
    get_config,
    native_word_bits,
    reset_config,
)

__all__ = [
    "CodecConfig",
    "SUPPORTED_WORD_BITS",
    "get_config",
    "native_word_bits",
    "reset_config",
]
