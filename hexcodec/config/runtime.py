"""
Runtime Configuration

Codec-wide settings: native word width for the machine-word integer
codec and the log level.
"""

from __future__ import annotations

import copy
import os
import struct
from dataclasses import dataclass
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()


SUPPORTED_WORD_BITS = (32, 64)


def native_word_bits() -> int:
    """Width in bits of the interpreter's native unsigned word."""
    return struct.calcsize("P") * 8


def _validate_word_bits(word_bits: int) -> int:
    if word_bits not in SUPPORTED_WORD_BITS:
        raise ValueError(
            f"word_bits must be one of {SUPPORTED_WORD_BITS}, got {word_bits!r}"
        )
    return word_bits


@dataclass
class CodecConfig:
    """
    Complete runtime configuration for the hex codec.

    Can be loaded from:
    - Environment variables (and a .env file)
    - A plain dictionary
    - Programmatic construction
    """
    word_bits: int = 0
    log_level: str = "INFO"

    def __post_init__(self):
        # 0 means "use the platform width"
        if not self.word_bits:
            self.word_bits = native_word_bits()
        _validate_word_bits(self.word_bits)
        self.log_level = self.log_level.upper()

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - HEXCODEC_WORD_BITS: word width for decode_uint/encode_uint (32 or 64)
        - HEXCODEC_LOG_LEVEL: log level name
        """
        overrides: dict[str, Any] = {}

        if os.getenv("HEXCODEC_WORD_BITS"):
            raw = os.getenv("HEXCODEC_WORD_BITS", "")
            try:
                overrides["word_bits"] = int(raw)
            except ValueError:
                raise ValueError(
                    f"HEXCODEC_WORD_BITS must be an integer, got {raw!r}"
                ) from None
        if os.getenv("HEXCODEC_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("HEXCODEC_LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CodecConfig":
        """Load configuration from a dictionary (supports partial data)."""
        return cls(
            word_bits=int(data.get("word_bits") or 0),
            log_level=data.get("log_level", "INFO"),
        )

    def with_env_overrides(self) -> "CodecConfig":
        """Return a new config with environment variable overrides applied."""
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        if "word_bits" in overrides:
            new_config.word_bits = _validate_word_bits(overrides["word_bits"])
        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"].upper()
        return new_config


_config: Optional[CodecConfig] = None


def get_config() -> CodecConfig:
    """Return the process-wide configuration, loading it from env on first use."""
    global _config
    if _config is None:
        _config = CodecConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
