"""
Hex Codec Schemas
File: errors.py

Purpose: Closed error taxonomy for hex decoding and encoding.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# Offending input longer than this is truncated in error details
MAX_INPUT_IN_DETAILS = 80


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes for every rejection path."""

    # Emptiness
    EMPTY_STRING = "EMPTY_STRING"
    EMPTY_NUMBER = "EMPTY_NUMBER"

    # Syntax
    SYNTAX = "SYNTAX"
    ODD_LENGTH = "ODD_LENGTH"
    LEADING_ZERO = "LEADING_ZERO"

    # Range
    BIG256_RANGE = "BIG256_RANGE"
    UINT64_RANGE = "UINT64_RANGE"
    UINT32_RANGE = "UINT32_RANGE"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class HexError(BaseModel):
    """
    Structured form of a codec failure.

    Used when an error has to cross a serialization boundary (for example
    an RPC error payload) instead of being raised.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.SYNTAX],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Parse failures are never retryable",
    )

    def to_exception(self) -> "HexCodecException":
        """Convert this error model to the matching exception."""
        exc_cls = exception_for_code(self.code)
        return exc_cls(message=self.message, details=dict(self.details))


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class HexCodecException(ValueError):
    """
    Base exception for all hex codec errors.

    Subclasses ValueError so callers that only care about "bad input"
    can catch the builtin.
    """

    code: str = "HEX_CODEC_ERROR"
    default_message: str = "invalid hex input"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.retryable = False

    @classmethod
    def for_input(cls, text: str) -> "HexCodecException":
        """Build the exception with the offending input recorded in details."""
        if len(text) > MAX_INPUT_IN_DETAILS:
            shown = text[:MAX_INPUT_IN_DETAILS] + "..."
        else:
            shown = text
        return cls(details={"input": shown, "length": len(text)})

    def to_error_model(self) -> HexError:
        """Convert this exception to a HexError model."""
        return HexError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class EmptyStringError(HexCodecException):
    """Input was the empty string."""

    code = ErrorCodes.EMPTY_STRING
    default_message = "empty hex string"


class EmptyNumberError(HexCodecException):
    """A quantity consisted of the 0x prefix and nothing else."""

    code = ErrorCodes.EMPTY_NUMBER
    default_message = 'hex string "0x"'


class HexSyntaxError(HexCodecException):
    code = ErrorCodes.SYNTAX
    default_message = "invalid hex string"


class OddLengthError(HexCodecException):
    code = ErrorCodes.ODD_LENGTH
    default_message = "hex string of odd length"


class LeadingZeroError(HexCodecException):
    code = ErrorCodes.LEADING_ZERO
    default_message = "hex number with leading zero digits"


class Big256RangeError(HexCodecException):
    code = ErrorCodes.BIG256_RANGE
    default_message = "hex number > 256 bits"


class Uint64RangeError(HexCodecException):
    code = ErrorCodes.UINT64_RANGE
    default_message = "hex number > 64 bits"


class Uint32RangeError(HexCodecException):
    code = ErrorCodes.UINT32_RANGE
    default_message = "hex number > 32 bits"


_EXCEPTIONS_BY_CODE: dict[str, type[HexCodecException]] = {
    exc.code: exc
    for exc in (
        EmptyStringError,
        EmptyNumberError,
        HexSyntaxError,
        OddLengthError,
        LeadingZeroError,
        Big256RangeError,
        Uint64RangeError,
        Uint32RangeError,
    )
}


def exception_for_code(code: str) -> type[HexCodecException]:
    """
    Look up the exception class for an error code.

    Raises:
        KeyError: If the code is not part of the taxonomy.
    """
    try:
        return _EXCEPTIONS_BY_CODE[code]
    except KeyError:
        raise KeyError(f"Unknown hex codec error code: {code!r}") from None
