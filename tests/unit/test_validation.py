"""
Validation Primitive Unit Tests
Tests for hexcodec/hexutil/validation.py
"""
import logging

import pytest

from hexcodec.hexutil import decode_big, has_hex_prefix, is_hex_digits, strip_hex_prefix
from hexcodec.hexutil.validation import reject
from hexcodec.schemas.errors import HexSyntaxError


class TestPrefix:
    """Tests for has_hex_prefix()/strip_hex_prefix()."""

    def test_has_hex_prefix(self):
        assert has_hex_prefix("0x1")
        assert has_hex_prefix("0X1")
        assert has_hex_prefix("0x")
        assert not has_hex_prefix("1")
        assert not has_hex_prefix("x0")
        assert not has_hex_prefix("")

    def test_strip_hex_prefix_tracks_presence(self):
        assert strip_hex_prefix("0xab") == ("ab", True)
        assert strip_hex_prefix("0Xab") == ("ab", True)
        assert strip_hex_prefix("ab") == ("ab", False)
        assert strip_hex_prefix("0x") == ("", True)
        assert strip_hex_prefix("") == ("", False)

    def test_strip_only_once(self):
        assert strip_hex_prefix("0x0x12") == ("0x12", True)


class TestIsHexDigits:
    """Tests for is_hex_digits()."""

    def test_valid_digits(self):
        assert is_hex_digits("0123456789abcdefABCDEF")
        assert is_hex_digits("")

    def test_invalid_digits(self):
        for text in ["g", "0x12", " 1", "1 ", "1_0", "-1", "+1", "\n", "١"]:
            assert not is_hex_digits(text), f"input {text!r}"


class TestRejectLogging:
    """Tests for rejection logging."""

    def test_reject_logs_debug_record(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="hexcodec"):
            exc = reject(HexSyntaxError, "zz")

        assert isinstance(exc, HexSyntaxError)
        assert any("SYNTAX" in record.getMessage() for record in caplog.records)

    def test_decode_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="hexcodec"):
            with pytest.raises(HexSyntaxError):
                decode_big("0xzz")

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.DEBUG

    def test_success_is_not_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="hexcodec"):
            decode_big("0xff")

        assert caplog.records == []
