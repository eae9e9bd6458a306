"""Unit tests for sigpatch.formats.hex_utils."""

import pytest

from sigpatch.formats.hex_utils import (
    format_signature,
    is_wildcard_token,
    parse_hex_token,
    parse_signature,
)


class TestParseHexToken:
    """Tests for parse_hex_token()."""

    def test_two_digit_upper(self):
        assert parse_hex_token("8B") == 0x8B

    def test_two_digit_lower(self):
        assert parse_hex_token("0f") == 0x0F

    def test_single_digit(self):
        assert parse_hex_token("9") == 0x09

    def test_single_question_mark_is_wildcard(self):
        assert parse_hex_token("?") is None

    def test_double_question_mark_is_wildcard(self):
        assert parse_hex_token("??") is None

    @pytest.mark.parametrize("token", ["0x90", "G1", "123", "+F", "", "1_0"])
    def test_malformed_token_raises(self, token):
        with pytest.raises(ValueError, match="Invalid hex byte"):
            parse_hex_token(token)


class TestParseSignature:
    """Tests for parse_signature()."""

    def test_mixed_tokens(self):
        assert parse_signature("E8 ? 90") == [0xE8, None, 0x90]

    def test_extra_whitespace_ignored(self):
        assert parse_signature("  48\t8B \n 05 ") == [0x48, 0x8B, 0x05]

    def test_empty_string_raises(self):
        with pytest.raises(ValueError, match="empty"):
            parse_signature("")

    def test_whitespace_only_raises(self):
        with pytest.raises(ValueError, match="empty"):
            parse_signature("   ")

    def test_bad_token_raises(self):
        with pytest.raises(ValueError):
            parse_signature("48 ZZ 8B")


class TestFormatting:
    """Tests for format_signature()."""

    def test_format_signature_low_values_padded(self):
        assert format_signature(bytes([1, 2, 163, 255])) == "01 02 A3 FF"

    def test_format_signature_with_wildcards(self):
        assert format_signature(bytes([0xE8, 0, 0, 0x90]), {1, 2}) == "E8 ? ? 90"

    def test_format_signature_without_wildcards(self):
        assert format_signature(bytes([0x0F, 0x1F, 0x00])) == "0F 1F 00"

    def test_is_wildcard_token(self):
        assert is_wildcard_token("??")
        assert not is_wildcard_token("00")
