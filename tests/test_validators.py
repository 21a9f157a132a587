"""Tests for argument validation."""

import pytest

from fabric_mcp.primitives.errors import ValidationError
from fabric_mcp.utils.validators import optional, require


class TestRequire:
    """require(value, field_name)."""

    def test_returns_trimmed_value(self):
        assert require("  summarize \n", "pattern_name") == "summarize"

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_rejects_missing_or_blank(self, value):
        with pytest.raises(ValidationError) as exc_info:
            require(value, "input_text")

        assert exc_info.value.message == "input_text is required"
        assert exc_info.value.field == "input_text"

    def test_stringifies_non_text(self):
        assert require(42, "input_text") == "42"


class TestOptional:
    """optional(value)."""

    def test_absent_is_empty(self):
        assert optional(None) == ""

    def test_trims(self):
        assert optional("  gpt-4o ") == "gpt-4o"


class TestNullBytes:
    """Text bound for an argument vector may not contain NUL."""

    def test_required_argument_rejects_null_byte(self):
        with pytest.raises(ValidationError) as exc_info:
            require("summa\x00rize", "pattern_name")

        assert exc_info.value.message == "pattern_name must not contain null bytes"
        assert exc_info.value.field == "pattern_name"

    def test_stdin_text_may_contain_null_byte(self):
        assert require("a\x00b", "input_text", in_argv=False) == "a\x00b"

    def test_optional_argument_rejects_null_byte(self):
        with pytest.raises(ValidationError) as exc_info:
            optional("gpt\x00", "model")

        assert exc_info.value.field == "model"
