"""Tests for invocation and response values."""

import pytest

from fabric_mcp.models import ToolInvocation, ToolResponse


class TestToolInvocation:
    """ToolInvocation.create normalizes raw host arguments."""

    def test_drops_null_values(self):
        invocation = ToolInvocation.create("execute_pattern", {"pattern_name": "x", "model": None})
        assert dict(invocation.arguments) == {"pattern_name": "x"}

    def test_stringifies_scalars(self):
        invocation = ToolInvocation.create("execute_pattern", {"input_text": 12})
        assert invocation.arguments["input_text"] == "12"

    def test_missing_arguments(self):
        assert dict(ToolInvocation.create("list_models", None).arguments) == {}

    def test_arguments_are_read_only(self):
        invocation = ToolInvocation.create("list_patterns", {"search": "a"})
        with pytest.raises(TypeError):
            invocation.arguments["search"] = "b"


class TestToolResponse:
    def test_defaults_to_success(self):
        assert ToolResponse(text="ok").is_error is False
