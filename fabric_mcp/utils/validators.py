"""Argument validation for tool calls.

Runs before anything is spawned: a missing or blank required field fails the
call with ValidationError and no external process is started. Text that ends
up in an argument vector may not contain NUL bytes.
"""

from typing import Any, Optional

from fabric_mcp.primitives.errors import ValidationError


def _check_text(text: str, field_name: str) -> str:
    if "\x00" in text:
        raise ValidationError(
            f"{field_name} must not contain null bytes", field=field_name
        )
    return text


def require(value: Optional[Any], field_name: str, in_argv: bool = True) -> str:
    """Return value stripped of surrounding whitespace.

    Args:
        value: Raw argument.
        field_name: Name used in the error message.
        in_argv: Whether the value is passed to fabric as an argument.
            Text piped to stdin may contain NUL bytes.

    Raises:
        ValidationError: value is absent, blank after stripping, or
            contains a NUL byte while in_argv is set.
    """
    if value is None:
        raise ValidationError(f"{field_name} is required", field=field_name)
    text = str(value).strip()
    if not text:
        raise ValidationError(f"{field_name} is required", field=field_name)
    if not in_argv:
        return text
    return _check_text(text, field_name)


def optional(value: Optional[Any], field_name: str = "value") -> str:
    """Stripped value, or an empty string when absent."""
    if value is None:
        return ""
    return _check_text(str(value).strip(), field_name)
