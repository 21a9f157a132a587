"""Fabric MCP utility modules."""

from fabric_mcp.utils.formatting import (
    ResultKind,
    format_catalog,
    format_error,
    format_success,
)
from fabric_mcp.utils.logger import get_logger
from fabric_mcp.utils.path_utils import get_pattern_search_paths
from fabric_mcp.utils.pattern_sources import PatternSourceResolver, filter_patterns
from fabric_mcp.utils.validators import optional, require

__all__ = [
    "ResultKind",
    "format_catalog",
    "format_error",
    "format_success",
    "get_logger",
    "get_pattern_search_paths",
    "PatternSourceResolver",
    "filter_patterns",
    "optional",
    "require",
]
