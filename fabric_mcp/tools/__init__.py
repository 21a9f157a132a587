"""Fabric MCP tools - one class per exposed operation."""

from fabric_mcp.tools.execute_pattern import ExecutePatternTool
from fabric_mcp.tools.list_models import ListModelsTool
from fabric_mcp.tools.list_patterns import ListPatternsTool
from fabric_mcp.tools.pattern_details import PatternDetailsTool
from fabric_mcp.tools.process_url import ProcessUrlTool
from fabric_mcp.tools.process_youtube import ProcessYoutubeTool
from fabric_mcp.tools.update_patterns import UpdatePatternsTool

__all__ = [
    "ExecutePatternTool",
    "ListModelsTool",
    "ListPatternsTool",
    "PatternDetailsTool",
    "ProcessUrlTool",
    "ProcessYoutubeTool",
    "UpdatePatternsTool",
]
