"""MCP server for Fabric AI.

Exposes 7 tools:
- execute_pattern
- list_patterns
- get_pattern_details
- process_url
- process_youtube
- update_patterns
- list_models
"""

import logging
from typing import Optional

from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from fabric_mcp import __version__
from fabric_mcp import tool_descriptions as desc
from fabric_mcp.config import Settings, get_settings
from fabric_mcp.constants import SERVER_NAME, ToolName
from fabric_mcp.dispatcher import ToolDispatcher
from fabric_mcp.readiness import Readiness, probe

logger = logging.getLogger(__name__)


def _schema(properties: dict, required: Optional[list] = None) -> dict:
    schema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def _text(description: str) -> dict:
    return {"type": "string", "description": description}


TOOLS = [
    Tool(
        name=ToolName.EXECUTE_PATTERN,
        description=desc.EXECUTE_PATTERN_DESC,
        inputSchema=_schema(
            {
                "input_text": _text(desc.INPUT_TEXT_DESC),
                "pattern_name": _text(desc.EXECUTE_PATTERN_NAME_DESC),
                "model": _text(desc.MODEL_DESC),
            },
            required=["input_text", "pattern_name"],
        ),
    ),
    Tool(
        name=ToolName.LIST_PATTERNS,
        description=desc.LIST_PATTERNS_DESC,
        inputSchema=_schema({"search": _text(desc.SEARCH_DESC)}),
    ),
    Tool(
        name=ToolName.GET_PATTERN_DETAILS,
        description=desc.PATTERN_DETAILS_DESC,
        inputSchema=_schema(
            {"pattern_name": _text(desc.PATTERN_DETAILS_NAME_DESC)},
            required=["pattern_name"],
        ),
    ),
    Tool(
        name=ToolName.PROCESS_URL,
        description=desc.PROCESS_URL_DESC,
        inputSchema=_schema(
            {
                "url": _text(desc.URL_DESC),
                "pattern_name": _text(desc.PATTERN_NAME_DESC),
                "model": _text(desc.MODEL_DESC),
            },
            required=["url", "pattern_name"],
        ),
    ),
    Tool(
        name=ToolName.PROCESS_YOUTUBE,
        description=desc.PROCESS_YOUTUBE_DESC,
        inputSchema=_schema(
            {
                "youtube_url": _text(desc.YOUTUBE_URL_DESC),
                "pattern_name": _text(desc.YOUTUBE_PATTERN_NAME_DESC),
                "model": _text(desc.MODEL_DESC),
            },
            required=["youtube_url", "pattern_name"],
        ),
    ),
    Tool(
        name=ToolName.UPDATE_PATTERNS,
        description=desc.UPDATE_PATTERNS_DESC,
        inputSchema=_schema({}),
    ),
    Tool(
        name=ToolName.LIST_MODELS,
        description=desc.LIST_MODELS_DESC,
        inputSchema=_schema({}),
    ),
]


class FabricServer:
    """MCP Server for Fabric AI."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        readiness: Optional[Readiness] = None,
    ):
        self.settings = settings or get_settings()
        self.debug = self.settings.debug
        self.readiness = readiness or probe(self.settings.fabric_binary)
        self.dispatcher = ToolDispatcher(self.settings, readiness=self.readiness)
        self.server = Server(SERVER_NAME)
        self._setup_handlers()

    def _setup_handlers(self):
        """Register MCP handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return list(TOOLS)

        # Argument checks belong to the dispatcher, so schema validation is off.
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict) -> CallToolResult:
            return await self.call_tool(name, arguments)

    async def call_tool(self, name: str, arguments: Optional[dict]) -> CallToolResult:
        """Dispatch one call and wrap the response for the protocol."""
        response = await self.dispatcher.dispatch(name, arguments)
        return CallToolResult(
            content=[TextContent(type="text", text=response.text)],
            isError=response.is_error,
        )

    async def start(self):
        """Start the MCP server."""
        logger.info("Fabric AI MCP server running on stdio")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name=SERVER_NAME,
                    server_version=__version__,
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )


async def run_stdio(settings: Optional[Settings] = None):
    """Run in stdio mode."""
    logger.info("Starting Fabric AI MCP server...")
    server = FabricServer(settings)
    await server.start()
