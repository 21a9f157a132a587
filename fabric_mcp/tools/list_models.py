"""List models tool - show the AI models fabric is configured to use."""

import logging

from fabric_mcp.constants import BufferLimit, FabricFlag, Timeout
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.models import ToolResponse
from fabric_mcp.utils.formatting import format_models

logger = logging.getLogger(__name__)


class ListModelsTool:
    def __init__(self, fabric: FabricCLI):
        self.fabric = fabric

    async def handle(self, **kwargs) -> ToolResponse:
        logger.info("Listing available models")
        outcome = await self.fabric.run(
            [FabricFlag.LIST_MODELS],
            timeout_ms=Timeout.LIST_MODELS,
            max_buffer_bytes=BufferLimit.LISTING,
            label="List models",
        )
        return format_models(outcome.stdout.strip())
