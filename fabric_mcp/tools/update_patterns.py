"""Update patterns tool - refresh the installed pattern catalog."""

import logging

from fabric_mcp.constants import BufferLimit, FabricFlag, Timeout
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.models import ToolResponse
from fabric_mcp.utils.formatting import ResultKind, format_success

logger = logging.getLogger(__name__)


class UpdatePatternsTool:
    def __init__(self, fabric: FabricCLI):
        self.fabric = fabric

    async def handle(self, **kwargs) -> ToolResponse:
        logger.info("Updating Fabric patterns")
        outcome = await self.fabric.run(
            [FabricFlag.UPDATE],
            timeout_ms=Timeout.UPDATE_PATTERNS,
            max_buffer_bytes=BufferLimit.CONTENT,
            label="Update",
        )
        return format_success(ResultKind.UPDATE, outcome.stdout)
