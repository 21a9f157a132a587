"""Process YouTube tool - pull a video transcript and run a pattern over it."""

import logging

from fabric_mcp.constants import BufferLimit, FabricFlag, Timeout
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.models import ToolResponse
from fabric_mcp.utils.formatting import ResultKind, format_success
from fabric_mcp.utils.validators import optional, require

logger = logging.getLogger(__name__)


class ProcessYoutubeTool:
    """Run `fabric -y URL --pattern NAME`."""

    def __init__(self, fabric: FabricCLI):
        self.fabric = fabric

    async def handle(self, **kwargs) -> ToolResponse:
        youtube_url = require(kwargs.get("youtube_url"), "youtube_url")
        pattern_name = require(kwargs.get("pattern_name"), "pattern_name")
        model = optional(kwargs.get("model"), "model")

        logger.info(f"Processing YouTube video with pattern: {pattern_name}")
        outcome = await self.fabric.run(
            [FabricFlag.YOUTUBE, youtube_url, *self.fabric.pattern_args(pattern_name, model)],
            timeout_ms=Timeout.PROCESS_YOUTUBE,
            max_buffer_bytes=BufferLimit.CONTENT,
            label="YouTube processing",
        )
        return format_success(ResultKind.YOUTUBE, outcome.stdout)
