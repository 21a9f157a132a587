"""Execute pattern tool - run a Fabric pattern over caller-supplied text."""

import logging

from fabric_mcp.constants import BufferLimit, Timeout
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.models import ToolResponse
from fabric_mcp.utils.formatting import ResultKind, format_success
from fabric_mcp.utils.validators import optional, require

logger = logging.getLogger(__name__)


class ExecutePatternTool:
    """Pipe input text through `fabric --pattern`."""

    def __init__(self, fabric: FabricCLI):
        self.fabric = fabric

    async def handle(self, **kwargs) -> ToolResponse:
        pattern_name = require(kwargs.get("pattern_name"), "pattern_name")
        input_text = require(kwargs.get("input_text"), "input_text", in_argv=False)
        model = optional(kwargs.get("model"), "model")

        logger.info(f"Executing pattern: {pattern_name}")
        outcome = await self.fabric.run(
            self.fabric.pattern_args(pattern_name, model),
            timeout_ms=Timeout.EXECUTE_PATTERN,
            max_buffer_bytes=BufferLimit.CONTENT,
            input_data=input_text,
            label="Pattern",
        )
        return format_success(ResultKind.PATTERN, outcome.stdout)
