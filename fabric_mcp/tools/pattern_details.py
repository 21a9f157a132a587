"""Pattern details tool - describe a single pattern.

The pattern's system prompt is read from disk when an installed copy is
found. Otherwise fabric is asked via `--pattern NAME --help`; if that exits
non-zero the response falls back to a short stub naming the pattern.
"""

import logging

from fabric_mcp.constants import BufferLimit, FabricFlag, Timeout
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.models import ToolResponse
from fabric_mcp.primitives.errors import ProcessExecutionError
from fabric_mcp.utils.formatting import format_pattern_detail, format_pattern_stub
from fabric_mcp.utils.pattern_sources import PatternSourceResolver
from fabric_mcp.utils.validators import require

logger = logging.getLogger(__name__)


class PatternDetailsTool:
    """Describe one pattern."""

    def __init__(self, fabric: FabricCLI, resolver: PatternSourceResolver):
        self.fabric = fabric
        self.resolver = resolver

    async def handle(self, **kwargs) -> ToolResponse:
        pattern_name = require(kwargs.get("pattern_name"), "pattern_name")

        logger.info(f"Getting details for pattern: {pattern_name}")

        prompt_file = self.resolver.find_pattern_file(pattern_name)
        if prompt_file is not None:
            try:
                return format_pattern_detail(
                    pattern_name, prompt_file.read_text(encoding="utf-8").strip()
                )
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Could not read {prompt_file}: {e}")

        try:
            outcome = await self.fabric.run(
                [FabricFlag.PATTERN, pattern_name, FabricFlag.HELP],
                timeout_ms=Timeout.PATTERN_DETAILS,
                max_buffer_bytes=BufferLimit.LISTING,
                label="Pattern details",
            )
        except ProcessExecutionError as e:
            logger.info(f"No details from fabric for {pattern_name}: {e.message}")
            return format_pattern_stub(pattern_name)

        if not outcome.stdout.strip():
            return format_pattern_stub(pattern_name)
        return format_pattern_detail(pattern_name, outcome.stdout.strip())
