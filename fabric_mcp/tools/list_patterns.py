"""List patterns tool - show the pattern catalog, optionally filtered."""

import logging

from fabric_mcp.models import ToolResponse
from fabric_mcp.utils.formatting import format_catalog
from fabric_mcp.utils.pattern_sources import PatternSourceResolver
from fabric_mcp.utils.validators import optional

logger = logging.getLogger(__name__)


class ListPatternsTool:
    """List available patterns from disk, or from fabric itself."""

    def __init__(self, resolver: PatternSourceResolver):
        self.resolver = resolver

    async def handle(self, **kwargs) -> ToolResponse:
        search = optional(kwargs.get("search"), "search")

        logger.info("Listing available patterns")
        patterns = await self.resolver.list_patterns(search)
        return format_catalog(patterns, search)
