"""Tool dispatcher - the single entry point for tool calls.

Maps a fixed set of operation names onto tool instances. dispatch() never
raises: every failure, expected or not, is logged and returned as a
formatted error response.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from fabric_mcp.config import Settings, get_settings
from fabric_mcp.constants import ToolName
from fabric_mcp.fabric_cli import FabricCLI
from fabric_mcp.models import ToolInvocation, ToolResponse
from fabric_mcp.primitives.errors import (
    BridgeError,
    ProcessExecutionError,
    UnknownToolError,
)
from fabric_mcp.primitives.subprocess import CommandExecutor
from fabric_mcp.readiness import Readiness
from fabric_mcp.tools import (
    ExecutePatternTool,
    ListModelsTool,
    ListPatternsTool,
    PatternDetailsTool,
    ProcessUrlTool,
    ProcessYoutubeTool,
    UpdatePatternsTool,
)
from fabric_mcp.utils.formatting import format_error
from fabric_mcp.utils.path_utils import get_pattern_search_paths
from fabric_mcp.utils.pattern_sources import PatternSourceResolver

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """Routes tool calls to their operations.

    Args:
        settings: Server settings; defaults to get_settings().
        readiness: Startup probe result, consulted when logging failures.
        executor: Process executor; built from settings when omitted.
        resolver: Pattern resolver; built from settings when omitted.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        readiness: Optional[Readiness] = None,
        executor: Optional[CommandExecutor] = None,
        resolver: Optional[PatternSourceResolver] = None,
    ):
        self.settings = settings or get_settings()
        self.readiness = readiness
        self.executor = executor or CommandExecutor(self.settings.max_concurrency)
        self.fabric = FabricCLI(self.executor, self.settings.fabric_binary)
        self.resolver = resolver or PatternSourceResolver(
            self.fabric, get_pattern_search_paths(self.settings.patterns_dir)
        )

        self._operations: Dict[str, Any] = {
            ToolName.EXECUTE_PATTERN: ExecutePatternTool(self.fabric),
            ToolName.LIST_PATTERNS: ListPatternsTool(self.resolver),
            ToolName.GET_PATTERN_DETAILS: PatternDetailsTool(self.fabric, self.resolver),
            ToolName.PROCESS_URL: ProcessUrlTool(self.fabric),
            ToolName.PROCESS_YOUTUBE: ProcessYoutubeTool(self.fabric),
            ToolName.UPDATE_PATTERNS: UpdatePatternsTool(self.fabric),
            ToolName.LIST_MODELS: ListModelsTool(self.fabric),
        }

    @property
    def tool_names(self) -> List[str]:
        return list(self._operations)

    async def dispatch(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> ToolResponse:
        """Run the named operation and return its response."""
        invocation = ToolInvocation.create(name, arguments)
        logger.debug(f"Dispatch: {invocation.name} args={sorted(invocation.arguments)}")

        try:
            operation = self._operations.get(invocation.name)
            if operation is None:
                raise UnknownToolError(invocation.name)
            return await operation.handle(**invocation.arguments)
        except BridgeError as e:
            logger.error(f"Error executing tool {invocation.name}: [{e.kind.value}] {e.message}")
            if isinstance(e, ProcessExecutionError) and self.readiness and not self.readiness.installed:
                logger.error(self.readiness.describe())
            return format_error(e)
        except Exception as e:
            logger.exception(f"Unexpected error executing tool {invocation.name}")
            return format_error(e)
