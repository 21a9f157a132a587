"""Adapter for the fabric executable.

Builds argument vectors for each fabric mode and runs them through the
CommandExecutor. Failures are raised as BridgeError subclasses; standard
error on a successful run is only logged.
"""

import logging
from typing import List, Optional, Sequence

from fabric_mcp.constants import BufferLimit, FabricFlag
from fabric_mcp.primitives.subprocess import (
    CommandExecutor,
    ExecutionRequest,
    ExecutionSuccess,
)

logger = logging.getLogger(__name__)


class FabricCLI:
    """Runs fabric subcommands.

    Args:
        executor: Executor that spawns the processes.
        binary: Name or path of the fabric executable.
    """

    def __init__(self, executor: CommandExecutor, binary: str = "fabric"):
        self.executor = executor
        self.binary = binary

    def pattern_args(self, pattern_name: str, model: str = "") -> List[str]:
        args = [FabricFlag.PATTERN, pattern_name]
        if model:
            args.extend([FabricFlag.MODEL, model])
        return args

    async def run(
        self,
        args: Sequence[str],
        timeout_ms: int,
        max_buffer_bytes: int = BufferLimit.CONTENT,
        input_data: Optional[str] = None,
        label: str = "fabric",
    ) -> ExecutionSuccess:
        """Run fabric with args and return the successful outcome.

        Raises:
            ProcessTimeoutError, ProcessExecutionError, BufferOverflowError
        """
        request = ExecutionRequest(
            argv=(self.binary, *args),
            timeout_ms=timeout_ms,
            max_buffer_bytes=max_buffer_bytes,
            input_data=input_data,
        )
        outcome = await self.executor.run(request)
        if not outcome.success:
            raise outcome.to_error()

        if outcome.stderr.strip():
            logger.warning(f"{label} stderr: {outcome.stderr.strip()}")
        logger.debug(f"{label} finished in {outcome.duration_ms:.0f}ms")
        return outcome
