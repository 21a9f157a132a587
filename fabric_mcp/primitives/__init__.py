"""Process and error primitives used by every tool."""

from fabric_mcp.primitives.errors import (
    BridgeError,
    BufferOverflowError,
    ErrorEnvelope,
    ErrorKind,
    FilesystemError,
    ProcessExecutionError,
    ProcessTimeoutError,
    UnknownToolError,
    ValidationError,
)
from fabric_mcp.primitives.subprocess import (
    CommandExecutor,
    ExecutionFailure,
    ExecutionOutcome,
    ExecutionRequest,
    ExecutionSuccess,
)

__all__ = [
    "BridgeError",
    "BufferOverflowError",
    "CommandExecutor",
    "ErrorEnvelope",
    "ErrorKind",
    "ExecutionFailure",
    "ExecutionOutcome",
    "ExecutionRequest",
    "ExecutionSuccess",
    "FilesystemError",
    "ProcessExecutionError",
    "ProcessTimeoutError",
    "UnknownToolError",
    "ValidationError",
]
