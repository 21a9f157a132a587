"""Error types for the Fabric bridge.

Every failure a tool call can produce maps onto one BridgeError subclass.
The dispatcher turns these into a single-paragraph failure message; none of
them is fatal to the server process.

FilesystemError is the exception: it is raised and recovered inside the
pattern resolver and never reaches a caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Stable identifiers for each failure class."""

    VALIDATION = "ValidationError"
    PROCESS_TIMEOUT = "ProcessTimeoutError"
    PROCESS_EXECUTION = "ProcessExecutionError"
    BUFFER_OVERFLOW = "BufferOverflowError"
    UNKNOWN_TOOL = "UnknownToolError"
    FILESYSTEM = "FilesystemError"


@dataclass(frozen=True)
class ErrorEnvelope:
    """The only shape a failure takes on its way back to a caller.

    Attributes:
        kind: Which failure class produced the envelope.
        human_message: Caller-facing description, most specific cause last.
    """

    kind: ErrorKind
    human_message: str


class BridgeError(Exception):
    """Base exception for tool call failures.

    Attributes:
        message: Error description.
        cause: Optional underlying exception being wrapped.
    """

    kind: ErrorKind = ErrorKind.PROCESS_EXECUTION

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def envelope(self) -> ErrorEnvelope:
        """Collapse the error into its caller-facing envelope."""
        return ErrorEnvelope(kind=self.kind, human_message=self.message)


class ValidationError(BridgeError):
    """A required argument was missing or blank.

    Attributes:
        field: Name of the offending argument.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ProcessTimeoutError(BridgeError):
    """The external process outlived its time budget.

    Attributes:
        timeout_ms: The budget that was exceeded.
    """

    kind = ErrorKind.PROCESS_TIMEOUT

    def __init__(self, message: str, timeout_ms: Optional[int] = None):
        super().__init__(message)
        self.timeout_ms = timeout_ms


class ProcessExecutionError(BridgeError):
    """The external process exited non-zero or could not be started.

    Attributes:
        return_code: Exit status, or None when the process never started.
        stderr: Captured standard error, if any.
    """

    kind = ErrorKind.PROCESS_EXECUTION

    def __init__(
        self,
        message: str,
        return_code: Optional[int] = None,
        stderr: str = "",
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.return_code = return_code
        self.stderr = stderr


class BufferOverflowError(BridgeError):
    """Captured output exceeded the configured byte cap.

    Attributes:
        limit: The cap, in bytes.
    """

    kind = ErrorKind.BUFFER_OVERFLOW

    def __init__(self, message: str, limit: Optional[int] = None):
        super().__init__(message)
        self.limit = limit


class UnknownToolError(BridgeError):
    """The dispatcher received an operation name it does not serve."""

    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class FilesystemError(BridgeError):
    """A pattern directory could not be read.

    Attributes:
        path: The directory that failed.
    """

    kind = ErrorKind.FILESYSTEM

    def __init__(self, message: str, path: Optional[str] = None, cause: Optional[Exception] = None):
        super().__init__(message, cause=cause)
        self.path = path
