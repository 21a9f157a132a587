"""Tests for bridge error types."""

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


class TestErrorKinds:
    """Each error class carries its kind."""

    def test_kinds(self):
        assert ValidationError("x").kind is ErrorKind.VALIDATION
        assert ProcessTimeoutError("x").kind is ErrorKind.PROCESS_TIMEOUT
        assert ProcessExecutionError("x").kind is ErrorKind.PROCESS_EXECUTION
        assert BufferOverflowError("x").kind is ErrorKind.BUFFER_OVERFLOW
        assert UnknownToolError("x").kind is ErrorKind.UNKNOWN_TOOL
        assert FilesystemError("x").kind is ErrorKind.FILESYSTEM

    def test_all_are_bridge_errors(self):
        for error in (
            ValidationError("x"),
            ProcessTimeoutError("x"),
            ProcessExecutionError("x"),
            BufferOverflowError("x"),
            UnknownToolError("x"),
            FilesystemError("x"),
        ):
            assert isinstance(error, BridgeError)

    def test_kind_values_are_class_names(self):
        assert ErrorKind.PROCESS_TIMEOUT.value == "ProcessTimeoutError"


class TestBridgeError:
    """BridgeError(message, cause=None)."""

    def test_message_and_cause(self):
        cause = OSError("denied")
        err = ProcessExecutionError("could not start", cause=cause)
        assert err.message == "could not start"
        assert err.cause is cause
        assert str(err) == "could not start"

    def test_envelope(self):
        envelope = ValidationError("url is required", field="url").envelope()
        assert envelope == ErrorEnvelope(
            kind=ErrorKind.VALIDATION, human_message="url is required"
        )


class TestSpecificErrors:
    """Extra attributes on individual error types."""

    def test_validation_field(self):
        assert ValidationError("pattern_name is required", field="pattern_name").field == "pattern_name"

    def test_unknown_tool_message(self):
        err = UnknownToolError("delete_everything")
        assert err.name == "delete_everything"
        assert err.message == "Unknown tool: delete_everything"

    def test_process_execution_details(self):
        err = ProcessExecutionError("failed", return_code=2, stderr="oops")
        assert err.return_code == 2
        assert err.stderr == "oops"

    def test_filesystem_path(self):
        assert FilesystemError("cannot read", path="/nope").path == "/nope"
