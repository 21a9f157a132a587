"""Subprocess execution primitive.

One external process per call, started from an argument vector and never
from a shell line. Every call is bounded twice:

- the primary timeout (asyncio.wait_for) sends SIGTERM to the process group
- a safety timer armed for timeout + 1s sends SIGKILL if the process is
  still alive, for children that ignore or outlive SIGTERM

Whichever fires first decides the outcome. Combined stdout/stderr capture is
capped at max_buffer_bytes; going over the cap kills the process and yields
BufferOverflowError with no partial output.

Expected failures come back as ExecutionFailure values rather than raised
exceptions. Callers decide whether to raise them via to_error().
"""

import asyncio
import logging
import os
import signal
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from fabric_mcp.primitives.errors import (
    BridgeError,
    BufferOverflowError,
    ErrorKind,
    ProcessExecutionError,
    ProcessTimeoutError,
)

logger = logging.getLogger(__name__)

SAFETY_MARGIN_MS = 1000
READ_CHUNK_SIZE = 64 * 1024
STDERR_SUMMARY_LIMIT = 500
REAP_SLACK_MS = 50


@dataclass(frozen=True)
class ExecutionRequest:
    """One external invocation, built fresh from validated arguments.

    Attributes:
        argv: Program name followed by its arguments.
        timeout_ms: Primary timeout in milliseconds.
        max_buffer_bytes: Cap on combined stdout + stderr bytes.
        input_data: Text piped to standard input, or None for no input.
    """

    argv: Tuple[str, ...]
    timeout_ms: int
    max_buffer_bytes: int
    input_data: Optional[str] = None

    def __post_init__(self):
        if not self.argv:
            raise ValueError("argv must not be empty")
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")
        if self.max_buffer_bytes <= 0:
            raise ValueError(
                f"max_buffer_bytes must be positive, got {self.max_buffer_bytes}"
            )

    @property
    def program(self) -> str:
        return self.argv[0]


@dataclass(frozen=True)
class ExecutionSuccess:
    """Process exited with status 0.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error (informational, never a failure).
        return_code: Always 0.
        duration_ms: Wall time of the call.
    """

    stdout: str
    stderr: str = ""
    return_code: int = 0
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ExecutionFailure:
    """Process timed out, overflowed its buffer, failed or never started.

    Attributes:
        kind: Failure class.
        message: Caller-facing description.
        duration_ms: Wall time of the call.
        return_code: Exit status when the process ran to completion.
        stderr: Captured standard error for non-zero exits.
    """

    kind: ErrorKind
    message: str
    duration_ms: float = 0.0
    return_code: Optional[int] = None
    stderr: str = ""

    @property
    def success(self) -> bool:
        return False

    def to_error(self) -> BridgeError:
        """Build the exception matching this failure."""
        if self.kind is ErrorKind.PROCESS_TIMEOUT:
            return ProcessTimeoutError(self.message)
        if self.kind is ErrorKind.BUFFER_OVERFLOW:
            return BufferOverflowError(self.message)
        return ProcessExecutionError(
            self.message, return_code=self.return_code, stderr=self.stderr
        )


ExecutionOutcome = Union[ExecutionSuccess, ExecutionFailure]


class _CaptureBuffer:
    """Shared byte budget for both output streams."""

    def __init__(self, limit: int):
        self.limit = limit
        self.size = 0
        self.stdout = bytearray()
        self.stderr = bytearray()

    def append(self, target: bytearray, chunk: bytes) -> None:
        self.size += len(chunk)
        if self.size > self.limit:
            raise BufferOverflowError(
                f"Output exceeded maximum buffer size of {self.limit} bytes",
                limit=self.limit,
            )
        target.extend(chunk)

    def decode(self) -> Tuple[str, str]:
        return (
            self.stdout.decode("utf-8", errors="replace"),
            self.stderr.decode("utf-8", errors="replace"),
        )


def _send_signal(proc: asyncio.subprocess.Process, force: bool) -> None:
    """Signal the whole process group (POSIX) or the process (Windows)."""
    try:
        if os.name == "nt":
            if proc.returncode is None:
                if force:
                    proc.kill()
                else:
                    proc.terminate()
        else:
            os.killpg(proc.pid, signal.SIGKILL if force else signal.SIGTERM)
    except (ProcessLookupError, PermissionError):
        pass


def _summarize(stderr: str) -> str:
    summary = " ".join(stderr.split())
    if len(summary) > STDERR_SUMMARY_LIMIT:
        summary = summary[:STDERR_SUMMARY_LIMIT] + "..."
    return summary


class CommandExecutor:
    """Runs external processes under time and output bounds.

    Args:
        max_concurrency: Optional ceiling on simultaneously running
            processes. None leaves spawning unbounded.
    """

    def __init__(self, max_concurrency: Optional[int] = None):
        if max_concurrency is not None and max_concurrency <= 0:
            raise ValueError("max_concurrency must be positive")
        self.max_concurrency = max_concurrency
        self._slots = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def run(self, request: ExecutionRequest) -> ExecutionOutcome:
        """Execute one request and return its outcome.

        The process has always exited by the time this returns.
        """
        if self._slots is None:
            return await self._run(request)
        async with self._slots:
            return await self._run(request)

    async def _run(self, request: ExecutionRequest) -> ExecutionOutcome:
        start_time = time.monotonic()
        logger.debug(
            f"Spawning {request.program} with {len(request.argv) - 1} args "
            f"(timeout={request.timeout_ms}ms, max_buffer={request.max_buffer_bytes})"
        )

        try:
            proc = await asyncio.create_subprocess_exec(
                *request.argv,
                stdin=(
                    asyncio.subprocess.PIPE
                    if request.input_data is not None
                    else asyncio.subprocess.DEVNULL
                ),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                start_new_session=(os.name != "nt"),
            )
        except (OSError, ValueError) as e:
            # ValueError: argv with an embedded NUL byte
            reason = getattr(e, "strerror", None) or e
            return ExecutionFailure(
                kind=ErrorKind.PROCESS_EXECUTION,
                message=f"Failed to start {request.program}: {reason}",
                duration_ms=self._elapsed(start_time),
            )

        safety_fired = False

        def safety_kill() -> None:
            nonlocal safety_fired
            if proc.returncode is None:
                safety_fired = True
                logger.warning(
                    f"{request.program} (pid {proc.pid}) still running "
                    f"{SAFETY_MARGIN_MS}ms past its timeout, sending SIGKILL"
                )
                _send_signal(proc, force=True)

        loop = asyncio.get_running_loop()
        safety_delay = (request.timeout_ms + SAFETY_MARGIN_MS) / 1000
        safety_deadline = time.monotonic() + safety_delay
        safety = loop.call_later(safety_delay, safety_kill)

        try:
            try:
                stdout, stderr = await asyncio.wait_for(
                    self._communicate(proc, request),
                    timeout=request.timeout_ms / 1000,
                )
            except asyncio.TimeoutError:
                logger.warning(
                    f"{request.program} (pid {proc.pid}) exceeded "
                    f"{request.timeout_ms}ms, sending SIGTERM"
                )
                _send_signal(proc, force=False)
                await self._reap(proc, safety_deadline)
                return self._timed_out(request, start_time)
            except BufferOverflowError as e:
                logger.warning(f"{request.program} (pid {proc.pid}): {e.message}")
                _send_signal(proc, force=True)
                await self._reap(
                    proc, min(safety_deadline, time.monotonic() + SAFETY_MARGIN_MS / 1000)
                )
                return ExecutionFailure(
                    kind=ErrorKind.BUFFER_OVERFLOW,
                    message=e.message,
                    duration_ms=self._elapsed(start_time),
                )
            except asyncio.CancelledError:
                _send_signal(proc, force=True)
                raise
        finally:
            safety.cancel()

        if safety_fired:
            return self._timed_out(request, start_time)

        duration_ms = self._elapsed(start_time)
        if proc.returncode != 0:
            summary = _summarize(stderr)
            message = f"Command failed with exit code {proc.returncode}"
            if summary:
                message = f"{message}: {summary}"
            return ExecutionFailure(
                kind=ErrorKind.PROCESS_EXECUTION,
                message=message,
                duration_ms=duration_ms,
                return_code=proc.returncode,
                stderr=stderr,
            )

        return ExecutionSuccess(stdout=stdout, stderr=stderr, duration_ms=duration_ms)

    async def _communicate(
        self, proc: asyncio.subprocess.Process, request: ExecutionRequest
    ) -> Tuple[str, str]:
        """Feed stdin and drain both output streams, then wait for exit."""
        capture = _CaptureBuffer(request.max_buffer_bytes)
        tasks: List[asyncio.Future] = [
            asyncio.ensure_future(self._drain(proc.stdout, capture, capture.stdout)),
            asyncio.ensure_future(self._drain(proc.stderr, capture, capture.stderr)),
        ]
        if request.input_data is not None:
            tasks.append(asyncio.ensure_future(self._feed(proc.stdin, request.input_data)))

        try:
            await asyncio.gather(*tasks)
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        await proc.wait()
        return capture.decode()

    @staticmethod
    async def _drain(
        stream: asyncio.StreamReader, capture: _CaptureBuffer, target: bytearray
    ) -> None:
        while True:
            chunk = await stream.read(READ_CHUNK_SIZE)
            if not chunk:
                return
            capture.append(target, chunk)

    @staticmethod
    async def _feed(stdin: asyncio.StreamWriter, data: str) -> None:
        try:
            stdin.write(data.encode("utf-8"))
            await stdin.drain()
        except (BrokenPipeError, ConnectionResetError):
            # Process exited before reading all of its input.
            logger.debug("stdin closed early by child process")
        finally:
            stdin.close()

    @staticmethod
    async def _reap(proc: asyncio.subprocess.Process, deadline: float) -> None:
        """Discard leftover output and wait for a signalled process to exit.

        Output pipes have to reach EOF before Process.wait() resolves, so
        they are drained here until deadline (a time.monotonic() value). A
        descendant that left the process group can hold a pipe open past
        it; the pipes are then closed from this end.
        """

        async def discard(stream: asyncio.StreamReader) -> None:
            while await stream.read(READ_CHUNK_SIZE):
                pass

        remaining = max(deadline - time.monotonic(), 0) + REAP_SLACK_MS / 1000
        try:
            await asyncio.wait_for(
                asyncio.gather(discard(proc.stdout), discard(proc.stderr), proc.wait()),
                timeout=remaining,
            )
            return
        except asyncio.TimeoutError:
            logger.warning(f"Output pipes of pid {proc.pid} still open, closing them")

        # Closes every pipe and kills the child if it is still running.
        proc._transport.close()
        try:
            await asyncio.wait_for(proc.wait(), timeout=REAP_SLACK_MS / 1000)
        except asyncio.TimeoutError:
            logger.error(f"pid {proc.pid} did not exit after being signalled")

    def _timed_out(self, request: ExecutionRequest, start_time: float) -> ExecutionFailure:
        return ExecutionFailure(
            kind=ErrorKind.PROCESS_TIMEOUT,
            message=f"Command timed out after {request.timeout_ms}ms",
            duration_ms=self._elapsed(start_time),
        )

    @staticmethod
    def _elapsed(start_time: float) -> float:
        return (time.monotonic() - start_time) * 1000
