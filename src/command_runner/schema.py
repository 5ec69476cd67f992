from __future__ import annotations

from attrs import frozen

from .exceptions import DecodeError


@frozen
class CommandOpts:
    """Per-invocation options."""

    capture_stderr: bool = True
    """Capture the child's stderr. When false it is inherited from the parent and not recorded."""


@frozen
class ExecutionResult:
    """Command execution result."""

    exit_code: int | None
    raw_stdout: bytes = b""
    raw_stderr: bytes = b""
    signal: int | None = None

    @classmethod
    def from_returncode(
        cls, returncode: int, stdout: bytes, stderr: bytes
    ) -> ExecutionResult:
        # subprocess reports death by signal N as -N
        if returncode < 0:
            return cls(
                exit_code=None, raw_stdout=stdout, raw_stderr=stderr, signal=-returncode
            )
        return cls(exit_code=returncode, raw_stdout=stdout, raw_stderr=stderr)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def status(self) -> str:
        if self.exit_code is not None:
            return f"exit code {self.exit_code}"
        if self.signal is not None:
            return f"signal {self.signal}"
        return "unknown status"

    def stdout(self) -> str:
        """Decode the captured stdout as UTF-8, raising `DecodeError` if it is invalid."""
        return _decode("stdout", self.raw_stdout)

    def stderr(self) -> str:
        """Decode the captured stderr as UTF-8, raising `DecodeError` if it is invalid."""
        return _decode("stderr", self.raw_stderr)

    def stdout_lossy(self) -> str:
        return self.raw_stdout.decode("utf-8", errors="replace")

    def stderr_lossy(self) -> str:
        return self.raw_stderr.decode("utf-8", errors="replace")


def _decode(stream: str, data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise DecodeError(stream, err.start, err.reason) from err
