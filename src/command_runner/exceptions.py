from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .command_line import CommandLine
    from .schema import ExecutionResult


class CommandRunnerError(Exception):
    """Base exception for the command_runner package."""


class InvalidCommandLine(CommandRunnerError, ValueError):
    """Raised when a command line is built from an empty sequence."""

    def __init__(self) -> None:
        super().__init__("At least one argument must be provided")


class InvalidWorkingDirectory(CommandRunnerError, ValueError):
    """Raised when a working directory is not an absolute path."""

    def __init__(self, cwd: str) -> None:
        super().__init__(f"Working directory must be an absolute path, got `{cwd}`")
        self.cwd = cwd


class SpawnError(CommandRunnerError):
    """Raised when the OS could not start the process at all."""

    def __init__(self, command_line: CommandLine, cause: OSError) -> None:
        super().__init__(f"Failed to spawn `{command_line.program}`: {cause}")
        self.command_line = command_line
        self.cause = cause


class NonZeroExitError(CommandRunnerError):
    """Raised by checked runs when the process did not exit with status zero."""

    def __init__(self, command_line: CommandLine, result: ExecutionResult) -> None:
        super().__init__(
            f"Command `{command_line.program}` failed with {result.status}\n"
            f"Stdout:\n{result.stdout_lossy()}\n"
            f"Stderr:\n{result.stderr_lossy()}"
        )
        self.command_line = command_line
        self.result = result


class DecodeError(CommandRunnerError):
    """Raised when captured output is not valid UTF-8."""

    def __init__(self, stream: str, position: int, reason: str) -> None:
        super().__init__(
            f"Captured {stream} is not valid UTF-8 at byte {position}: {reason}"
        )
        self.stream = stream
        self.position = position
        self.reason = reason


class MissingHomeError(CommandRunnerError):
    """Raised when the user's home directory cannot be determined."""

    def __init__(self) -> None:
        super().__init__("Could not get $HOME!")
