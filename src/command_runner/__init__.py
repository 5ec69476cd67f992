from __future__ import annotations

from loguru import logger

from .command_line import CommandLine
from .exceptions import (
    CommandRunnerError,
    DecodeError,
    InvalidCommandLine,
    InvalidWorkingDirectory,
    MissingHomeError,
    NonZeroExitError,
    SpawnError,
)
from .runner import CommandRunner, DefaultCommandRunner
from .schema import CommandOpts, ExecutionResult

logger.disable("command_runner")

__all__ = [
    "CommandLine",
    "CommandOpts",
    "CommandRunner",
    "CommandRunnerError",
    "DecodeError",
    "DefaultCommandRunner",
    "ExecutionResult",
    "InvalidCommandLine",
    "InvalidWorkingDirectory",
    "MissingHomeError",
    "NonZeroExitError",
    "SpawnError",
]
