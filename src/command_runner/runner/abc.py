from __future__ import annotations

import os
import socket
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from ..command_line import Arg, CommandLine
from ..exceptions import InvalidWorkingDirectory, MissingHomeError, NonZeroExitError
from ..schema import CommandOpts, ExecutionResult

type CommandLike = CommandLine | Iterable[Arg]
type PathLike = str | os.PathLike[str]


def absolute_cwd(cwd: PathLike) -> Path:
    """Return `cwd` as a `Path`, rejecting relative paths."""
    path = Path(cwd)
    if not path.is_absolute():
        raise InvalidWorkingDirectory(os.fspath(cwd))
    return path


class CommandRunner(ABC):
    """
    Runs command lines in a working directory.

    `run` returns a result for any process that could be started, whatever its
    exit status. `run_checked` additionally raises `NonZeroExitError` unless
    the process exited with status zero. Both raise `SpawnError` if the
    process could not be started and `InvalidWorkingDirectory` if `cwd` is
    not absolute.
    """

    def run(self, command_line: CommandLike, cwd: PathLike) -> ExecutionResult:
        return self.run_with_opts(command_line, cwd, CommandOpts())

    def run_checked(self, command_line: CommandLike, cwd: PathLike) -> ExecutionResult:
        return self.run_checked_with_opts(command_line, cwd, CommandOpts())

    def run_with_opts(
        self, command_line: CommandLike, cwd: PathLike, opts: CommandOpts
    ) -> ExecutionResult:
        command_line = CommandLine(command_line)
        path = absolute_cwd(cwd)

        logger.info("Running `{}` in `{}`", command_line, path)
        result = self._run_inner(command_line, path, opts)
        logger.debug("Completed `{}` with {}", command_line.program, result.status)
        return result

    def run_checked_with_opts(
        self, command_line: CommandLike, cwd: PathLike, opts: CommandOpts
    ) -> ExecutionResult:
        command_line = CommandLine(command_line)
        result = self.run_with_opts(command_line, cwd, opts)
        if not result.succeeded:
            raise NonZeroExitError(command_line, result)
        return result

    @abstractmethod
    def _run_inner(
        self, command_line: CommandLine, cwd: Path, opts: CommandOpts
    ) -> ExecutionResult:
        """Start the process, wait for it and collect its output."""

    @abstractmethod
    def exec(self, command_line: CommandLike, cwd: PathLike) -> ExecutionResult:
        """
        Hand the current process over to `command_line`.

        Real runners never return on success. Recording runners cannot replace
        the process, so they record the call and return their canned result;
        code under test must not rely on control stopping here.
        """

    def hostname(self) -> str:
        return socket.gethostname()

    def root_systemd_path(self) -> Path:
        return Path("/etc/systemd/user")

    def user_systemd_path(self) -> Path:
        config_home = os.environ.get("XDG_CONFIG_HOME")
        if config_home and Path(config_home).is_absolute():
            return Path(config_home) / "systemd" / "user"

        try:
            home = Path.home()
        except RuntimeError as err:
            raise MissingHomeError() from err
        return home / ".config" / "systemd" / "user"
