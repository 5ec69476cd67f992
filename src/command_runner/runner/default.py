from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import NoReturn, final, override

from attrs import define
from loguru import logger

from command_runner.utils.process import run_process

from ..command_line import CommandLine
from ..exceptions import SpawnError
from ..schema import CommandOpts, ExecutionResult
from .abc import CommandLike, CommandRunner, PathLike, absolute_cwd


@final
@define
class DefaultCommandRunner(CommandRunner):
    """Runs commands as real child processes. Holds no state, so one instance can be shared across threads."""

    @override
    def _run_inner(
        self, command_line: CommandLine, cwd: Path, opts: CommandOpts
    ) -> ExecutionResult:
        try:
            result = run_process(
                command_line.argv, cwd=cwd, capture_stderr=opts.capture_stderr
            )
        except OSError as err:
            raise SpawnError(command_line, err) from err

        return ExecutionResult.from_returncode(
            result.returncode, result.stdout, result.stderr
        )

    @override
    def exec(self, command_line: CommandLike, cwd: PathLike) -> NoReturn:
        command_line = CommandLine(command_line)
        path = absolute_cwd(cwd)

        logger.info("Exec'ing `{}` in `{}`", command_line, path)

        previous: str | None = None
        try:
            previous = os.getcwd()
            os.chdir(path)
            # exec discards unflushed stdio buffers
            sys.stdout.flush()
            sys.stderr.flush()
            os.execvp(command_line.program, list(command_line.argv))
        except OSError as err:
            if previous is not None:
                os.chdir(previous)
            raise SpawnError(command_line, err) from err
