from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterable
from pathlib import Path
from typing import ClassVar, Self, override

from attrs import define, field, frozen

from ..command_line import CommandLine
from ..schema import CommandOpts, ExecutionResult
from .abc import CommandLike, CommandRunner, PathLike, absolute_cwd


@frozen
class Invocation:
    """A command line and working directory requested from a `TestCommandRunner`."""

    command_line: CommandLine
    cwd: Path


def _canned(exit_code: int, stdout: str) -> ExecutionResult:
    return ExecutionResult(exit_code=exit_code, raw_stdout=stdout.encode())


@define
class TestCommandRunner(CommandRunner):
    """
    Records every requested command instead of running it.

    Each call returns the next queued result, or `result` once the queue is
    empty. `run_checked` still raises `NonZeroExitError` for a canned nonzero
    status. `exec` records the call like `run` and returns, since there is no
    process to replace.
    """

    __test__: ClassVar[bool] = False

    result: ExecutionResult = field(factory=lambda: ExecutionResult(exit_code=0))
    """Result returned when no queued result is left."""

    hostname_value: str = "local.example.com"

    _queued: deque[ExecutionResult] = field(factory=deque, alias="queued")
    _issued: list[Invocation] = field(init=False, factory=list)
    _lock: threading.Lock = field(init=False, factory=threading.Lock)

    @classmethod
    def with_output(cls, exit_code: int, stdout: str = "") -> Self:
        return cls(result=_canned(exit_code, stdout))

    @classmethod
    def with_results(cls, results: Iterable[tuple[int, str]]) -> Self:
        """Queue one canned `(exit_code, stdout)` result per expected call, in order."""
        return cls(queued=deque(_canned(code, stdout) for code, stdout in results))

    @property
    def issued_commands(self) -> tuple[Invocation, ...]:
        """Snapshot of every recorded invocation in call order."""
        with self._lock:
            return tuple(self._issued)

    def _record(self, command_line: CommandLine, cwd: Path) -> ExecutionResult:
        with self._lock:
            self._issued.append(Invocation(command_line, cwd))
            return self._queued.popleft() if self._queued else self.result

    @override
    def _run_inner(
        self, command_line: CommandLine, cwd: Path, opts: CommandOpts
    ) -> ExecutionResult:
        return self._record(command_line, cwd)

    @override
    def exec(self, command_line: CommandLike, cwd: PathLike) -> ExecutionResult:
        return self._record(CommandLine(command_line), absolute_cwd(cwd))

    @override
    def hostname(self) -> str:
        return self.hostname_value
