from __future__ import annotations

import os
import shlex
from collections.abc import Iterable, Iterator
from typing import overload

from attrs import field, frozen

from .exceptions import InvalidCommandLine

type Arg = str | os.PathLike[str]


def _to_arg(item: Arg) -> str:
    value = os.fspath(item)
    if not isinstance(value, str):
        raise TypeError(f"CommandLine arguments must be str, got {type(value).__name__}")
    return value


def _to_argv(items: Iterable[Arg]) -> tuple[str, ...]:
    if isinstance(items, CommandLine):
        return items.argv
    # a bare string would otherwise be split into characters
    if isinstance(items, str):
        raise TypeError("CommandLine expects a sequence of arguments, not a str")
    return tuple(_to_arg(item) for item in items)


def _non_empty(instance: CommandLine, attribute: object, value: tuple[str, ...]) -> None:
    if not value:
        raise InvalidCommandLine()


@frozen
class CommandLine:
    """
    A program and its arguments.

    Arguments are opaque: they are handed to the process as-is and are never
    split, quoted or interpreted by a shell. `str()` renders a shell-quoted
    form for logging only.
    """

    argv: tuple[str, ...] = field(converter=_to_argv, validator=_non_empty)

    @property
    def program(self) -> str:
        """The program to execute, i.e. the first element."""
        return self.argv[0]

    @property
    def args(self) -> tuple[str, ...]:
        """All elements after `program`."""
        return self.argv[1:]

    def clone_with(self, other: Iterable[Arg]) -> CommandLine:
        """Return a new command line with `other` appended to this one."""
        return CommandLine((*self.argv, *_to_argv(other)))

    def __add__(self, other: Iterable[Arg]) -> CommandLine:
        return self.clone_with(other)

    def __iter__(self) -> Iterator[str]:
        return iter(self.argv)

    def __len__(self) -> int:
        return len(self.argv)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        return self.argv[index]

    def __str__(self) -> str:
        return shlex.join(self.argv)
