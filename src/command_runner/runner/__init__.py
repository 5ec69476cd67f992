from __future__ import annotations

from .abc import CommandRunner, absolute_cwd
from .default import DefaultCommandRunner
from .testing import Invocation, TestCommandRunner

__all__ = [
    "CommandRunner",
    "DefaultCommandRunner",
    "Invocation",
    "TestCommandRunner",
    "absolute_cwd",
]
